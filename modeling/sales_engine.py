"""
sales_engine.py
---------------
Sales View: ranked market-share summary and stacked-bar series.

  records → totals per brand → stable sort (desc) → share of grand total

Both outputs use the same ordering, so the summary table and the stacked
bar chart always list brands identically. Ties keep input order.
"""

import logging
from typing import NamedTuple, Sequence

import pandas as pd

from data_bundle.records import SalesRecord

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ['rank', 'brand', 'bev_units', 'phev_units',
                   'total_units', 'market_share_percent']


class ChartSeries(NamedTuple):
    """Parallel BEV / PHEV unit series indexed by brand."""
    bev: pd.Series
    phev: pd.Series


def grand_total(records: Sequence[SalesRecord]) -> int:
    return sum(r.total_units for r in records)


def _ranked_frame(records: Sequence[SalesRecord]) -> pd.DataFrame:
    df = pd.DataFrame({
        'brand':      [r.brand for r in records],
        'bev_units':  [r.bev_units for r in records],
        'phev_units': [r.phev_units for r in records],
    })
    df['total_units'] = df['bev_units'] + df['phev_units']
    return (
        df.sort_values('total_units', ascending=False, kind='stable')
        .reset_index(drop=True)
    )


def compute_sales_summary(records: Sequence[SalesRecord]) -> pd.DataFrame:
    """
    Rank brands by total plug-in sales and annotate each with its share.

    Raises ZeroDivisionError when the grand total is zero (including an
    empty table): there is no meaningful share to report.
    """
    total = grand_total(records)
    if total == 0:
        raise ZeroDivisionError("Grand total of sales units is zero; market share is undefined")

    df = _ranked_frame(records)
    df['market_share_percent'] = df['total_units'].astype(float) / float(total) * 100.0
    df.insert(0, 'rank', list(range(1, len(df) + 1)))

    logger.info(f"Sales summary: {len(df)} brands | {total:,} units | "
                f"leader: {df.loc[0, 'brand']} ({df.loc[0, 'market_share_percent']:.2f}%)")
    return df[SUMMARY_COLUMNS]


def compute_chart_series(records: Sequence[SalesRecord]) -> ChartSeries:
    """BEV and PHEV unit series in summary order, zeros kept."""
    df = _ranked_frame(records).set_index('brand')
    return ChartSeries(
        bev=df['bev_units'].rename('BEV'),
        phev=df['phev_units'].rename('PHEV'),
    )
