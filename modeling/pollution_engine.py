"""
pollution_engine.py
-------------------
Pollution View: the stored rows, exactly as stored.
"""

from typing import Sequence, Tuple

import pandas as pd

from data_bundle.records import PollutionFactor

DISPLAY_COLUMNS = {
    'impact_name': 'Impact',
    'value':       'Value',
    'unit':        'Unit',
    'source_note': 'Source',
}


def passthrough_table(records: Sequence[PollutionFactor]) -> Tuple[PollutionFactor, ...]:
    """Identity transform; order and rows are preserved."""
    return tuple(records)


def pollution_frame(records: Sequence[PollutionFactor]) -> pd.DataFrame:
    """Display frame for table widgets, one row per factor in input order."""
    rows = passthrough_table(records)
    df = pd.DataFrame(
        [[getattr(r, col) for col in DISPLAY_COLUMNS] for r in rows],
        columns=list(DISPLAY_COLUMNS),
    )
    return df.rename(columns=DISPLAY_COLUMNS)
