#!/usr/bin/env python3
"""
EV Battery Footprint Dashboard - Report Export
Builds every view over the dataset and writes standalone HTML files.
Run: python main.py
"""
import logging
import sys

from config import DATASET_SOURCE, REPORTS_DIR
from data_bundle.bundle import LoadError, get_bundle
from modeling.geo_engine import china_markers, us_markers
from modeling.pollution_engine import pollution_frame
from modeling.sales_engine import compute_chart_series, compute_sales_summary
from utils.io_utils import save_figure, save_map
from visualization.map_plots import build_marker_map
from visualization.sales_plots import plot_sales_stacked_bar, plot_sales_summary_table
from visualization.table_plots import plot_pollution_table

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(out_dir=None, source=None):
    logger.info(" Starting EV battery report export")
    out_dir = out_dir or REPORTS_DIR
    source = source or DATASET_SOURCE
    status = 0

    # 1. Dataset
    logger.info(" Step 1: Loading dataset")
    try:
        bundle = get_bundle(source)
    except LoadError as e:
        logger.error(f"Dataset rejected, nothing exported: {e}")
        return 1

    # 2. Sales (skipped on its own; the other views do not need it)
    logger.info(" Step 2: Sales view")
    try:
        summary = compute_sales_summary(bundle.sales)
    except ZeroDivisionError as e:
        logger.error(f"Sales reports skipped: {e}")
        status = 1
    else:
        save_figure(plot_sales_stacked_bar(compute_chart_series(bundle.sales)), "sales_chart", out_dir)
        save_figure(plot_sales_summary_table(summary), "sales_summary", out_dir)

    # 3. Pollution
    logger.info(" Step 3: Pollution view")
    save_figure(plot_pollution_table(pollution_frame(bundle.pollution)), "pollution_table", out_dir)

    # 4. Maps
    logger.info(" Step 4: Geo views")
    save_map(build_marker_map(china_markers(bundle), "china"), "china_map", out_dir)
    save_map(build_marker_map(us_markers(bundle), "us"), "us_map", out_dir)

    if status:
        logger.warning(f" Export finished with errors, see log. Partial reports in {out_dir}")
    else:
        logger.info(f" Export COMPLETE! Check {out_dir} for HTML reports")
        logger.info("Run: streamlit run dashboard/app.py")
    return status


if __name__ == "__main__":
    sys.exit(main())
