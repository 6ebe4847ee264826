import os
from pathlib import Path

# Paths
BASE_DIR = Path(__file__).parent
REPORTS_DIR = Path(os.getenv("EV_DASHBOARD_REPORTS_DIR", BASE_DIR / "reports"))

# Dataset source: unset → embedded tables, otherwise a JSON path or URL
DATASET_SOURCE = os.getenv("EV_DASHBOARD_DATASET") or None
REQUEST_TIMEOUT = 30

# Chart colours
SALES_COLORS = {
    "BEV":  "#0a9396",
    "PHEV": "#ee9b00",
}

# Map settings per region (center is lat, lon)
MAP_TILES = "CartoDB positron"
REGION_MAPS = {
    "china": {"center": (31.0, 113.0), "zoom": 4, "marker_color": "#d62828"},
    "us":    {"center": (38.5, -96.0), "zoom": 4, "marker_color": "#1d4ed8"},
}
