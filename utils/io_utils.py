import json
import logging
from pathlib import Path

import requests

from config import REPORTS_DIR, REQUEST_TIMEOUT
from data_bundle.errors import LoadError

logger = logging.getLogger(__name__)


def _is_url(source) -> bool:
    return str(source).startswith(("http://", "https://"))


def read_json_source(source):
    """Read a JSON document from a local path or an http(s) URL."""
    if _is_url(source):
        try:
            response = requests.get(source, headers={"Accept": "application/json"},
                                    timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise LoadError(f"Could not fetch dataset from {source}: {e}") from e
        except ValueError as e:
            raise LoadError(f"Dataset at {source} is not valid JSON: {e}") from e

    path = Path(source)
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise LoadError(f"Could not read dataset file {path}: {e}") from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise LoadError(f"Dataset file {path} is not valid JSON: {e}") from e


def save_figure(fig, name, out_dir=None):
    """Save a Plotly figure as standalone HTML."""
    out_dir = Path(out_dir or REPORTS_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)
    fname = out_dir / f"{name}.html"
    fig.write_html(str(fname), include_plotlyjs="cdn")
    logger.info(f"Saved {fname}")
    return fname


def save_map(fmap, name, out_dir=None):
    """Save a folium map as standalone HTML."""
    out_dir = Path(out_dir or REPORTS_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)
    fname = out_dir / f"{name}.html"
    fmap.save(str(fname))
    logger.info(f"Saved {fname}")
    return fname
