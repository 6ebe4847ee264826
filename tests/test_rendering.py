"""Smoke tests for figure / map builders, the HTML export and the dashboard."""

import json
from pathlib import Path

import folium
from streamlit.testing.v1 import AppTest

from main import main
from modeling.geo_engine import china_markers, us_markers
from modeling.pollution_engine import pollution_frame
from modeling.sales_engine import compute_chart_series, compute_sales_summary
from config import SALES_COLORS
from visualization.map_plots import build_marker_map, popup_html
from visualization.sales_plots import plot_sales_stacked_bar, plot_sales_summary_table
from visualization.table_plots import plot_pollution_table


APP_PATH = Path(__file__).resolve().parent.parent / "dashboard" / "app.py"

SECTION_HEADINGS = [
    "### Plug-in Sales by Brand",
    "### Battery Production Pollution Factors",
    "### China Battery-Production Cities",
    "### U.S. Battery-Production Cities",
]


def _write_dataset(tmp_path, tables):
    path = tmp_path / "dataset.json"
    path.write_text(json.dumps(tables))
    return str(path)


def _zero_sales(raw_tables):
    for row in raw_tables["sales"]:
        row["bev_units"] = 0
        row["phev_units"] = 0
    return raw_tables


def _run_app(monkeypatch, source=None):
    monkeypatch.setattr("config.DATASET_SOURCE", source)
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    return at.run()


def _circle_markers(fmap):
    return [c for c in fmap._children.values() if isinstance(c, folium.CircleMarker)]


class TestSalesPlots:
    def test_stacked_bar_has_bev_and_phev(self, bundle):
        fig = plot_sales_stacked_bar(compute_chart_series(bundle.sales))

        assert fig.layout.barmode == "stack"
        assert [t.name for t in fig.data] == ["BEV", "PHEV"]
        assert fig.data[0].marker.color == SALES_COLORS["BEV"]
        assert fig.data[1].marker.color == SALES_COLORS["PHEV"]
        assert list(fig.data[0].x)[0] == "BYD"

    def test_summary_table_rows(self, bundle):
        summary = compute_sales_summary(bundle.sales)
        fig = plot_sales_summary_table(summary)

        assert len(fig.data[0].cells.values[1]) == len(bundle.sales)


class TestPollutionTable:
    def test_rows_rendered_in_order(self, bundle):
        fig = plot_pollution_table(pollution_frame(bundle.pollution))
        assert list(fig.data[0].cells.values[0]) == [r.impact_name for r in bundle.pollution]


class TestMaps:
    def test_one_circle_marker_per_city(self, bundle):
        fmap = build_marker_map(china_markers(bundle), "china")
        assert len(_circle_markers(fmap)) == len(bundle.china_cities)

    def test_us_map(self, bundle):
        fmap = build_marker_map(us_markers(bundle), "us")
        assert len(_circle_markers(fmap)) == len(bundle.us_cities)

    def test_popup_html_lists_detail_lines(self, ningde):
        from modeling.geo_engine import to_markers

        html = popup_html(to_markers([ningde])[0])
        assert html.startswith("<b>Ningde</b>")
        assert "Producer: CATL<br>Capacity: 120 GWh" in html

    def test_popup_escapes_text(self, bundle):
        # Xi'an carries an apostrophe
        xian = next(m for m in china_markers(bundle) if m.label.startswith("Xi"))
        assert "Xi&#x27;an" in popup_html(xian)


class TestExport:
    def test_main_writes_every_report(self, tmp_path):
        assert main(out_dir=tmp_path) == 0

        written = sorted(p.name for p in tmp_path.iterdir())
        assert written == [
            "china_map.html",
            "pollution_table.html",
            "sales_chart.html",
            "sales_summary.html",
            "us_map.html",
        ]

    def test_zero_sales_skips_only_sales_reports(self, tmp_path, raw_tables):
        source = _write_dataset(tmp_path, _zero_sales(raw_tables))
        out_dir = tmp_path / "reports"

        assert main(out_dir=out_dir, source=source) == 1

        written = sorted(p.name for p in out_dir.iterdir())
        assert written == ["china_map.html", "pollution_table.html", "us_map.html"]

    def test_rejected_dataset_writes_nothing(self, tmp_path, raw_tables):
        raw_tables["china_cities"][0]["lat"] = 95
        source = _write_dataset(tmp_path, raw_tables)
        out_dir = tmp_path / "reports"

        assert main(out_dir=out_dir, source=source) == 1
        assert not out_dir.exists()


class TestDashboard:
    def test_default_dataset_renders_every_tab(self, monkeypatch):
        at = _run_app(monkeypatch)

        assert not at.exception
        assert not at.error
        assert len(at.tabs) == 4
        markdown = [m.value for m in at.markdown]
        for heading in SECTION_HEADINGS:
            assert heading in markdown
        assert len(at.get("component_instance")) == 2
        assert [m.value for m in at.metric] == ["10", "6", "7", "7"]

    def test_out_of_range_latitude_stops_with_error(self, monkeypatch, tmp_path, raw_tables):
        raw_tables["china_cities"][0]["lat"] = 95
        at = _run_app(monkeypatch, _write_dataset(tmp_path, raw_tables))

        assert not at.exception
        assert len(at.error) == 1
        assert "Dataset could not be loaded" in at.error[0].value
        assert "china_cities[0].lat" in at.error[0].value
        assert len(at.tabs) == 0
        assert not at.title

    def test_unreadable_dataset_stops_with_error(self, monkeypatch, tmp_path):
        at = _run_app(monkeypatch, str(tmp_path / "missing.json"))

        assert not at.exception
        assert "Could not read dataset file" in at.error[0].value
        assert len(at.tabs) == 0

    def test_zero_sales_keeps_other_tabs(self, monkeypatch, tmp_path, raw_tables):
        at = _run_app(monkeypatch, _write_dataset(tmp_path, _zero_sales(raw_tables)))

        assert not at.exception
        assert len(at.error) == 1
        assert "Grand total of sales units is zero" in at.error[0].value
        assert len(at.tabs) == 4
        markdown = [m.value for m in at.markdown]
        for heading in SECTION_HEADINGS:
            assert heading in markdown
        assert "#### Market Share" not in markdown
        assert len(at.dataframe) == 1
        assert len(at.get("component_instance")) == 2
