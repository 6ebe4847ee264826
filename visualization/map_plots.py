"""
map_plots.py
------------
Clickable folium maps over Geo View markers.

Each marker becomes a CircleMarker with the city as tooltip and the
detail text, line by line, as its popup.
"""

import html

import folium

from config import MAP_TILES, REGION_MAPS


def popup_html(marker) -> str:
    lines = [f"<b>{html.escape(marker.label)}</b>"]
    lines += [html.escape(line) for line in marker.detail_text.splitlines()]
    return "<br>".join(lines)


def build_marker_map(markers, region):
    """folium.Map centred per region settings, one CircleMarker per marker."""
    settings = REGION_MAPS[region]
    m = folium.Map(location=list(settings["center"]), zoom_start=settings["zoom"], tiles=MAP_TILES)

    for mk in markers:
        folium.CircleMarker(
            location=[mk.lat, mk.lon],
            radius=8,
            color=settings["marker_color"],
            fill=True,
            fill_opacity=0.8,
            tooltip=mk.label,
            popup=folium.Popup(popup_html(mk), max_width=320),
        ).add_to(m)

    return m
