"""
geo_engine.py
-------------
Geo Views: project city tables onto map markers.

One marker per row, in input order. No clustering or deduplication;
rendering density is the map's concern.

Detail text is a fixed template per region, one "Field: value" line each:

  China  → Producer, Capacity, CO2, Water, Notes
  U.S.   → Automaker, Capacity, CO2, Pollution, Risks

Map popups render it verbatim, so field order is part of the contract.
Coordinates are trusted here; the bundle rejects out-of-range rows.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from data_bundle.records import ChinaCityRecord, USCityRecord

logger = logging.getLogger(__name__)

CityRecord = Union[ChinaCityRecord, USCityRecord]


@dataclass(frozen=True)
class Marker:
    lat: float
    lon: float
    label: str
    detail_text: str


def format_number(value) -> str:
    """120.0 → '120', 124.5 → '124.5', 1e-05 → '0.00001' (never exponent form)."""
    return np.format_float_positional(float(value), trim='-')


def format_china_detail(rec: ChinaCityRecord) -> str:
    return "\n".join([
        f"Producer: {rec.producer}",
        f"Capacity: {format_number(rec.capacity_gwh)} GWh",
        f"CO2: {format_number(rec.co2_per_kwh)} kg/kWh",
        f"Water: {format_number(rec.water_per_kwh)} L/kWh",
        f"Notes: {rec.notes}",
    ])


def format_us_detail(rec: USCityRecord) -> str:
    return "\n".join([
        f"Automaker: {rec.automaker}",
        f"Capacity: {format_number(rec.capacity_gwh)} GWh",
        f"CO2: {format_number(rec.co2_per_kwh)} kg/kWh",
        f"Pollution: {format_number(rec.pollution_percent)}%",
        f"Risks: {rec.risks}",
    ])


DETAIL_FORMATTERS = {
    ChinaCityRecord: format_china_detail,
    USCityRecord:    format_us_detail,
}


def to_markers(records: Sequence[CityRecord]) -> Tuple[Marker, ...]:
    """
    One Marker per city row.

    All rows must belong to the same region; mixing China and U.S. rows
    (or passing any other type) raises TypeError.
    """
    if not records:
        return ()

    region_type = type(records[0])
    formatter = DETAIL_FORMATTERS.get(region_type)
    if formatter is None:
        raise TypeError(f"No marker template for {region_type.__name__}")

    markers = []
    for rec in records:
        if type(rec) is not region_type:
            raise TypeError(f"Mixed regions: {type(rec).__name__} among {region_type.__name__} rows")
        markers.append(Marker(lat=rec.lat, lon=rec.lon, label=rec.city,
                              detail_text=formatter(rec)))

    logger.info(f"Built {len(markers)} markers for {region_type.__name__}")
    return tuple(markers)


def china_markers(bundle) -> Tuple[Marker, ...]:
    return to_markers(bundle.china_cities)


def us_markers(bundle) -> Tuple[Marker, ...]:
    return to_markers(bundle.us_cities)
