"""
bundle.py
---------
The Dataset Bundle: the four source tables, validated once and frozen.

Construction is all-or-nothing. Any row that breaks its table's invariants
raises SchemaViolation and no bundle is produced, so the dashboard never
serves views over partially valid data.

USAGE:
  from data_bundle.bundle import get_bundle, load_bundle

  bundle = get_bundle()                  # embedded tables, built once per process
  bundle = get_bundle(source)            # same, for a JSON path / URL (shells use this)
  bundle = load_bundle("data/ev.json")   # fresh, uncached load with the same validation
"""

import logging
import math
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Tuple

from data_bundle import embedded
from data_bundle.errors import LoadError, SchemaViolation
from data_bundle.records import (
    ChinaCityRecord,
    PollutionFactor,
    SalesRecord,
    USCityRecord,
)
from utils.io_utils import read_json_source

logger = logging.getLogger(__name__)

# table name → (record type, unique key field)
TABLES = {
    'sales':        (SalesRecord,     'brand'),
    'pollution':    (PollutionFactor, 'impact_name'),
    'china_cities': (ChinaCityRecord, 'city'),
    'us_cities':    (USCityRecord,    'city'),
}

INT_FIELDS   = {'bev_units', 'phev_units'}
FLOAT_FIELDS = {'value', 'lat', 'lon', 'capacity_gwh', 'co2_per_kwh',
                'water_per_kwh', 'pollution_percent'}
# fields that may be empty strings (free text)
OPTIONAL_TEXT = {'source_note', 'notes', 'risks', 'unit'}


# ── FIELD CHECKS ──────────────────────────────────────────────────────────────

def _is_number(x) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_text(table, idx, name, value):
    if not isinstance(value, str):
        raise SchemaViolation(table, idx, name, f"expected text, got {type(value).__name__}")
    if name not in OPTIONAL_TEXT and not value.strip():
        raise SchemaViolation(table, idx, name, "must not be empty")


def _check_number(table, idx, name, value, lo=None, hi=None):
    if name in INT_FIELDS:
        if not isinstance(value, int) or isinstance(value, bool):
            raise SchemaViolation(table, idx, name, f"expected integer, got {value!r}")
    elif not _is_number(value) or not math.isfinite(value):
        raise SchemaViolation(table, idx, name, f"expected finite number, got {value!r}")
    if lo is not None and value < lo:
        raise SchemaViolation(table, idx, name, f"{value} is below {lo}")
    if hi is not None and value > hi:
        raise SchemaViolation(table, idx, name, f"{value} is above {hi}")


def _check_coordinates(table, idx, rec):
    _check_number(table, idx, 'lat', rec.lat, -90, 90)
    _check_number(table, idx, 'lon', rec.lon, -180, 180)


def _validate_record(table: str, idx: int, rec) -> None:
    expected, _ = TABLES[table]
    if not isinstance(rec, expected):
        raise SchemaViolation(table, idx, '*',
                              f"expected {expected.__name__}, got {type(rec).__name__}")

    for f in fields(rec):
        value = getattr(rec, f.name)
        if f.name in INT_FIELDS or f.name in FLOAT_FIELDS:
            continue
        _check_text(table, idx, f.name, value)

    if isinstance(rec, SalesRecord):
        _check_number(table, idx, 'bev_units', rec.bev_units, 0)
        _check_number(table, idx, 'phev_units', rec.phev_units, 0)
    elif isinstance(rec, PollutionFactor):
        _check_number(table, idx, 'value', rec.value, 0)
    elif isinstance(rec, ChinaCityRecord):
        _check_coordinates(table, idx, rec)
        _check_number(table, idx, 'capacity_gwh', rec.capacity_gwh, 0)
        _check_number(table, idx, 'co2_per_kwh', rec.co2_per_kwh, 0)
        _check_number(table, idx, 'water_per_kwh', rec.water_per_kwh, 0)
    elif isinstance(rec, USCityRecord):
        _check_coordinates(table, idx, rec)
        _check_number(table, idx, 'capacity_gwh', rec.capacity_gwh, 0)
        _check_number(table, idx, 'co2_per_kwh', rec.co2_per_kwh, 0)
        _check_number(table, idx, 'pollution_percent', rec.pollution_percent, 0, 100)


def _validate_table(table: str, rows: Tuple) -> None:
    _, key = TABLES[table]
    seen = {}
    for idx, rec in enumerate(rows):
        _validate_record(table, idx, rec)
        k = getattr(rec, key)
        if k in seen:
            raise SchemaViolation(table, idx, key,
                                  f"duplicate {key} {k!r} (first seen at row {seen[k]})")
        seen[k] = idx


# ── BUNDLE ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DatasetBundle:
    """
    Process-wide immutable collection of the four source tables.

    Each accessor is an ordered tuple of frozen records. Tables are
    validated in __post_init__, so holding a DatasetBundle means holding
    valid data.
    """
    sales:        Tuple[SalesRecord, ...]
    pollution:    Tuple[PollutionFactor, ...]
    china_cities: Tuple[ChinaCityRecord, ...]
    us_cities:    Tuple[USCityRecord, ...]

    def __post_init__(self):
        for table in TABLES:
            rows = getattr(self, table)
            if isinstance(rows, (str, bytes)) or not hasattr(rows, '__iter__'):
                raise SchemaViolation(table, None, '*', "expected a sequence of records")
            rows = tuple(rows)
            _validate_table(table, rows)
            object.__setattr__(self, table, rows)

    def summary(self) -> Dict[str, int]:
        """Row count per table."""
        return {table: len(getattr(self, table)) for table in TABLES}


# ── CONSTRUCTION FROM MAPPINGS ────────────────────────────────────────────────

def _build_row(table: str, idx: int, row: Any):
    record_type, _ = TABLES[table]
    if not isinstance(row, Mapping):
        raise SchemaViolation(table, idx, '*', f"expected an object, got {type(row).__name__}")

    names   = [f.name for f in fields(record_type)]
    missing = [n for n in names if n not in row]
    unknown = [k for k in row if k not in names]
    if missing:
        raise SchemaViolation(table, idx, missing[0], "missing column")
    if unknown:
        raise SchemaViolation(table, idx, str(unknown[0]), "unknown column")

    values = {}
    for n in names:
        v = row[n]
        # JSON has one number type; widen integral capacities etc. to float
        if n in FLOAT_FIELDS and _is_number(v):
            v = float(v)
        values[n] = v
    return record_type(**values)


def bundle_from_mapping(payload: Mapping) -> DatasetBundle:
    """Build a bundle from {'sales': [...], 'pollution': [...], ...} rows."""
    if not isinstance(payload, Mapping):
        raise SchemaViolation('dataset', None, '*',
                              f"expected an object of tables, got {type(payload).__name__}")

    tables = {}
    for table in TABLES:
        if table not in payload:
            raise SchemaViolation('dataset', None, table, "missing table")
        rows = payload[table]
        if not isinstance(rows, (list, tuple)):
            raise SchemaViolation(table, None, '*', "expected a list of rows")
        tables[table] = tuple(_build_row(table, i, r) for i, r in enumerate(rows))

    return DatasetBundle(**tables)


def build_default_bundle() -> DatasetBundle:
    """Bundle over the literal tables shipped in data_bundle.embedded."""
    return bundle_from_mapping({
        'sales':        embedded.SALES_ROWS,
        'pollution':    embedded.POLLUTION_ROWS,
        'china_cities': embedded.CHINA_CITY_ROWS,
        'us_cities':    embedded.US_CITY_ROWS,
    })


def load_bundle(source: Optional[str] = None) -> DatasetBundle:
    """
    Load and validate the dataset.

    source:
      None             → embedded tables
      path / http URL  → JSON document with the four tables

    Raises LoadError when the source cannot be read and SchemaViolation
    (a LoadError) when its rows break the table invariants.
    """
    if not source:
        bundle = build_default_bundle()
        logger.info(f"Loaded embedded dataset: {bundle.summary()}")
        return bundle

    payload = read_json_source(source)
    try:
        bundle = bundle_from_mapping(payload)
    except SchemaViolation as e:
        logger.error(f"Dataset {source} rejected: {e}")
        raise
    logger.info(f"Loaded dataset from {source}: {bundle.summary()}")
    return bundle


@lru_cache(maxsize=None)
def _cached_bundle(source: Optional[str]) -> DatasetBundle:
    return load_bundle(source)


def get_bundle(source: Optional[str] = None) -> DatasetBundle:
    """
    Process-wide bundle per source, built on first use and reused afterwards.

    Used by both shells (dashboard/app.py, main.py). Failed loads are not
    cached, so a fixed source is picked up on the next call.
    """
    return _cached_bundle(source or None)


__all__ = [
    'DatasetBundle', 'LoadError', 'SchemaViolation',
    'build_default_bundle', 'bundle_from_mapping', 'get_bundle', 'load_bundle',
]
