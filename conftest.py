"""Shared pytest fixtures for the EV battery dashboard."""

import copy

import pytest

from data_bundle import embedded
from data_bundle.bundle import build_default_bundle
from data_bundle.records import ChinaCityRecord, SalesRecord, USCityRecord


@pytest.fixture
def bundle():
    return build_default_bundle()


@pytest.fixture
def raw_tables():
    """Deep copy of the embedded tables, safe to edit per test."""
    return copy.deepcopy({
        "sales": embedded.SALES_ROWS,
        "pollution": embedded.POLLUTION_ROWS,
        "china_cities": embedded.CHINA_CITY_ROWS,
        "us_cities": embedded.US_CITY_ROWS,
    })


@pytest.fixture
def byd_tesla():
    return [
        SalesRecord(brand="BYD", bev_units=1764992, phev_units=2335008),
        SalesRecord(brand="Tesla", bev_units=1790000, phev_units=0),
    ]


@pytest.fixture
def ningde():
    return ChinaCityRecord(
        city="Ningde", lat=26.6656, lon=119.5482, producer="CATL",
        capacity_gwh=120.0, co2_per_kwh=124.5, water_per_kwh=50.0,
        notes="CATL headquarters",
    )


@pytest.fixture
def sparks():
    return USCityRecord(
        city="Sparks", lat=39.538, lon=-119.442, automaker="Tesla",
        capacity_gwh=37.0, co2_per_kwh=88.0, pollution_percent=12.5,
        risks="Water scarcity",
    )
