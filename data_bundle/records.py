"""
records.py
----------
Typed row schemas for the four dashboard tables.

Every table row is a frozen dataclass, so rows cannot be edited after the
bundle is built. Views select and derive; they never write back.

  SalesRecord       ← EV sales by brand (BEV / PHEV units)
  PollutionFactor   ← battery-production impact factors
  ChinaCityRecord   ← China battery-production cities
  USCityRecord      ← U.S. battery-production cities
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SalesRecord:
    """Annual plug-in sales for one brand."""
    brand: str
    bev_units: int
    phev_units: int

    @property
    def total_units(self) -> int:
        # derived on demand, never stored
        return self.bev_units + self.phev_units


@dataclass(frozen=True)
class PollutionFactor:
    impact_name: str
    value: float
    unit: str
    source_note: str


@dataclass(frozen=True)
class ChinaCityRecord:
    city: str
    lat: float
    lon: float
    producer: str
    capacity_gwh: float
    co2_per_kwh: float      # kg CO2-eq per kWh of cell capacity
    water_per_kwh: float    # litres per kWh of cell capacity
    notes: str


@dataclass(frozen=True)
class USCityRecord:
    city: str
    lat: float
    lon: float
    automaker: str
    capacity_gwh: float
    co2_per_kwh: float
    pollution_percent: float
    risks: str
