"""
embedded.py
-----------
Literal source tables shipped with the dashboard.

Values are annual figures compiled for the report; city rows repeat their
own CO2 / water factors rather than pointing into the pollution table.
Rows are plain dicts so the same validation path serves both these tables
and an external JSON document (see data_bundle.bundle.bundle_from_mapping).
"""

# ── EV SALES BY BRAND ─────────────────────────────────────────────────────────

SALES_ROWS = [
    {"brand": "BYD",               "bev_units": 1764992, "phev_units": 2335008},
    {"brand": "Tesla",             "bev_units": 1790000, "phev_units": 0},
    {"brand": "Volkswagen Group",  "bev_units": 771100,  "phev_units": 230400},
    {"brand": "Geely-Volvo",       "bev_units": 487500,  "phev_units": 170200},
    {"brand": "GAC Aion",          "bev_units": 480000,  "phev_units": 60000},
    {"brand": "Hyundai-Kia",       "bev_units": 380000,  "phev_units": 110000},
    {"brand": "BMW Group",         "bev_units": 376000,  "phev_units": 188000},
    {"brand": "Li Auto",           "bev_units": 0,       "phev_units": 376030},
    {"brand": "Stellantis",        "bev_units": 330000,  "phev_units": 280000},
    {"brand": "Mercedes-Benz",     "bev_units": 240000,  "phev_units": 160000},
]

# ── BATTERY POLLUTION FACTORS ────────────────────────────────────────────────

POLLUTION_ROWS = [
    {
        "impact_name": "CO2 per kWh of cells (China grid)",
        "value": 124.5,
        "unit": "kg CO2-eq/kWh",
        "source_note": "Cradle-to-gate LCA, coal-heavy provincial grids",
    },
    {
        "impact_name": "CO2 per kWh of cells (U.S. grid)",
        "value": 88.0,
        "unit": "kg CO2-eq/kWh",
        "source_note": "Cradle-to-gate LCA, U.S. average grid mix",
    },
    {
        "impact_name": "Process water per kWh of cells",
        "value": 50.0,
        "unit": "L/kWh",
        "source_note": "Electrode slurry, cleaning and cooling loops",
    },
    {
        "impact_name": "Brine water for lithium carbonate",
        "value": 2000.0,
        "unit": "m3/t Li2CO3",
        "source_note": "Evaporation ponds, South American salt flats",
    },
    {
        "impact_name": "SO2 from nickel and cobalt refining",
        "value": 0.6,
        "unit": "kg SO2/kWh",
        "source_note": "Sulphide ore smelting upstream of cathode production",
    },
    {
        "impact_name": "Battery share of EV manufacturing emissions",
        "value": 46.0,
        "unit": "%",
        "source_note": "Mid-size BEV with a 60 kWh pack",
    },
]

# ── CHINA BATTERY-PRODUCTION CITIES ──────────────────────────────────────────

CHINA_CITY_ROWS = [
    {
        "city": "Ningde", "lat": 26.6656, "lon": 119.5482,
        "producer": "CATL", "capacity_gwh": 120, "co2_per_kwh": 124.5, "water_per_kwh": 50,
        "notes": "CATL headquarters and largest cell cluster",
    },
    {
        "city": "Yibin", "lat": 28.7513, "lon": 104.6417,
        "producer": "CATL", "capacity_gwh": 75, "co2_per_kwh": 98.0, "water_per_kwh": 48,
        "notes": "Hydropower-heavy Sichuan grid lowers footprint",
    },
    {
        "city": "Shenzhen", "lat": 22.5431, "lon": 114.0579,
        "producer": "BYD", "capacity_gwh": 60, "co2_per_kwh": 118.0, "water_per_kwh": 52,
        "notes": "Blade LFP cell lines next to vehicle assembly",
    },
    {
        "city": "Changzhou", "lat": 31.8107, "lon": 119.9742,
        "producer": "CALB", "capacity_gwh": 80, "co2_per_kwh": 120.3, "water_per_kwh": 49,
        "notes": "Yangtze River Delta supplier cluster",
    },
    {
        "city": "Hefei", "lat": 31.8206, "lon": 117.2272,
        "producer": "Gotion High-Tech", "capacity_gwh": 50, "co2_per_kwh": 122.0, "water_per_kwh": 51,
        "notes": "LFP cells for domestic and export programmes",
    },
    {
        "city": "Xi'an", "lat": 34.3416, "lon": 108.9398,
        "producer": "BYD", "capacity_gwh": 40, "co2_per_kwh": 130.2, "water_per_kwh": 55,
        "notes": "Coal-fired northwest grid, water-stressed basin",
    },
    {
        "city": "Nanjing", "lat": 32.0603, "lon": 118.7969,
        "producer": "LG Energy Solution", "capacity_gwh": 55, "co2_per_kwh": 119.8, "water_per_kwh": 47,
        "notes": "NCM pouch cells, mostly for export",
    },
]

# ── U.S. BATTERY-PRODUCTION CITIES ───────────────────────────────────────────

US_CITY_ROWS = [
    {
        "city": "Sparks", "lat": 39.5380, "lon": -119.4420,
        "automaker": "Tesla", "capacity_gwh": 37, "co2_per_kwh": 88.0, "pollution_percent": 12,
        "risks": "Water scarcity in the high desert",
    },
    {
        "city": "Spring Hill", "lat": 35.7512, "lon": -86.9300,
        "automaker": "General Motors", "capacity_gwh": 50, "co2_per_kwh": 82.0, "pollution_percent": 9,
        "risks": "Solvent emissions near residential areas",
    },
    {
        "city": "Lordstown", "lat": 41.1656, "lon": -80.8573,
        "automaker": "General Motors", "capacity_gwh": 35, "co2_per_kwh": 95.0, "pollution_percent": 14,
        "risks": "Coal-heavy regional grid",
    },
    {
        "city": "Glendale", "lat": 37.6020, "lon": -85.9044,
        "automaker": "Ford", "capacity_gwh": 43, "co2_per_kwh": 91.0, "pollution_percent": 11,
        "risks": "Wastewater discharge into karst groundwater",
    },
    {
        "city": "Commerce", "lat": 34.2040, "lon": -83.4571,
        "automaker": "Hyundai / Ford", "capacity_gwh": 21.5, "co2_per_kwh": 85.0, "pollution_percent": 10,
        "risks": "Past NMP solvent leaks into local creeks",
    },
    {
        "city": "Smyrna", "lat": 35.9828, "lon": -86.5186,
        "automaker": "Nissan", "capacity_gwh": 7, "co2_per_kwh": 84.5, "pollution_percent": 7.5,
        "risks": "Older lines with higher scrap rates",
    },
    {
        "city": "Marshall", "lat": 42.2723, "lon": -84.9633,
        "automaker": "Ford", "capacity_gwh": 20, "co2_per_kwh": 90.0, "pollution_percent": 8,
        "risks": "Farmland conversion and wetland runoff",
    },
]
