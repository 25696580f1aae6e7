# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Canonical Constants Registry
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single source of truth for every emission factor, lifecycle stage policy,
# regional overlay and regulatory threshold used by the calculation pipeline.
# All modules MUST import from here; never redefine factors locally.
#
# Sources:
#   National Greenhouse Accounts (NGA) Factors (DCCEEW, indicative)
#   EN 15978 life-cycle stage taxonomy (A1–D)
#   NCC 2022 Volume One, Section J (climate zones 1–8)
#   NABERS Energy (indicative star benchmarks)
#   IPCC AR5 100-year GWP values (refrigerants)
#
# This file has ZERO network and ZERO side-effect imports.
# It is safe to import in any context, including unit tests.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

# ─────────────────────────────────────────────────────────────────────────────
# CALCULATION DEFAULTS
# ─────────────────────────────────────────────────────────────────────────────

CALCULATION_VERSION: str = "2.0.0"

DEFAULT_PROJECT_LIFE_YEARS: int = 50       # years
DEFAULT_BATCH_SIZE: int = 3                # coefficient lookups per batch
DEFAULT_CACHE_MAX_AGE_S: int = 24 * 3600   # seconds
DEFAULT_CACHE_MAX_ENTRIES: int = 512

# Documented regional fallbacks (always reported as RegionalFallbackWarning)
DEFAULT_CLIMATE_ZONE: int = 5              # warm temperate (Sydney / Adelaide / Perth)
DEFAULT_STATE: str = "nsw"
DEFAULT_STAR_PROFILE: str = "office"

VALID_STATES: tuple[str, ...] = ("nsw", "vic", "qld", "sa", "wa", "tas", "nt", "act")

MATERIAL_CATEGORIES: tuple[str, ...] = (
    "concrete", "steel", "timber", "masonry",
    "insulation", "glazing", "finishes", "other",
)


# ─────────────────────────────────────────────────────────────────────────────
# MATERIAL COEFFICIENTS — local table (cradle-to-gate, A1–A3)
#
# Each entry: category, rate (kg CO₂-e / unit), unit, biogenic storage
# (kg CO₂-e / unit, ≤ 0) where the material sequesters carbon.
# ─────────────────────────────────────────────────────────────────────────────

MATERIAL_COEFFICIENTS: dict[str, dict] = {
    # Concrete, per m³
    "concrete-32mpa":              {"category": "concrete",   "rate": 320.0, "unit": "m³"},
    "concrete-40mpa":              {"category": "concrete",   "rate": 355.0, "unit": "m³"},
    "concrete-gpc-32mpa":          {"category": "concrete",   "rate": 215.0, "unit": "m³"},
    "concrete-recycled-aggregate": {"category": "concrete",   "rate": 280.0, "unit": "m³"},
    # Steel, per kg
    "steel-reinforcing-bar":       {"category": "steel",      "rate": 1.55,  "unit": "kg"},
    "steel-structural-sections":   {"category": "steel",      "rate": 1.65,  "unit": "kg"},
    "steel-recycled":              {"category": "steel",      "rate": 0.95,  "unit": "kg"},
    # Engineered timber, per m³
    "timber-clt":                  {"category": "timber",     "rate": 200.0, "unit": "m³", "biogenic": -750.0},
    "timber-lvl":                  {"category": "timber",     "rate": 280.0, "unit": "m³", "biogenic": -600.0},
    "timber-glulam":               {"category": "timber",     "rate": 230.0, "unit": "m³", "biogenic": -680.0},
    # Masonry, per m² of wall
    "block-concrete":              {"category": "masonry",    "rate": 18.0,  "unit": "m²"},
    "block-aac":                   {"category": "masonry",    "rate": 15.0,  "unit": "m²"},
    "brick-clay":                  {"category": "masonry",    "rate": 22.0,  "unit": "m²"},
    # Insulation, per m²
    "insulation-glasswool":        {"category": "insulation", "rate": 3.5,   "unit": "m²"},
    "insulation-rockwool":         {"category": "insulation", "rate": 4.2,   "unit": "m²"},
    "insulation-xps":              {"category": "insulation", "rate": 8.5,   "unit": "m²"},
    # Glazing and windows, per m²
    "glass-single-glazed":         {"category": "glazing",    "rate": 45.0,  "unit": "m²"},
    "glass-double-glazed":         {"category": "glazing",    "rate": 65.0,  "unit": "m²"},
    "window-aluminium":            {"category": "glazing",    "rate": 120.0, "unit": "m²"},
    "window-timber":               {"category": "glazing",    "rate": 35.0,  "unit": "m²", "biogenic": -45.0},
    # Finishes, per m²
    "plasterboard":                {"category": "finishes",   "rate": 4.2,   "unit": "m²"},
    "carpet-nylon":                {"category": "finishes",   "rate": 12.5,  "unit": "m²"},
    "flooring-timber":             {"category": "finishes",   "rate": 8.2,   "unit": "m²", "biogenic": -15.0},
}

# Default reporting unit per category (used when a provider omits the unit)
CATEGORY_UNITS: dict[str, str] = {
    "concrete":   "m³",
    "steel":      "kg",
    "timber":     "m³",
    "masonry":    "m²",
    "insulation": "m²",
    "glazing":    "m²",
    "finishes":   "m²",
    "other":      "unit",
}


# ─────────────────────────────────────────────────────────────────────────────
# LIFECYCLE STAGE POLICY — per material category (EN 15978)
#
#   a4_fraction           : A4 transport to site, share of A1–A3
#   a5_fraction           : A5 construction / installation, share of A1–A3
#   c_fraction            : C1–C4 end of life, share of A1–A3
#   recycling_potential   : module D credit, share of A1–A3
#   service_life_years    : None → lasts the design life (no replacements)
#   replacement_intensity : share of (A1–A3 + A4 + A5) re-incurred per replacement
# ─────────────────────────────────────────────────────────────────────────────

STAGE_POLICIES: dict[str, dict] = {
    "concrete":   {"a4_fraction": 0.05, "a5_fraction": 0.05, "c_fraction": 0.08,
                   "recycling_potential": 0.15, "service_life_years": None, "replacement_intensity": 0.80},
    "steel":      {"a4_fraction": 0.05, "a5_fraction": 0.05, "c_fraction": 0.03,
                   "recycling_potential": 0.85, "service_life_years": None, "replacement_intensity": 0.80},
    "timber":     {"a4_fraction": 0.05, "a5_fraction": 0.05, "c_fraction": 0.05,
                   "recycling_potential": 0.40, "service_life_years": None, "replacement_intensity": 0.80},
    "masonry":    {"a4_fraction": 0.05, "a5_fraction": 0.05, "c_fraction": 0.06,
                   "recycling_potential": 0.10, "service_life_years": None, "replacement_intensity": 0.80},
    "insulation": {"a4_fraction": 0.05, "a5_fraction": 0.05, "c_fraction": 0.05,
                   "recycling_potential": 0.05, "service_life_years": 40, "replacement_intensity": 0.80},
    "glazing":    {"a4_fraction": 0.05, "a5_fraction": 0.05, "c_fraction": 0.04,
                   "recycling_potential": 0.20, "service_life_years": 30, "replacement_intensity": 0.80},
    "finishes":   {"a4_fraction": 0.05, "a5_fraction": 0.05, "c_fraction": 0.05,
                   "recycling_potential": 0.05, "service_life_years": 15, "replacement_intensity": 0.80},
    "other":      {"a4_fraction": 0.05, "a5_fraction": 0.05, "c_fraction": 0.05,
                   "recycling_potential": 0.10, "service_life_years": None, "replacement_intensity": 0.80},
}


# ─────────────────────────────────────────────────────────────────────────────
# REGIONAL MATERIAL OVERLAY — multiplier on the base rate by (state, category)
# Missing (state, category) pairs are a 1.0 no-op.
# transport: added to 1.0 to scale A4 (remoteness from manufacturing hubs).
# ─────────────────────────────────────────────────────────────────────────────

REGIONAL_MATERIAL_MULTIPLIERS: dict[str, dict[str, float]] = {
    "nsw": {"concrete": 1.00, "steel": 0.95, "timber": 1.00},
    "vic": {"concrete": 1.05, "steel": 1.00, "timber": 1.10},
    "qld": {"concrete": 1.02, "steel": 1.05, "timber": 0.90},
    "wa":  {"concrete": 1.10, "steel": 1.15, "timber": 1.05},
    "sa":  {"concrete": 1.03, "steel": 1.00, "timber": 1.10},
    "tas": {"concrete": 1.05, "steel": 1.05, "timber": 0.90},
    "act": {"concrete": 1.00, "steel": 0.95, "timber": 1.00},
    "nt":  {"concrete": 1.15, "steel": 1.20, "timber": 1.15},
}

REGIONAL_TRANSPORT_FACTORS: dict[str, float] = {
    "nsw": 0.03,
    "vic": 0.06,
    "qld": 0.15,
    "wa":  0.25,
    "sa":  0.12,
    "tas": 0.20,
    "act": 0.05,
    "nt":  0.35,
}


# ─────────────────────────────────────────────────────────────────────────────
# STATE ENERGY FACTORS — NGA (indicative)
# ─────────────────────────────────────────────────────────────────────────────

GRID_FACTORS_KG_PER_KWH: dict[str, float] = {
    "nsw": 0.81,
    "vic": 0.98,   # brown coal
    "qld": 0.79,
    "sa":  0.32,   # high wind / solar share
    "wa":  0.69,
    "tas": 0.15,   # hydro
    "nt":  0.54,
    "act": 0.81,   # NSW grid
}
NATIONAL_GRID_FACTOR_KG_PER_KWH: float = 0.79

GAS_FACTOR_KG_PER_GJ: float = 51.53  # kg CO₂-e / GJ, all states

RENEWABLE_SHARE_PCT: dict[str, float] = {
    "nsw": 26.8,
    "vic": 29.4,
    "qld": 22.5,
    "sa":  68.3,
    "wa":  30.2,
    "tas": 95.6,
    "nt":  16.0,
    "act": 100.0,
}


# ─────────────────────────────────────────────────────────────────────────────
# REGIONAL TRANSPORT PENALTIES — kg CO₂-e per unit delivered, by category
# City rows override state rows when the city is tabulated.
# ─────────────────────────────────────────────────────────────────────────────

STATE_TRANSPORT_PENALTIES: dict[str, dict[str, float]] = {
    "nsw": {"steel": 0.05, "concrete": 4.0, "timber": 0.03, "masonry": 0.09, "insulation": 0.02, "glazing": 0.04},
    "vic": {"steel": 0.06, "concrete": 4.2, "timber": 0.04, "masonry": 0.10, "insulation": 0.02, "glazing": 0.05},
    "qld": {"steel": 0.07, "concrete": 4.5, "timber": 0.02, "masonry": 0.08, "insulation": 0.03, "glazing": 0.05},
    "sa":  {"steel": 0.08, "concrete": 5.0, "timber": 0.05, "masonry": 0.12, "insulation": 0.03, "glazing": 0.06},
    "wa":  {"steel": 0.12, "concrete": 5.5, "timber": 0.06, "masonry": 0.14, "insulation": 0.04, "glazing": 0.08},
    "tas": {"steel": 0.14, "concrete": 6.0, "timber": 0.04, "masonry": 0.15, "insulation": 0.05, "glazing": 0.09},
    "nt":  {"steel": 0.18, "concrete": 7.0, "timber": 0.08, "masonry": 0.18, "insulation": 0.06, "glazing": 0.10},
    "act": {"steel": 0.06, "concrete": 4.2, "timber": 0.04, "masonry": 0.10, "insulation": 0.02, "glazing": 0.05},
}

CITY_TRANSPORT_PENALTIES: dict[str, dict[str, float]] = {
    "sydney":     {"steel": 0.03, "concrete": 4.0, "timber": 0.02, "masonry": 0.08, "insulation": 0.01, "glazing": 0.03},
    "melbourne":  {"steel": 0.06, "concrete": 4.2, "timber": 0.04, "masonry": 0.10, "insulation": 0.02, "glazing": 0.05},
    "brisbane":   {"steel": 0.05, "concrete": 4.3, "timber": 0.02, "masonry": 0.08, "insulation": 0.02, "glazing": 0.04},
    "perth":      {"steel": 0.12, "concrete": 5.3, "timber": 0.06, "masonry": 0.13, "insulation": 0.04, "glazing": 0.08},
    "adelaide":   {"steel": 0.08, "concrete": 4.8, "timber": 0.05, "masonry": 0.12, "insulation": 0.03, "glazing": 0.06},
    "hobart":     {"steel": 0.14, "concrete": 6.0, "timber": 0.04, "masonry": 0.15, "insulation": 0.05, "glazing": 0.09},
    "darwin":     {"steel": 0.18, "concrete": 6.8, "timber": 0.08, "masonry": 0.17, "insulation": 0.06, "glazing": 0.10},
    "canberra":   {"steel": 0.06, "concrete": 4.2, "timber": 0.04, "masonry": 0.10, "insulation": 0.02, "glazing": 0.05},
    "newcastle":  {"steel": 0.03, "concrete": 3.8, "timber": 0.02, "masonry": 0.07, "insulation": 0.01, "glazing": 0.03},
    "wollongong": {"steel": 0.02, "concrete": 3.7, "timber": 0.02, "masonry": 0.07, "insulation": 0.01, "glazing": 0.03},
    "geelong":    {"steel": 0.05, "concrete": 4.0, "timber": 0.03, "masonry": 0.09, "insulation": 0.02, "glazing": 0.04},
    "gold coast": {"steel": 0.05, "concrete": 4.2, "timber": 0.02, "masonry": 0.08, "insulation": 0.02, "glazing": 0.04},
    "townsville": {"steel": 0.09, "concrete": 5.0, "timber": 0.04, "masonry": 0.10, "insulation": 0.03, "glazing": 0.06},
    "cairns":     {"steel": 0.10, "concrete": 5.2, "timber": 0.04, "masonry": 0.11, "insulation": 0.03, "glazing": 0.06},
    "toowoomba":  {"steel": 0.07, "concrete": 4.5, "timber": 0.03, "masonry": 0.09, "insulation": 0.02, "glazing": 0.05},
    "launceston": {"steel": 0.12, "concrete": 5.8, "timber": 0.04, "masonry": 0.14, "insulation": 0.04, "glazing": 0.08},
}


# ─────────────────────────────────────────────────────────────────────────────
# LOCAL SUPPLIERS — by material type, then state
# Types or states without a row resolve to GENERIC_SUPPLIER.
# ─────────────────────────────────────────────────────────────────────────────

GENERIC_SUPPLIER: str = "Generic Supplier"

_READY_MIX_SUPPLIERS: dict[str, list[str]] = {
    "nsw": ["Boral Sydney", "Hanson Sydney", "Holcim Sydney"],
    "vic": ["Boral Melbourne", "Hanson Melbourne", "Holcim Melbourne"],
    "qld": ["Boral Brisbane", "Hanson Brisbane", "Holcim Brisbane", "Wagners Toowoomba"],
    "sa":  ["Boral Adelaide", "Hanson Adelaide", "Holcim Adelaide"],
    "wa":  ["Boral Perth", "Hanson Perth", "Holcim Perth", "BGC Concrete"],
    "tas": ["Boral Hobart", "Hanson Hobart", "Holcim Hobart"],
    "nt":  ["Boral Darwin", "Holcim Darwin"],
    "act": ["Boral Canberra", "Hanson Canberra", "Holcim Canberra"],
}

_STRUCTURAL_STEEL_SUPPLIERS: dict[str, list[str]] = {
    "nsw": ["InfraBuild Sydney", "Liberty OneSteel", "BlueScope Distribution"],
    "vic": ["InfraBuild Melbourne", "Liberty OneSteel", "BlueScope Distribution"],
    "qld": ["InfraBuild Brisbane", "Liberty OneSteel", "BlueScope Distribution"],
    "sa":  ["InfraBuild Adelaide", "Liberty OneSteel", "BlueScope Distribution"],
    "wa":  ["InfraBuild Perth", "Liberty OneSteel", "BlueScope Distribution"],
    "tas": ["InfraBuild Hobart", "Liberty OneSteel"],
    "nt":  ["InfraBuild Darwin", "OneSteel NT"],
    "act": ["Liberty OneSteel", "Southern Steel ACT"],
}

SUPPLIERS: dict[str, dict[str, list[str]]] = {
    "concrete-32mpa": _READY_MIX_SUPPLIERS,
    "concrete-40mpa": _READY_MIX_SUPPLIERS,
    "concrete-gpc-32mpa": {
        "qld": ["Wagners Toowoomba", "Wagners Brisbane"],
        "nsw": ["Boral Sydney", "Concrete Grinding Solutions"],
        "vic": ["Boral Melbourne", "EFC Green Concrete"],
        "sa":  ["GreenCon SA"],
        "wa":  ["BGC GPC Concrete", "Boral Perth"],
        "act": ["Boral Canberra"],
    },
    "concrete-recycled-aggregate": {
        "nsw": ["Boral Sydney", "Concrete Recyclers", "Benedict Recycled"],
        "vic": ["Boral Melbourne", "Alex Fraser Group", "Repurpose It"],
        "qld": ["Boral Brisbane", "NuCrush"],
        "sa":  ["Boral Adelaide", "Southern Waste ResourceCo"],
        "wa":  ["Boral Perth", "Capital Recycling"],
        "tas": ["Boral Hobart", "Spectran Group"],
        "nt":  ["Boral Darwin"],
        "act": ["Boral Canberra", "ACT Recycling"],
    },
    "steel-reinforcing-bar": {
        "nsw": ["InfraBuild Sydney", "Liberty OneSteel", "Australian Reinforcing Company"],
        "vic": ["InfraBuild Melbourne", "Liberty OneSteel", "BRC Victoria"],
        "qld": ["InfraBuild Brisbane", "Liberty OneSteel", "OneSteel Reinforcing"],
        "sa":  ["InfraBuild Adelaide", "Liberty OneSteel", "Best Bar Adelaide"],
        "wa":  ["InfraBuild Perth", "Liberty OneSteel", "Best Bar Perth"],
        "tas": ["InfraBuild Hobart", "Liberty OneSteel"],
        "nt":  ["InfraBuild Darwin", "OneSteel NT"],
        "act": ["Liberty OneSteel", "Southern Steel ACT"],
    },
    "steel-structural-sections": _STRUCTURAL_STEEL_SUPPLIERS,
    "steel-recycled": {
        "nsw": ["InfraBuild Sydney", "Liberty Recycling", "Sims Metal Management"],
        "vic": ["InfraBuild Melbourne", "Liberty Recycling", "Sims Metal Management"],
        "qld": ["InfraBuild Brisbane", "Liberty Recycling", "Sims Metal Management"],
        "sa":  ["InfraBuild Adelaide", "Liberty Recycling", "Sims Metal Management"],
        "wa":  ["InfraBuild Perth", "Liberty Recycling", "Sims Metal Management"],
        "tas": ["InfraBuild Hobart", "Liberty Recycling"],
        "nt":  ["OneSteel NT", "Sims Metal Management"],
        "act": ["Liberty Recycling", "Sims Metal Management"],
    },
    "timber-clt": {
        "nsw": ["XLam Australia", "Strongbuild", "Timberlink"],
        "vic": ["XLam Australia", "Australian Sustainable Hardwoods", "Hyne Timber"],
        "qld": ["Hyne Timber", "Timbertruss"],
        "sa":  ["XLam Australia", "Timberlink"],
        "wa":  ["Wesbeam", "Timberlink"],
        "tas": ["XLam Australia", "Tasmanian Timber"],
        "act": ["XLam Australia", "Timber Traders ACT"],
    },
    "block-aac": {
        "nsw": ["CSR Hebel", "BigRiver Building Products", "Baines Masonry"],
        "vic": ["CSR Hebel", "Integra Lightweight Concrete"],
        "qld": ["CSR Hebel", "Brickworks Building Products"],
        "sa":  ["CSR Hebel", "PGH Bricks & Pavers"],
        "wa":  ["CSR Hebel", "BGC Masonry"],
        "tas": ["CSR Hebel", "Island Block & Paving"],
        "nt":  ["CSR Hebel"],
        "act": ["CSR Hebel", "PGH Bricks & Pavers"],
    },
    "insulation-glasswool": {
        state: ["CSR Bradford", "Fletcher Insulation", "Knauf Insulation"]
        for state in VALID_STATES
    },
    "glass-double-glazed": {
        "nsw": ["Viridian Glass", "G.James Glass & Aluminium", "Jeld-Wen Australia"],
        "vic": ["Viridian Glass", "G.James Glass & Aluminium", "Jeld-Wen Australia"],
        "qld": ["G.James Glass & Aluminium", "Viridian Glass", "Jeld-Wen Australia"],
        "sa":  ["Viridian Glass", "G.James Glass & Aluminium"],
        "wa":  ["Viridian Glass", "G.James Glass & Aluminium"],
        "tas": ["Viridian Glass", "Jeld-Wen Australia"],
        "nt":  ["G.James Glass & Aluminium"],
        "act": ["Viridian Glass", "G.James Glass & Aluminium"],
    },
}


# ─────────────────────────────────────────────────────────────────────────────
# GHG PROTOCOL ACTIVITY FACTORS
# ─────────────────────────────────────────────────────────────────────────────

# Scope 1 — stationary and mobile combustion
FUEL_FACTORS: dict[str, float] = {
    "diesel":      2.68,  # kg CO₂-e / L
    "petrol":      2.31,  # kg CO₂-e / L
    "natural_gas": 0.18,  # kg CO₂-e / kWh
    "lpg":         1.51,  # kg CO₂-e / L
    "coal":        2.42,  # kg CO₂-e / kg
}

# Scope 1 — fugitive refrigerant leakage (AR5 GWP100, kg CO₂-e / kg)
REFRIGERANT_GWP: dict[str, float] = {
    "r410a": 2088.0,
    "r32":   675.0,
    "r134a": 1430.0,
    "r404a": 3922.0,
    "r407c": 1774.0,
}

# Scope 2 — purchased heat and cooling
STEAM_FACTOR_KG_PER_KWH: float = 0.22
COOLING_FACTOR_KG_PER_KWH: float = 0.19

# Scope 3 — transport. basis "freight": factor per tonne-km (weight in kg);
# basis "passenger": factor per passenger-km.
TRANSPORT_MODES: dict[str, dict] = {
    "light_vehicle": {"basis": "freight",   "factor": 0.25},
    "heavy_vehicle": {"basis": "freight",   "factor": 0.12},
    "rail":          {"basis": "freight",   "factor": 0.02},
    "ship":          {"basis": "freight",   "factor": 0.01},
    "air_freight":   {"basis": "freight",   "factor": 1.50},
    "car":           {"basis": "passenger", "factor": 0.17},
    "bus":           {"basis": "passenger", "factor": 0.10},
    "train":         {"basis": "passenger", "factor": 0.04},
    "flight":        {"basis": "passenger", "factor": 0.15},
}
DEFAULT_FREIGHT_FACTOR: float = 0.20  # kg CO₂-e / t-km, unknown mode

# Scope 3 — waste, kg CO₂-e per kg by disposal route
WASTE_FACTORS: dict[str, float] = {
    "landfill":     0.45,
    "recycling":    0.02,
    "composting":   0.01,
    "incineration": 0.35,
}
DEFAULT_WASTE_FACTOR: float = 0.30

# Scope 3 — employee commuting, kg CO₂-e per km
COMMUTE_FACTORS: dict[str, float] = {
    "car":     0.17,
    "bus":     0.10,
    "train":   0.04,
    "cycling": 0.0,
    "walking": 0.0,
}
DEFAULT_COMMUTE_FACTOR: float = 0.17
DEFAULT_WORKING_DAYS: int = 230


# ─────────────────────────────────────────────────────────────────────────────
# OPERATIONAL ENERGY MODEL
# ─────────────────────────────────────────────────────────────────────────────

# Base energy use intensity by building type, kWh / m² / year
ENERGY_INTENSITY_KWH_M2: dict[str, float] = {
    "office":      200.0,
    "commercial":  200.0,
    "residential": 150.0,
    "retail":      300.0,
    "industrial":  180.0,
    "warehouse":   120.0,
    "healthcare":  320.0,
    "education":   160.0,
    "hospitality": 280.0,
    "mixed":       220.0,
}
DEFAULT_ENERGY_INTENSITY_KWH_M2: float = 200.0

ENERGY_RATING_FACTORS: dict[str, float] = {
    "excellent": 0.6,
    "good":      0.8,
    "average":   1.0,
    "poor":      1.2,
}

# Heating / cooling load adjustment per NCC climate zone
CLIMATE_ZONE_ENERGY_FACTORS: dict[int, float] = {
    1: 1.15,
    2: 1.05,
    3: 1.10,
    4: 1.00,
    5: 0.95,
    6: 1.00,
    7: 1.10,
    8: 1.25,
}

# Operational end-use split by building type (fractions sum to 1.0)
END_USE_DISTRIBUTION: dict[str, dict[str, float]] = {
    "commercial":  {"hvac": 0.45, "lighting": 0.25, "equipment": 0.20, "hot_water": 0.05, "other": 0.05},
    "residential": {"hvac": 0.40, "lighting": 0.15, "equipment": 0.15, "hot_water": 0.20, "other": 0.10},
    "retail":      {"hvac": 0.35, "lighting": 0.35, "equipment": 0.15, "hot_water": 0.05, "other": 0.10},
    "industrial":  {"hvac": 0.25, "lighting": 0.15, "equipment": 0.45, "hot_water": 0.05, "other": 0.10},
    "healthcare":  {"hvac": 0.40, "lighting": 0.20, "equipment": 0.25, "hot_water": 0.10, "other": 0.05},
    "education":   {"hvac": 0.45, "lighting": 0.25, "equipment": 0.15, "hot_water": 0.05, "other": 0.10},
    "hospitality": {"hvac": 0.35, "lighting": 0.20, "equipment": 0.15, "hot_water": 0.20, "other": 0.10},
}
END_USE_PROFILE_BY_BUILDING_TYPE: dict[str, str] = {
    "office":    "commercial",
    "mixed":     "commercial",
    "warehouse": "industrial",
}


# ─────────────────────────────────────────────────────────────────────────────
# NCC 2022 SECTION J — climate zone requirements
# ─────────────────────────────────────────────────────────────────────────────

CLIMATE_ZONES: dict[int, dict] = {
    1: {"description": "Hot humid summer, warm winter",
        "roof_r_min": 4.1, "wall_r_min": 3.3, "glazing_u_max": 6.3, "glazing_shgc_max": 0.43, "air_sealing": "Medium"},
    2: {"description": "Warm humid summer, mild winter",
        "roof_r_min": 3.8, "wall_r_min": 2.8, "glazing_u_max": 5.7, "glazing_shgc_max": 0.57, "air_sealing": "Medium"},
    3: {"description": "Hot dry summer, warm winter",
        "roof_r_min": 4.2, "wall_r_min": 2.4, "glazing_u_max": 5.7, "glazing_shgc_max": 0.51, "air_sealing": "Medium"},
    4: {"description": "Hot dry summer, cool winter",
        "roof_r_min": 4.2, "wall_r_min": 2.6, "glazing_u_max": 4.3, "glazing_shgc_max": 0.57, "air_sealing": "High"},
    5: {"description": "Warm temperate",
        "roof_r_min": 4.2, "wall_r_min": 2.8, "glazing_u_max": 4.3, "glazing_shgc_max": 0.69, "air_sealing": "Medium"},
    6: {"description": "Mild temperate",
        "roof_r_min": 4.8, "wall_r_min": 3.3, "glazing_u_max": 3.3, "glazing_shgc_max": 0.69, "air_sealing": "High"},
    7: {"description": "Cool temperate",
        "roof_r_min": 5.1, "wall_r_min": 3.8, "glazing_u_max": 2.9, "glazing_shgc_max": 0.69, "air_sealing": "Very High"},
    8: {"description": "Cold temperate / Alpine",
        "roof_r_min": 6.3, "wall_r_min": 4.8, "glazing_u_max": 2.5, "glazing_shgc_max": 0.69, "air_sealing": "Very High"},
}

# Maximum air leakage (ACH @ 50 Pa) for each sealing requirement
AIR_SEALING_MAX_ACH: dict[str, float] = {
    "Very Low":  10.0,
    "Low":       8.0,
    "Medium":    6.0,
    "High":      4.0,
    "Very High": 3.0,
}

# J1.6 maximum illumination power density, W / m²
LIGHTING_POWER_DENSITY_MAX: dict[str, float] = {
    "office":      4.5,
    "retail":      14.0,
    "commercial":  5.0,
    "healthcare":  8.0,
    "education":   6.0,
    "industrial":  4.0,
    "warehouse":   3.0,
    "residential": 5.0,
    "mixed":       7.0,
}
DEFAULT_LIGHTING_POWER_DENSITY_MAX: float = 7.0

# J5 embodied carbon limit, kg CO₂-e / m² GFA
EMBODIED_CARBON_LIMITS: dict[str, float] = {
    "office":      800.0,
    "retail":      850.0,
    "commercial":  800.0,
    "healthcare":  900.0,
    "education":   780.0,
    "industrial":  600.0,
    "warehouse":   500.0,
    "residential": 750.0,
    "mixed":       800.0,
}
DEFAULT_EMBODIED_CARBON_LIMIT: float = 800.0


# ─────────────────────────────────────────────────────────────────────────────
# NABERS ENERGY STAR TIERS — annual operational kg CO₂-e / m²
#
# Each tuple: (stars, max_intensity). Ordered 6★ (lowest intensity) → 1★;
# intensity above the 1★ threshold rates 0★.
# ─────────────────────────────────────────────────────────────────────────────

STAR_STEPS: tuple[float, ...] = (6.0, 5.5, 5.0, 4.5, 4.0, 3.5, 3.0, 2.5, 2.0, 1.5, 1.0)

STAR_BENCHMARKS: dict[str, list[tuple[float, float]]] = {
    "office":          list(zip(STAR_STEPS, (22, 31, 43, 55, 67, 79, 91, 103, 115, 127, 139))),
    "retail":          list(zip(STAR_STEPS, (35, 53, 70, 88, 105, 123, 140, 158, 175, 192, 210))),
    "shopping_centre": list(zip(STAR_STEPS, (42, 56, 76, 106, 135, 164, 193, 223, 252, 281, 310))),
    "hotel":           list(zip(STAR_STEPS, (30, 45, 60, 75, 90, 105, 120, 135, 150, 165, 180))),
    "data_centre":     list(zip(STAR_STEPS, (80, 115, 160, 240, 320, 400, 480, 560, 640, 720, 800))),
    "apartment":       list(zip(STAR_STEPS, (12, 18, 24, 36, 48, 60, 72, 84, 96, 108, 120))),
}

STAR_PROFILE_BY_BUILDING_TYPE: dict[str, str] = {
    "office":      "office",
    "commercial":  "office",
    "retail":      "retail",
    "hospitality": "hotel",
    "residential": "apartment",
}

# Each tuple: (min_stars, grade)
STAR_GRADES: list[tuple[float, str]] = [
    (6.0, "Market Leading"),
    (5.0, "Excellent"),
    (4.0, "Good"),
    (3.0, "Average"),
    (2.0, "Below Average"),
    (1.0, "Poor"),
    (0.0, "Very Poor"),
]
