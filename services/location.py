# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Location & Regional Overlay
# © 2026 Aparajita Parihar. All rights reserved.
#
# Provides:
#   • Curated Australian city database (lat/lon, state, NCC climate zone)
#   • Nearest-city resolver (Haversine) for coordinate → city mapping
#   • RegionalAdjuster: attaches grid, transport and supplier context to a
#     project without mutating it
#
# Resolution chain for state and climate zone:
#   explicit project value → city table → nearest tabulated city (coordinates)
#   → documented default (state "nsw", zone 5). Every step past the city table
#   records a RegionalFallbackWarning on the enriched result.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Mapping, Optional

from config.constants import (
    CITY_TRANSPORT_PENALTIES,
    CLIMATE_ZONES,
    DEFAULT_CLIMATE_ZONE,
    DEFAULT_STATE,
    GAS_FACTOR_KG_PER_GJ,
    GENERIC_SUPPLIER,
    GRID_FACTORS_KG_PER_KWH,
    NATIONAL_GRID_FACTOR_KG_PER_KWH,
    REGIONAL_TRANSPORT_FACTORS,
    RENEWABLE_SHARE_PCT,
    STATE_TRANSPORT_PENALTIES,
    SUPPLIERS,
    VALID_STATES,
)
from core.errors import RegionalFallbackWarning
from core.models import Project, readonly

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# CITY DATABASE
# zone = NCC climate zone (1 hot humid … 8 alpine).
# ─────────────────────────────────────────────────────────────────────────────
CITIES: dict[str, dict] = {
    # NSW & ACT
    "Sydney":        {"lat": -33.8688, "lon": 151.2093, "state": "nsw", "zone": 5},
    "Newcastle":     {"lat": -32.9283, "lon": 151.7817, "state": "nsw", "zone": 5},
    "Wollongong":    {"lat": -34.4278, "lon": 150.8931, "state": "nsw", "zone": 5},
    "Thredbo":       {"lat": -36.5048, "lon": 148.3069, "state": "nsw", "zone": 8},
    "Canberra":      {"lat": -35.2809, "lon": 149.1300, "state": "act", "zone": 7},
    # VIC
    "Melbourne":     {"lat": -37.8136, "lon": 144.9631, "state": "vic", "zone": 6},
    "Geelong":       {"lat": -38.1499, "lon": 144.3617, "state": "vic", "zone": 6},
    "Ballarat":      {"lat": -37.5622, "lon": 143.8503, "state": "vic", "zone": 7},
    "Mildura":       {"lat": -34.2080, "lon": 142.1246, "state": "vic", "zone": 4},
    # QLD
    "Brisbane":      {"lat": -27.4698, "lon": 153.0251, "state": "qld", "zone": 2},
    "Gold Coast":    {"lat": -28.0167, "lon": 153.4000, "state": "qld", "zone": 2},
    "Toowoomba":     {"lat": -27.5598, "lon": 151.9507, "state": "qld", "zone": 5},
    "Townsville":    {"lat": -19.2590, "lon": 146.8169, "state": "qld", "zone": 1},
    "Cairns":        {"lat": -16.9186, "lon": 145.7781, "state": "qld", "zone": 1},
    # SA, WA, NT
    "Adelaide":      {"lat": -34.9285, "lon": 138.6007, "state": "sa",  "zone": 5},
    "Perth":         {"lat": -31.9505, "lon": 115.8605, "state": "wa",  "zone": 5},
    "Darwin":        {"lat": -12.4634, "lon": 130.8456, "state": "nt",  "zone": 1},
    "Alice Springs": {"lat": -23.6980, "lon": 133.8807, "state": "nt",  "zone": 3},
    # TAS
    "Hobart":        {"lat": -42.8821, "lon": 147.3272, "state": "tas", "zone": 7},
    "Launceston":    {"lat": -41.4332, "lon": 147.1441, "state": "tas", "zone": 7},
}

_CITY_INDEX: dict[str, str] = {name.lower(): name for name in CITIES}


def find_city(name: Optional[str]) -> Optional[str]:
    """Case-insensitive lookup of a tabulated city key; None when untabulated."""
    if not name:
        return None
    return _CITY_INDEX.get(str(name).strip().lower())


def city_meta(city_key: str) -> dict:
    """Return metadata dict for a city key. Raises KeyError if not found."""
    key = find_city(city_key)
    if key is None:
        raise KeyError(city_key)
    return CITIES[key]


def _haversine(la1: float, lo1: float, la2: float, lo2: float) -> float:
    R = 6_371.0
    dlat = math.radians(la2 - la1)
    dlon = math.radians(lo2 - lo1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(la1))
        * math.cos(math.radians(la2))
        * math.sin(dlon / 2) ** 2
    )
    return R * 2 * math.asin(math.sqrt(a))


def nearest_city(lat: float, lon: float) -> str:
    """Return the city key nearest to (lat, lon) using the Haversine formula."""
    return min(
        CITIES,
        key=lambda c: _haversine(lat, lon, CITIES[c]["lat"], CITIES[c]["lon"]),
    )


# ─────────────────────────────────────────────────────────────────────────────
# ENRICHED PROJECT
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EnrichedProject:
    """A project plus the derived regional context. Never persisted."""

    project: Project
    state: str
    climate_zone: int
    zone_description: str
    requirements: Mapping[str, object]
    grid_factor: float                      # kg CO₂-e / kWh
    gas_factor: float                       # kg CO₂-e / GJ
    renewable_share_pct: float
    transport_scale: float                  # multiplier on A4
    transport_penalties: Mapping[str, float]
    suppliers: Mapping[str, tuple[str, ...]]
    city: Optional[str] = None              # tabulated city used, if any
    warnings: tuple[RegionalFallbackWarning, ...] = field(default_factory=tuple)

    @property
    def warning_messages(self) -> tuple[str, ...]:
        return tuple(str(w) for w in self.warnings)


class RegionalAdjuster:
    """Resolves a project's location into grid, transport and supplier context."""

    def __init__(
        self,
        default_state: str = DEFAULT_STATE,
        default_climate_zone: int = DEFAULT_CLIMATE_ZONE,
    ):
        if default_state not in VALID_STATES:
            raise ValueError(f"Unknown default state '{default_state}'.")
        if default_climate_zone not in CLIMATE_ZONES:
            raise ValueError(f"Unknown default climate zone {default_climate_zone}.")
        self.default_state = default_state
        self.default_climate_zone = default_climate_zone

    def _fallback(self, warnings: list, field_name: str, requested, fallback, reason: str) -> None:
        warning = RegionalFallbackWarning(field_name, requested, fallback, reason)
        logger.warning("Regional fallback: %s", warning)
        warnings.append(warning)

    def _resolve_state(self, project: Project, city: Optional[str], nearest: Optional[str], warnings: list) -> str:
        requested = (project.location.state or "").strip().lower()
        if requested in VALID_STATES:
            return requested
        if city is not None:
            state = CITIES[city]["state"]
            if requested:
                self._fallback(warnings, "state", requested, state, f"unknown state, using city {city}")
            return state
        label = requested or project.location.city or None
        if nearest is not None:
            state = CITIES[nearest]["state"]
            self._fallback(warnings, "state", label, state, f"nearest tabulated city {nearest}")
            return state
        self._fallback(warnings, "state", label, self.default_state, "location not tabulated")
        return self.default_state

    def _resolve_zone(self, project: Project, city: Optional[str], nearest: Optional[str], warnings: list) -> int:
        if project.climate_zone in CLIMATE_ZONES:
            return project.climate_zone
        if city is not None:
            return CITIES[city]["zone"]
        label = project.location.city or None
        if nearest is not None:
            zone = CITIES[nearest]["zone"]
            self._fallback(warnings, "climate_zone", label, zone, f"nearest tabulated city {nearest}")
            return zone
        self._fallback(warnings, "climate_zone", label, self.default_climate_zone, "location not tabulated")
        return self.default_climate_zone

    def transport_penalties(self, state: str, city: Optional[str]) -> dict[str, float]:
        if city is not None and city.lower() in CITY_TRANSPORT_PENALTIES:
            return dict(CITY_TRANSPORT_PENALTIES[city.lower()])
        return dict(STATE_TRANSPORT_PENALTIES.get(state, {}))

    @staticmethod
    def suppliers_for(type_id: str, state: str) -> tuple[str, ...]:
        return tuple(SUPPLIERS.get(type_id, {}).get(state) or (GENERIC_SUPPLIER,))

    def enrich(self, project: Project) -> EnrichedProject:
        warnings: list[RegionalFallbackWarning] = []
        loc = project.location
        city = find_city(loc.city)
        nearest = None
        if city is None and loc.lat is not None and loc.lon is not None:
            nearest = nearest_city(loc.lat, loc.lon)

        state = self._resolve_state(project, city, nearest, warnings)
        zone = self._resolve_zone(project, city, nearest, warnings)
        requirements = CLIMATE_ZONES[zone]

        suppliers = {
            item.type_id: self.suppliers_for(item.type_id, state)
            for item in project.materials
        }
        return EnrichedProject(
            project=project,
            state=state,
            climate_zone=zone,
            zone_description=requirements["description"],
            requirements=readonly(requirements),
            grid_factor=GRID_FACTORS_KG_PER_KWH.get(state, NATIONAL_GRID_FACTOR_KG_PER_KWH),
            gas_factor=GAS_FACTOR_KG_PER_GJ,
            renewable_share_pct=RENEWABLE_SHARE_PCT.get(state, 0.0),
            transport_scale=1.0 + REGIONAL_TRANSPORT_FACTORS.get(state, 0.0),
            transport_penalties=readonly(self.transport_penalties(state, city or nearest)),
            suppliers=readonly(suppliers),
            city=city or nearest,
            warnings=tuple(warnings),
        )
