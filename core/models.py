# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Domain Model
# © 2026 Aparajita Parihar. All rights reserved.
#
# Immutable value types exchanged between pipeline stages:
#   • inputs:   Project, MaterialLineItem, Envelope, ActivityData
#   • lookups:  CarbonCoefficient, StagePolicy
#   • outputs:  StageBreakdown, ScopeResult, ComplianceResult,
#               Recommendation, ProjectResult
#
# Every dataclass is frozen. Mappings stored on results are read-only views.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from config.constants import (
    DEFAULT_PROJECT_LIFE_YEARS,
    DEFAULT_WORKING_DAYS,
    STAGE_POLICIES,
)
from core.errors import ValidationError

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def normalize_key(value: Any) -> str:
    """'naturalGas' / 'Natural Gas' / 'natural-gas' → 'natural_gas'."""
    text = _CAMEL_BOUNDARY.sub("_", str(value or "").strip())
    return re.sub(r"[\s\-]+", "_", text).lower()


def readonly(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


# ─────────────────────────────────────────────────────────────────────────────
# ENUMERATIONS
# ─────────────────────────────────────────────────────────────────────────────

class MaterialCategory(str, Enum):
    CONCRETE = "concrete"
    STEEL = "steel"
    TIMBER = "timber"
    MASONRY = "masonry"
    INSULATION = "insulation"
    GLAZING = "glazing"
    FINISHES = "finishes"
    OTHER = "other"

    @property
    def policy(self) -> "StagePolicy":
        return StagePolicy.for_category(self)


class BuildingType(str, Enum):
    OFFICE = "office"
    COMMERCIAL = "commercial"
    RETAIL = "retail"
    RESIDENTIAL = "residential"
    INDUSTRIAL = "industrial"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    HOSPITALITY = "hospitality"
    WAREHOUSE = "warehouse"
    MIXED = "mixed"


class EnergyRating(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"


class Scope2Method(str, Enum):
    LOCATION = "location"
    MARKET = "market"


class SectionStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"   # no input data, assessment skipped, not "passed"


# ─────────────────────────────────────────────────────────────────────────────
# LIFECYCLE POLICY
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StagePolicy:
    """Per-category stage fractions, looked up by enum key."""

    a4_fraction: float
    a5_fraction: float
    c_fraction: float
    recycling_potential: float
    service_life_years: Optional[int]
    replacement_intensity: float

    @classmethod
    def for_category(cls, category: MaterialCategory | str) -> "StagePolicy":
        key = MaterialCategory(category).value
        return cls(**STAGE_POLICIES[key])


# ─────────────────────────────────────────────────────────────────────────────
# PROJECT INPUT
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Location:
    city: str = ""
    state: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None


@dataclass(frozen=True)
class MaterialLineItem:
    category: MaterialCategory
    type_id: str
    quantity: float
    unit: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.category.value, self.type_id)


@dataclass(frozen=True)
class Envelope:
    """Design-stage envelope figures used by the Section J checks."""

    roof_r: Optional[float] = None                  # m²K / W
    wall_r: Optional[float] = None                  # m²K / W
    glazing_u: Optional[float] = None               # W / m²K
    glazing_shgc: Optional[float] = None
    air_leakage_ach: Optional[float] = None         # ACH @ 50 Pa
    lighting_power_density: Optional[float] = None  # W / m²


@dataclass(frozen=True)
class FuelUse:
    fuel_type: str
    quantity: float


@dataclass(frozen=True)
class VehicleUse:
    vehicle_type: str
    fuel_type: str
    fuel_used: float


@dataclass(frozen=True)
class RefrigerantLeak:
    refrigerant: str
    kg: float


@dataclass(frozen=True)
class TransportLeg:
    mode: str
    distance_km: float
    weight_kg: float = 0.0
    passengers: int = 1


@dataclass(frozen=True)
class WasteStream:
    waste_type: str
    disposal_method: str
    quantity_kg: float


@dataclass(frozen=True)
class Commuting:
    employees: int = 0
    daily_km: float = 0.0
    working_days: int = DEFAULT_WORKING_DAYS
    mode: str = "car"
    total_km: Optional[float] = None

    @property
    def distance_km(self) -> float:
        if self.total_km is not None:
            return self.total_km
        return self.employees * self.daily_km * self.working_days


@dataclass(frozen=True)
class ActivityData:
    fuels: tuple[FuelUse, ...] = ()
    vehicles: tuple[VehicleUse, ...] = ()
    refrigerants: tuple[RefrigerantLeak, ...] = ()
    electricity_kwh: Optional[float] = None
    market_factor: Optional[float] = None
    steam_kwh: float = 0.0
    cooling_kwh: float = 0.0
    gas_gj: float = 0.0
    transport: tuple[TransportLeg, ...] = ()
    waste: tuple[WasteStream, ...] = ()
    business_travel: tuple[TransportLeg, ...] = ()
    commuting: Optional[Commuting] = None


@dataclass(frozen=True)
class Project:
    project_id: str
    name: str
    location: Location
    gfa_m2: float
    building_type: BuildingType
    materials: tuple[MaterialLineItem, ...]
    design_life_years: int = DEFAULT_PROJECT_LIFE_YEARS
    climate_zone: Optional[int] = None
    energy_rating: EnergyRating = EnergyRating.AVERAGE
    has_renewables: bool = False
    envelope: Optional[Envelope] = None
    activity: ActivityData = field(default_factory=ActivityData)

    @classmethod
    def from_dict(
        cls, payload: Mapping[str, Any], default_life_years: int = DEFAULT_PROJECT_LIFE_YEARS,
    ) -> "Project":
        """Parse a collaborator payload (snake_case or camelCase keys)."""
        return _ProjectParser(payload, default_life_years).parse()


# ─────────────────────────────────────────────────────────────────────────────
# COEFFICIENTS & STAGES
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CarbonCoefficient:
    category: MaterialCategory
    type_id: str
    rate: float                               # kg CO₂-e / unit
    unit: str
    biogenic_storage: Optional[float] = None  # kg CO₂-e / unit, ≤ 0
    source: str = "local"
    confidence: str = "medium"
    base_rate: Optional[float] = None
    regional_multiplier: float = 1.0

    def adjusted(self, multiplier: float) -> "CarbonCoefficient":
        """Return a copy with the regional multiplier applied to the base rate."""
        base = self.rate if self.base_rate is None else self.base_rate
        biogenic = None if self.biogenic_storage is None else self.biogenic_storage * multiplier
        return CarbonCoefficient(
            category=self.category,
            type_id=self.type_id,
            rate=base * multiplier,
            unit=self.unit,
            biogenic_storage=biogenic,
            source=self.source,
            confidence=self.confidence,
            base_rate=base,
            regional_multiplier=multiplier,
        )


@dataclass(frozen=True)
class StageBreakdown:
    """EN 15978 stage totals in kg CO₂-e. Biogenic storage is kept apart from D."""

    a1a3: float
    a4: float
    a5: float
    b1b7: float
    c1c4: float
    d: float
    biogenic: float = 0.0

    @property
    def upfront(self) -> float:
        return self.a1a3 + self.a4 + self.a5

    @property
    def embodied(self) -> float:
        return self.upfront + self.b1b7 + self.c1c4

    @property
    def whole_life(self) -> float:
        return self.embodied + self.d + self.biogenic

    def __add__(self, other: "StageBreakdown") -> "StageBreakdown":
        return StageBreakdown(
            a1a3=self.a1a3 + other.a1a3,
            a4=self.a4 + other.a4,
            a5=self.a5 + other.a5,
            b1b7=self.b1b7 + other.b1b7,
            c1c4=self.c1c4 + other.c1c4,
            d=self.d + other.d,
            biogenic=self.biogenic + other.biogenic,
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "A1A3": self.a1a3,
            "A4": self.a4,
            "A5": self.a5,
            "B1B7": self.b1b7,
            "C1C4": self.c1c4,
            "D": self.d,
            "biogenic": self.biogenic,
        }


EMPTY_STAGES = StageBreakdown(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class MaterialResult:
    item: MaterialLineItem
    coefficient: CarbonCoefficient
    stages: StageBreakdown
    replacements: int = 0
    suppliers: tuple[str, ...] = ()

    @property
    def embodied(self) -> float:
        return self.stages.embodied

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.item.category.value,
            "type": self.item.type_id,
            "quantity": self.item.quantity,
            "unit": self.coefficient.unit,
            "rate": self.coefficient.rate,
            "source": self.coefficient.source,
            "regional_multiplier": self.coefficient.regional_multiplier,
            "replacements": self.replacements,
            "stages": self.stages.to_dict(),
            "embodied": self.embodied,
            "suppliers": list(self.suppliers),
        }


# ─────────────────────────────────────────────────────────────────────────────
# SCOPES
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScopeResult:
    """A total plus per-category subtotals; total is the sum of the subtotals."""

    total: float
    categories: Mapping[str, float]

    @classmethod
    def from_categories(cls, categories: Mapping[str, float]) -> "ScopeResult":
        return cls(total=sum(categories.values()), categories=readonly(categories))

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "categories": dict(self.categories)}


@dataclass(frozen=True)
class ScopesSummary:
    scope1: ScopeResult
    scope2: ScopeResult
    scope3: ScopeResult
    total: float
    percentages: Mapping[str, float]
    largest_scope: str
    materials_share_pct: float
    method: Scope2Method
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "scope1": self.scope1.to_dict(),
            "scope2": self.scope2.to_dict(),
            "scope3": self.scope3.to_dict(),
            "total": self.total,
            "percentages": dict(self.percentages),
            "largest_scope": self.largest_scope,
            "materials_share_pct": self.materials_share_pct,
            "method": self.method.value,
        }


# ─────────────────────────────────────────────────────────────────────────────
# COMPLIANCE
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ComplianceCheck:
    metric: str
    actual: float
    threshold: float
    limit: str          # "min": actual ≥ threshold; "max": actual ≤ threshold
    passed: bool
    score: float
    unit: str = ""


@dataclass(frozen=True)
class ComplianceSection:
    code: str
    name: str
    status: SectionStatus
    score: Optional[float] = None
    checks: tuple[ComplianceCheck, ...] = ()
    recommendations: tuple[str, ...] = ()

    @property
    def applicable(self) -> bool:
        return self.status is not SectionStatus.SKIPPED

    @property
    def passed(self) -> bool:
        return self.status is not SectionStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "status": self.status.value,
            "score": self.score,
            "checks": [asdict(c) for c in self.checks],
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class ComplianceResult:
    climate_zone: int
    sections: tuple[ComplianceSection, ...]
    overall: bool
    star_rating: float
    star_grade: str
    star_profile: str
    emissions_intensity: Optional[float] = None   # kg CO₂-e / m² / year
    recommendations: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def section(self, code: str) -> ComplianceSection:
        for sec in self.sections:
            if sec.code == code:
                return sec
        raise KeyError(code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "climate_zone": self.climate_zone,
            "overall": self.overall,
            "sections": [s.to_dict() for s in self.sections],
            "star_rating": self.star_rating,
            "star_grade": self.star_grade,
            "star_profile": self.star_profile,
            "emissions_intensity": self.emissions_intensity,
            "recommendations": list(self.recommendations),
            "warnings": list(self.warnings),
        }


# ─────────────────────────────────────────────────────────────────────────────
# RECOMMENDATIONS & FINAL REPORT
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Recommendation:
    title: str
    category: str
    carbon_savings: float      # kg CO₂-e, ≥ 0
    cost_impact: str
    implementation: str
    details: str = ""


@dataclass(frozen=True)
class CategoryShare:
    category: str
    embodied: float
    percentage: float


@dataclass(frozen=True)
class OperationalSummary:
    annual_energy_kwh: float
    energy_intensity_kwh_m2: float
    grid_factor: float
    annual_emissions: float     # kg CO₂-e / year
    total: float                # kg CO₂-e over the design life
    years: int
    estimated: bool
    end_uses: Mapping[str, float] = field(default_factory=lambda: readonly({}))


@dataclass(frozen=True)
class ProjectResult:
    project_id: str
    project_name: str
    building_type: str
    gfa_m2: float
    state: str
    climate_zone: int
    design_life_years: int
    totals: Mapping[str, float]
    per_m2: Mapping[str, float]
    stages: StageBreakdown
    lifecycle_report: Mapping[str, float]
    materials: tuple[MaterialResult, ...]
    category_breakdown: tuple[CategoryShare, ...]
    operational: OperationalSummary
    construction: ScopeResult
    waste: ScopeResult
    scopes: ScopesSummary
    compliance: ComplianceResult
    recommendations: tuple[Recommendation, ...]
    total_potential_savings: float
    savings_percentage: float
    warnings: tuple[str, ...]
    timestamp: str
    calculation_version: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "project_info": {
                "id": self.project_id,
                "name": self.project_name,
                "building_type": self.building_type,
                "gfa_m2": self.gfa_m2,
                "state": self.state,
                "climate_zone": self.climate_zone,
                "design_life_years": self.design_life_years,
            },
            "totals": dict(self.totals),
            "per_m2": dict(self.per_m2),
            "stages": self.stages.to_dict(),
            "lifecycle_report": dict(self.lifecycle_report),
            "materials": [m.to_dict() for m in self.materials],
            "category_breakdown": [asdict(c) for c in self.category_breakdown],
            "operational": {
                "annual_energy_kwh": self.operational.annual_energy_kwh,
                "energy_intensity_kwh_m2": self.operational.energy_intensity_kwh_m2,
                "grid_factor": self.operational.grid_factor,
                "annual_emissions": self.operational.annual_emissions,
                "total": self.operational.total,
                "years": self.operational.years,
                "estimated": self.operational.estimated,
                "end_uses": dict(self.operational.end_uses),
            },
            "construction": self.construction.to_dict(),
            "waste": self.waste.to_dict(),
            "scopes": self.scopes.to_dict(),
            "compliance": self.compliance.to_dict(),
            "recommendations": [asdict(r) for r in self.recommendations],
            "total_potential_savings": self.total_potential_savings,
            "savings_percentage": self.savings_percentage,
            "warnings": list(self.warnings),
            "timestamp": self.timestamp,
            "calculation_version": self.calculation_version,
        }


# ─────────────────────────────────────────────────────────────────────────────
# PAYLOAD PARSING
# Shape errors are collected and raised together as one ValidationError.
# ─────────────────────────────────────────────────────────────────────────────

def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


class _ProjectParser:
    def __init__(self, payload: Mapping[str, Any], default_life_years: int = DEFAULT_PROJECT_LIFE_YEARS):
        self.payload = payload
        self.default_life_years = default_life_years
        self.problems: list[str] = []

    def _number(self, value: Any, label: str, default: Optional[float] = None) -> Optional[float]:
        if value is None:
            return default
        if isinstance(value, bool):
            self.problems.append(f"{label} must be a number.")
            return default
        try:
            number = float(value)
        except (TypeError, ValueError):
            self.problems.append(f"{label} must be a number (got {value!r}).")
            return default
        if not math.isfinite(number):
            self.problems.append(f"{label} must be a finite number (got {value!r}).")
            return default
        return number

    def _int(self, value: Any, label: str, default: Optional[int] = None) -> Optional[int]:
        number = self._number(value, label)
        if number is None:
            return default
        if not number.is_integer():
            self.problems.append(f"{label} must be a whole number (got {value!r}).")
            return default
        return int(number)

    def _enum(self, enum_cls, value: Any, label: str, default=None):
        if value is None:
            return default
        try:
            return enum_cls(normalize_key(value))
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            self.problems.append(f"{label} '{value}' is not one of: {allowed}.")
            return default

    def _rows(self, value: Any, label: str) -> list[Mapping[str, Any]]:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            self.problems.append(f"{label} must be a list.")
            return []
        rows = [row for row in value if isinstance(row, Mapping)]
        if len(rows) != len(value):
            self.problems.append(f"{label} entries must be objects.")
        return rows

    def parse(self) -> Project:
        data = self.payload
        if not isinstance(data, Mapping):
            raise ValidationError("Project payload must be a mapping.")

        loc = _pick(data, "location", default={})
        if isinstance(loc, str):
            loc = {"city": loc}
        if not isinstance(loc, Mapping):
            self.problems.append("location must be an object or a city name.")
            loc = {}
        location = Location(
            city=str(_pick(loc, "city", default="")),
            state=(str(loc["state"]).strip().lower() if loc.get("state") else None),
            lat=self._number(_pick(loc, "lat", "latitude"), "location.lat"),
            lon=self._number(_pick(loc, "lon", "longitude"), "location.lon"),
        )

        materials = []
        for idx, row in enumerate(self._rows(_pick(data, "materials"), "materials")):
            category = self._enum(MaterialCategory, row.get("category"), f"materials[{idx}].category")
            materials.append(
                MaterialLineItem(
                    category=category if category is not None else MaterialCategory.OTHER,
                    type_id=str(_pick(row, "type", "type_id", default="")).strip(),
                    quantity=self._number(row.get("quantity"), f"materials[{idx}].quantity", 0.0),
                    unit=str(_pick(row, "unit", default="")),
                )
            )

        project = Project(
            project_id=str(_pick(data, "project_id", "id", default="")),
            name=str(_pick(data, "name", default="Unnamed Project")),
            location=location,
            gfa_m2=self._number(_pick(data, "gfa_m2", "gfa"), "gfa", 0.0),
            building_type=self._enum(
                BuildingType, _pick(data, "building_type", "buildingType"), "building_type",
            ),
            materials=tuple(materials),
            design_life_years=self._int(
                _pick(data, "design_life_years", "projectLife"), "design_life_years",
                self.default_life_years,
            ),
            climate_zone=self._int(_pick(data, "climate_zone", "climateZone"), "climate_zone"),
            energy_rating=self._enum(
                EnergyRating, _pick(data, "energy_rating", "energyRating"), "energy_rating",
                EnergyRating.AVERAGE,
            ),
            has_renewables=bool(_pick(data, "has_renewables", "hasRenewables", default=False)),
            envelope=self._envelope(_pick(data, "envelope", "buildingData")),
            activity=self._activity(_pick(data, "activity", default={})),
        )
        if self.problems:
            raise ValidationError(self.problems)
        return project

    def _envelope(self, data: Any) -> Optional[Envelope]:
        if data is None:
            return None
        if not isinstance(data, Mapping):
            self.problems.append("envelope must be an object.")
            return None
        return Envelope(
            roof_r=self._number(_pick(data, "roof_r"), "envelope.roof_r"),
            wall_r=self._number(_pick(data, "wall_r"), "envelope.wall_r"),
            glazing_u=self._number(_pick(data, "glazing_u"), "envelope.glazing_u"),
            glazing_shgc=self._number(_pick(data, "glazing_shgc"), "envelope.glazing_shgc"),
            air_leakage_ach=self._number(_pick(data, "air_leakage_ach", "air_leakage"), "envelope.air_leakage_ach"),
            lighting_power_density=self._number(
                _pick(data, "lighting_power_density"), "envelope.lighting_power_density",
            ),
        )

    def _leg(self, row: Mapping[str, Any], label: str) -> TransportLeg:
        return TransportLeg(
            mode=normalize_key(_pick(row, "mode", "type", default="")),
            distance_km=self._number(_pick(row, "distance_km", "distance"), f"{label}.distance", 0.0),
            weight_kg=self._number(_pick(row, "weight_kg", "weight"), f"{label}.weight", 0.0),
            passengers=self._int(_pick(row, "passengers"), f"{label}.passengers", 1),
        )

    def _activity(self, data: Any) -> ActivityData:
        if not isinstance(data, Mapping):
            self.problems.append("activity must be an object.")
            return ActivityData()
        commuting = None
        raw_commute = _pick(data, "commuting", "employeeCommuting")
        if isinstance(raw_commute, Mapping):
            total_km = _pick(raw_commute, "total_km", "totalKm")
            commuting = Commuting(
                employees=self._int(raw_commute.get("employees"), "commuting.employees", 0),
                daily_km=self._number(_pick(raw_commute, "daily_km", "dailyKm"), "commuting.daily_km", 0.0),
                working_days=self._int(
                    _pick(raw_commute, "working_days", "workingDays"), "commuting.working_days",
                    DEFAULT_WORKING_DAYS,
                ),
                mode=normalize_key(_pick(raw_commute, "mode", default="car")),
                total_km=self._number(total_km, "commuting.total_km") if total_km is not None else None,
            )
        return ActivityData(
            fuels=tuple(
                FuelUse(normalize_key(_pick(r, "fuel_type", "type")),
                        self._number(r.get("quantity"), f"fuels[{i}].quantity", 0.0))
                for i, r in enumerate(self._rows(data.get("fuels"), "fuels"))
            ),
            vehicles=tuple(
                VehicleUse(str(_pick(r, "vehicle_type", "type", default="")),
                           normalize_key(_pick(r, "fuel_type", "fuelType")),
                           self._number(_pick(r, "fuel_used", "fuelUsed"), f"vehicles[{i}].fuel_used", 0.0))
                for i, r in enumerate(self._rows(data.get("vehicles"), "vehicles"))
            ),
            refrigerants=tuple(
                RefrigerantLeak(normalize_key(_pick(r, "refrigerant", "type")),
                                self._number(r.get("kg"), f"refrigerants[{i}].kg", 0.0))
                for i, r in enumerate(self._rows(data.get("refrigerants"), "refrigerants"))
            ),
            electricity_kwh=self._number(_pick(data, "electricity_kwh", "energyConsumption"), "electricity_kwh"),
            market_factor=self._number(_pick(data, "market_factor", "marketBased"), "market_factor"),
            steam_kwh=self._number(data.get("steam_kwh"), "steam_kwh", 0.0),
            cooling_kwh=self._number(data.get("cooling_kwh"), "cooling_kwh", 0.0),
            gas_gj=self._number(data.get("gas_gj"), "gas_gj", 0.0),
            transport=tuple(
                self._leg(r, f"transport[{i}]")
                for i, r in enumerate(self._rows(data.get("transport"), "transport"))
            ),
            waste=tuple(
                WasteStream(str(_pick(r, "waste_type", "type", default="mixed")),
                            normalize_key(_pick(r, "disposal_method", "disposalMethod")),
                            self._number(_pick(r, "quantity_kg", "quantity"), f"waste[{i}].quantity", 0.0))
                for i, r in enumerate(self._rows(data.get("waste"), "waste"))
            ),
            business_travel=tuple(
                self._leg(r, f"business_travel[{i}]")
                for i, r in enumerate(self._rows(_pick(data, "business_travel", "businessTravel"), "business_travel"))
            ),
            commuting=commuting,
        )
