# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Input Validation
# © 2026 Aparajita Parihar. All rights reserved.
#
# Field helpers return (ok, message). validate_project() runs all of them,
# collects every problem and raises a single ValidationError before any
# calculation starts.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import math
from typing import Optional

from config.constants import CLIMATE_ZONES
from core.errors import ValidationError
from core.models import MaterialLineItem, Project, Scope2Method

# ─────────────────────────────────────────────────────────────────────────────
# VALIDATION HELPERS
# ─────────────────────────────────────────────────────────────────────────────

def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def validate_floor_area(area_m2: float) -> tuple[bool, str]:
    """Validate a gross floor area in m²."""
    if not _is_number(area_m2):
        return False, "Floor area must be a number."
    if area_m2 <= 0:
        return False, "Floor area must be greater than zero."
    if area_m2 > 10_000_000:
        return False, f"Floor area ({area_m2:,.0f} m²) is unrealistically large."
    return True, "ok"


def validate_quantity(quantity: float, label: str = "Quantity") -> tuple[bool, str]:
    if not _is_number(quantity):
        return False, f"{label} must be a number."
    if quantity <= 0:
        return False, f"{label} must be greater than zero."
    return True, "ok"


def validate_design_life(years: int) -> tuple[bool, str]:
    if not _is_number(years):
        return False, "Design life must be a number."
    if years < 1:
        return False, "Design life must be at least 1 year."
    if years > 200:
        return False, f"Design life ({years} years) is outside the supported range (≤ 200)."
    return True, "ok"


def validate_climate_zone(zone: Optional[int]) -> tuple[bool, str]:
    """None is allowed; the zone is then resolved from the location."""
    if zone is None:
        return True, "ok"
    if zone not in CLIMATE_ZONES:
        return False, f"Climate zone {zone} is not an NCC zone (1–8)."
    return True, "ok"


def validate_material(item: MaterialLineItem, label: str = "Material") -> tuple[bool, str]:
    if not item.type_id:
        return False, f"{label} has no material type."
    return validate_quantity(item.quantity, f"{label} quantity")


def validate_envelope_value(value: Optional[float], label: str) -> tuple[bool, str]:
    if value is None:
        return True, "ok"
    if not _is_number(value) or value < 0:
        return False, f"{label} must be a non-negative number."
    return True, "ok"


# ─────────────────────────────────────────────────────────────────────────────
# PROJECT VALIDATION
# ─────────────────────────────────────────────────────────────────────────────

def validate_project(project: Project, method: Scope2Method | str = Scope2Method.LOCATION) -> None:
    """Raise ValidationError listing every problem with ``project``."""
    problems: list[str] = []

    def _check(result: tuple[bool, str]) -> None:
        ok, msg = result
        if not ok:
            problems.append(msg)

    if not project.project_id:
        problems.append("Project id is required.")
    if project.building_type is None:
        problems.append("Building type is required.")
    _check(validate_floor_area(project.gfa_m2))
    _check(validate_design_life(project.design_life_years))
    _check(validate_climate_zone(project.climate_zone))

    if not project.materials:
        problems.append("At least one material line item is required.")
    for idx, item in enumerate(project.materials):
        _check(validate_material(item, f"Material {idx + 1} ({item.type_id or 'unnamed'})"))

    if project.envelope is not None:
        env = project.envelope
        for label, value in (
            ("Roof R-value", env.roof_r),
            ("Wall R-value", env.wall_r),
            ("Glazing U-value", env.glazing_u),
            ("Glazing SHGC", env.glazing_shgc),
            ("Air leakage", env.air_leakage_ach),
            ("Lighting power density", env.lighting_power_density),
        ):
            _check(validate_envelope_value(value, label))

    try:
        method = Scope2Method(method)
    except ValueError:
        problems.append(f"Unknown Scope 2 method: {method!r} (expected 'location' or 'market').")
        method = None
    if method is Scope2Method.MARKET and project.activity.market_factor is None:
        problems.append("Market-based Scope 2 accounting requires a market_factor.")

    if problems:
        raise ValidationError(problems)
