# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — NCC Section J & NABERS Compliance
# © 2026 Aparajita Parihar. All rights reserved.
#
# Sections (each evaluated independently):
#   J1.2  Thermal fabric:     roof / wall R-value ≥ zone minimum
#   J1.3  Glazing:            U-value and SHGC ≤ zone maximum
#   J1.5  Building sealing:   air leakage ≤ limit for the zone's sealing class
#   J1.6  Lighting:           power density ≤ building-type maximum
#   J5    Embodied carbon:    kg CO₂-e / m² ≤ building-type limit
#
# A section without input data is SKIPPED (score None): it does not fail the
# overall result but is reported apart from PASSED.
#
# NABERS-style star rating uses operational kg CO₂-e / m² / year against a
# decreasing tier table. The J5 limit and the star benchmarks are independent
# schemes and are never derived from one another.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from config.constants import (
    AIR_SEALING_MAX_ACH,
    CLIMATE_ZONES,
    DEFAULT_CLIMATE_ZONE,
    DEFAULT_EMBODIED_CARBON_LIMIT,
    DEFAULT_LIGHTING_POWER_DENSITY_MAX,
    DEFAULT_STAR_PROFILE,
    EMBODIED_CARBON_LIMITS,
    LIGHTING_POWER_DENSITY_MAX,
    STAR_BENCHMARKS,
    STAR_GRADES,
    STAR_PROFILE_BY_BUILDING_TYPE,
)
from core.models import (
    ComplianceCheck,
    ComplianceResult,
    ComplianceSection,
    Envelope,
    SectionStatus,
    normalize_key,
)

logger = logging.getLogger(__name__)

SECTION_NAMES: dict[str, str] = {
    "J1.2": "Thermal fabric",
    "J1.3": "Glazing",
    "J1.5": "Building sealing",
    "J1.6": "Lighting",
    "J5":   "Embodied carbon",
}


# ─────────────────────────────────────────────────────────────────────────────
# VALIDATION HELPERS
# ─────────────────────────────────────────────────────────────────────────────

def validate_climate_zone(zone: Any) -> tuple[bool, str]:
    """Validate an NCC climate zone number (1–8)."""
    if isinstance(zone, bool) or not isinstance(zone, (int, float)):
        return False, "Climate zone must be a number."
    if int(zone) != zone or int(zone) not in CLIMATE_ZONES:
        return False, f"Climate zone {zone} is not an NCC zone (1–8)."
    return True, "ok"


def validate_intensity(value: Any, label: str = "Intensity") -> tuple[bool, str]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False, f"{label} must be a number."
    if value < 0:
        return False, f"{label} cannot be negative."
    return True, "ok"


# ─────────────────────────────────────────────────────────────────────────────
# SCORING
# ─────────────────────────────────────────────────────────────────────────────

def _score(actual: float, threshold: float, limit: str) -> float:
    """0–100. Upper limits score threshold/actual, minimums actual/threshold."""
    if limit == "max":
        ratio = 1.0 if actual <= 0 else threshold / actual
    else:
        ratio = 1.0 if threshold <= 0 else actual / threshold
    return round(min(100.0, max(0.0, ratio * 100.0)), 1)


def make_check(metric: str, actual: float, threshold: float, limit: str, unit: str = "") -> ComplianceCheck:
    passed = actual <= threshold if limit == "max" else actual >= threshold
    return ComplianceCheck(
        metric=metric,
        actual=actual,
        threshold=threshold,
        limit=limit,
        passed=passed,
        score=_score(actual, threshold, limit),
        unit=unit,
    )


def make_section(code: str, checks: Sequence[ComplianceCheck], advice: Mapping[str, str]) -> ComplianceSection:
    if not checks:
        return ComplianceSection(code=code, name=SECTION_NAMES[code], status=SectionStatus.SKIPPED)
    failed = [c for c in checks if not c.passed]
    return ComplianceSection(
        code=code,
        name=SECTION_NAMES[code],
        status=SectionStatus.FAILED if failed else SectionStatus.PASSED,
        score=min(c.score for c in checks),
        checks=tuple(checks),
        recommendations=tuple(advice[c.metric] for c in failed if c.metric in advice),
    )


def star_grade(stars: float) -> str:
    for min_stars, grade in STAR_GRADES:
        if stars >= min_stars:
            return grade
    return STAR_GRADES[-1][1]


# ─────────────────────────────────────────────────────────────────────────────
# CHECKER
# ─────────────────────────────────────────────────────────────────────────────

class ComplianceChecker:
    def __init__(self, default_climate_zone: int = DEFAULT_CLIMATE_ZONE, default_profile: str = DEFAULT_STAR_PROFILE):
        if default_profile not in STAR_BENCHMARKS:
            raise ValueError(f"Unknown star profile '{default_profile}'.")
        self.default_climate_zone = default_climate_zone
        self.default_profile = default_profile

    # ── Sections ──────────────────────────────────────────────────────────────

    def fabric(self, env: Envelope, req: Mapping[str, Any]) -> ComplianceSection:
        checks = []
        if env.roof_r is not None:
            checks.append(make_check("roof_r", env.roof_r, req["roof_r_min"], "min", "m²K/W"))
        if env.wall_r is not None:
            checks.append(make_check("wall_r", env.wall_r, req["wall_r_min"], "min", "m²K/W"))
        return make_section("J1.2", checks, {
            "roof_r": f"Increase roof insulation to at least R{req['roof_r_min']}.",
            "wall_r": f"Increase wall insulation to at least R{req['wall_r_min']}.",
        })

    def glazing(self, env: Envelope, req: Mapping[str, Any]) -> ComplianceSection:
        checks = []
        if env.glazing_u is not None:
            checks.append(make_check("glazing_u", env.glazing_u, req["glazing_u_max"], "max", "W/m²K"))
        if env.glazing_shgc is not None:
            checks.append(make_check("glazing_shgc", env.glazing_shgc, req["glazing_shgc_max"], "max"))
        return make_section("J1.3", checks, {
            "glazing_u": f"Upgrade to glazing with U-value of {req['glazing_u_max']} or lower.",
            "glazing_shgc": f"Specify glazing with SHGC of {req['glazing_shgc_max']} or lower.",
        })

    def sealing(self, env: Envelope, req: Mapping[str, Any]) -> ComplianceSection:
        limit = AIR_SEALING_MAX_ACH[req["air_sealing"]]
        checks = []
        if env.air_leakage_ach is not None:
            checks.append(make_check("air_leakage_ach", env.air_leakage_ach, limit, "max", "ACH@50Pa"))
        return make_section("J1.5", checks, {
            "air_leakage_ach": f"Improve building sealing to {limit} ACH @ 50 Pa or better "
                               f"({req['air_sealing'].lower()} sealing class).",
        })

    def lighting(self, env: Envelope, building_type: str) -> ComplianceSection:
        limit = LIGHTING_POWER_DENSITY_MAX.get(building_type, DEFAULT_LIGHTING_POWER_DENSITY_MAX)
        checks = []
        if env.lighting_power_density is not None:
            checks.append(make_check("lighting_power_density", env.lighting_power_density, limit, "max", "W/m²"))
        return make_section("J1.6", checks, {
            "lighting_power_density": f"Reduce lighting power density to {limit} W/m² (LED with controls).",
        })

    def embodied(self, intensity: Optional[float], building_type: str) -> ComplianceSection:
        limit = EMBODIED_CARBON_LIMITS.get(building_type, DEFAULT_EMBODIED_CARBON_LIMIT)
        checks = []
        if intensity is not None:
            checks.append(make_check("embodied_intensity", intensity, limit, "max", "kg CO₂-e/m²"))
        return make_section("J5", checks, {
            "embodied_intensity": f"Reduce embodied carbon below {limit:.0f} kg CO₂-e/m² "
                                  f"through material substitution.",
        })

    # ── Star rating ───────────────────────────────────────────────────────────

    def star_profile(self, building_type: Optional[str]) -> tuple[str, Optional[str]]:
        """Return (profile, note). The note is set when the default profile was used."""
        key = normalize_key(building_type)
        if key in STAR_BENCHMARKS:
            return key, None
        profile = STAR_PROFILE_BY_BUILDING_TYPE.get(key)
        if profile is not None:
            return profile, None
        note = (f"No star benchmark for building type '{building_type}'; "
                f"rated against the '{self.default_profile}' profile.")
        return self.default_profile, note

    def star_rating(self, intensity: float, building_type: Optional[str] = None) -> tuple[float, str, Optional[str]]:
        """
        Highest tier whose threshold is ≥ ``intensity`` (kg CO₂-e / m² / year).

        Total over every building type: untabulated types use the default
        profile. Returns (stars, profile, note).
        """
        profile, note = self.star_profile(building_type)
        for stars, threshold in STAR_BENCHMARKS[profile]:
            if intensity <= threshold:
                return stars, profile, note
        return 0.0, profile, note

    def next_star_target(self, stars: float, profile: str) -> Optional[str]:
        for tier, threshold in reversed(STAR_BENCHMARKS[profile]):
            if tier > stars:
                return (f"Reduce operational emissions to {threshold:.0f} kg CO₂-e/m²/yr "
                        f"to reach a {tier:g} star rating.")
        return None

    # ── Full assessment ───────────────────────────────────────────────────────

    def check(
        self,
        envelope: Optional[Envelope],
        climate_zone: int,
        building_type: Optional[str],
        embodied_intensity: Optional[float] = None,
        emissions_intensity: Optional[float] = None,
        warnings: Sequence[str] = (),
    ) -> ComplianceResult:
        notes = list(warnings)
        env = envelope or Envelope()
        req = CLIMATE_ZONES[climate_zone]
        btype = normalize_key(building_type) if building_type else ""

        sections = (
            self.fabric(env, req),
            self.glazing(env, req),
            self.sealing(env, req),
            self.lighting(env, btype),
            self.embodied(embodied_intensity, btype),
        )
        applicable = [s for s in sections if s.applicable]
        overall = all(s.passed for s in applicable)

        recommendations = [rec for s in sections for rec in s.recommendations]
        stars, profile = 0.0, self.star_profile(btype)[0]
        if emissions_intensity is not None:
            stars, profile, note = self.star_rating(emissions_intensity, btype)
            if note:
                logger.warning(note)
                notes.append(note)
            target = self.next_star_target(stars, profile)
            if target:
                recommendations.append(target)

        return ComplianceResult(
            climate_zone=climate_zone,
            sections=sections,
            overall=overall,
            star_rating=stars,
            star_grade=star_grade(stars),
            star_profile=profile,
            emissions_intensity=emissions_intensity,
            recommendations=tuple(recommendations),
            warnings=tuple(notes),
        )

    def check_ncc_compliance(self, building_data: Mapping[str, Any], climate_zone: Any) -> ComplianceResult:
        """
        Standalone what-if assessment from a flat mapping.

        Recognised keys: roof_r, wall_r, glazing_u, glazing_shgc,
        air_leakage_ach, lighting_power_density, building_type,
        embodied_intensity, emissions_intensity. An unknown climate zone
        falls back to the default zone and is reported in ``warnings``.
        """
        if not isinstance(building_data, Mapping):
            raise ValueError("building_data must be a mapping.")
        warnings: list[str] = []
        ok, msg = validate_climate_zone(climate_zone)
        if ok:
            zone = int(climate_zone)
        else:
            zone = self.default_climate_zone
            note = f"{msg} Using default climate zone {zone}."
            logger.warning(note)
            warnings.append(note)

        def _num(*keys: str) -> Optional[float]:
            for key in keys:
                value = building_data.get(key)
                if value is None:
                    continue
                ok, msg = validate_intensity(value, key)
                if not ok:
                    raise ValueError(f"Building data: {msg}")
                return float(value)
            return None

        envelope = Envelope(
            roof_r=_num("roof_r", "roofR"),
            wall_r=_num("wall_r", "wallR"),
            glazing_u=_num("glazing_u", "glazingU"),
            glazing_shgc=_num("glazing_shgc", "glazingSHGC"),
            air_leakage_ach=_num("air_leakage_ach", "air_leakage", "airLeakage"),
            lighting_power_density=_num("lighting_power_density", "lightingPowerDensity"),
        )
        return self.check(
            envelope,
            zone,
            building_data.get("building_type") or building_data.get("buildingType"),
            embodied_intensity=_num("embodied_intensity", "embodiedIntensity"),
            emissions_intensity=_num("emissions_intensity", "emissionsIntensity"),
            warnings=warnings,
        )
