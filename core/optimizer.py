# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Optimisation Recommender
# © 2026 Aparajita Parihar. All rights reserved.
#
# Rule-based. Measures come from config/recommendations.py:
#   1. Material substitutions   savings = line embodied × reduction
#   2. Mass timber              savings = GFA × savings_per_m2 (no timber present)
#   3. Operational measures     savings = annual emissions × fraction × design life
#   4. Construction measures    fixed estimates; local sourcing from penalties
#
# Output is sorted by savings, descending. The sort is stable so ties keep
# insertion order. Total potential savings is a plain sum even though some
# measures overlap in practice.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from config.recommendations import (
    CONSTRUCTION_MEASURES,
    LOCAL_SOURCING_FALLBACK_KG,
    MASS_TIMBER,
    OPERATIONAL_MEASURES,
    SUBSTITUTIONS,
)
from core.models import MaterialCategory, MaterialResult, Recommendation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizationResult:
    recommendations: tuple[Recommendation, ...]
    total_potential_savings: float
    savings_percentage: float


def _recommendation(measure: Mapping, savings: float, **fmt) -> Recommendation:
    return Recommendation(
        title=measure["title"].format(**fmt),
        category=measure["category"],
        carbon_savings=max(0.0, savings),
        cost_impact=measure["cost_impact"],
        implementation=measure["implementation"],
        details=measure["details"].format(**fmt),
    )


def rank(recommendations: Sequence[Recommendation]) -> list[Recommendation]:
    """Stable sort, highest savings first."""
    return sorted(recommendations, key=lambda r: r.carbon_savings, reverse=True)


class OptimizationRecommender:
    def substitutions(self, materials: Sequence[MaterialResult]) -> list[Recommendation]:
        recs = []
        for result in materials:
            rule = SUBSTITUTIONS.get(result.item.category.value)
            if rule is None or result.item.type_id in rule["exempt"]:
                continue
            recs.append(_recommendation(
                rule,
                result.embodied * rule["reduction"],
                type_id=result.item.type_id,
                quantity=result.item.quantity,
                unit=result.coefficient.unit,
            ))
        return recs

    def mass_timber(self, materials: Sequence[MaterialResult], gfa_m2: float) -> list[Recommendation]:
        if any(m.item.category is MaterialCategory.TIMBER for m in materials):
            return []
        return [_recommendation(MASS_TIMBER, gfa_m2 * MASS_TIMBER["savings_per_m2"])]

    def operational(
        self,
        annual_emissions: float,
        design_life_years: int,
        climate_zone: int,
        has_renewables: bool,
    ) -> list[Recommendation]:
        recs = []
        for measure in OPERATIONAL_MEASURES:
            if climate_zone > measure.get("max_climate_zone", 8):
                continue
            if has_renewables and measure.get("requires_no_renewables"):
                continue
            recs.append(_recommendation(measure, annual_emissions * measure["fraction"] * design_life_years))
        return recs

    @staticmethod
    def local_sourcing_savings(
        materials: Sequence[MaterialResult],
        transport_penalties: Optional[Mapping[str, float]],
    ) -> float:
        penalties = transport_penalties or {}
        savings = sum(m.item.quantity * penalties.get(m.item.category.value, 0.0) for m in materials)
        return savings if savings > 0 else LOCAL_SOURCING_FALLBACK_KG

    def construction(
        self,
        materials: Sequence[MaterialResult],
        transport_penalties: Optional[Mapping[str, float]],
    ) -> list[Recommendation]:
        recs = []
        for measure in CONSTRUCTION_MEASURES:
            savings = measure["savings"]
            if savings is None:
                savings = self.local_sourcing_savings(materials, transport_penalties)
            recs.append(_recommendation(measure, savings))
        return recs

    def recommend(
        self,
        materials: Sequence[MaterialResult],
        *,
        gfa_m2: float,
        annual_operational_emissions: float,
        operational_total: float,
        design_life_years: int,
        climate_zone: int,
        has_renewables: bool = False,
        transport_penalties: Optional[Mapping[str, float]] = None,
    ) -> OptimizationResult:
        recs = [
            *self.substitutions(materials),
            *self.mass_timber(materials, gfa_m2),
            *self.operational(annual_operational_emissions, design_life_years, climate_zone, has_renewables),
            *self.construction(materials, transport_penalties),
        ]
        ranked = rank(recs)
        total = sum(r.carbon_savings for r in ranked)
        baseline = sum(m.embodied for m in materials) + operational_total
        pct = total / baseline * 100.0 if baseline > 0 else 0.0
        logger.info("Generated %d recommendations, %.0f kg CO₂-e potential savings", len(ranked), total)
        return OptimizationResult(tuple(ranked), total, pct)
