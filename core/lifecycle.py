# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Lifecycle Stage Engine (EN 15978)
# © 2026 Aparajita Parihar. All rights reserved.
#
# For one material quantity:
#   A1–A3  product          = rate × quantity
#   A4     transport        = A1–A3 × a4_fraction × transport_scale
#   A5     construction     = A1–A3 × a5_fraction
#   B1–B7  replacement      = n × replacement_intensity × (A1–A3 + A4 + A5)
#          n = max(0, ceil(project_life / service_life) − 1)
#   C1–C4  end of life      = A1–A3 × c_fraction
#   D      beyond boundary  = −(A1–A3 × recycling_potential), ≤ 0
#   biogenic storage        = biogenic_storage × quantity, kept apart from D
#
# Stage fractions are category policy data (config/constants.STAGE_POLICIES).
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence

from core.models import (
    EMPTY_STAGES,
    CarbonCoefficient,
    MaterialLineItem,
    MaterialResult,
    StageBreakdown,
    StagePolicy,
)

logger = logging.getLogger(__name__)


def replacement_count(project_life: int, service_life: Optional[int]) -> int:
    """Number of replacements during the project life. Undefined service life → 0."""
    if not service_life or service_life <= 0:
        return 0
    return max(0, math.ceil(project_life / service_life) - 1)


class LifecycleStageEngine:
    def __init__(self, include_module_d: bool = True, include_sequestration: bool = True):
        self.include_module_d = include_module_d
        self.include_sequestration = include_sequestration

    @classmethod
    def from_settings(cls, settings) -> "LifecycleStageEngine":
        return cls(settings.include_module_d, settings.include_sequestration)

    def compute_stages(
        self,
        coefficient: CarbonCoefficient,
        quantity: float,
        project_life: int,
        stage_factors: Optional[StagePolicy] = None,
        transport_scale: float = 1.0,
    ) -> StageBreakdown:
        policy = stage_factors or StagePolicy.for_category(coefficient.category)

        a1a3 = coefficient.rate * quantity
        a4 = a1a3 * policy.a4_fraction * transport_scale
        a5 = a1a3 * policy.a5_fraction

        replacements = replacement_count(project_life, policy.service_life_years)
        b1b7 = replacements * policy.replacement_intensity * (a1a3 + a4 + a5)

        c1c4 = a1a3 * policy.c_fraction
        d = -(a1a3 * policy.recycling_potential) if self.include_module_d else 0.0

        biogenic = 0.0
        if self.include_sequestration and coefficient.biogenic_storage is not None:
            biogenic = coefficient.biogenic_storage * quantity

        return StageBreakdown(a1a3=a1a3, a4=a4, a5=a5, b1b7=b1b7, c1c4=c1c4, d=d, biogenic=biogenic)

    def compute_material(
        self,
        item: MaterialLineItem,
        coefficient: CarbonCoefficient,
        project_life: int,
        transport_scale: float = 1.0,
        suppliers: Sequence[str] = (),
    ) -> MaterialResult:
        policy = item.category.policy
        stages = self.compute_stages(coefficient, item.quantity, project_life, policy, transport_scale)
        logger.debug("Stages for %s/%s: %s", item.category.value, item.type_id, stages)
        return MaterialResult(
            item=item,
            coefficient=coefficient,
            stages=stages,
            replacements=replacement_count(project_life, policy.service_life_years),
            suppliers=tuple(suppliers),
        )


def total_stages(results: Iterable[MaterialResult]) -> StageBreakdown:
    total = EMPTY_STAGES
    for result in results:
        total = total + result.stages
    return total
