# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Pipeline & Results Compiler
# © 2026 Aparajita Parihar. All rights reserved.
#
# Entry points:
#   calculate_project(project)                       → ProjectResult
#   check_ncc_compliance(building_data, climate_zone) → ComplianceResult
#
# Stages run in order: validation → regional_enrichment → coefficients →
# lifecycle → operational → construction → waste → scopes → compliance →
# optimization → compilation.
#
# A run either returns a complete ProjectResult or raises. ValidationError
# propagates as-is; every other failure is wrapped in CalculationError naming
# the stage, with the original exception chained as __cause__.
#
# All collaborators are passed to the constructor. No module-level instances.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import dataclasses
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from config.constants import (
    CALCULATION_VERSION,
    CLIMATE_ZONE_ENERGY_FACTORS,
    DEFAULT_ENERGY_INTENSITY_KWH_M2,
    END_USE_DISTRIBUTION,
    END_USE_PROFILE_BY_BUILDING_TYPE,
    ENERGY_INTENSITY_KWH_M2,
    ENERGY_RATING_FACTORS,
)
from config.settings import EngineSettings
from core.compliance import ComplianceChecker
from core.errors import CalculationError, ValidationError
from core.lifecycle import LifecycleStageEngine, total_stages
from core.models import (
    ActivityData,
    CategoryShare,
    ComplianceResult,
    MaterialResult,
    OperationalSummary,
    Project,
    ProjectResult,
    Scope2Method,
    ScopeResult,
    ScopesSummary,
    readonly,
)
from core.optimizer import OptimizationRecommender, OptimizationResult
from core.scopes import ScopesAggregator
from core.validation import validate_project
from services.coefficients import CoefficientSource
from services.epd import EpdRegistryProvider
from services.location import EnrichedProject, RegionalAdjuster

logger = logging.getLogger(__name__)

STAGES: tuple[str, ...] = (
    "validation",
    "regional_enrichment",
    "coefficients",
    "lifecycle",
    "operational",
    "construction",
    "waste",
    "scopes",
    "compliance",
    "optimization",
    "compilation",
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CarbonIntelligenceCore:
    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        source: Optional[CoefficientSource] = None,
        adjuster: Optional[RegionalAdjuster] = None,
        lifecycle: Optional[LifecycleStageEngine] = None,
        scopes: Optional[ScopesAggregator] = None,
        compliance: Optional[ComplianceChecker] = None,
        recommender: Optional[OptimizationRecommender] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.settings = settings or EngineSettings()
        self.source = source or CoefficientSource.from_settings(self.settings)
        self.adjuster = adjuster or RegionalAdjuster()
        self.lifecycle = lifecycle or LifecycleStageEngine.from_settings(self.settings)
        self.scopes = scopes or ScopesAggregator()
        self.compliance = compliance or ComplianceChecker()
        self.recommender = recommender or OptimizationRecommender()
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Optional[EngineSettings] = None) -> "CarbonIntelligenceCore":
        """Wire a core from settings, adding the EPD registry when one is configured."""
        settings = settings or EngineSettings.from_env()
        provider = EpdRegistryProvider.from_settings(settings) if settings.epd_api_url else None
        return cls(settings=settings, source=CoefficientSource.from_settings(settings, provider))

    # ── Stage guard ───────────────────────────────────────────────────────────

    @contextmanager
    def _stage(self, project_id: str, name: str) -> Iterator[None]:
        logger.debug("Project %s: stage %s", project_id, name)
        try:
            yield
        except (ValidationError, CalculationError):
            raise
        except Exception as exc:
            logger.error("Project %s failed at stage %s: %s", project_id, name, exc)
            raise CalculationError(project_id, name, exc) from exc

    # ── Stage helpers ─────────────────────────────────────────────────────────

    def operational(self, enriched: EnrichedProject) -> OperationalSummary:
        """Annual operational energy and emissions, supplied or estimated."""
        project = enriched.project
        btype = project.building_type.value
        kwh = project.activity.electricity_kwh
        estimated = kwh is None
        if estimated:
            intensity = (
                ENERGY_INTENSITY_KWH_M2.get(btype, DEFAULT_ENERGY_INTENSITY_KWH_M2)
                * ENERGY_RATING_FACTORS[project.energy_rating.value]
                * CLIMATE_ZONE_ENERGY_FACTORS.get(enriched.climate_zone, 1.0)
            )
            kwh = intensity * project.gfa_m2
        else:
            intensity = kwh / project.gfa_m2

        annual = kwh * enriched.grid_factor + project.activity.gas_gj * enriched.gas_factor
        profile = END_USE_PROFILE_BY_BUILDING_TYPE.get(btype, btype)
        split = END_USE_DISTRIBUTION.get(profile, END_USE_DISTRIBUTION["commercial"])
        return OperationalSummary(
            annual_energy_kwh=kwh,
            energy_intensity_kwh_m2=intensity,
            grid_factor=enriched.grid_factor,
            annual_emissions=annual,
            total=annual * project.design_life_years,
            years=project.design_life_years,
            estimated=estimated,
            end_uses=readonly({use: annual * share for use, share in split.items()}),
        )

    def construction(self, activity: ActivityData, warnings: list[str]) -> ScopeResult:
        scope1 = self.scopes.scope1(activity, warnings)
        return ScopeResult.from_categories({
            "fuels": scope1.categories["fuels"],
            "vehicles": scope1.categories["vehicles"],
        })

    def waste(self, activity: ActivityData, warnings: list[str]) -> ScopeResult:
        by_type: dict[str, float] = {}
        for stream in activity.waste:
            by_type[stream.waste_type] = (
                by_type.get(stream.waste_type, 0.0) + self.scopes.waste_emissions(stream, warnings)
            )
        return ScopeResult.from_categories(by_type)

    @staticmethod
    def category_breakdown(materials: Sequence[MaterialResult]) -> tuple[CategoryShare, ...]:
        """Per-category embodied carbon; percentages sum to 100 over materials."""
        sums: dict[str, float] = {}
        for m in materials:
            sums[m.item.category.value] = sums.get(m.item.category.value, 0.0) + m.embodied
        total = sum(sums.values())
        return tuple(
            CategoryShare(cat, value, value / total * 100.0 if total > 0 else 0.0)
            for cat, value in sums.items()
        )

    # ── Entry points ──────────────────────────────────────────────────────────

    def calculate_project(
        self,
        project: Project | Mapping[str, Any],
        method: Optional[Scope2Method | str] = None,
    ) -> ProjectResult:
        if not isinstance(project, Project):
            project = Project.from_dict(project, self.settings.project_life_years)
        method = method or self.settings.scope2_method
        pid = project.project_id or "<unnamed>"
        logger.info("Starting carbon analysis for %s (%s)", project.name, pid)

        with self._stage(pid, "validation"):
            validate_project(project, method)
        method = Scope2Method(method)

        with self._stage(pid, "regional_enrichment"):
            enriched = self.adjuster.enrich(project)

        with self._stage(pid, "coefficients"):
            coefficients = self.source.resolve_batch(project.materials, enriched.state, self.settings.batch_size)

        with self._stage(pid, "lifecycle"):
            materials = tuple(
                self.lifecycle.compute_material(
                    item,
                    coefficient,
                    project.design_life_years,
                    enriched.transport_scale,
                    enriched.suppliers.get(item.type_id, ()),
                )
                for item, coefficient in zip(project.materials, coefficients)
            )

        with self._stage(pid, "operational"):
            operational = self.operational(enriched)

        activity_warnings: list[str] = []
        with self._stage(pid, "construction"):
            construction = self.construction(project.activity, activity_warnings)

        with self._stage(pid, "waste"):
            waste = self.waste(project.activity, activity_warnings)

        with self._stage(pid, "scopes"):
            activity = project.activity
            if activity.electricity_kwh is None:
                activity = dataclasses.replace(activity, electricity_kwh=operational.annual_energy_kwh)
            scopes = self.scopes.aggregate(activity, enriched, materials, method)

        embodied = sum(m.embodied for m in materials)
        with self._stage(pid, "compliance"):
            compliance = self.compliance.check(
                project.envelope,
                enriched.climate_zone,
                project.building_type.value,
                embodied_intensity=embodied / project.gfa_m2,
                emissions_intensity=operational.annual_emissions / project.gfa_m2,
            )

        with self._stage(pid, "optimization"):
            if self.settings.enable_recommendations:
                optimization = self.recommender.recommend(
                    materials,
                    gfa_m2=project.gfa_m2,
                    annual_operational_emissions=operational.annual_emissions,
                    operational_total=operational.total,
                    design_life_years=project.design_life_years,
                    climate_zone=enriched.climate_zone,
                    has_renewables=project.has_renewables,
                    transport_penalties=enriched.transport_penalties,
                )
            else:
                optimization = OptimizationResult((), 0.0, 0.0)

        with self._stage(pid, "compilation"):
            warnings = (
                *enriched.warning_messages,
                *activity_warnings,
                *scopes.warnings,
                *compliance.warnings,
            )
            result = self._compile(
                enriched, materials, operational, construction, waste, scopes,
                compliance, optimization, tuple(dict.fromkeys(warnings)),
            )

        logger.info(
            "Completed carbon analysis for %s: %.0f kg CO₂-e whole of life",
            project.name, result.totals["whole_of_life"],
        )
        return result

    def check_ncc_compliance(self, building_data: Mapping[str, Any], climate_zone: Any) -> ComplianceResult:
        return self.compliance.check_ncc_compliance(building_data, climate_zone)

    # ── Compilation ───────────────────────────────────────────────────────────

    def _compile(
        self,
        enriched: EnrichedProject,
        materials: tuple[MaterialResult, ...],
        operational: OperationalSummary,
        construction: ScopeResult,
        waste: ScopeResult,
        scopes: ScopesSummary,
        compliance: ComplianceResult,
        optimization: OptimizationResult,
        warnings: tuple[str, ...],
    ) -> ProjectResult:
        project = enriched.project
        gfa = project.gfa_m2
        stages = total_stages(materials)
        embodied = sum(m.embodied for m in materials)
        whole_of_life = embodied + operational.total + construction.total + waste.total

        totals = {
            "embodied": embodied,
            "operational": operational.total,
            "construction": construction.total,
            "waste": waste.total,
            "whole_of_life": whole_of_life,
            "module_d": stages.d,
            "biogenic": stages.biogenic,
        }
        per_m2 = {
            "embodied": embodied / gfa,
            "operational": operational.total / gfa,
            "total": (embodied + operational.total) / gfa,
            "whole_of_life": whole_of_life / gfa,
        }
        lifecycle_report = {
            "A1A3": stages.a1a3,
            "A4": stages.a4,
            "A5": stages.a5 + construction.total,
            "B1B7": stages.b1b7 + operational.total,
            "C1C4": stages.c1c4 + waste.total,
            "D": stages.d,
            "biogenic": stages.biogenic,
        }
        return ProjectResult(
            project_id=project.project_id,
            project_name=project.name,
            building_type=project.building_type.value,
            gfa_m2=gfa,
            state=enriched.state,
            climate_zone=enriched.climate_zone,
            design_life_years=project.design_life_years,
            totals=readonly(totals),
            per_m2=readonly(per_m2),
            stages=stages,
            lifecycle_report=readonly(lifecycle_report),
            materials=materials,
            category_breakdown=self.category_breakdown(materials),
            operational=operational,
            construction=construction,
            waste=waste,
            scopes=scopes,
            compliance=compliance,
            recommendations=optimization.recommendations,
            total_potential_savings=optimization.total_potential_savings,
            savings_percentage=optimization.savings_percentage,
            warnings=warnings,
            timestamp=self._clock().isoformat(),
            calculation_version=CALCULATION_VERSION,
        )
