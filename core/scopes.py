# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — GHG Protocol Scopes Aggregator
# © 2026 Aparajita Parihar. All rights reserved.
#
#   Scope 1  fuels, on-site gas, vehicles, fugitive refrigerant
#   Scope 2  electricity (location- or market-based, never mixed), steam, cooling
#   Scope 3  materials, transport, waste, business travel, employee commuting
#
# Each ScopeResult total is the sum of its own category values. Unknown
# factors contribute 0 (or a documented default) and add a warning.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Iterable

from config.constants import (
    COMMUTE_FACTORS,
    COOLING_FACTOR_KG_PER_KWH,
    DEFAULT_COMMUTE_FACTOR,
    DEFAULT_FREIGHT_FACTOR,
    DEFAULT_WASTE_FACTOR,
    FUEL_FACTORS,
    GAS_FACTOR_KG_PER_GJ,
    REFRIGERANT_GWP,
    STEAM_FACTOR_KG_PER_KWH,
    TRANSPORT_MODES,
    WASTE_FACTORS,
)
from core.models import (
    ActivityData,
    MaterialResult,
    Scope2Method,
    ScopeResult,
    ScopesSummary,
    TransportLeg,
    WasteStream,
    readonly,
)

logger = logging.getLogger(__name__)

SCOPE_KEYS = ("scope1", "scope2", "scope3")


class ScopesAggregator:
    """Maps activity data for one project onto Scopes 1, 2 and 3."""

    @staticmethod
    def _warn(warnings: list[str], message: str) -> None:
        logger.warning(message)
        warnings.append(message)

    # ── Scope 1 ───────────────────────────────────────────────────────────────

    def _fuel_factor(self, fuel_type: str, label: str, warnings: list[str]) -> float:
        factor = FUEL_FACTORS.get(fuel_type)
        if factor is None:
            self._warn(warnings, f"No emission factor for {label} fuel '{fuel_type}'; counted as 0.")
            return 0.0
        return factor

    def scope1(
        self,
        activity: ActivityData,
        warnings: list[str],
        gas_factor: float = GAS_FACTOR_KG_PER_GJ,
    ) -> ScopeResult:
        fuels = sum(f.quantity * self._fuel_factor(f.fuel_type, "combustion", warnings) for f in activity.fuels)
        vehicles = sum(v.fuel_used * self._fuel_factor(v.fuel_type, "vehicle", warnings) for v in activity.vehicles)
        fugitive = 0.0
        for leak in activity.refrigerants:
            gwp = REFRIGERANT_GWP.get(leak.refrigerant)
            if gwp is None:
                self._warn(warnings, f"No GWP for refrigerant '{leak.refrigerant}'; counted as 0.")
                continue
            fugitive += leak.kg * gwp
        return ScopeResult.from_categories({
            "fuels": fuels,
            "gas": activity.gas_gj * gas_factor,
            "vehicles": vehicles,
            "fugitive": fugitive,
        })

    # ── Scope 2 ───────────────────────────────────────────────────────────────

    def scope2(self, activity: ActivityData, grid_factor: float, method: Scope2Method) -> ScopeResult:
        kwh = activity.electricity_kwh or 0.0
        if method is Scope2Method.MARKET:
            if activity.market_factor is None:
                raise ValueError("Market-based Scope 2 accounting requires a market_factor.")
            electricity = kwh * activity.market_factor
        else:
            electricity = kwh * grid_factor
        return ScopeResult.from_categories({
            "electricity": electricity,
            "steam": activity.steam_kwh * STEAM_FACTOR_KG_PER_KWH,
            "cooling": activity.cooling_kwh * COOLING_FACTOR_KG_PER_KWH,
        })

    # ── Scope 3 ───────────────────────────────────────────────────────────────

    def leg_emissions(self, leg: TransportLeg, warnings: list[str]) -> float:
        """Freight legs use tonne-km; passenger legs use passenger-km."""
        mode = TRANSPORT_MODES.get(leg.mode)
        if mode is None:
            self._warn(warnings, f"Unknown transport mode '{leg.mode}'; using default freight factor.")
            return leg.distance_km * leg.weight_kg / 1000.0 * DEFAULT_FREIGHT_FACTOR
        if mode["basis"] == "passenger":
            return leg.distance_km * max(leg.passengers, 1) * mode["factor"]
        return leg.distance_km * leg.weight_kg / 1000.0 * mode["factor"]

    def waste_emissions(self, stream: WasteStream, warnings: list[str]) -> float:
        factor = WASTE_FACTORS.get(stream.disposal_method)
        if factor is None:
            self._warn(warnings, f"Unknown disposal method '{stream.disposal_method}'; using default waste factor.")
            factor = DEFAULT_WASTE_FACTOR
        return stream.quantity_kg * factor

    def scope3(self, activity: ActivityData, materials: Iterable[MaterialResult], warnings: list[str]) -> ScopeResult:
        commuting = 0.0
        if activity.commuting is not None:
            factor = COMMUTE_FACTORS.get(activity.commuting.mode)
            if factor is None:
                self._warn(warnings, f"Unknown commuting mode '{activity.commuting.mode}'; using default factor.")
                factor = DEFAULT_COMMUTE_FACTOR
            commuting = activity.commuting.distance_km * factor
        return ScopeResult.from_categories({
            "materials": sum(m.embodied for m in materials),
            "transport": sum(self.leg_emissions(leg, warnings) for leg in activity.transport),
            "waste": sum(self.waste_emissions(s, warnings) for s in activity.waste),
            "business_travel": sum(self.leg_emissions(leg, warnings) for leg in activity.business_travel),
            "employee_commuting": commuting,
        })

    # ── Summary ───────────────────────────────────────────────────────────────

    def aggregate(
        self,
        activity: ActivityData,
        region,
        materials: Iterable[MaterialResult] = (),
        method: Scope2Method | str = Scope2Method.LOCATION,
    ) -> ScopesSummary:
        """
        Aggregate one project's activity data.

        ``region`` is an EnrichedProject (or anything with a ``grid_factor``)
        or a bare grid factor in kg CO₂-e / kWh.
        """
        warnings: list[str] = []
        method = Scope2Method(method)
        grid_factor = float(getattr(region, "grid_factor", region))
        gas_factor = float(getattr(region, "gas_factor", GAS_FACTOR_KG_PER_GJ))

        s1 = self.scope1(activity, warnings, gas_factor)
        s2 = self.scope2(activity, grid_factor, method)
        s3 = self.scope3(activity, list(materials), warnings)
        totals = {"scope1": s1.total, "scope2": s2.total, "scope3": s3.total}
        total = sum(totals.values())

        if total > 0:
            percentages = {k: v / total * 100.0 for k, v in totals.items()}
            materials_share = s3.categories["materials"] / total * 100.0
        else:
            percentages = {k: 0.0 for k in totals}
            materials_share = 0.0

        return ScopesSummary(
            scope1=s1,
            scope2=s2,
            scope3=s3,
            total=total,
            percentages=readonly(percentages),
            largest_scope=max(SCOPE_KEYS, key=lambda k: totals[k]),
            materials_share_pct=materials_share,
            method=method,
            warnings=tuple(warnings),
        )
