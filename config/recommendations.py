# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Reduction Measure Registry
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single source of truth for:
#   • SUBSTITUTIONS:         lower-carbon material swaps, per category
#   • MASS_TIMBER:           timber sequestration suggestion
#   • OPERATIONAL_MEASURES:  design / system measures (share of operational carbon)
#   • CONSTRUCTION_MEASURES: site-process measures (fixed kg CO₂-e)
#
# All savings are kg CO₂-e. This file has ZERO network imports.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from config.constants import MATERIAL_CATEGORIES, MATERIAL_COEFFICIENTS

COST_TIERS: tuple[str, ...] = (
    "Savings", "Neutral", "Slight Increase", "Moderate Increase", "High Initial Cost",
)
IMPLEMENTATION_TIERS: tuple[str, ...] = ("Easy", "Medium", "Complex")

# ─────────────────────────────────────────────────────────────────────────────
# MATERIAL SUBSTITUTIONS
# Applied to every line of ``category`` whose type is not in ``exempt``.
# savings = line embodied carbon × reduction
# ─────────────────────────────────────────────────────────────────────────────

SUBSTITUTIONS: dict[str, dict] = {
    "concrete": {
        "substitute":     "concrete-gpc-32mpa",
        "exempt":         ("concrete-gpc-32mpa",),
        "reduction":      0.60,
        "title":          "Replace {type_id} with geopolymer concrete",
        "category":       "Material Substitution",
        "cost_impact":    "Neutral",
        "implementation": "Easy",
        "details":        "Substitute {quantity:g} {unit} of standard concrete with geopolymer "
                          "concrete (GPC) for a 60% reduction in embodied carbon.",
    },
    "steel": {
        "substitute":     "steel-recycled",
        "exempt":         ("steel-recycled",),
        "reduction":      0.75,
        "title":          "Use recycled steel instead of {type_id}",
        "category":       "Material Substitution",
        "cost_impact":    "Slight Increase",
        "implementation": "Medium",
        "details":        "Source {quantity:g} {unit} of recycled steel instead of virgin steel "
                          "for a 75% reduction in embodied carbon.",
    },
}

MASS_TIMBER: dict = {
    "savings_per_m2": 100.0,   # kg CO₂-e per m² GFA
    "title":          "Incorporate mass timber elements",
    "category":       "Material Substitution",
    "cost_impact":    "Moderate Increase",
    "implementation": "Complex",
    "details":        "Incorporate cross-laminated timber (CLT) for internal walls and floors "
                      "to benefit from carbon sequestration.",
}

# ─────────────────────────────────────────────────────────────────────────────
# OPERATIONAL MEASURES
# savings = annual operational emissions × fraction × design life
# max_climate_zone: only offered in zones ≤ this value
# requires_no_renewables: skipped when the project already has renewables
# ─────────────────────────────────────────────────────────────────────────────

OPERATIONAL_MEASURES: list[dict] = [
    {
        "title":          "Optimise window-to-wall ratio by facade",
        "category":       "Design Optimization",
        "fraction":       0.15,
        "cost_impact":    "Neutral",
        "implementation": "Medium",
        "details":        "Reduce glazing on west/east facades and optimise north/south facades "
                          "to cut solar gain and heat loss.",
    },
    {
        "title":          "Enhance insulation in critical zones",
        "category":       "Design Optimization",
        "fraction":       0.10,
        "cost_impact":    "Slight Increase",
        "implementation": "Easy",
        "details":        "Increase insulation R-values in the roof and west-facing walls.",
    },
    {
        "title":            "Add external solar shading",
        "category":         "Design Optimization",
        "fraction":         0.08,
        "max_climate_zone": 4,
        "cost_impact":      "Moderate Increase",
        "implementation":   "Medium",
        "details":          "Install external shading on north and west facades to reduce cooling loads.",
    },
    {
        "title":          "Right-size HVAC system for actual loads",
        "category":       "System Optimization",
        "fraction":       0.12,
        "cost_impact":    "Savings",
        "implementation": "Complex",
        "details":        "Use detailed thermal modelling to right-size HVAC plant and avoid oversizing.",
    },
    {
        "title":          "Implement advanced HVAC controls",
        "category":       "System Optimization",
        "fraction":       0.15,
        "cost_impact":    "Moderate Increase",
        "implementation": "Medium",
        "details":        "Add CO₂ sensors, occupancy detection and predictive controls.",
    },
    {
        "title":                  "Install rooftop solar PV system",
        "category":               "System Optimization",
        "fraction":               0.25,
        "requires_no_renewables": True,
        "cost_impact":            "High Initial Cost",
        "implementation":         "Complex",
        "details":                "Install a rooftop array sized to offset 25% of electrical consumption.",
    },
]

# ─────────────────────────────────────────────────────────────────────────────
# CONSTRUCTION MEASURES — fixed estimates in kg CO₂-e
# "savings": None → computed from regional transport penalties
# ─────────────────────────────────────────────────────────────────────────────

LOCAL_SOURCING_FALLBACK_KG: float = 25_000.0

CONSTRUCTION_MEASURES: list[dict] = [
    {
        "title":          "Optimise material delivery schedules",
        "category":       "Construction Optimization",
        "savings":        20_000.0,
        "cost_impact":    "Savings",
        "implementation": "Easy",
        "details":        "Consolidate deliveries and optimise routes to reduce transport emissions.",
    },
    {
        "title":          "Increase prefabrication to reduce waste",
        "category":       "Construction Optimization",
        "savings":        35_000.0,
        "cost_impact":    "Slight Increase",
        "implementation": "Medium",
        "details":        "Use prefabricated components to reduce on-site waste and improve quality.",
    },
    {
        "title":          "Source materials locally",
        "category":       "Construction Optimization",
        "savings":        None,
        "cost_impact":    "Neutral",
        "implementation": "Easy",
        "details":        "Prioritise suppliers within a 100 km radius to reduce transport emissions.",
    },
]


# ─────────────────────────────────────────────────────────────────────────────
# INTEGRITY ASSERTION (runs at import time)
# ─────────────────────────────────────────────────────────────────────────────

def _assert_registry_integrity() -> None:
    for category, sub in SUBSTITUTIONS.items():
        assert category in MATERIAL_CATEGORIES, (
            f"config/recommendations.py integrity error: unknown category '{category}'"
        )
        target = MATERIAL_COEFFICIENTS.get(sub["substitute"])
        assert target is not None and target["category"] == category, (
            f"config/recommendations.py integrity error: "
            f"substitute '{sub['substitute']}' is not a local {category} material"
        )
        assert sub["substitute"] in sub["exempt"], (
            f"config/recommendations.py integrity error: "
            f"substitute '{sub['substitute']}' must be exempt from its own swap"
        )
        assert 0 < sub["reduction"] <= 1, (
            f"config/recommendations.py integrity error: bad reduction for '{category}'"
        )
    for measure in [*SUBSTITUTIONS.values(), MASS_TIMBER, *OPERATIONAL_MEASURES, *CONSTRUCTION_MEASURES]:
        assert measure["cost_impact"] in COST_TIERS, (
            f"config/recommendations.py integrity error: "
            f"unknown cost tier '{measure['cost_impact']}'"
        )
        assert measure["implementation"] in IMPLEMENTATION_TIERS, (
            f"config/recommendations.py integrity error: "
            f"unknown implementation tier '{measure['implementation']}'"
        )
    for measure in OPERATIONAL_MEASURES:
        assert 0 < measure["fraction"] < 1, (
            f"config/recommendations.py integrity error: bad fraction for '{measure['title']}'"
        )


_assert_registry_integrity()
