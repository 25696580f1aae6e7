# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Tabular Views
# © 2026 Aparajita Parihar. All rights reserved.
#
# pandas DataFrames built from a ProjectResult for dashboard collaborators.
# Read-only views: nothing here feeds back into the calculation.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import pandas as pd

from core.models import ProjectResult


def category_table(result: ProjectResult) -> pd.DataFrame:
    rows = [
        {"Category": c.category, "Embodied (kg CO₂-e)": c.embodied, "Share (%)": c.percentage}
        for c in result.category_breakdown
    ]
    return pd.DataFrame(rows, columns=["Category", "Embodied (kg CO₂-e)", "Share (%)"])


def materials_table(result: ProjectResult) -> pd.DataFrame:
    rows = []
    for m in result.materials:
        row = {
            "Category": m.item.category.value,
            "Type": m.item.type_id,
            "Quantity": m.item.quantity,
            "Unit": m.coefficient.unit,
            "Source": m.coefficient.source,
        }
        row.update(m.stages.to_dict())
        row["Embodied"] = m.embodied
        rows.append(row)
    return pd.DataFrame(rows)


def recommendations_table(result: ProjectResult) -> pd.DataFrame:
    """Recommendations in ranked order, with cumulative savings."""
    columns = ["Rank", "Title", "Category", "Savings (kg CO₂-e)", "Cost Impact", "Implementation"]
    rows = [
        {
            "Rank": i,
            "Title": r.title,
            "Category": r.category,
            "Savings (kg CO₂-e)": r.carbon_savings,
            "Cost Impact": r.cost_impact,
            "Implementation": r.implementation,
        }
        for i, r in enumerate(result.recommendations, start=1)
    ]
    df = pd.DataFrame(rows, columns=columns)
    df["Cumulative (kg CO₂-e)"] = df["Savings (kg CO₂-e)"].cumsum()
    return df


def scopes_table(result: ProjectResult) -> pd.DataFrame:
    """One row per (scope, category) subtotal."""
    rows = []
    for scope_name, scope in (
        ("Scope 1", result.scopes.scope1),
        ("Scope 2", result.scopes.scope2),
        ("Scope 3", result.scopes.scope3),
    ):
        for category, value in scope.categories.items():
            rows.append({"Scope": scope_name, "Category": category, "Emissions (kg CO₂-e)": value})
    return pd.DataFrame(rows, columns=["Scope", "Category", "Emissions (kg CO₂-e)"])
