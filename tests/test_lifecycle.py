# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Lifecycle Stage Engine Tests
# © 2026 Aparajita Parihar. All rights reserved.
# ═══════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

import pytest

from core.lifecycle import LifecycleStageEngine, replacement_count, total_stages
from core.models import CarbonCoefficient, MaterialCategory, MaterialLineItem
from services.coefficients import CoefficientSource


@pytest.fixture
def source():
    return CoefficientSource()


def _result(engine, source, category, type_id, quantity, life=50, transport_scale=1.0):
    item = MaterialLineItem(MaterialCategory(category), type_id, quantity)
    return engine.compute_material(item, source.get(category, type_id), life, transport_scale)


class TestComputeStages:
    def test_concrete_stages(self, source):
        stages = LifecycleStageEngine().compute_stages(source.get("concrete", "concrete-32mpa"), 1200.0, 50)
        assert stages.a1a3 == 384_000.0
        assert stages.a4 == pytest.approx(19_200.0)
        assert stages.a5 == pytest.approx(19_200.0)
        assert stages.b1b7 == 0.0
        assert stages.c1c4 == pytest.approx(30_720.0)
        assert stages.d == pytest.approx(-57_600.0)
        assert stages.biogenic == 0.0

    def test_transport_scale_applies_to_a4_only(self, source):
        stages = LifecycleStageEngine().compute_stages(
            source.get("concrete", "concrete-32mpa"), 1200.0, 50, transport_scale=1.25,
        )
        assert stages.a4 == pytest.approx(24_000.0)
        assert stages.a5 == pytest.approx(19_200.0)

    def test_replacements_for_short_lived_finishes(self, source):
        result = _result(LifecycleStageEngine(), source, "finishes", "carpet-nylon", 1000.0)
        assert result.replacements == 3
        assert result.stages.b1b7 == pytest.approx(33_000.0)

    def test_explicit_stage_factors(self, source):
        policy = MaterialCategory.FINISHES.policy
        stages = LifecycleStageEngine().compute_stages(
            source.get("concrete", "concrete-32mpa"), 1.0, 50, stage_factors=policy,
        )
        assert stages.b1b7 > 0

    def test_module_d_can_be_excluded(self, source):
        stages = LifecycleStageEngine(include_module_d=False).compute_stages(
            source.get("steel", "steel-recycled"), 1000.0, 50,
        )
        assert stages.d == 0.0

    def test_module_d_never_positive(self, source):
        for type_id in ("steel-recycled", "steel-reinforcing-bar"):
            stages = LifecycleStageEngine().compute_stages(source.get("steel", type_id), 500.0, 50)
            assert stages.d <= 0.0

    def test_biogenic_storage_kept_apart(self, source):
        result = _result(LifecycleStageEngine(), source, "timber", "timber-clt", 10.0)
        assert result.stages.biogenic == pytest.approx(-7_500.0)
        assert result.stages.d == pytest.approx(-2_000.0 * 0.40)
        assert result.embodied == pytest.approx(result.stages.upfront + result.stages.c1c4)

    def test_sequestration_can_be_excluded(self, source):
        result = _result(LifecycleStageEngine(include_sequestration=False), source, "timber", "timber-clt", 10.0)
        assert result.stages.biogenic == 0.0

    def test_no_biogenic_without_storage_value(self):
        coef = CarbonCoefficient(MaterialCategory.TIMBER, "timber-framing", 150.0, "m³")
        stages = LifecycleStageEngine().compute_stages(coef, 2.0, 50)
        assert stages.biogenic == 0.0


class TestReplacementCount:
    @pytest.mark.parametrize("life, service, expected", [
        (50, 15, 3),
        (50, 25, 1),
        (50, 30, 1),
        (50, 50, 0),
        (50, 60, 0),
        (50, None, 0),
        (50, 0, 0),
    ])
    def test_cases(self, life, service, expected):
        assert replacement_count(life, service) == expected


def test_total_stages_sums_materials(source):
    engine = LifecycleStageEngine()
    results = [
        _result(engine, source, "concrete", "concrete-32mpa", 1200.0),
        _result(engine, source, "finishes", "carpet-nylon", 1000.0),
    ]
    total = total_stages(results)
    assert total.a1a3 == pytest.approx(384_000.0 + 12_500.0)
    assert total.embodied == pytest.approx(sum(r.embodied for r in results))
    assert total_stages([]).embodied == 0.0
