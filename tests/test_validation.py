# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Input Validation Tests
# © 2026 Aparajita Parihar. All rights reserved.
# ═══════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

import pytest

from core.errors import ValidationError
from core.models import ActivityData, Envelope, MaterialCategory, MaterialLineItem, Scope2Method
from core.validation import (
    validate_climate_zone,
    validate_design_life,
    validate_envelope_value,
    validate_floor_area,
    validate_quantity,
    validate_project,
)


class TestFieldHelpers:
    def test_floor_area(self):
        assert validate_floor_area(10_000.0) == (True, "ok")
        ok, msg = validate_floor_area(0)
        assert not ok and "greater than zero" in msg
        ok, msg = validate_floor_area("big")
        assert not ok and "must be a number" in msg

    def test_quantity(self):
        assert validate_quantity(1)[0] is True
        assert validate_quantity(0)[0] is False
        assert validate_quantity(-5)[0] is False
        assert validate_quantity(True)[0] is False

    def test_design_life(self):
        assert validate_design_life(50)[0] is True
        assert validate_design_life(0)[0] is False

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_numbers_rejected(self, value):
        assert validate_floor_area(value)[0] is False
        assert validate_quantity(value)[0] is False
        assert validate_design_life(value)[0] is False
        assert validate_envelope_value(value, "Roof R-value")[0] is False

    def test_climate_zone_optional(self):
        assert validate_climate_zone(None)[0] is True
        assert validate_climate_zone(8)[0] is True
        ok, msg = validate_climate_zone(9)
        assert not ok and "1–8" in msg


class TestValidateProject:
    def test_valid_project_passes(self, make_project):
        assert validate_project(make_project()) is None

    def test_is_a_value_error(self, make_project):
        with pytest.raises(ValueError, match="Floor area must be greater than zero"):
            validate_project(make_project(gfa_m2=0.0))

    def test_collects_every_problem(self, make_project):
        with pytest.raises(ValidationError) as excinfo:
            validate_project(make_project(gfa_m2=-1.0, materials=(), climate_zone=11))
        problems = excinfo.value.problems
        assert len(problems) == 3
        assert any("At least one material" in p for p in problems)

    def test_zero_quantity_rejected(self, make_project):
        item = MaterialLineItem(MaterialCategory.STEEL, "steel-recycled", 0.0, "kg")
        with pytest.raises(ValidationError, match="quantity must be greater than zero"):
            validate_project(make_project(materials=(item,)))

    def test_missing_type_rejected(self, make_project):
        item = MaterialLineItem(MaterialCategory.STEEL, "", 10.0, "kg")
        with pytest.raises(ValidationError, match="no material type"):
            validate_project(make_project(materials=(item,)))

    def test_missing_building_type_rejected(self, make_project):
        with pytest.raises(ValidationError, match="Building type is required"):
            validate_project(make_project(building_type=None))

    def test_negative_envelope_value_rejected(self, make_project):
        with pytest.raises(ValidationError, match="Roof R-value"):
            validate_project(make_project(envelope=Envelope(roof_r=-1.0)))

    def test_market_method_needs_factor(self, make_project):
        with pytest.raises(ValidationError, match="market_factor"):
            validate_project(make_project(), Scope2Method.MARKET)
        project = make_project(activity=ActivityData(electricity_kwh=1000.0, market_factor=0.4))
        assert validate_project(project, "market") is None

    def test_unknown_method_rejected(self, make_project):
        with pytest.raises(ValidationError, match="Unknown Scope 2 method: 'hybrid'"):
            validate_project(make_project(), "hybrid")

    def test_nan_floor_area_and_quantity_rejected(self, make_project):
        item = MaterialLineItem(MaterialCategory.CONCRETE, "concrete-32mpa", float("inf"), "m³")
        with pytest.raises(ValidationError) as excinfo:
            validate_project(make_project(gfa_m2=float("nan"), materials=(item,)))
        problems = excinfo.value.problems
        assert "Floor area must be a number." in problems
        assert any("quantity must be a number" in p for p in problems)
