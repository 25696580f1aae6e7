# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Location & Regional Overlay Tests
# © 2026 Aparajita Parihar. All rights reserved.
# ═══════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

import pytest

from core.errors import RegionalFallbackWarning
from core.models import Location, MaterialCategory, MaterialLineItem
from services.location import (
    RegionalAdjuster,
    city_meta,
    find_city,
    nearest_city,
)


class TestCityLookup:
    def test_case_insensitive(self):
        assert find_city("  sydney ") == "Sydney"
        assert find_city("GOLD COAST") == "Gold Coast"
        assert find_city("Atlantis") is None
        assert find_city(None) is None

    def test_city_meta(self):
        assert city_meta("melbourne")["zone"] == 6
        with pytest.raises(KeyError):
            city_meta("Atlantis")

    @pytest.mark.parametrize("lat, lon, expected", [
        (-42.90, 147.30, "Hobart"),
        (-33.90, 151.20, "Sydney"),
        (-12.40, 130.90, "Darwin"),
    ])
    def test_nearest_city(self, lat, lon, expected):
        assert nearest_city(lat, lon) == expected


class TestRegionalAdjuster:
    def test_sydney_enrichment(self, make_project):
        enriched = RegionalAdjuster().enrich(make_project())
        assert enriched.state == "nsw"
        assert enriched.climate_zone == 5
        assert enriched.city == "Sydney"
        assert enriched.grid_factor == 0.81
        assert enriched.gas_factor == 51.53
        assert enriched.transport_scale == pytest.approx(1.03)
        assert enriched.transport_penalties["concrete"] == 4.0
        assert enriched.suppliers["concrete-32mpa"][0] == "Boral Sydney"
        assert enriched.warnings == ()

    def test_enrichment_does_not_mutate_project(self, make_project):
        project = make_project()
        enriched = RegionalAdjuster().enrich(project)
        assert enriched.project is project
        assert project.climate_zone is None

    def test_untabulated_location_uses_defaults(self, make_project, caplog):
        project = make_project(location=Location(city="Atlantis"))
        with caplog.at_level("WARNING"):
            enriched = RegionalAdjuster().enrich(project)
        assert enriched.state == "nsw"
        assert enriched.climate_zone == 5
        assert [w.field for w in enriched.warnings] == ["state", "climate_zone"]
        assert all(isinstance(w, RegionalFallbackWarning) for w in enriched.warnings)
        assert "Atlantis" in enriched.warning_messages[0]
        assert "Regional fallback" in caplog.text

    def test_explicit_zone_wins(self, make_project):
        enriched = RegionalAdjuster().enrich(make_project(climate_zone=8))
        assert enriched.climate_zone == 8
        assert enriched.requirements["roof_r_min"] == 6.3

    def test_coordinates_resolve_to_nearest_city(self, make_project):
        project = make_project(location=Location(lat=-42.9, lon=147.3))
        enriched = RegionalAdjuster().enrich(project)
        assert enriched.city == "Hobart"
        assert enriched.state == "tas"
        assert enriched.climate_zone == 7
        assert enriched.warnings[0].reason == "nearest tabulated city Hobart"

    def test_known_state_unknown_city_warns_for_zone_only(self, make_project):
        project = make_project(location=Location(city="Bendigo", state="vic"))
        enriched = RegionalAdjuster().enrich(project)
        assert enriched.state == "vic"
        assert enriched.grid_factor == 0.98
        assert enriched.transport_penalties["concrete"] == 4.2
        assert [w.field for w in enriched.warnings] == ["climate_zone"]

    def test_unknown_state_with_known_city(self, make_project):
        project = make_project(location=Location(city="Perth", state="xx"))
        enriched = RegionalAdjuster().enrich(project)
        assert enriched.state == "wa"
        assert enriched.warnings[0].requested == "xx"

    def test_generic_supplier_fallback(self, make_project):
        item = MaterialLineItem(MaterialCategory.FINISHES, "carpet-nylon", 500.0, "m²")
        enriched = RegionalAdjuster().enrich(make_project(materials=(item,)))
        assert enriched.suppliers["carpet-nylon"] == ("Generic Supplier",)

    def test_bad_defaults_rejected(self):
        with pytest.raises(ValueError):
            RegionalAdjuster(default_state="atlantis")
        with pytest.raises(ValueError):
            RegionalAdjuster(default_climate_zone=0)
