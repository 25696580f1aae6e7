# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Intelligence Core — Section J & NABERS Compliance Tests
# © 2026 Aparajita Parihar. All rights reserved.
# ═══════════════════════════════════════════════════════════════════════════════
from __future__ import annotations

import pytest

from core.compliance import (
    ComplianceChecker,
    make_check,
    star_grade,
    validate_climate_zone,
    validate_intensity,
)
from core.models import Envelope, SectionStatus


@pytest.fixture
def checker():
    return ComplianceChecker()


class TestValidators:
    def test_climate_zone(self):
        assert validate_climate_zone(5) == (True, "ok")
        assert validate_climate_zone(12)[0] is False
        assert validate_climate_zone("5")[0] is False
        assert validate_climate_zone(True)[0] is False

    def test_intensity(self):
        assert validate_intensity(0.0)[0] is True
        ok, msg = validate_intensity(-1, "roof_r")
        assert not ok and msg == "roof_r cannot be negative."


class TestChecks:
    def test_max_check_score(self):
        check = make_check("embodied_intensity", 820.0, 800.0, "max")
        assert check.passed is False
        assert check.score == 97.6

    def test_min_check_score_capped(self):
        assert make_check("roof_r", 5.0, 4.2, "min").score == 100.0
        assert make_check("roof_r", 2.1, 4.2, "min").score == 50.0


# ─────────────────────────────────────────────────────────────────────────────
# SECTION J
# ─────────────────────────────────────────────────────────────────────────────

class TestSectionJ:
    def test_embodied_limit_exceeded(self, checker):
        result = checker.check(None, 5, "office", embodied_intensity=820.0)
        j5 = result.section("J5")
        assert j5.status is SectionStatus.FAILED
        assert result.overall is False
        assert any("below 800 kg CO₂-e/m²" in r for r in result.recommendations)

    def test_embodied_limit_met(self, checker):
        result = checker.check(None, 5, "office", embodied_intensity=780.0)
        assert result.section("J5").status is SectionStatus.PASSED
        assert result.overall is True

    def test_no_data_skips_every_section(self, checker):
        result = checker.check(None, 5, "office")
        assert all(s.status is SectionStatus.SKIPPED for s in result.sections)
        assert all(s.score is None for s in result.sections)
        assert result.overall is True
        assert result.star_rating == 0.0

    def test_fabric_uses_zone_minimums(self, checker):
        env = Envelope(roof_r=3.0, wall_r=3.0)
        fabric = checker.check(env, 5, "office").section("J1.2")
        assert fabric.status is SectionStatus.FAILED
        assert fabric.recommendations == ("Increase roof insulation to at least R4.2.",)
        assert checker.check(Envelope(roof_r=6.5, wall_r=5.0), 8, "office").section("J1.2").passed

    def test_glazing(self, checker):
        glazing = checker.check(Envelope(glazing_u=5.0, glazing_shgc=0.4), 5, "office").section("J1.3")
        assert glazing.status is SectionStatus.FAILED
        assert glazing.score == 86.0
        assert len(glazing.recommendations) == 1

    def test_sealing_class_follows_zone(self, checker):
        env = Envelope(air_leakage_ach=5.0)
        assert checker.check(env, 5, "office").section("J1.5").passed
        sealed = checker.check(env, 7, "office").section("J1.5")
        assert sealed.status is SectionStatus.FAILED
        assert "3.0 ACH" in sealed.recommendations[0]

    def test_lighting_by_building_type(self, checker):
        env = Envelope(lighting_power_density=5.0)
        assert checker.check(env, 5, "office").section("J1.6").status is SectionStatus.FAILED
        assert checker.check(env, 5, "retail").section("J1.6").status is SectionStatus.PASSED

    def test_partial_data_only_checks_supplied_sections(self, checker):
        result = checker.check(Envelope(roof_r=5.0), 5, "office")
        assert result.section("J1.2").status is SectionStatus.PASSED
        assert result.section("J1.3").status is SectionStatus.SKIPPED


# ─────────────────────────────────────────────────────────────────────────────
# STAR RATING
# ─────────────────────────────────────────────────────────────────────────────

class TestStarRating:
    @pytest.mark.parametrize("intensity, stars", [
        (22.0, 6.0),
        (23.0, 5.5),
        (67.0, 4.0),
        (139.0, 1.0),
        (140.0, 0.0),
    ])
    def test_office_tiers(self, checker, intensity, stars):
        assert checker.star_rating(intensity, "office")[0] == stars

    def test_ratings_never_improve_with_intensity(self, checker):
        ratings = [checker.star_rating(float(i), "retail")[0] for i in range(0, 260, 5)]
        assert ratings == sorted(ratings, reverse=True)

    def test_profile_mapping(self, checker):
        assert checker.star_profile("hospitality") == ("hotel", None)
        assert checker.star_profile("residential") == ("apartment", None)
        assert checker.star_profile("data_centre") == ("data_centre", None)

    def test_untabulated_type_falls_back_to_office(self, checker):
        stars, profile, note = checker.star_rating(50.0, "spaceport")
        assert profile == "office"
        assert stars == 4.5
        assert "spaceport" in note

    def test_fallback_note_reported_on_result(self, checker):
        result = checker.check(None, 5, "warehouse", emissions_intensity=50.0)
        assert result.star_profile == "office"
        assert any("warehouse" in w for w in result.warnings)

    @pytest.mark.parametrize("stars, grade", [
        (6.0, "Market Leading"),
        (5.5, "Excellent"),
        (4.0, "Good"),
        (2.5, "Below Average"),
        (0.0, "Very Poor"),
    ])
    def test_grades(self, stars, grade):
        assert star_grade(stars) == grade

    def test_next_star_target(self, checker):
        assert checker.next_star_target(3.0, "office") == (
            "Reduce operational emissions to 79 kg CO₂-e/m²/yr to reach a 3.5 star rating."
        )
        assert checker.next_star_target(6.0, "office") is None

    def test_target_added_to_recommendations(self, checker):
        result = checker.check(None, 5, "office", emissions_intensity=100.0)
        assert result.star_rating == 2.5
        assert result.star_grade == "Below Average"
        assert result.recommendations[-1].endswith("to reach a 3 star rating.")


# ─────────────────────────────────────────────────────────────────────────────
# STANDALONE ASSESSMENT
# ─────────────────────────────────────────────────────────────────────────────

class TestCheckNccCompliance:
    def test_camel_case_keys(self, checker):
        result = checker.check_ncc_compliance(
            {"roofR": 4.5, "wallR": 3.0, "buildingType": "office", "embodiedIntensity": 750}, 5,
        )
        assert result.climate_zone == 5
        assert result.section("J1.2").passed
        assert result.section("J5").passed
        assert result.overall is True

    def test_unknown_zone_falls_back(self, checker):
        result = checker.check_ncc_compliance({"roof_r": 4.5}, 12)
        assert result.climate_zone == 5
        assert result.warnings == ("Climate zone 12 is not an NCC zone (1–8). Using default climate zone 5.",)

    def test_negative_value_rejected(self, checker):
        with pytest.raises(ValueError, match="Building data: roof_r cannot be negative"):
            checker.check_ncc_compliance({"roof_r": -1.0}, 5)

    def test_non_mapping_rejected(self, checker):
        with pytest.raises(ValueError):
            checker.check_ncc_compliance([("roof_r", 4.0)], 5)
