"""
Unit tests for body fat classification.

Boundary values lock in strict category bounds and inclusive health bands.
"""

import pytest

from bodycomp.domain.enums import AgeBracket, BodyFatCategory, HealthStatus, Sex
from bodycomp.services.classification import (
    CATEGORY_THRESHOLDS,
    OPTIMAL_RANGES,
    classify,
    get_age_bracket,
    get_body_fat_category,
    get_health_status,
)


class TestAgeBracket:
    """Tests for the age split at 30."""

    def test_under_30(self):
        assert get_age_bracket(29) == AgeBracket.UNDER_30

    def test_exactly_30(self):
        """30 belongs to the older bracket."""
        assert get_age_bracket(30) == AgeBracket.OVER_30


class TestThresholdTables:
    """The tables match the published thresholds."""

    def test_category_bounds(self):
        bounds = {
            key: [bound for bound, _ in thresholds]
            for key, thresholds in CATEGORY_THRESHOLDS.items()
        }
        assert bounds == {
            (Sex.MALE, AgeBracket.UNDER_30): [8, 14, 21, 25],
            (Sex.MALE, AgeBracket.OVER_30): [8, 17, 24, 28],
            (Sex.FEMALE, AgeBracket.UNDER_30): [10, 16, 24, 31],
            (Sex.FEMALE, AgeBracket.OVER_30): [10, 20, 27, 34],
        }

    def test_category_order(self):
        for thresholds in CATEGORY_THRESHOLDS.values():
            assert [category for _, category in thresholds] == [
                BodyFatCategory.ESSENTIAL_FAT,
                BodyFatCategory.ATHLETIC,
                BodyFatCategory.FITNESS,
                BodyFatCategory.AVERAGE,
            ]

    def test_optimal_ranges(self):
        assert OPTIMAL_RANGES == {
            (Sex.MALE, AgeBracket.UNDER_30): (8, 19),
            (Sex.MALE, AgeBracket.OVER_30): (11, 22),
            (Sex.FEMALE, AgeBracket.UNDER_30): (16, 24),
            (Sex.FEMALE, AgeBracket.OVER_30): (20, 27),
        }


class TestBodyFatCategory:
    """Tests for category lookup."""

    def test_male_under_30(self):
        assert get_body_fat_category(7.9, "male", 25) == BodyFatCategory.ESSENTIAL_FAT
        assert get_body_fat_category(8, "male", 25) == BodyFatCategory.ATHLETIC
        assert get_body_fat_category(13.9, "male", 25) == BodyFatCategory.ATHLETIC
        assert get_body_fat_category(14, "male", 25) == BodyFatCategory.FITNESS
        assert get_body_fat_category(21, "male", 25) == BodyFatCategory.AVERAGE
        assert get_body_fat_category(24.9, "male", 25) == BodyFatCategory.AVERAGE
        assert get_body_fat_category(25, "male", 25) == BodyFatCategory.OBESE

    def test_male_30_and_over(self):
        assert get_body_fat_category(16.9, "male", 30) == BodyFatCategory.ATHLETIC
        assert get_body_fat_category(17, "male", 30) == BodyFatCategory.FITNESS
        assert get_body_fat_category(27.9, "male", 45) == BodyFatCategory.AVERAGE
        assert get_body_fat_category(28, "male", 45) == BodyFatCategory.OBESE

    def test_female_under_30(self):
        assert get_body_fat_category(9.9, "female", 20) == BodyFatCategory.ESSENTIAL_FAT
        assert get_body_fat_category(10, "female", 20) == BodyFatCategory.ATHLETIC
        assert get_body_fat_category(16, "female", 20) == BodyFatCategory.FITNESS
        assert get_body_fat_category(24, "female", 20) == BodyFatCategory.AVERAGE
        assert get_body_fat_category(31, "female", 20) == BodyFatCategory.OBESE

    def test_female_30_and_over(self):
        assert get_body_fat_category(19.9, Sex.FEMALE, 35) == BodyFatCategory.ATHLETIC
        assert get_body_fat_category(20, Sex.FEMALE, 35) == BodyFatCategory.FITNESS
        assert get_body_fat_category(27, Sex.FEMALE, 35) == BodyFatCategory.AVERAGE
        assert get_body_fat_category(34, Sex.FEMALE, 35) == BodyFatCategory.OBESE

    def test_age_changes_category(self):
        """Same value, different bracket."""
        assert get_body_fat_category(15, "male", 29) == BodyFatCategory.FITNESS
        assert get_body_fat_category(15, "male", 30) == BodyFatCategory.ATHLETIC

    def test_display_values(self):
        assert BodyFatCategory.ESSENTIAL_FAT.value == "Essential Fat"
        assert HealthStatus.VERY_POOR.value == "Very Poor"


class TestHealthStatus:
    """Tests for health status bands around the optimal range."""

    @pytest.mark.parametrize(
        "body_fat,expected",
        [
            (8, HealthStatus.EXCELLENT),
            (19, HealthStatus.EXCELLENT),
            (5, HealthStatus.GOOD),
            (22, HealthStatus.GOOD),
            (4.9, HealthStatus.FAIR),
            (22.1, HealthStatus.FAIR),
            (2, HealthStatus.FAIR),
            (25, HealthStatus.FAIR),
            (1.9, HealthStatus.POOR),
            (25.1, HealthStatus.POOR),
            (29, HealthStatus.POOR),
            (29.1, HealthStatus.VERY_POOR),
            (40, HealthStatus.VERY_POOR),
        ],
    )
    def test_male_under_30_bands(self, body_fat, expected):
        """Band edges are inclusive: exactly max+3 is still Good."""
        assert get_health_status(body_fat, "male", 25) == expected

    def test_male_30_and_over_bands(self):
        assert get_health_status(11, "male", 40) == HealthStatus.EXCELLENT
        assert get_health_status(25, "male", 40) == HealthStatus.GOOD
        assert get_health_status(28, "male", 40) == HealthStatus.FAIR
        assert get_health_status(32, "male", 40) == HealthStatus.POOR
        assert get_health_status(32.1, "male", 40) == HealthStatus.VERY_POOR

    def test_female_under_30_bands(self):
        assert get_health_status(16, "female", 25) == HealthStatus.EXCELLENT
        assert get_health_status(13, "female", 25) == HealthStatus.GOOD
        assert get_health_status(30, "female", 25) == HealthStatus.FAIR
        assert get_health_status(34, "female", 25) == HealthStatus.POOR
        assert get_health_status(34.5, "female", 25) == HealthStatus.VERY_POOR

    def test_female_30_and_over_bands(self):
        assert get_health_status(27, "female", 50) == HealthStatus.EXCELLENT
        assert get_health_status(17, "female", 50) == HealthStatus.GOOD
        assert get_health_status(14, "female", 50) == HealthStatus.FAIR
        assert get_health_status(10, "female", 50) == HealthStatus.POOR
        assert get_health_status(9.9, "female", 50) == HealthStatus.VERY_POOR


class TestClassify:
    """Tests for the combined classification."""

    def test_classify_returns_both_labels(self):
        result = classify(14.5, "male", 30)
        assert result.category == BodyFatCategory.ATHLETIC
        assert result.health_status == HealthStatus.EXCELLENT

    def test_classify_obese(self):
        result = classify(45.0, Sex.FEMALE, 28)
        assert result.category == BodyFatCategory.OBESE
        assert result.health_status == HealthStatus.VERY_POOR

    def test_classify_invalid_sex(self):
        with pytest.raises(ValueError):
            classify(20.0, "other", 30)
