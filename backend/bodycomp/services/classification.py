"""
Body fat classification.

Maps a body fat percentage to a category and a health status using
lookup tables keyed by (sex, age bracket).
"""

from typing import Dict, Tuple, Union

from bodycomp.domain.enums import AgeBracket, BodyFatCategory, HealthStatus, Sex
from bodycomp.domain.measurement import Classification

AGE_BRACKET_SPLIT = 30

# Ascending (upper_bound, category); first bound the value is strictly below wins
CATEGORY_THRESHOLDS: Dict[Tuple[Sex, AgeBracket], Tuple[Tuple[float, BodyFatCategory], ...]] = {
    (Sex.MALE, AgeBracket.UNDER_30): (
        (8, BodyFatCategory.ESSENTIAL_FAT),
        (14, BodyFatCategory.ATHLETIC),
        (21, BodyFatCategory.FITNESS),
        (25, BodyFatCategory.AVERAGE),
    ),
    (Sex.MALE, AgeBracket.OVER_30): (
        (8, BodyFatCategory.ESSENTIAL_FAT),
        (17, BodyFatCategory.ATHLETIC),
        (24, BodyFatCategory.FITNESS),
        (28, BodyFatCategory.AVERAGE),
    ),
    (Sex.FEMALE, AgeBracket.UNDER_30): (
        (10, BodyFatCategory.ESSENTIAL_FAT),
        (16, BodyFatCategory.ATHLETIC),
        (24, BodyFatCategory.FITNESS),
        (31, BodyFatCategory.AVERAGE),
    ),
    (Sex.FEMALE, AgeBracket.OVER_30): (
        (10, BodyFatCategory.ESSENTIAL_FAT),
        (20, BodyFatCategory.ATHLETIC),
        (27, BodyFatCategory.FITNESS),
        (34, BodyFatCategory.AVERAGE),
    ),
}

# Optimal (min, max) body fat range
OPTIMAL_RANGES: Dict[Tuple[Sex, AgeBracket], Tuple[float, float]] = {
    (Sex.MALE, AgeBracket.UNDER_30): (8, 19),
    (Sex.MALE, AgeBracket.OVER_30): (11, 22),
    (Sex.FEMALE, AgeBracket.UNDER_30): (16, 24),
    (Sex.FEMALE, AgeBracket.OVER_30): (20, 27),
}

# Symmetric expansions of the optimal range, inclusive at both ends
HEALTH_STATUS_BANDS: Tuple[Tuple[float, HealthStatus], ...] = (
    (0, HealthStatus.EXCELLENT),
    (3, HealthStatus.GOOD),
    (6, HealthStatus.FAIR),
    (10, HealthStatus.POOR),
)


def get_age_bracket(age: int) -> AgeBracket:
    """Split ages at 30: under 30, or 30 and over."""
    return AgeBracket.UNDER_30 if age < AGE_BRACKET_SPLIT else AgeBracket.OVER_30


def get_body_fat_category(
    body_fat_percentage: float, sex: Union[Sex, str], age: int
) -> BodyFatCategory:
    """Look up the category for a body fat percentage."""
    thresholds = CATEGORY_THRESHOLDS[(Sex(sex), get_age_bracket(age))]
    for upper_bound, category in thresholds:
        if body_fat_percentage < upper_bound:
            return category
    return BodyFatCategory.OBESE


def get_health_status(
    body_fat_percentage: float, sex: Union[Sex, str], age: int
) -> HealthStatus:
    """
    Rate how far a body fat percentage falls from the optimal range.

    Within range is Excellent, within range±3 Good, ±6 Fair, ±10 Poor,
    anything further Very Poor. Band edges belong to the inner band.
    """
    low, high = OPTIMAL_RANGES[(Sex(sex), get_age_bracket(age))]
    for margin, status in HEALTH_STATUS_BANDS:
        if low - margin <= body_fat_percentage <= high + margin:
            return status
    return HealthStatus.VERY_POOR


def classify(
    body_fat_percentage: float, sex: Union[Sex, str], age: int
) -> Classification:
    """
    Classify a body fat percentage.

    Args:
        body_fat_percentage: Body fat percentage
        sex: "male" or "female"
        age: Age in years

    Returns:
        Classification with category and health status
    """
    return Classification(
        category=get_body_fat_category(body_fat_percentage, sex, age),
        health_status=get_health_status(body_fat_percentage, sex, age),
    )
