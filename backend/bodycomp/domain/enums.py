"""Shared enums for the body composition domain."""

from enum import Enum
from typing import Any


class Sex(str, Enum):
    """Biological sex used to select formulas and threshold tables."""

    MALE = "male"
    FEMALE = "female"


def normalize_sex(value: Any) -> Any:
    """Strip and lowercase a raw sex string; other values pass through."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


class AgeBracket(str, Enum):
    """Age split used by the classification tables."""

    UNDER_30 = "under_30"
    OVER_30 = "30_and_over"


class BodyFatCategory(str, Enum):
    """Body fat percentage classification bucket."""

    ESSENTIAL_FAT = "Essential Fat"
    ATHLETIC = "Athletic"
    FITNESS = "Fitness"
    AVERAGE = "Average"
    OBESE = "Obese"


class HealthStatus(str, Enum):
    """Deviation from the optimal body fat range."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    VERY_POOR = "Very Poor"


class ActivityLevel(str, Enum):
    """Activity level used to scale BMR into TDEE."""

    SEDENTARY = "sedentary"  # Little or no exercise
    LIGHT = "light"  # Light exercise 1-3 days/week
    MODERATE = "moderate"  # Moderate exercise 3-5 days/week
    ACTIVE = "active"  # Hard exercise 6-7 days/week
    VERY_ACTIVE = "veryActive"  # Very hard exercise, physical job
