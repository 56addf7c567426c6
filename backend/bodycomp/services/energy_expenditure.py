"""Energy expenditure calculations (kcal/day)."""

import logging
from typing import Dict, Optional, Union

from bodycomp.domain.enums import ActivityLevel, Sex
from bodycomp.domain.measurement import EnergyExpenditure

logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

DEFAULT_ACTIVITY_LEVEL = ActivityLevel.MODERATE


def resolve_activity_level(
    activity_level: Optional[Union[ActivityLevel, str]]
) -> ActivityLevel:
    """Map a raw activity level to ActivityLevel, falling back to moderate."""
    try:
        return ActivityLevel(activity_level)
    except ValueError:
        logger.warning(
            f"Unknown activity level {activity_level!r}, "
            f"using {DEFAULT_ACTIVITY_LEVEL.value}"
        )
        return DEFAULT_ACTIVITY_LEVEL


def calculate_bmr(
    weight_kg: float, height_cm: float, age: int, sex: Union[Sex, str]
) -> float:
    """Mifflin-St Jeor BMR equation. Not rounded."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if Sex(sex) == Sex.MALE else base - 161


def calculate_tdee(
    bmr: float, activity_level: Optional[Union[ActivityLevel, str]]
) -> float:
    """
    Scale BMR by the activity multiplier.

    Unrecognized activity levels use the moderate multiplier (1.55).
    """
    return bmr * ACTIVITY_MULTIPLIERS[resolve_activity_level(activity_level)]


def calculate_energy_expenditure(
    weight_kg: float,
    height_cm: float,
    age: int,
    sex: Union[Sex, str],
    activity_level: Optional[Union[ActivityLevel, str]] = None,
) -> EnergyExpenditure:
    """BMR and TDEE together for one person."""
    level = resolve_activity_level(
        DEFAULT_ACTIVITY_LEVEL if activity_level is None else activity_level
    )
    bmr = calculate_bmr(weight_kg, height_cm, age, sex)
    return EnergyExpenditure(
        bmr=bmr,
        activity_level=level,
        tdee=calculate_tdee(bmr, level),
    )
