"""
Measurement validator.

Checks a raw (possibly partial) measurement record before any calculation.
Problems are returned as a list of human-readable messages; nothing is raised.
"""

import logging
import math
from typing import Any, List, Mapping, Optional, Tuple, Union

from bodycomp.domain.enums import Sex, normalize_sex
from bodycomp.domain.measurement import MeasurementInput

logger = logging.getLogger(__name__)


# (field, min, max, message) in the order messages are reported
RANGE_CHECKS: Tuple[Tuple[str, float, float, str], ...] = (
    ("age", 13, 100, "Age must be between 13 and 100 years"),
    ("height_cm", 100, 250, "Height must be between 100 and 250 cm"),
    ("weight_kg", 30, 300, "Weight must be between 30 and 300 kg"),
    ("waist_cm", 50, 200, "Waist measurement must be between 50 and 200 cm"),
    ("neck_cm", 20, 60, "Neck measurement must be between 20 and 60 cm"),
)

HIP_RANGE = (60, 200)
HIP_MESSAGE = (
    "Hip measurement is required for females and must be between 60 and 200 cm"
)
WAIST_NECK_MESSAGE = "Waist measurement should be larger than neck measurement"


def _as_number(value: Any) -> Optional[float]:
    """Coerce a raw field value to float, or None if absent/unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return number


def _in_range(value: Any, low: float, high: float) -> bool:
    """
    Inclusive range check.

    Missing, zero and non-numeric values fail the same way as
    out-of-range ones.
    """
    number = _as_number(value)
    if not number:
        return False
    return low <= number <= high


def _is_female(data: Mapping[str, Any]) -> bool:
    sex = normalize_sex(data.get("sex", data.get("gender")))
    return sex == Sex.FEMALE.value


def validate_measurements(
    data: Union[Mapping[str, Any], MeasurementInput]
) -> List[str]:
    """
    Validate measurement data.

    All checks run; the result lists every violation in field order
    (age, height, weight, waist, neck, hip, waist/neck relationship).

    Args:
        data: Partial measurement record (dict-like) or a MeasurementInput

    Returns:
        List of violation messages, empty when the input is acceptable
    """
    if isinstance(data, MeasurementInput):
        data = data.model_dump()

    errors: List[str] = []

    for field, low, high, message in RANGE_CHECKS:
        if not _in_range(data.get(field), low, high):
            errors.append(message)

    if _is_female(data) and not _in_range(data.get("hip_cm"), *HIP_RANGE):
        errors.append(HIP_MESSAGE)

    # Logical validations
    waist = _as_number(data.get("waist_cm"))
    neck = _as_number(data.get("neck_cm"))
    if waist and neck and waist <= neck:
        errors.append(WAIST_NECK_MESSAGE)

    if errors:
        logger.debug(f"Measurement validation failed with {len(errors)} error(s)")

    return errors
