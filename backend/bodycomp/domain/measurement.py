"""
Measurement domain models.

MeasurementInput is what callers supply; the remaining models are
produced by the calculation pipeline. All of them are immutable and
created fresh per call.
"""

from typing import Any, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from bodycomp.domain.enums import (
    ActivityLevel,
    BodyFatCategory,
    HealthStatus,
    Sex,
    normalize_sex,
)


class MeasurementInput(BaseModel):
    """Raw anthropometric measurements for one person."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    age: int = Field(..., description="Age in whole years")
    sex: Sex = Field(
        ...,
        validation_alias=AliasChoices("sex", "gender"),
        description="male or female",
    )
    height_cm: float = Field(..., gt=0, description="Height in centimeters")
    weight_kg: float = Field(..., gt=0, description="Weight in kilograms")
    waist_cm: float = Field(..., gt=0, description="Waist circumference in centimeters")
    neck_cm: float = Field(..., gt=0, description="Neck circumference in centimeters")
    hip_cm: Optional[float] = Field(
        None, gt=0, description="Hip circumference (required for women)"
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_raw_fields(cls, data: Any) -> Any:
        """
        Accept sex in any case with surrounding whitespace, and ignore an
        unusable hip value on male records (hip is not used for men).
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in ("sex", "gender"):
            if key in data:
                data[key] = normalize_sex(data[key])
        sex = data.get("sex", data.get("gender"))
        if sex == Sex.MALE.value and not _is_positive_number(data.get("hip_cm")):
            data["hip_cm"] = None
        return data


def _is_positive_number(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return float(value) > 0
    except (TypeError, ValueError, OverflowError):
        return False


class BodyComposition(BaseModel):
    """Numeric output of the body composition calculator."""

    model_config = ConfigDict(frozen=True)

    body_fat_percentage: float = Field(
        ..., ge=3.0, le=50.0, description="Navy body fat %, clamped to [3, 50]"
    )
    bmi: float = Field(..., description="Body mass index")
    fat_mass_kg: float = Field(..., description="Fat mass in kilograms")
    lean_mass_kg: float = Field(..., description="Lean mass in kilograms")


class Classification(BaseModel):
    """Category and health status for a body fat percentage."""

    model_config = ConfigDict(frozen=True)

    category: BodyFatCategory
    health_status: HealthStatus


class EnergyExpenditure(BaseModel):
    """Basal and total daily energy expenditure (kcal/day)."""

    model_config = ConfigDict(frozen=True)

    bmr: float
    activity_level: ActivityLevel
    tdee: float


class BodyCompositionResult(BaseModel):
    """Complete pipeline result for one measurement."""

    model_config = ConfigDict(frozen=True)

    body_fat_percentage: float
    bmi: float
    fat_mass_kg: float
    lean_mass_kg: float
    category: BodyFatCategory
    health_status: HealthStatus
    recommendations: List[str] = Field(default_factory=list)
    energy: Optional[EnergyExpenditure] = None


class BodyFatAssessment(BaseModel):
    """
    Validation gate plus result.

    Either errors is non-empty and result is None, or errors is empty
    and result holds the computed values.
    """

    model_config = ConfigDict(frozen=True)

    errors: List[str] = Field(default_factory=list)
    result: Optional[BodyCompositionResult] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors
