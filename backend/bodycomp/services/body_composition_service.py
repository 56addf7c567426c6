"""
Body composition service.

Composes the validator, calculator, classifier, energy calculator and
recommendation generator into one pipeline.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from bodycomp.core.config import Settings, get_settings
from bodycomp.domain.enums import ActivityLevel
from bodycomp.domain.health_context import HealthContext
from bodycomp.domain.measurement import (
    BodyCompositionResult,
    BodyFatAssessment,
    MeasurementInput,
)
from bodycomp.services.body_fat_calculator import BodyFatCalculator
from bodycomp.services.classification import classify
from bodycomp.services.energy_expenditure import (
    calculate_energy_expenditure,
    resolve_activity_level,
)
from bodycomp.services.measurement_validator import validate_measurements
from bodycomp.services.recommendations import generate_recommendations

logger = logging.getLogger(__name__)

SEX_MESSAGE = "Sex must be 'male' or 'female'"


def _describe_type_error(error: Dict[str, Any]) -> str:
    """Turn a pydantic error entry into a validation message."""
    loc = error.get("loc") or ("input",)
    field = str(loc[0])
    if field in ("sex", "gender"):
        return SEX_MESSAGE
    return f"{field}: {error.get('msg', 'invalid value')}"


class BodyCompositionService:
    """Service running the full body composition pipeline."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.calculator = BodyFatCalculator()

    def _activity_level(
        self, activity_level: Optional[Union[ActivityLevel, str]]
    ) -> ActivityLevel:
        if activity_level is None:
            return self.settings.default_activity_level
        return resolve_activity_level(activity_level)

    def calculate(
        self,
        measurement: MeasurementInput,
        activity_level: Optional[Union[ActivityLevel, str]] = None,
    ) -> BodyCompositionResult:
        """
        Calculate body composition, classification, energy and recommendations.

        Classification and recommendations use the clamped body fat before
        rounding and the unrounded BMI; reported numbers are rounded.

        Args:
            measurement: Validated measurement input
            activity_level: Activity level for TDEE (defaults from settings)

        Returns:
            BodyCompositionResult

        Raises:
            MissingMeasurementError: If sex is female and hip is absent
        """
        body_fat = self.calculator.calculate_navy_body_fat(
            sex=measurement.sex,
            height_cm=measurement.height_cm,
            waist_cm=measurement.waist_cm,
            neck_cm=measurement.neck_cm,
            hip_cm=measurement.hip_cm,
        )
        bmi = self.calculator.calculate_bmi(measurement.height_cm, measurement.weight_kg)
        composition = self.calculator.to_body_composition(
            measurement.weight_kg, body_fat, bmi
        )

        classification = classify(body_fat, measurement.sex, measurement.age)
        recommendations = generate_recommendations(
            body_fat, bmi, measurement.sex, measurement.age
        )

        energy = None
        if self.settings.include_energy_expenditure:
            energy = calculate_energy_expenditure(
                weight_kg=measurement.weight_kg,
                height_cm=measurement.height_cm,
                age=measurement.age,
                sex=measurement.sex,
                activity_level=self._activity_level(activity_level),
            )

        logger.debug(
            f"Body composition: bf={composition.body_fat_percentage}% "
            f"bmi={composition.bmi} category={classification.category.value}"
        )

        return BodyCompositionResult(
            body_fat_percentage=composition.body_fat_percentage,
            bmi=composition.bmi,
            fat_mass_kg=composition.fat_mass_kg,
            lean_mass_kg=composition.lean_mass_kg,
            category=classification.category,
            health_status=classification.health_status,
            recommendations=recommendations,
            energy=energy,
        )

    def assess(
        self,
        data: Union[Mapping[str, Any], MeasurementInput],
        activity_level: Optional[Union[ActivityLevel, str]] = None,
    ) -> BodyFatAssessment:
        """
        Validate raw measurements and calculate when they are acceptable.

        Validation problems are returned in the assessment, never raised.

        Args:
            data: Raw measurement record or MeasurementInput
            activity_level: Activity level for TDEE (defaults from settings)

        Returns:
            BodyFatAssessment with either errors or a result
        """
        errors = validate_measurements(data)
        if errors:
            logger.info(f"Rejected measurements: {len(errors)} validation error(s)")
            return BodyFatAssessment(errors=errors)

        if isinstance(data, MeasurementInput):
            measurement = data
        else:
            try:
                measurement = MeasurementInput.model_validate(dict(data))
            except ValidationError as e:
                messages = [_describe_type_error(err) for err in e.errors()]
                logger.info(f"Rejected measurements: {messages}")
                return BodyFatAssessment(errors=messages)

        return BodyFatAssessment(result=self.calculate(measurement, activity_level))

    def build_health_context(
        self,
        measurement: MeasurementInput,
        result: BodyCompositionResult,
        activity_level: Optional[Union[ActivityLevel, str]] = None,
        goals: Optional[Sequence[str]] = None,
        dietary_restrictions: Optional[Sequence[str]] = None,
        medical_history: Optional[Sequence[str]] = None,
    ) -> HealthContext:
        """
        Build the context passed to the AI recommendation service.

        Args:
            measurement: Measurement the result was computed from
            result: Pipeline result
            activity_level: Activity level (defaults to the result's, then settings)
            goals: User goals (defaults to general fitness)
            dietary_restrictions: Dietary restrictions
            medical_history: Medical conditions

        Returns:
            HealthContext
        """
        if activity_level is None and result.energy is not None:
            level = result.energy.activity_level
        else:
            level = self._activity_level(activity_level)

        context: Dict[str, Any] = {
            "age": measurement.age,
            "sex": measurement.sex,
            "height_cm": measurement.height_cm,
            "weight_kg": measurement.weight_kg,
            "body_fat_percentage": result.body_fat_percentage,
            "bmi": result.bmi,
            "category": result.category,
            "health_status": result.health_status,
            "activity_level": level,
            "dietary_restrictions": list(dietary_restrictions or []),
            "medical_history": list(medical_history or []),
            "rule_based_recommendations": list(result.recommendations),
        }
        if goals:
            context["goals"] = list(goals)

        return HealthContext(**context)


def assess_measurements(
    data: Union[Mapping[str, Any], MeasurementInput],
    activity_level: Optional[Union[ActivityLevel, str]] = None,
    settings: Optional[Settings] = None,
) -> BodyFatAssessment:
    """Convenience wrapper around BodyCompositionService.assess."""
    return BodyCompositionService(settings).assess(data, activity_level)
