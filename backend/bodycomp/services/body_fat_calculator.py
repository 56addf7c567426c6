"""
Body fat calculator service.

Implements the U.S. Navy circumference formulas (metric form) and BMI.
All calculations use metric units (cm, kg).

Body fat is silently clamped to [3, 50] percent. Inputs that would produce
a value outside that range (e.g. a data-entry error) are reported at the
boundary, not as an error. Callers must not assume the returned value is
the raw formula output near either end.
"""

import logging
import math
from typing import Optional, Union

from bodycomp.domain.enums import Sex
from bodycomp.domain.errors import InvalidMeasurementError, MissingMeasurementError
from bodycomp.domain.measurement import BodyComposition, MeasurementInput

logger = logging.getLogger(__name__)

BODY_FAT_MIN = 3.0
BODY_FAT_MAX = 50.0


class BodyFatCalculator:
    """Service for calculating body composition from circumference measurements."""

    @staticmethod
    def calculate_bmi(height_cm: float, weight_kg: float) -> float:
        """
        Calculate body mass index.

        Args:
            height_cm: Height in centimeters
            weight_kg: Weight in kilograms

        Returns:
            Unrounded BMI (kg/m²)
        """
        height_m = height_cm / 100
        return weight_kg / (height_m * height_m)

    @staticmethod
    def calculate_navy_body_fat(
        sex: Union[Sex, str],
        height_cm: float,
        waist_cm: float,
        neck_cm: float,
        hip_cm: Optional[float] = None,
    ) -> float:
        """
        Calculate body fat percentage using the U.S. Navy method.

        Args:
            sex: "male" or "female"
            height_cm: Height in centimeters
            waist_cm: Waist circumference in centimeters
            neck_cm: Neck circumference in centimeters
            hip_cm: Hip circumference in centimeters (required for women)

        Returns:
            Body fat percentage clamped to [3, 50], unrounded

        Raises:
            MissingMeasurementError: If sex is female and hip is absent
            InvalidMeasurementError: If the logarithm argument is not positive
        """
        sex = Sex(sex)

        if sex == Sex.MALE:
            # BF% = 495 / (1.0324 - 0.19077×log10(waist - neck) + 0.15456×log10(height)) - 450
            circumference = waist_cm - neck_cm
            if circumference <= 0 or height_cm <= 0:
                raise InvalidMeasurementError(
                    "Waist must be greater than neck circumference"
                )
            density = (
                1.0324
                - 0.19077 * math.log10(circumference)
                + 0.15456 * math.log10(height_cm)
            )
        else:
            if hip_cm is None:
                raise MissingMeasurementError(
                    "hip_cm", "Hip measurement is required for females"
                )
            # BF% = 495 / (1.29579 - 0.35004×log10(waist + hip - neck) + 0.22100×log10(height)) - 450
            circumference = waist_cm + hip_cm - neck_cm
            if circumference <= 0 or height_cm <= 0:
                raise InvalidMeasurementError(
                    "Waist plus hip must be greater than neck circumference"
                )
            density = (
                1.29579
                - 0.35004 * math.log10(circumference)
                + 0.22100 * math.log10(height_cm)
            )

        bfp = 495 / density - 450

        clamped = max(BODY_FAT_MIN, min(BODY_FAT_MAX, bfp))
        if clamped != bfp:
            logger.info(
                f"Navy body fat {bfp:.2f}% outside [{BODY_FAT_MIN}, {BODY_FAT_MAX}], "
                f"clamped to {clamped}"
            )

        return clamped

    @staticmethod
    def calculate_fat_mass(weight_kg: float, body_fat_percentage: float) -> float:
        """
        Calculate fat mass from total weight and body fat percentage.

        Args:
            weight_kg: Total weight in kilograms
            body_fat_percentage: Body fat percentage (0-100)

        Returns:
            Fat mass in kilograms
        """
        if weight_kg <= 0:
            raise ValueError("Weight must be positive")
        if body_fat_percentage < 0 or body_fat_percentage > 100:
            raise ValueError("Body fat percentage must be between 0 and 100")

        return round(weight_kg * (body_fat_percentage / 100.0), 2)

    @staticmethod
    def calculate_lean_mass(weight_kg: float, body_fat_percentage: float) -> float:
        """
        Calculate lean body mass from total weight and body fat percentage.

        Args:
            weight_kg: Total weight in kilograms
            body_fat_percentage: Body fat percentage (0-100)

        Returns:
            Lean body mass in kilograms
        """
        fat_mass = BodyFatCalculator.calculate_fat_mass(weight_kg, body_fat_percentage)
        return round(weight_kg - fat_mass, 2)

    @staticmethod
    def compute_body_composition(measurement: MeasurementInput) -> BodyComposition:
        """
        Compute rounded body fat percentage, BMI and mass split.

        The measurement is expected to have passed validate_measurements.

        Args:
            measurement: Validated measurement input

        Returns:
            BodyComposition with body fat and BMI rounded to one decimal place

        Raises:
            MissingMeasurementError: If sex is female and hip is absent
        """
        body_fat = BodyFatCalculator.calculate_navy_body_fat(
            sex=measurement.sex,
            height_cm=measurement.height_cm,
            waist_cm=measurement.waist_cm,
            neck_cm=measurement.neck_cm,
            hip_cm=measurement.hip_cm,
        )
        bmi = BodyFatCalculator.calculate_bmi(
            measurement.height_cm, measurement.weight_kg
        )
        return BodyFatCalculator.to_body_composition(
            measurement.weight_kg, body_fat, bmi
        )

    @staticmethod
    def to_body_composition(
        weight_kg: float, body_fat: float, bmi: float
    ) -> BodyComposition:
        """Round raw body fat and BMI and derive the fat/lean mass split."""
        body_fat_percentage = round(body_fat, 1)
        return BodyComposition(
            body_fat_percentage=body_fat_percentage,
            bmi=round(bmi, 1),
            fat_mass_kg=BodyFatCalculator.calculate_fat_mass(
                weight_kg, body_fat_percentage
            ),
            lean_mass_kg=BodyFatCalculator.calculate_lean_mass(
                weight_kg, body_fat_percentage
            ),
        )
