"""
Domain exceptions.

Contract violations raised by the calculators. User-correctable input
problems are never raised; the validator returns them as messages.
"""

from typing import Optional


class BodyCompositionError(ValueError):
    """Base exception for calculator contract violations."""

    pass


class MissingMeasurementError(BodyCompositionError):
    """
    A measurement the formula needs was not supplied.

    Raised when:
    - sex is female and hip_cm is absent

    Example:
        >>> raise MissingMeasurementError("hip_cm", "Hip measurement is required for females")
    """

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Missing required measurement: {field}")


class InvalidMeasurementError(BodyCompositionError):
    """
    Measurements are present but produce an undefined formula result.

    Raised when the Navy formula logarithm argument is not positive
    (e.g. waist <= neck for males).
    """

    pass
