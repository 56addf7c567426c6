from .enums import ActivityLevel, AgeBracket, BodyFatCategory, HealthStatus, Sex
from .errors import (
    BodyCompositionError,
    InvalidMeasurementError,
    MissingMeasurementError,
)
from .measurement import (
    BodyComposition,
    BodyCompositionResult,
    BodyFatAssessment,
    Classification,
    EnergyExpenditure,
    MeasurementInput,
)
from .health_context import HealthContext, format_health_context_for_ai

__all__ = [
    "ActivityLevel",
    "AgeBracket",
    "BodyFatCategory",
    "HealthStatus",
    "Sex",
    "BodyCompositionError",
    "InvalidMeasurementError",
    "MissingMeasurementError",
    "BodyComposition",
    "BodyCompositionResult",
    "BodyFatAssessment",
    "Classification",
    "EnergyExpenditure",
    "MeasurementInput",
    "HealthContext",
    "format_health_context_for_ai",
]
