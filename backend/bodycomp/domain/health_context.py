"""
Health context handed to the AI recommendation service.

The engine never calls the AI service. It only shapes the numeric
results into the context object and prompt text the caller forwards.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from bodycomp.domain.enums import ActivityLevel, BodyFatCategory, HealthStatus, Sex


class HealthContext(BaseModel):
    """Context for AI-generated recommendations."""

    model_config = ConfigDict(frozen=True)

    age: int
    sex: Sex
    height_cm: float
    weight_kg: float
    body_fat_percentage: Optional[float] = None
    bmi: Optional[float] = None
    category: Optional[BodyFatCategory] = None
    health_status: Optional[HealthStatus] = None
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    goals: List[str] = Field(default_factory=lambda: ["general fitness"])
    dietary_restrictions: List[str] = Field(default_factory=list)
    medical_history: List[str] = Field(default_factory=list)
    rule_based_recommendations: List[str] = Field(default_factory=list)


def format_health_context_for_ai(context: HealthContext) -> str:
    """
    Format a health context as plain text for an AI prompt.

    Args:
        context: HealthContext built from a pipeline result

    Returns:
        Multi-line string with profile, results and existing guidance
    """
    lines = []

    lines.append("User Profile:")
    lines.append(f"  Sex: {context.sex.value}")
    lines.append(f"  Age: {context.age} years")
    lines.append(f"  Height: {context.height_cm} cm")
    lines.append(f"  Weight: {context.weight_kg} kg")
    lines.append(f"  Activity level: {context.activity_level.value}")
    lines.append("")

    lines.append("Body Composition:")
    if context.body_fat_percentage is not None:
        lines.append(f"  Body fat: {context.body_fat_percentage}%")
    if context.bmi is not None:
        lines.append(f"  BMI: {context.bmi}")
    if context.category is not None:
        lines.append(f"  Category: {context.category.value}")
    if context.health_status is not None:
        lines.append(f"  Health status: {context.health_status.value}")
    lines.append("")

    lines.append(f"Goals: {', '.join(context.goals) if context.goals else 'none'}")
    lines.append(
        "Dietary restrictions: "
        f"{', '.join(context.dietary_restrictions) if context.dietary_restrictions else 'none'}"
    )
    lines.append(
        "Medical history: "
        f"{', '.join(context.medical_history) if context.medical_history else 'none'}"
    )

    # The AI output augments these, it does not replace them
    if context.rule_based_recommendations:
        lines.append("")
        lines.append("Existing recommendations:")
        for rec in context.rule_based_recommendations:
            lines.append(f"  - {rec}")

    return "\n".join(lines)
