"""
Rule-based recommendation generator.

Each rule is a (predicate, messages) pair. Rules are evaluated in order and
every matching rule appends its messages, so several can fire for one input.
General wellness guidance is always appended last.
"""

from typing import Callable, List, NamedTuple, Tuple, Union

from bodycomp.domain.enums import Sex


class RecommendationRule(NamedTuple):
    name: str
    predicate: Callable[[float, float, Sex, int], bool]
    messages: Tuple[str, ...]


def _is_underweight(body_fat: float, bmi: float, sex: Sex, age: int) -> bool:
    return bmi < 18.5


def _is_overweight(body_fat: float, bmi: float, sex: Sex, age: int) -> bool:
    return bmi > 25


def _has_low_body_fat(body_fat: float, bmi: float, sex: Sex, age: int) -> bool:
    if sex == Sex.MALE:
        return body_fat < 10
    return body_fat < 16


def _has_high_body_fat(body_fat: float, bmi: float, sex: Sex, age: int) -> bool:
    if sex == Sex.MALE:
        return body_fat > 25
    return body_fat > 32


def _is_over_40(body_fat: float, bmi: float, sex: Sex, age: int) -> bool:
    return age > 40


RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule(
        "underweight",
        _is_underweight,
        (
            "Consider increasing caloric intake with nutritious foods",
            "Include strength training to build lean muscle mass",
        ),
    ),
    RecommendationRule(
        "overweight",
        _is_overweight,
        (
            "Focus on creating a moderate caloric deficit through diet and exercise",
            "Incorporate both cardio and strength training exercises",
        ),
    ),
    RecommendationRule(
        "low_body_fat",
        _has_low_body_fat,
        (
            "Your body fat is quite low - ensure adequate nutrition for health",
            "Monitor energy levels and overall health markers",
        ),
    ),
    RecommendationRule(
        "high_body_fat",
        _has_high_body_fat,
        (
            "Consider a structured fat loss program",
            "Increase daily physical activity and improve dietary habits",
            "Consult with a healthcare provider for personalized guidance",
        ),
    ),
    RecommendationRule(
        "over_40",
        _is_over_40,
        (
            "Include resistance training to maintain muscle mass",
            "Focus on flexibility and mobility exercises",
        ),
    ),
)

GENERAL_RECOMMENDATIONS: Tuple[str, ...] = (
    "Stay hydrated and get adequate sleep (7-9 hours)",
    "Include plenty of vegetables, lean proteins, and whole grains in your diet",
    "Aim for at least 150 minutes of moderate exercise per week",
)


def generate_recommendations(
    body_fat_percentage: float, bmi: float, sex: Union[Sex, str], age: int
) -> List[str]:
    """
    Build the recommendation list for a result.

    Args:
        body_fat_percentage: Body fat percentage
        bmi: Body mass index
        sex: "male" or "female"
        age: Age in years

    Returns:
        Messages from every matching rule, in rule order, followed by
        the general wellness messages
    """
    sex = Sex(sex)
    recommendations: List[str] = []

    for rule in RECOMMENDATION_RULES:
        if rule.predicate(body_fat_percentage, bmi, sex, age):
            recommendations.extend(rule.messages)

    recommendations.extend(GENERAL_RECOMMENDATIONS)
    return recommendations
