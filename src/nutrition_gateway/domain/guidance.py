"""Models for AI guidance requests and results."""

from dataclasses import dataclass, field
from enum import StrEnum


class PromptType(StrEnum):
    """Recognized prompt templates."""

    GUIDANCE = "guidance"
    RECIPE = "recipe"
    ANALYSIS = "analysis"
    MEAL_ESTIMATE = "meal_estimate"
    FOOD_ANALYSIS = "food_analysis"
    MACRO_RECOMMENDATION = "macro_recommendation"


@dataclass(frozen=True)
class PromptContext:
    """Inputs for a single prompt template."""

    type: PromptType
    nutrition: dict[str, object] = field(default_factory=dict)
    user_goals: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class GuidanceResult:
    """Completion text returned to the caller."""

    message: str
    type: PromptType
