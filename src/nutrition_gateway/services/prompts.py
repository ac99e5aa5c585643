"""Prompt templates for AI guidance requests."""

from collections.abc import Callable, Mapping

from nutrition_gateway.domain.guidance import PromptContext, PromptType
from nutrition_gateway.errors import ValidationError

INVALID_TYPE_MESSAGE = (
    "Invalid type. Use: guidance, recipe, analysis, meal_estimate, "
    "food_analysis, or macro_recommendation"
)


def build_context(
    nutrition: Mapping[str, object] | None,
    user_goals: Mapping[str, object] | None,
    prompt_type: str | None = PromptType.GUIDANCE,
) -> PromptContext:
    """Validate raw request fields into a prompt context.

    Only an omitted type falls back to guidance; empty or null types are
    rejected like any other unknown value.
    """
    if nutrition is None or user_goals is None:
        raise ValidationError("Provide nutrition and userGoals")
    try:
        resolved = PromptType(prompt_type)
    except ValueError as exc:
        raise ValidationError(INVALID_TYPE_MESSAGE) from exc
    return PromptContext(
        type=resolved, nutrition=dict(nutrition), user_goals=dict(user_goals)
    )


def build_prompt(context: PromptContext) -> str:
    """Render the template selected by ``context.type``."""
    template = _TEMPLATES.get(context.type)
    if template is None:
        raise ValidationError(INVALID_TYPE_MESSAGE)
    return template(context.nutrition, context.user_goals)


def _value(data: Mapping[str, object], key: str, default: object) -> str:
    """Return a display string for ``data[key]`` or the default when falsy."""
    value = data.get(key)
    return _display(value if value else default)


def _display(value: object) -> str:
    """Render JSON values the way callers write them, not as Python reprs."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_display(item) for item in value)
    return str(value)


def _guidance(nutrition: Mapping[str, object], goals: Mapping[str, object]) -> str:
    return f"""You are a certified nutrition expert. Based on this meal and the user's goals, provide brief, actionable nutrition guidance.

Food: {_value(nutrition, "name", "Unknown food")}
Nutrition per serving:
- Calories: {_value(nutrition, "calories", 0)}
- Protein: {_value(nutrition, "protein", 0)}g
- Carbs: {_value(nutrition, "carbohydrates", 0)}g
- Fat: {_value(nutrition, "fat", 0)}g

User Profile:
- Age: {_value(goals, "age", "Unknown")}
- Goal: {_value(goals, "goal", "General health")}
- Activity Level: {_value(goals, "activityLevel", "Unknown")}
- Daily Calorie Target: {_value(goals, "dailyCalories", "Unknown")}
- Protein Target: {_value(goals, "dailyProtein", "Unknown")}g

Provide 2-3 sentences of plain text guidance (no markdown, no bullet points). Be supportive and practical."""


def _recipe(nutrition: Mapping[str, object], goals: Mapping[str, object]) -> str:
    return f"""You are a creative chef. Generate a simple, healthy recipe using common ingredients.

User Goals:
- Calories per serving: {_value(goals, "caloriesPerServing", 400)}
- Protein: {_value(goals, "proteinPerServing", 25)}g
- Carbs: {_value(goals, "carbsPerServing", 40)}g
- Fat: {_value(goals, "fatPerServing", 10)}g

Provide a recipe in plain text (no markdown). Include: ingredient list, prep time, cooking instructions, and nutritional breakdown."""


def _analysis(nutrition: Mapping[str, object], goals: Mapping[str, object]) -> str:
    return f"""Analyze this meal and provide a quick assessment.

Nutrition:
- Calories: {_value(nutrition, "calories", 0)}
- Protein: {_value(nutrition, "protein", 0)}g
- Carbs: {_value(nutrition, "carbohydrates", 0)}g
- Fat: {_value(nutrition, "fat", 0)}g

User's daily goal: {_value(goals, "dailyCalories", "Unknown")} calories, {_value(goals, "dailyProtein", "Unknown")}g protein

Provide 2-3 sentences of plain text analysis. Be encouraging and practical (no markdown)."""


def _meal_estimate(
    nutrition: Mapping[str, object], goals: Mapping[str, object]
) -> str:
    return f"""You are a nutrition expert with access to a comprehensive food database. The user ate this meal:

"{_value(nutrition, "description", "Unknown meal")}"

Based on typical serving sizes and your nutrition knowledge, estimate the total nutrition for this ENTIRE meal as described. Consider:
1. Typical portion sizes people eat
2. All foods mentioned (even if vague like "a sandwich" - estimate what's in it)
3. Cooking methods implied
4. Condiments and extras typically included

Return ONLY valid JSON (no markdown, no code blocks):
{{
  "description": "brief summary of the meal",
  "totalCalories": total_calories_for_entire_meal,
  "totalProtein": total_protein_grams,
  "totalCarbs": total_carbs_grams,
  "totalFat": total_fat_grams,
  "servings": 1
}}

The nutrition values should be for the ENTIRE meal as described, not per serving."""


def _food_analysis(
    nutrition: Mapping[str, object], goals: Mapping[str, object]
) -> str:
    return f"""You are a practical, realistic nutrition coach. Analyze this food for the user and provide personalized guidance.

Food:
- Name: {_value(nutrition, "name", "Unknown")}
- Brand: {_value(nutrition, "brand", "Unknown")}
- Serving: {_value(nutrition, "servingSize", "Unknown")}
- Calories: {_value(nutrition, "calories", "Unknown")}
- Protein: {_value(nutrition, "protein", "Unknown")}g
- Carbs: {_value(nutrition, "carbohydrates", "Unknown")}g
- Fat: {_value(nutrition, "fat", "Unknown")}g
- Sugar: {_value(nutrition, "sugar", "Unknown")}g
- Fiber: {_value(nutrition, "fiber", "Unknown")}g

User Profile:
- Age: {_value(goals, "age", "Unknown")}
- Goal: {_value(goals, "goal", "General health")}
- Daily Calories: {_value(goals, "dailyCalories", "Unknown")}
- Daily Protein: {_value(goals, "dailyProtein", "Unknown")}g

Today's Intake:
- Calories: {_value(goals, "todayCalories", 0)}
- Protein: {_value(goals, "todayProtein", 0)}g

Respond with this exact JSON structure:
{{
  "alignment": "supports" or "neutral" or "works_against",
  "summary": "Brief 1-sentence assessment",
  "details": ["Specific observations about this food relative to user's goals"],
  "alternatives": ["If not ideal, suggest 2-3 healthier alternatives"],
  "incorporationTips": ["If user wants to eat this, how to incorporate it well"],
  "exerciseOffset": "If this is a treat, estimate exercise to offset (e.g., '30 min walk'). Only include if relevant.",
  "allergenWarnings": ["Any allergen or restriction conflicts"]
}}"""


def _health_goals(goals: Mapping[str, object]) -> str:
    raw = goals.get("goals")
    if isinstance(raw, (list, tuple)):
        joined = ", ".join(_display(item) for item in raw)
    else:
        joined = str(raw) if raw else ""
    return joined or "General health"


def _macro_recommendation(
    nutrition: Mapping[str, object], goals: Mapping[str, object]
) -> str:
    return f"""You are an expert nutritionist and fitness coach. Generate personalized daily calorie and macro (protein, carbs, fat) recommendations based on the user's profile and goals.

User Profile:
- Age: {_value(nutrition, "age", "Unknown")}
- Gender: {_value(nutrition, "gender", "Unknown")}
- Weight: {_value(nutrition, "weight_lbs", "Unknown")} lbs
- Height: {_value(nutrition, "height_feet", "Unknown")}'{_value(nutrition, "height_inches", 0)}"
- Activity Level: {_value(nutrition, "activity_level", "Unknown")}

Goals & Preferences:
- Health Goals: {_health_goals(goals)}
- Diet Preference: {_value(goals, "diet_preference", "No preference")}
- Preferred Exercises: {_value(goals, "preferred_exercises", "Not specified")}

Based on this information, calculate realistic, sustainable daily targets. Consider:
1. BMR and TDEE based on the user's physical profile
2. Their specific goals (weight loss should have moderate deficit, muscle gain should have modest surplus)
3. Activity level
4. The macro ratios should support their goals (higher protein for muscle building or weight loss)

Return ONLY valid JSON (no markdown, no code blocks):
{{
  "calories": daily_calorie_target,
  "protein": daily_protein_grams,
  "carbs": daily_carbs_grams,
  "fat": daily_fat_grams
}}

Make sure the macros add up correctly (protein*4 + carbs*4 + fat*9 should roughly equal calories)."""


_TEMPLATES: dict[
    PromptType, Callable[[Mapping[str, object], Mapping[str, object]], str]
] = {
    PromptType.GUIDANCE: _guidance,
    PromptType.RECIPE: _recipe,
    PromptType.ANALYSIS: _analysis,
    PromptType.MEAL_ESTIMATE: _meal_estimate,
    PromptType.FOOD_ANALYSIS: _food_analysis,
    PromptType.MACRO_RECOMMENDATION: _macro_recommendation,
}
