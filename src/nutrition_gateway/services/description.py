"""Parse nutrition values out of FatSecret ``food_description`` strings.

Descriptions look like
``"Per 100g - Calories: 165kcal | Fat: 3.6g | Carbs: 0g | Protein: 31g"``
but field order and separators vary, so each field is searched for on its own.
"""

import re
from dataclasses import replace

from nutrition_gateway.domain.nutrition import NutritionFacts

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"

_SERVING_RE = re.compile(rf"Per\s+{_NUMBER}\s*(\w+)", re.IGNORECASE)
_FIELD_PATTERNS = {
    "calories": re.compile(rf"Calories:\s*{_NUMBER}", re.IGNORECASE),
    "fat": re.compile(rf"Fat:\s*{_NUMBER}", re.IGNORECASE),
    "carbs": re.compile(rf"Carb(?:ohydrate)?s?:\s*{_NUMBER}", re.IGNORECASE),
    "protein": re.compile(rf"Protein:\s*{_NUMBER}", re.IGNORECASE),
}


def parse_nutrition_description(description: str | None) -> NutritionFacts:
    """Extract serving and macro values, falling back to defaults."""
    facts = NutritionFacts()
    if not description:
        return facts

    serving = _SERVING_RE.search(description)
    if serving:
        facts = replace(
            facts, serving_size=serving.group(1), serving_unit=serving.group(2)
        )

    values: dict[str, float] = {}
    for name, pattern in _FIELD_PATTERNS.items():
        match = pattern.search(description)
        if match:
            values[name] = float(match.group(1))
    return replace(facts, **values)
