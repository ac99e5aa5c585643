"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition values parsed from a FatSecret food description."""

    serving_size: str = "100"
    serving_unit: str = "g"
    calories: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    protein: float = 0.0


@dataclass(frozen=True)
class FoodRecord:
    """A single FatSecret search hit with parsed nutrition."""

    id: str | None
    name: str | None
    brand: str | None
    description: str | None
    calories_per_serving: float
    protein_grams: float
    carb_grams: float
    fat_grams: float
    serving_size_value: str
    serving_size_unit: str
