"""Nutrition search service integrating FatSecret."""

import logging
from dataclasses import dataclass

import httpx

from nutrition_gateway.adapters.fatsecret_client import FatSecretClient
from nutrition_gateway.domain.nutrition import FoodRecord
from nutrition_gateway.errors import (
    ConfigurationError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from nutrition_gateway.services.description import parse_nutrition_description

_logger = logging.getLogger(__name__)


@dataclass
class NutritionSearchService:
    """Runs FatSecret searches and shapes the results for API callers."""

    client: FatSecretClient | None
    max_results: int = 20

    async def search(self, query: str) -> list[FoodRecord]:
        """Search FatSecret and return parsed food records in upstream order."""
        if self.client is None:
            raise ConfigurationError()
        try:
            payload = await self.client.search_foods(
                query, max_results=self.max_results
            )
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("FatSecret search failed: query=%s error=%s", query, exc)
            raise UpstreamError(f"FatSecret error: {exc}") from exc

        if not isinstance(payload, dict):
            _logger.warning("FatSecret returned non-object payload: query=%s", query)
            raise UpstreamError("FatSecret error: unexpected response")

        error = payload.get("error")
        if error:
            message = (
                error.get("message") if isinstance(error, dict) else None
            ) or "FatSecret API error"
            _logger.warning("FatSecret returned error: query=%s error=%s", query, message)
            raise UpstreamError(f"FatSecret error: {message}")

        raw_foods = _raw_foods(payload)
        records = [_to_record(food) for food in raw_foods[: self.max_results]]
        _logger.info("FatSecret search: query=%s results=%s", query, len(records))
        return records

    async def lookup(
        self, *, barcode: str | None, search: str | None
    ) -> dict[str, object]:
        """Resolve a lookup request into the search or barcode response shape.

        Barcode lookups run as a plain keyword search on the barcode digits.
        """
        if self.client is None:
            raise ConfigurationError()
        if not barcode and not search:
            raise ValidationError("Provide either barcode or search query")

        query = barcode or search or ""
        records = await self.search(query)
        if not records:
            raise NotFoundError("Food not found")

        if search and not barcode:
            return {"foods": [food_summary(record) for record in records]}
        return barcode_summary(query, records[0])


def food_summary(record: FoodRecord) -> dict[str, object]:
    """Shape a record for search responses."""
    return {
        "food_id": record.id,
        "food_name": record.name or "Unknown",
        "brand_name": record.brand,
        "calories": _round_calories(record.calories_per_serving),
        "protein": _round_grams(record.protein_grams),
        "carbohydrate": _round_grams(record.carb_grams),
        "fat": _round_grams(record.fat_grams),
        "serving_size": record.serving_size_value or "100",
        "serving_unit": record.serving_size_unit or "g",
    }


def barcode_summary(barcode: str, record: FoodRecord) -> dict[str, object]:
    """Shape a record for the flat barcode response."""
    serving_size = record.serving_size_value or "100"
    serving_unit = record.serving_size_unit or "g"
    return {
        "barcode": barcode,
        "name": record.name or "Unknown",
        "brand": record.brand or "FatSecret",
        "calories": _round_calories(record.calories_per_serving),
        "protein": _round_grams(record.protein_grams),
        "carbohydrates": _round_grams(record.carb_grams),
        "fat": _round_grams(record.fat_grams),
        "servingSize": f"{serving_size} {serving_unit}",
        "source": "fatsecret",
    }


def _raw_foods(payload: dict[str, object]) -> list[dict[str, object]]:
    """Return the hit list; FatSecret collapses a single hit into an object."""
    foods = payload.get("foods")
    if not isinstance(foods, dict):
        return []
    food = foods.get("food")
    if not food:
        return []
    if isinstance(food, list):
        return [item for item in food if isinstance(item, dict)]
    if isinstance(food, dict):
        return [food]
    return []


def _to_record(food: dict[str, object]) -> FoodRecord:
    description = food.get("food_description")
    facts = parse_nutrition_description(
        description if isinstance(description, str) else None
    )
    return FoodRecord(
        id=_optional_str(food.get("food_id")),
        name=_optional_str(food.get("food_name")),
        brand=_optional_str(food.get("brand_name")),
        description=description if isinstance(description, str) else None,
        calories_per_serving=facts.calories,
        protein_grams=facts.protein,
        carb_grams=facts.carbs,
        fat_grams=facts.fat,
        serving_size_value=facts.serving_size,
        serving_size_unit=facts.serving_unit,
    )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _round_calories(value: float) -> int:
    # Half up; parsed values are never negative.
    return int(value + 0.5)


def _round_grams(value: float) -> float:
    return int(value * 10 + 0.5) / 10
