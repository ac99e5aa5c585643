"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import pytest

from nutrition_gateway.adapters.fatsecret_client import (
    FatSecretClient,
    HttpxFatSecretClient,
)
from nutrition_gateway.config import Settings
from nutrition_gateway.containers import AppContainer
from nutrition_gateway.services.guidance import CompletionClient, GuidanceService
from nutrition_gateway.services.nutrition import NutritionSearchService

CHICKEN_DESCRIPTION = (
    "Per 100g - Calories: 165kcal | Fat: 3.6g | Carbs: 0g | Protein: 31g"
)
RICE_DESCRIPTION = (
    "Per 1 cup - Calories: 205.4kcal | Fat: 0.44g | Carbs: 44.51g | Protein: 4.25g"
)


def two_food_payload() -> dict[str, object]:
    return {
        "foods": {
            "food": [
                {
                    "food_id": "1641",
                    "food_name": "Chicken Breast",
                    "brand_name": "Kirkland",
                    "food_description": CHICKEN_DESCRIPTION,
                    "food_type": "Brand",
                },
                {
                    "food_id": "4501",
                    "food_name": "White Rice",
                    "food_description": RICE_DESCRIPTION,
                    "food_type": "Generic",
                },
            ],
            "max_results": "20",
            "total_results": "2",
        }
    }


def mock_fatsecret_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> HttpxFatSecretClient:
    """Real FatSecret client wired to an in-process transport."""
    return HttpxFatSecretClient(
        consumer_key="consumer-key",
        consumer_secret="consumer-secret",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        nonce_factory=lambda: "abcdefghijklmnopqrstuvwxyz",
        clock=lambda: "1700000000",
    )


@dataclass
class FakeFatSecretClient(FatSecretClient):
    """Fake FatSecret client that records queries."""

    payload: dict[str, object] = field(default_factory=two_food_payload)
    queries: list[tuple[str, int]] = field(default_factory=list)

    async def search_foods(self, query: str, max_results: int = 20) -> dict[str, object]:
        self.queries.append((query, max_results))
        return self.payload


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client returning a fixed reply."""

    reply: str = "  Great choice, high in protein.  "
    prompts: list[str] = field(default_factory=list)
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        self.prompts.append(prompt)
        self.calls.append(
            {"model": model, "temperature": temperature, "max_tokens": max_tokens}
        )
        return self.reply


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fatsecret_consumer_key="consumer-key",
        fatsecret_consumer_secret="consumer-secret",
        openai_api_key="openai-key",
    )


@pytest.fixture
def fatsecret_client() -> FakeFatSecretClient:
    return FakeFatSecretClient()


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def container(
    settings: Settings,
    fatsecret_client: FakeFatSecretClient,
    completion_client: FakeCompletionClient,
) -> AppContainer:
    nutrition_service = NutritionSearchService(
        client=fatsecret_client,
        max_results=settings.fatsecret_max_results,
    )
    guidance_service = GuidanceService(
        client=completion_client,
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        max_tokens=settings.openai_max_tokens,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=nutrition_service,
        guidance_service=guidance_service,
        close_resources=close_resources,
    )


@pytest.fixture
def unconfigured_container(settings: Settings) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=NutritionSearchService(client=None),
        guidance_service=GuidanceService(client=None),
        close_resources=close_resources,
    )
