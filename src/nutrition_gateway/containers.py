"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_gateway.adapters.fatsecret_client import HttpxFatSecretClient
from nutrition_gateway.adapters.openai_chat_client import OpenAIChatClient
from nutrition_gateway.config import Settings
from nutrition_gateway.services.guidance import GuidanceService
from nutrition_gateway.services.nutrition import NutritionSearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionSearchService
    guidance_service: GuidanceService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Clients are only created for services whose credentials are present.
    """
    resolved_settings = settings or Settings()

    fatsecret_client: HttpxFatSecretClient | None = None
    if resolved_settings.fatsecret_configured:
        fatsecret_client = HttpxFatSecretClient.create(
            consumer_key=resolved_settings.fatsecret_consumer_key or "",
            consumer_secret=resolved_settings.fatsecret_consumer_secret or "",
            base_url=resolved_settings.fatsecret_base_url,
        )
    openai_client: OpenAIChatClient | None = None
    if resolved_settings.openai_configured:
        openai_client = OpenAIChatClient.create(resolved_settings.openai_api_key or "")

    nutrition_service = NutritionSearchService(
        client=fatsecret_client,
        max_results=resolved_settings.fatsecret_max_results,
    )
    guidance_service = GuidanceService(
        client=openai_client,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
        max_tokens=resolved_settings.openai_max_tokens,
    )

    async def close_resources() -> None:
        if fatsecret_client is not None:
            await fatsecret_client.close()
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        guidance_service=guidance_service,
        close_resources=close_resources,
    )
