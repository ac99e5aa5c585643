"""FatSecret platform API client."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from nutrition_gateway.adapters.oauth import (
    SignatureRequest,
    generate_nonce,
    normalize_params,
)

FATSECRET_API_URL = "https://platform.fatsecret.com/rest/server.api"


class FatSecretClient(Protocol):
    """Interface for FatSecret API interactions."""

    async def search_foods(self, query: str, max_results: int = 20) -> dict[str, object]:
        """Search foods by free-text expression and return raw API data."""


def _unix_timestamp() -> str:
    return str(int(time.time()))


@dataclass
class HttpxFatSecretClient(FatSecretClient):
    """HTTPX-backed FatSecret client signing requests with OAuth 1.0a."""

    consumer_key: str
    consumer_secret: str
    http_client: httpx.AsyncClient
    base_url: str = FATSECRET_API_URL
    nonce_factory: Callable[[], str] = field(default=generate_nonce)
    clock: Callable[[], str] = field(default=_unix_timestamp)

    @classmethod
    def create(
        cls,
        consumer_key: str,
        consumer_secret: str,
        base_url: str = FATSECRET_API_URL,
    ) -> "HttpxFatSecretClient":
        """Create a FatSecret client with a managed httpx session."""
        return cls(
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    def build_search_url(self, query: str, max_results: int = 20) -> str:
        """Return a fully signed ``foods.search`` URL."""
        params = {
            "format": "json",
            "max_results": str(max_results),
            "method": "foods.search",
            "oauth_consumer_key": self.consumer_key,
            "oauth_nonce": self.nonce_factory(),
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_timestamp": self.clock(),
            "oauth_version": "1.0",
            "search_expression": query,
        }
        signed = SignatureRequest(
            method="GET",
            base_url=self.base_url,
            consumer_secret=self.consumer_secret,
            params=params,
        ).signed_params()
        return f"{self.base_url}?{normalize_params(signed)}"

    async def search_foods(self, query: str, max_results: int = 20) -> dict[str, object]:
        """Search foods via ``foods.search``.

        FatSecret reports most failures as an ``error`` object in the body, so
        the HTTP status is only checked when no such object is present.
        """
        url = self.build_search_url(query, max_results)
        response = await self.http_client.get(url)
        try:
            payload = response.json()
        except ValueError:
            response.raise_for_status()
            raise
        if not isinstance(payload, dict) or "error" not in payload:
            response.raise_for_status()
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
