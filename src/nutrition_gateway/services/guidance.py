"""AI guidance service using LLM chat completions."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import openai

from nutrition_gateway.domain.guidance import GuidanceResult, PromptType
from nutrition_gateway.errors import ConfigurationError, UpstreamError
from nutrition_gateway.services.prompts import build_context, build_prompt

_logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Interface for LLM chat completions."""

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the completion text for a single user prompt."""


@dataclass
class GuidanceService:
    """Service that builds prompts and relays completion text."""

    client: CompletionClient | None
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_tokens: int = 500

    async def generate(
        self,
        *,
        nutrition: Mapping[str, object] | None,
        user_goals: Mapping[str, object] | None,
        prompt_type: str | None = PromptType.GUIDANCE,
    ) -> GuidanceResult:
        """Return completion text for the selected prompt template."""
        if self.client is None:
            raise ConfigurationError()
        context = build_context(nutrition, user_goals, prompt_type)
        prompt = build_prompt(context)

        try:
            message = await self.client.complete(
                model=self.model,
                prompt=prompt,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.APIError as exc:
            _logger.warning("OpenAI request failed: type=%s error=%s", context.type, exc)
            raise UpstreamError(f"OpenAI error: {_error_message(exc)}") from exc

        if not message or not message.strip():
            raise UpstreamError("No response from OpenAI")
        _logger.info("Guidance generated: type=%s", context.type)
        return GuidanceResult(message=message.strip(), type=context.type)


def _error_message(exc: openai.APIError) -> str:
    """Prefer the API-provided error message over the exception repr."""
    body = exc.body
    if isinstance(body, dict):
        message = body.get("message")
        if not message and isinstance(body.get("error"), dict):
            message = body["error"].get("message")
        if message:
            return str(message)
    return exc.message or "Unknown error"
