"""OpenAI Chat Completions client for guidance prompts."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from nutrition_gateway.services.guidance import CompletionClient


@dataclass
class OpenAIChatClient(CompletionClient):
    """Completion client backed by the OpenAI Chat Completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIChatClient":
        """Create an OpenAI chat client with SDK retries disabled."""
        return cls(client=AsyncOpenAI(api_key=api_key, max_retries=0))

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Send a single user message and return the first choice's text."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
