"""Chat completions client for OpenAI-compatible endpoints such as DeepSeek."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from share_foods.services.assistant import AssistantClient


@dataclass
class OpenAIAssistantClient(AssistantClient):
    """Assistant client backed by the OpenAI chat completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "OpenAIAssistantClient":
        """Create a client pointed at an OpenAI-compatible base URL."""
        return cls(client=AsyncOpenAI(api_key=api_key, base_url=base_url))

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the first choice's message content."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise RuntimeError("Assistant returned an empty response")
        return content

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
