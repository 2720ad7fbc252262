"""Nourish, the food-sharing assistant backed by a chat completion model."""

from dataclasses import dataclass
from typing import Protocol

NOURISH_PROMPT = (
    "You are Nourish, ShareFoods' AI assistant. You help users with food "
    "sharing, reducing food waste, storing food safely and finding recipes "
    "for surplus ingredients. Keep answers short, friendly and practical."
)


class AssistantClient(Protocol):
    """Interface for a chat completion backend."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the assistant's reply text."""


@dataclass
class AssistantService:
    """Service that builds prompts for the assistant features."""

    client: AssistantClient
    model: str

    async def chat(self, message: str, context: str = "") -> str:
        """Answer a free-form question."""
        if not message.strip():
            raise ValueError("message must not be empty")
        system = NOURISH_PROMPT
        if context:
            system = f"{system}\nContext: {context}"
        return await self._ask(system, message, temperature=0.7, max_tokens=1000)

    async def recipe_suggestions(self, ingredients: list[str]) -> str:
        """Suggest recipes that use up the given ingredients."""
        cleaned = [item.strip() for item in ingredients if item.strip()]
        if not cleaned:
            raise ValueError("at least one ingredient is required")
        system = (
            "You are a culinary expert. Suggest recipes using these ingredients: "
            f"{', '.join(cleaned)}. Include prep time and difficulty."
        )
        return await self._ask(
            system, "Suggest 3 recipes.", temperature=0.8, max_tokens=1500
        )

    async def storage_tips(self, food: str) -> str:
        """Explain how to keep a food fresh for longer."""
        name = _require_food(food)
        system = (
            "You are a food preservation expert. Provide storage tips and best "
            f"practices for: {name}."
        )
        return await self._ask(
            system,
            f"How should I store {name} to keep it fresh longer?",
            temperature=0.7,
            max_tokens=1000,
        )

    async def food_pairings(self, food: str) -> str:
        """Suggest foods that pair well with the given one."""
        name = _require_food(food)
        system = (
            "You are a food pairing expert. Suggest complementary foods and "
            f"ingredients that pair well with: {name}."
        )
        return await self._ask(
            system, "Suggest pairings.", temperature=0.7, max_tokens=800
        )

    async def environmental_impact(
        self, food_type: str, quantity: float, unit: str
    ) -> str:
        """Describe the environmental benefit of saving an amount of food."""
        name = _require_food(food_type)
        if quantity < 0:
            raise ValueError("quantity must be non-negative")
        system = (
            "You are an environmental impact expert. Calculate the environmental "
            "impact of food waste prevention."
        )
        return await self._ask(
            system,
            f"Calculate the environmental impact of saving {quantity} {unit} of "
            f"{name}.",
            temperature=0.5,
            max_tokens=800,
        )

    async def _ask(
        self, system: str, user: str, *, temperature: float, max_tokens: int
    ) -> str:
        return await self.client.complete(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )


def _require_food(food: str) -> str:
    name = food.strip()
    if not name:
        raise ValueError("food must not be empty")
    return name
