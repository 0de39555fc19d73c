"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from diet_genius.adapters.gemini_structured_client import GeminiStructuredClient
from diet_genius.adapters.openai_structured_client import OpenAIStructuredClient
from diet_genius.config import Settings
from diet_genius.services.diet_planner import DietPlanner
from diet_genius.services.food_analyzer import FoodAnalyzer
from diet_genius.services.generation import NutritionAIService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ai_service: NutritionAIService
    diet_planner: DietPlanner
    food_analyzer: FoodAnalyzer
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises ``pydantic.ValidationError`` when the API key is not configured.
    """
    resolved_settings = settings or Settings()
    client: GeminiStructuredClient | OpenAIStructuredClient
    if resolved_settings.ai_provider == "openai":
        client = OpenAIStructuredClient.create(
            api_key=resolved_settings.api_key,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        )
    else:
        client = GeminiStructuredClient.create(
            api_key=resolved_settings.api_key,
            model=resolved_settings.gemini_model,
        )
    ai_service = NutritionAIService(client)

    async def close_resources() -> None:
        await client.close()

    return AppContainer(
        settings=resolved_settings,
        ai_service=ai_service,
        diet_planner=DietPlanner(ai_service),
        food_analyzer=FoodAnalyzer(ai_service),
        close_resources=close_resources,
    )
