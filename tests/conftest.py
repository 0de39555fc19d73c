"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from diet_genius.config import Settings
from diet_genius.containers import AppContainer
from diet_genius.domain.analysis import ImagePayload
from diet_genius.domain.profile import ActivityLevel, Gender, Goal, UserProfile
from diet_genius.services.diet_planner import DietPlanner
from diet_genius.services.food_analyzer import FoodAnalyzer
from diet_genius.services.generation import (
    NutritionAIService,
    StructuredGenerationClient,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake-png-body"


def diet_plan_payload() -> dict[str, object]:
    return {
        "dailyCalories": 2200,
        "macros": {"protein": 150, "carbs": 220, "fats": 70},
        "mealPlan": [
            {
                "mealType": "Breakfast",
                "description": "Oatmeal with berries and Greek yogurt",
                "calories": 500,
                "protein": 30,
                "carbs": 65,
                "fats": 12,
            },
            {
                "mealType": "Lunch",
                "description": "Grilled chicken salad with quinoa",
                "calories": 650,
                "protein": 50,
                "carbs": 60,
                "fats": 20,
            },
            {
                "mealType": "Dinner",
                "description": "Baked salmon, brown rice and broccoli",
                "calories": 750,
                "protein": 55,
                "carbs": 70,
                "fats": 28,
            },
            {
                "mealType": "Snack",
                "description": "Apple with almond butter",
                "calories": 300,
                "protein": 15,
                "carbs": 25,
                "fats": 10,
            },
        ],
    }


def food_analysis_payload() -> dict[str, object]:
    return {
        "foodName": "Caesar salad",
        "calories": 450,
        "protein": 20,
        "carbs": 15,
        "fats": 35.5,
        "description": "Romaine lettuce with dressing, croutons and parmesan.",
        "healthScore": 6,
    }


@dataclass
class FakeStructuredClient(StructuredGenerationClient):
    """Fake structured client returning payloads keyed by schema name."""

    payloads: dict[str, object] = field(
        default_factory=lambda: {
            "diet_plan": diet_plan_payload(),
            "food_analysis": food_analysis_payload(),
        }
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate_json(
        self,
        *,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
        image: ImagePayload | None = None,
    ) -> dict[str, object]:
        self.calls.append(
            {
                "prompt": prompt,
                "schema": schema,
                "schema_name": schema_name,
                "image": image,
            }
        )
        if self.error is not None:
            raise self.error
        return self.payloads[schema_name]


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", environment="test")


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        height="175",
        weight="70",
        age="30",
        gender=Gender.MALE,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.MAINTAIN,
    )


@pytest.fixture
def image() -> ImagePayload:
    return ImagePayload(data=PNG_BYTES, mime_type="image/png")


@pytest.fixture
def fake_client() -> FakeStructuredClient:
    return FakeStructuredClient()


@pytest.fixture
def ai_service(fake_client: FakeStructuredClient) -> NutritionAIService:
    return NutritionAIService(fake_client)


@pytest.fixture
def container(settings: Settings, ai_service: NutritionAIService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        ai_service=ai_service,
        diet_planner=DietPlanner(ai_service),
        food_analyzer=FoodAnalyzer(ai_service),
        close_resources=close_resources,
    )
