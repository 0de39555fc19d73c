"""Schema-constrained diet-plan and food-analysis generation."""

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from diet_genius.domain.analysis import FoodAnalysis, ImagePayload
from diet_genius.domain.diet import DietPlan
from diet_genius.domain.profile import UserProfile
from diet_genius.services.errors import (
    DIET_PLAN_FAILURE_MESSAGE,
    FOOD_ANALYSIS_FAILURE_MESSAGE,
    AIServiceError,
    SchemaViolationError,
)
from diet_genius.services.prompts import FOOD_ANALYSIS_PROMPT, build_diet_plan_prompt
from diet_genius.services.schemas import DIET_PLAN_SCHEMA, FOOD_ANALYSIS_SCHEMA

logger = logging.getLogger(__name__)

ReplyT = TypeVar("ReplyT", bound=BaseModel)


class StructuredGenerationClient(Protocol):
    """Interface for generative models that reply with schema-shaped JSON."""

    async def generate_json(
        self,
        *,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
        image: ImagePayload | None = None,
    ) -> dict[str, object]:
        """Return the model reply parsed as JSON."""


@dataclass
class NutritionAIService:
    """Service that pairs prompts with schemas and validates the replies.

    Every call is issued once: there is no retry, timeout or caching. Any
    failure is logged and surfaced as an ``AIServiceError`` whose message is
    fixed per operation, so callers can show it as-is.
    """

    client: StructuredGenerationClient

    async def generate_diet_plan(self, profile: UserProfile) -> DietPlan:
        """Generate a one-day diet plan for the profile."""
        return await self._generate(
            DietPlan,
            prompt=build_diet_plan_prompt(profile),
            schema=DIET_PLAN_SCHEMA,
            schema_name="diet_plan",
            image=None,
            failure_message=DIET_PLAN_FAILURE_MESSAGE,
        )

    async def analyze_food_image(self, image: ImagePayload) -> FoodAnalysis:
        """Estimate the nutrition of the food shown in the image."""
        return await self._generate(
            FoodAnalysis,
            prompt=FOOD_ANALYSIS_PROMPT,
            schema=FOOD_ANALYSIS_SCHEMA,
            schema_name="food_analysis",
            image=image,
            failure_message=FOOD_ANALYSIS_FAILURE_MESSAGE,
        )

    async def _generate(  # noqa: PLR0913
        self,
        reply_model: type[ReplyT],
        *,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
        image: ImagePayload | None,
        failure_message: str,
    ) -> ReplyT:
        try:
            raw = await self.client.generate_json(
                prompt=prompt,
                schema=schema,
                schema_name=schema_name,
                image=image,
            )
        except Exception as exc:
            logger.exception(
                "Generative model call failed", extra={"schema_name": schema_name}
            )
            raise AIServiceError(failure_message) from exc

        try:
            return reply_model.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "Model reply violates %s schema: %s",
                schema_name,
                exc.errors(include_url=False),
            )
            raise SchemaViolationError(failure_message) from exc
