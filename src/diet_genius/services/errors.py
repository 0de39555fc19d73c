"""Errors raised at the generative-model boundary."""

DIET_PLAN_FAILURE_MESSAGE = (
    "Failed to generate diet plan. The AI model might be busy. Please try again."
)
FOOD_ANALYSIS_FAILURE_MESSAGE = (
    "Failed to analyze the food image. The AI may not have recognized the food. "
    "Please try a clearer image."
)


class AIServiceError(Exception):
    """A generative-model call failed; the message is safe to show to users."""


class SchemaViolationError(AIServiceError):
    """The model replied with JSON that does not match the requested schema."""
