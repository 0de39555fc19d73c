"""Diet plan models returned by the generative model."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr
from pydantic.alias_generators import to_camel

# Model replies must carry real JSON numbers; "450" is a schema violation.
Amount = Annotated[StrictFloat, Field(ge=0)]


class ModelReply(BaseModel):
    """Base for JSON objects produced by the generative model."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Macros(ModelReply):
    """Daily macronutrient goals in grams."""

    protein: Amount
    carbs: Amount
    fats: Amount


class Meal(ModelReply):
    """Single meal in a diet plan."""

    meal_type: StrictStr
    description: StrictStr
    calories: Amount
    protein: Amount
    carbs: Amount
    fats: Amount


class DietPlan(ModelReply):
    """One-day diet plan with totals and a non-empty list of meals."""

    daily_calories: StrictFloat
    macros: Macros
    meal_plan: list[Meal] = Field(min_length=1)
