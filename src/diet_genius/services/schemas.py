"""JSON schemas enforced on generative-model replies."""

_NUMBER = "number"
_STRING = "string"


def _field(kind: str, description: str) -> dict[str, object]:
    return {"type": kind, "description": description}


def _object(properties: dict[str, dict[str, object]]) -> dict[str, object]:
    """Build a closed object schema where every property is required."""
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }


MEAL_SCHEMA: dict[str, object] = _object(
    {
        "mealType": _field(_STRING, "e.g., Breakfast, Lunch, Dinner, Snack"),
        "description": _field(_STRING, "Detailed description of the meal."),
        "calories": _field(_NUMBER, "Estimated calories for this meal."),
        "protein": _field(_NUMBER, "Protein in grams for this meal."),
        "carbs": _field(_NUMBER, "Carbohydrates in grams for this meal."),
        "fats": _field(_NUMBER, "Fats in grams for this meal."),
    }
)

DIET_PLAN_SCHEMA: dict[str, object] = _object(
    {
        "dailyCalories": _field(_NUMBER, "Estimated daily caloric intake goal."),
        "macros": _object(
            {
                "protein": _field(_NUMBER, "Daily protein goal in grams."),
                "carbs": _field(_NUMBER, "Daily carbohydrates goal in grams."),
                "fats": _field(_NUMBER, "Daily fats goal in grams."),
            }
        ),
        "mealPlan": {"type": "array", "items": MEAL_SCHEMA},
    }
)

FOOD_ANALYSIS_SCHEMA: dict[str, object] = _object(
    {
        "foodName": _field(
            _STRING, "The name of the food identified in the image."
        ),
        "calories": _field(_NUMBER, "Estimated calories in the food."),
        "protein": _field(_NUMBER, "Estimated protein in grams."),
        "carbs": _field(_NUMBER, "Estimated carbohydrates in grams."),
        "fats": _field(_NUMBER, "Estimated fats in grams."),
        "description": _field(
            _STRING, "A brief description of the food and its nutritional value."
        ),
        "healthScore": _field(
            _NUMBER, "A score from 1 to 10 on how healthy this food is."
        ),
    }
)
