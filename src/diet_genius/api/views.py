"""View models with the display strings shown by the web client."""

from collections.abc import Mapping
from enum import StrEnum

from diet_genius.domain.analysis import AnalysisHistoryItem, FoodAnalysis
from diet_genius.domain.diet import DietPlan, Meal
from diet_genius.domain.profile import (
    ACTIVITY_LEVEL_LABELS,
    DEFAULT_PROFILE,
    GENDER_LABELS,
    GOAL_LABELS,
)
from diet_genius.services.diet_planner import PlannerState, PlannerStatus

DISCLAIMER = (
    "Powered by AI. Always consult with a healthcare professional for medical advice."
)
PLANNER_EMPTY_MESSAGE = (
    "Your personalized diet plan will appear here once you fill out your details."
)
PLANNER_LOADING_MESSAGE = (
    "Generating your personalized plan... This might take a moment."
)
HISTORY_EMPTY_MESSAGE = (
    "Upload a photo of your meal to begin. The AI will analyze it for you!"
)

GOOD_HEALTH_SCORE = 7
FAIR_HEALTH_SCORE = 4


def format_number(value: float) -> str:
    """Render whole numbers without a trailing .0 and others to one decimal."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def grams(value: float) -> str:
    return f"{format_number(value)}g"


def kcal(value: float) -> str:
    return f"{format_number(value)} kcal"


def health_rating(score: float) -> str:
    """Bucket a 1-10 health score into the colour band used by the client."""
    if score > GOOD_HEALTH_SCORE:
        return "good"
    if score > FAIR_HEALTH_SCORE:
        return "fair"
    return "poor"


def render_features() -> dict[str, object]:
    return {
        "title": "Diet Genius",
        "tabs": [
            {"id": "diet-planner", "label": "Diet Planner"},
            {"id": "food-analyzer", "label": "Food Analyzer"},
        ],
        "disclaimer": DISCLAIMER,
    }


def render_profile_form() -> dict[str, object]:
    """Return the profile form defaults and the labelled select options."""
    return {
        "defaults": DEFAULT_PROFILE.model_dump(mode="json", by_alias=True),
        "options": {
            "gender": _options(GENDER_LABELS),
            "activityLevel": _options(ACTIVITY_LEVEL_LABELS),
            "goal": _options(GOAL_LABELS),
        },
    }


def render_planner_state(state: PlannerState) -> dict[str, object]:
    """Render the single visible state of the diet planner."""
    view: dict[str, object] = {
        "status": str(state.status),
        "message": None,
        "error": state.error,
        "plan": None,
    }
    if state.status == PlannerStatus.IDLE:
        view["message"] = PLANNER_EMPTY_MESSAGE
    elif state.status == PlannerStatus.LOADING:
        view["message"] = PLANNER_LOADING_MESSAGE
    elif state.plan is not None:
        view["plan"] = render_diet_plan(state.plan)
    return view


def render_diet_plan(plan: DietPlan) -> dict[str, object]:
    return {
        "dailyCalories": kcal(plan.daily_calories),
        "macros": [
            {"label": "Protein", "value": grams(plan.macros.protein)},
            {"label": "Carbs", "value": grams(plan.macros.carbs)},
            {"label": "Fats", "value": grams(plan.macros.fats)},
        ],
        "meals": [_render_meal(meal) for meal in plan.meal_plan],
    }


def _render_meal(meal: Meal) -> dict[str, str]:
    return {
        "mealType": meal.meal_type,
        "description": meal.description,
        "calories": format_number(meal.calories),
        "protein": grams(meal.protein),
        "carbs": grams(meal.carbs),
        "fats": grams(meal.fats),
    }


def render_analysis(analysis: FoodAnalysis) -> dict[str, str]:
    return {
        "foodName": analysis.food_name,
        "description": analysis.description,
        "calories": kcal(analysis.calories),
        "protein": grams(analysis.protein),
        "carbs": grams(analysis.carbs),
        "fats": grams(analysis.fats),
        "healthScore": f"Health Score: {format_number(analysis.health_score)} / 10",
        "healthRating": health_rating(analysis.health_score),
    }


def render_history_item(item: AnalysisHistoryItem) -> dict[str, object]:
    return {
        "id": item.id,
        "createdAt": item.created_at.isoformat(),
        "imagePreview": item.image_preview,
        "status": item.status,
        "analysis": render_analysis(item.analysis) if item.analysis else None,
        "error": item.error,
    }


def render_history(items: list[AnalysisHistoryItem]) -> dict[str, object]:
    """Render the analyzer history; items are expected newest first."""
    return {
        "items": [render_history_item(item) for item in items],
        "message": None if items else HISTORY_EMPTY_MESSAGE,
    }


def _options(labels: Mapping[StrEnum, str]) -> list[dict[str, str]]:
    return [{"value": str(value), "label": label} for value, label in labels.items()]
