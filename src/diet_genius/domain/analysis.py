"""Food analysis models and the analyzer history record."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import StrictFloat, StrictStr

from diet_genius.domain.diet import Amount, ModelReply


class FoodAnalysis(ModelReply):
    """Nutrition estimate for the food in one image."""

    food_name: StrictStr
    description: StrictStr
    calories: Amount
    protein: Amount
    carbs: Amount
    fats: Amount
    health_score: StrictFloat


@dataclass(frozen=True)
class ImagePayload:
    """Raw image bytes with their declared media type."""

    data: bytes
    mime_type: str


@dataclass
class AnalysisHistoryItem:
    """One image submission and its eventual analysis or failure."""

    id: str
    image_preview: str
    created_at: datetime
    analysis: FoodAnalysis | None = None
    error: str | None = None

    @property
    def status(self) -> str:
        if self.analysis is not None:
            return "analyzed"
        if self.error is not None:
            return "failed"
        return "pending"
