"""Food image analysis with a newest-first submission history."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid1

from diet_genius.domain.analysis import (
    AnalysisHistoryItem,
    FoodAnalysis,
    ImagePayload,
)
from diet_genius.services.errors import AIServiceError
from diet_genius.services.generation import NutritionAIService
from diet_genius.services.images import to_data_url

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Analysis failed."


class HistoryItemNotFoundError(LookupError):
    """Raised when a history item id is unknown."""


class HistoryItemSettledError(RuntimeError):
    """Raised when a history item already holds an analysis or an error."""


@dataclass
class AnalysisHistory:
    """Append-only record of image submissions, newest first."""

    _items: list[AnalysisHistoryItem] = field(default_factory=list)

    def create(self, image_preview: str) -> AnalysisHistoryItem:
        """Record a new pending submission at the front of the history."""
        item = AnalysisHistoryItem(
            id=str(uuid1()),
            image_preview=image_preview,
            created_at=datetime.now(tz=UTC),
        )
        self._items.insert(0, item)
        return item

    def get(self, item_id: str) -> AnalysisHistoryItem:
        """Return the item with the given id."""
        for item in self._items:
            if item.id == item_id:
                return item
        raise HistoryItemNotFoundError(item_id)

    def items(self) -> list[AnalysisHistoryItem]:
        """Return all items, newest first."""
        return list(self._items)

    def resolve(self, item_id: str, analysis: FoodAnalysis) -> AnalysisHistoryItem:
        """Attach a successful analysis to a pending item."""
        item = self._pending(item_id)
        item.analysis = analysis
        return item

    def fail(self, item_id: str, error: str) -> AnalysisHistoryItem:
        """Attach a failure message to a pending item."""
        item = self._pending(item_id)
        item.error = error
        return item

    def _pending(self, item_id: str) -> AnalysisHistoryItem:
        item = self.get(item_id)
        if item.status != "pending":
            raise HistoryItemSettledError(item_id)
        return item

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class FoodAnalyzer:
    """Tracks food-image submissions and runs each analysis independently.

    Failure causes are logged; history items only carry the user-facing message.
    """

    ai_service: NutritionAIService
    history: AnalysisHistory = field(default_factory=AnalysisHistory)

    def start(self, image: ImagePayload) -> AnalysisHistoryItem:
        """Create the pending history item for a submitted image."""
        return self.history.create(to_data_url(image))

    async def run(self, item_id: str, image: ImagePayload) -> AnalysisHistoryItem:
        """Analyze the image and settle the matching history item."""
        try:
            analysis = await self.ai_service.analyze_food_image(image)
        except AIServiceError as exc:
            return self.history.fail(item_id, str(exc))
        except Exception:
            logger.exception("Food analysis failed", extra={"item_id": item_id})
            return self.history.fail(item_id, GENERIC_FAILURE_MESSAGE)
        return self.history.resolve(item_id, analysis)

    async def submit(self, image: ImagePayload) -> AnalysisHistoryItem:
        """Record and analyze an image in one step."""
        item = self.start(image)
        return await self.run(item.id, image)
