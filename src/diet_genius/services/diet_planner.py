"""Diet planner state machine with a latest-request-wins policy."""

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from diet_genius.domain.diet import DietPlan
from diet_genius.domain.profile import UserProfile
from diet_genius.services.errors import AIServiceError
from diet_genius.services.generation import NutritionAIService

logger = logging.getLogger(__name__)


class PlannerStatus(StrEnum):
    """Display states of the diet planner."""

    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class PlannerState:
    """Snapshot of what the diet planner should display."""

    status: PlannerStatus
    sequence: int = 0
    plan: DietPlan | None = None
    error: str | None = None


@dataclass
class DietPlanner:
    """Runs diet-plan submissions and keeps only the latest one's outcome.

    Each submission takes the next sequence number. A reply for a sequence
    number that has since been superseded is discarded, so a slow first
    request can never overwrite the result of a newer one.
    """

    ai_service: NutritionAIService
    state: PlannerState = field(
        default_factory=lambda: PlannerState(PlannerStatus.IDLE)
    )
    _last_sequence: int = field(default=0, init=False)

    async def submit(self, profile: UserProfile) -> PlannerState:
        """Generate a plan for the profile and return the resulting state."""
        self._last_sequence += 1
        sequence = self._last_sequence
        self.state = PlannerState(PlannerStatus.LOADING, sequence=sequence)

        try:
            plan = await self.ai_service.generate_diet_plan(profile)
        except AIServiceError as exc:
            self._settle(PlannerState(PlannerStatus.ERROR, sequence, error=str(exc)))
        else:
            self._settle(PlannerState(PlannerStatus.RESULT, sequence, plan=plan))
        return self.state

    def _settle(self, outcome: PlannerState) -> None:
        if outcome.sequence != self._last_sequence:
            logger.info(
                "Dropping stale diet plan outcome",
                extra={
                    "sequence": outcome.sequence,
                    "latest_sequence": self._last_sequence,
                },
            )
            return
        self.state = outcome
