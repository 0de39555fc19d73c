"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import (
    BackgroundTasks,
    FastAPI,
    File,
    HTTPException,
    Request,
    UploadFile,
    status,
)

from diet_genius.api.views import (
    render_features,
    render_history,
    render_history_item,
    render_planner_state,
    render_profile_form,
)
from diet_genius.app_logging import configure_logging
from diet_genius.containers import AppContainer
from diet_genius.domain.profile import UserProfile
from diet_genius.services.food_analyzer import HistoryItemNotFoundError
from diet_genius.services.images import to_image_payload


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting Diet Genius",
            extra={"ai_provider": app.state.container.settings.ai_provider},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Diet Genius", lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/features")
    async def features() -> dict[str, object]:
        """List the available feature tabs."""
        return render_features()

    @app.get("/diet-plan/defaults")
    async def diet_plan_defaults() -> dict[str, object]:
        """Return profile form defaults and select options."""
        return render_profile_form()

    @app.get("/diet-plan")
    async def diet_plan_state(request: Request) -> dict[str, object]:
        """Return what the diet planner currently shows."""
        state_container: AppContainer = request.app.state.container
        return render_planner_state(state_container.diet_planner.state)

    @app.post("/diet-plan")
    async def generate_diet_plan(
        profile: UserProfile, request: Request
    ) -> dict[str, object]:
        """Generate a diet plan; returns the planner state once it settles."""
        state_container: AppContainer = request.app.state.container
        await state_container.diet_planner.submit(profile)
        return render_planner_state(state_container.diet_planner.state)

    @app.get("/food-analysis")
    async def food_analysis_history(request: Request) -> dict[str, object]:
        """Return the analysis history, newest first."""
        state_container: AppContainer = request.app.state.container
        return render_history(state_container.food_analyzer.history.items())

    @app.post("/food-analysis", status_code=status.HTTP_202_ACCEPTED)
    async def submit_food_image(
        request: Request,
        background_tasks: BackgroundTasks,
        image: UploadFile = File(...),
    ) -> dict[str, object]:
        """Record an uploaded food image and analyze it in the background."""
        state_container: AppContainer = request.app.state.container
        content_type = (image.content_type or "").lower()
        if content_type and not (
            content_type.startswith("image/")
            or content_type == "application/octet-stream"
        ):
            raise HTTPException(
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                detail="Please upload an image file.",
            )
        data = await image.read()
        if not data:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="The uploaded image is empty.",
            )
        payload = to_image_payload(data, image.content_type)
        analyzer = state_container.food_analyzer
        item = analyzer.start(payload)
        background_tasks.add_task(analyzer.run, item.id, payload)
        return render_history_item(item)

    @app.get("/food-analysis/{item_id}")
    async def food_analysis_item(item_id: str, request: Request) -> dict[str, object]:
        """Return a single history item."""
        state_container: AppContainer = request.app.state.container
        try:
            item = state_container.food_analyzer.history.get(item_id)
        except HistoryItemNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
        return render_history_item(item)

    return app
