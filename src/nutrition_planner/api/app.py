"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nutrition_planner.api.planner import router as planner_router
from nutrition_planner.app_logging import configure_logging
from nutrition_planner.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Nutrition planner started: environment=%s diet_plan=%s",
            container.settings.environment,
            "enabled" if container.diet_plan_service else "disabled",
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Nutrition Planner", lifespan=lifespan)
    app.state.container = container

    app.include_router(planner_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
