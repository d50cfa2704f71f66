"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_planner.adapters.openai_text_client import OpenAITextClient
from nutrition_planner.adapters.profile_store_client import HttpxProfileStoreClient
from nutrition_planner.config import Settings
from nutrition_planner.services.diet_plan import DietPlanService
from nutrition_planner.services.planner import PlannerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    planner_service: PlannerService
    diet_plan_service: DietPlanService | None
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    profile_store = HttpxProfileStoreClient.create(
        base_url=resolved_settings.profile_store_url,
        timeout_seconds=resolved_settings.profile_store_timeout_seconds,
    )
    planner_service = PlannerService(
        profile_store=profile_store,
        cuisine=resolved_settings.diet_plan_cuisine,
        debug=resolved_settings.debug,
    )
    diet_plan_service = None
    if resolved_settings.openai_api_key:
        diet_plan_service = DietPlanService(
            client=OpenAITextClient.create(resolved_settings.openai_api_key),
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
            cuisine=resolved_settings.diet_plan_cuisine,
            debug=resolved_settings.debug,
        )

    async def close_resources() -> None:
        await profile_store.close()

    return AppContainer(
        settings=resolved_settings,
        planner_service=planner_service,
        diet_plan_service=diet_plan_service,
        close_resources=close_resources,
    )
