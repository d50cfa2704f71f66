"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from nutrition_planner.adapters.profile_store_client import ProfileStoreClient
from nutrition_planner.config import Settings
from nutrition_planner.containers import AppContainer
from nutrition_planner.services.diet_plan import DietPlanService, TextGenerationClient
from nutrition_planner.services.planner import PlannerService


@dataclass
class InMemoryProfileStoreClient(ProfileStoreClient):
    """Profile store fake keyed by profile id."""

    profiles: dict[str, dict[str, object]] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    async def get_profile(self, profile_id: str) -> dict[str, object]:
        self.calls.append(profile_id)
        profile = self.profiles.get(profile_id)
        if profile is None:
            request = httpx.Request("GET", f"https://store.test/profile/{profile_id}")
            response = httpx.Response(404, request=request)
            raise httpx.HTTPStatusError(
                "Profile not found", request=request, response=response
            )
        return profile


@dataclass
class FlakyProfileStoreClient(ProfileStoreClient):
    """Profile store fake failing a fixed number of times before answering."""

    payload: dict[str, object]
    failures: int = 1
    calls: int = 0

    async def get_profile(self, profile_id: str) -> dict[str, object]:
        self.calls += 1
        if self.calls <= self.failures:
            raise httpx.ConnectError("connection refused")
        return self.payload


@dataclass
class FakeTextGenerationClient(TextGenerationClient):
    """Text generation fake that records prompts."""

    reply: str = "Breakfast: poha. Lunch: dal and rice. Dinner: paneer and roti."
    prompts: list[str] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        self.prompts.append(prompt)
        return self.reply


@dataclass
class FailingTextGenerationClient(TextGenerationClient):
    """Text generation fake that always fails."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        raise RuntimeError("OpenAI returned an empty response")


STORED_PROFILE: dict[str, object] = {
    "_id": "profile-1",
    "name": "Asha",
    "age": 22,
    "gender": "male",
    "height": 180,
    "weight": 80,
    "dietType": "veg",
    "allergies": "",
    "healthGoal": "maintain",
    "activityLevel": "low",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        profile_store_url="https://store.test",
        openai_api_key="openai-key",
        environment="test",
    )


@pytest.fixture
def profile_store() -> InMemoryProfileStoreClient:
    return InMemoryProfileStoreClient(profiles={"profile-1": dict(STORED_PROFILE)})


@pytest.fixture
def text_client() -> FakeTextGenerationClient:
    return FakeTextGenerationClient()


@pytest.fixture
def container(
    settings: Settings,
    profile_store: InMemoryProfileStoreClient,
    text_client: FakeTextGenerationClient,
) -> AppContainer:
    planner_service = PlannerService(
        profile_store=profile_store,
        cuisine=settings.diet_plan_cuisine,
        retry_delay_seconds=0,
    )
    diet_plan_service = DietPlanService(
        client=text_client,
        model=settings.openai_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
        cuisine=settings.diet_plan_cuisine,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        planner_service=planner_service,
        diet_plan_service=diet_plan_service,
        close_resources=close_resources,
    )
