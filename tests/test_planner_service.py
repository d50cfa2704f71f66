"""Tests for the planner service."""

import asyncio

import httpx
import pytest

from nutrition_planner.domain.metrics import BmiCategory, ValidationError
from nutrition_planner.domain.profiles import RawProfile
from nutrition_planner.services.planner import PlannerService, raw_profile_from_store
from tests.conftest import (
    STORED_PROFILE,
    FlakyProfileStoreClient,
    InMemoryProfileStoreClient,
)


def test_calculate_validates_and_computes() -> None:
    service = PlannerService(profile_store=InMemoryProfileStoreClient())

    result = service.calculate(
        RawProfile(
            age="22", gender="M", height="180", weight="80", activity_level="Low"
        )
    )

    assert result.daily_calories == 2184
    assert result.bmi_category is BmiCategory.NORMAL


def test_calculate_rejects_invalid_input() -> None:
    service = PlannerService(profile_store=InMemoryProfileStoreClient())

    with pytest.raises(ValidationError):
        service.calculate(
            RawProfile(
                age="9", gender="M", height="180", weight="80", activity_level="Low"
            )
        )


def test_diet_prompt_uses_configured_cuisine() -> None:
    service = PlannerService(
        profile_store=InMemoryProfileStoreClient(), cuisine="Italian"
    )
    result = service.calculate(
        RawProfile(
            age="22", gender="M", height="180", weight="80", activity_level="Low"
        )
    )

    assert service.diet_prompt(result).startswith("Create an Italian diet plan")


def test_calculate_for_profile_uses_stored_biometrics(
    profile_store: InMemoryProfileStoreClient,
) -> None:
    service = PlannerService(profile_store=profile_store)

    stored = asyncio.run(service.calculate_for_profile("profile-1"))

    assert stored.profile_id == "profile-1"
    assert stored.name == "Asha"
    assert stored.metrics.daily_calories == 2184
    assert profile_store.calls == ["profile-1"]


def test_calculate_for_profile_does_not_retry_missing_profile(
    profile_store: InMemoryProfileStoreClient,
) -> None:
    service = PlannerService(profile_store=profile_store, retry_delay_seconds=0)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(service.calculate_for_profile("missing"))

    assert profile_store.calls == ["missing"]


def test_calculate_for_profile_retries_transient_failure() -> None:
    client = FlakyProfileStoreClient(payload=dict(STORED_PROFILE), failures=1)
    service = PlannerService(profile_store=client, retry_delay_seconds=0)

    stored = asyncio.run(service.calculate_for_profile("profile-1"))

    assert stored.metrics.protein_g == 80
    assert client.calls == 2


def test_calculate_for_profile_gives_up_after_retries() -> None:
    client = FlakyProfileStoreClient(payload=dict(STORED_PROFILE), failures=5)
    service = PlannerService(
        profile_store=client, retry_attempts=2, retry_delay_seconds=0
    )

    with pytest.raises(httpx.ConnectError):
        asyncio.run(service.calculate_for_profile("profile-1"))

    assert client.calls == 3


def test_stored_profile_with_unsupported_values_is_invalid() -> None:
    store = InMemoryProfileStoreClient(
        profiles={"p": {**STORED_PROFILE, "gender": "other", "weight": None}}
    )
    service = PlannerService(profile_store=store)

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(service.calculate_for_profile("p"))

    assert excinfo.value.fields == ("weight", "gender")


def test_raw_profile_from_store_formats_numbers() -> None:
    raw = raw_profile_from_store(
        {
            "age": 30,
            "gender": "female",
            "height": 165.0,
            "weight": 58.5,
            "activityLevel": "moderate",
        }
    )

    assert raw == RawProfile(
        age="30",
        gender="female",
        height="165",
        weight="58.5",
        activity_level="moderate",
    )
