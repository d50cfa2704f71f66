"""Consumption planner: validation, metrics and prompt assembly."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nutrition_planner.adapters.profile_store_client import ProfileStoreClient
from nutrition_planner.domain.metrics import MetricsResult
from nutrition_planner.domain.profiles import RawProfile, StoredProfileMetrics
from nutrition_planner.services.metrics import calculate
from nutrition_planner.services.prompts import format_diet_prompt
from nutrition_planner.services.validation import validate_profile_input

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class PlannerService:
    """Service computing daily targets from form input or stored profiles."""

    profile_store: ProfileStoreClient
    cuisine: str = "Indian"
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    def calculate(self, raw: RawProfile) -> MetricsResult:
        """Validate raw form values and compute metrics."""
        profile = validate_profile_input(
            age=raw.age,
            gender=raw.gender,
            height=raw.height,
            weight=raw.weight,
            activity_level=raw.activity_level,
        )
        result = calculate(profile)
        if self.debug:
            _logger.info(
                "Planner metrics: calories=%s bmi=%s",
                result.daily_calories,
                result.bmi,
            )
        return result

    def diet_prompt(self, result: MetricsResult) -> str:
        """Render the copyable diet-plan prompt."""
        return format_diet_prompt(result, cuisine=self.cuisine)

    async def calculate_for_profile(self, profile_id: str) -> StoredProfileMetrics:
        """Fetch a stored profile and compute its metrics."""
        payload = await self._call_with_retry(
            lambda: self.profile_store.get_profile(profile_id),
            action=f"get_profile:{profile_id}",
        )
        raw = raw_profile_from_store(payload)
        name = payload.get("name")
        return StoredProfileMetrics(
            profile_id=profile_id,
            name=name if isinstance(name, str) else None,
            metrics=self.calculate(raw),
        )

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                if self.debug:
                    _logger.warning(
                        "Profile store %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status_code,
                        exc,
                    )
                if attempt > self.retry_attempts or status_code == "404":
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def raw_profile_from_store(payload: dict[str, object]) -> RawProfile:
    """Map a stored profile document onto raw planner fields."""
    return RawProfile(
        age=_as_text(payload.get("age")),
        gender=_as_text(payload.get("gender")),
        height=_as_text(payload.get("height")),
        weight=_as_text(payload.get("weight")),
        activity_level=_as_text(payload.get("activityLevel")),
    )


def _as_text(value: object) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
