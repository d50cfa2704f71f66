"""Consumption planner API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from nutrition_planner.api.planner_models import (
    DietPlanResponse,
    MetricsPayload,
    MetricsResponse,
    PlannerForm,
    PromptResponse,
    StoredProfileMetricsResponse,
)
from nutrition_planner.domain.metrics import MetricsResult, ValidationError

if TYPE_CHECKING:
    from nutrition_planner.containers import AppContainer

router = APIRouter(prefix="/planner", tags=["planner"])

_logger = logging.getLogger(__name__)

# Starlette renamed HTTP_422_UNPROCESSABLE_ENTITY; the number is stable.
_UNPROCESSABLE = 422


@router.post("/metrics")
async def planner_metrics(form: PlannerForm, request: Request) -> MetricsResponse:
    """Compute daily targets from raw form input."""
    container: AppContainer = request.app.state.container
    result = _calculate(container, form)
    return MetricsResponse(
        metrics=MetricsPayload.from_result(result),
        prompt=container.planner_service.diet_prompt(result),
    )


@router.post("/prompt")
async def planner_prompt(form: PlannerForm, request: Request) -> PromptResponse:
    """Return the copyable diet-plan prompt for raw form input."""
    container: AppContainer = request.app.state.container
    result = _calculate(container, form)
    return PromptResponse(prompt=container.planner_service.diet_prompt(result))


@router.get("/profiles/{profile_id}/metrics")
async def stored_profile_metrics(
    profile_id: str, request: Request
) -> StoredProfileMetricsResponse:
    """Compute daily targets for a profile held by the profile store."""
    container: AppContainer = request.app.state.container
    try:
        stored = await container.planner_service.calculate_for_profile(profile_id)
    except ValidationError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=exc.message) from exc
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code == status.HTTP_404_NOT_FOUND:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found."
            ) from exc
        _logger.exception("Profile store error", extra={"profile_id": profile_id})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_format_upstream_error(
                container, exc, "Profile store is unavailable."
            ),
        ) from exc
    except httpx.HTTPError as exc:
        _logger.exception(
            "Profile store unreachable", extra={"profile_id": profile_id}
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_format_upstream_error(
                container, exc, "Profile store is unavailable."
            ),
        ) from exc
    return StoredProfileMetricsResponse(
        profile_id=stored.profile_id,
        name=stored.name,
        metrics=MetricsPayload.from_result(stored.metrics),
        prompt=container.planner_service.diet_prompt(stored.metrics),
    )


@router.post("/diet-plan")
async def diet_plan(form: PlannerForm, request: Request) -> DietPlanResponse:
    """Relay the diet prompt to the configured text model."""
    container: AppContainer = request.app.state.container
    if container.diet_plan_service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Diet plan generation is not configured.",
        )
    result = _calculate(container, form)
    try:
        reply = await container.diet_plan_service.generate(result)
    except Exception as exc:
        _logger.exception("Diet plan generation failed")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_format_upstream_error(
                container, exc, "Sorry, I couldn't generate a diet plan."
            ),
        ) from exc
    return DietPlanResponse(
        prompt=container.planner_service.diet_prompt(result), reply=reply
    )


def _calculate(container: AppContainer, form: PlannerForm) -> MetricsResult:
    try:
        return container.planner_service.calculate(form.to_raw())
    except ValidationError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=exc.message) from exc


def _format_upstream_error(
    container: AppContainer, exc: Exception, fallback: str
) -> str:
    """Return a user-facing upstream error message with local debug info."""
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
