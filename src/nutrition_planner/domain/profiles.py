"""Domain models for profiles held by the external profile store."""

from dataclasses import dataclass

from nutrition_planner.domain.metrics import MetricsResult


@dataclass(frozen=True)
class RawProfile:
    """Unvalidated form values, exactly as entered."""

    age: str
    gender: str
    height: str
    weight: str
    activity_level: str


@dataclass(frozen=True)
class StoredProfileMetrics:
    """Metrics computed for a profile fetched from the profile store."""

    profile_id: str
    name: str | None
    metrics: MetricsResult
