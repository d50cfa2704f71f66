"""Pydantic models for planner requests and responses."""

from pydantic import BaseModel, ConfigDict

from nutrition_planner.domain.metrics import MetricsResult
from nutrition_planner.domain.profiles import RawProfile


class PlannerForm(BaseModel):
    """Raw planner form fields as typed by the user."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    age: str = ""
    gender: str = ""
    height: str = ""
    weight: str = ""
    activity_level: str = ""

    def to_raw(self) -> RawProfile:
        """Convert to the domain snapshot of raw values."""
        return RawProfile(
            age=self.age,
            gender=self.gender,
            height=self.height,
            weight=self.weight,
            activity_level=self.activity_level,
        )


class WeightRangePayload(BaseModel):
    """Normal weight interval."""

    min_kg: float
    max_kg: float


class MetricsPayload(BaseModel):
    """Computed daily targets."""

    daily_calories: int
    bmi: float
    bmi_category: str
    normal_weight_range: WeightRangePayload
    protein_g: int
    carbs_g: int
    fat_g: int
    protein_pct: int
    carbs_pct: int
    fat_pct: int
    water_l_per_day: float

    @classmethod
    def from_result(cls, result: MetricsResult) -> "MetricsPayload":
        """Build the payload from a domain result."""
        return cls(
            daily_calories=result.daily_calories,
            bmi=result.bmi,
            bmi_category=result.bmi_category.value,
            normal_weight_range=WeightRangePayload(
                min_kg=result.normal_weight_range.min_kg,
                max_kg=result.normal_weight_range.max_kg,
            ),
            protein_g=result.protein_g,
            carbs_g=result.carbs_g,
            fat_g=result.fat_g,
            protein_pct=result.protein_pct,
            carbs_pct=result.carbs_pct,
            fat_pct=result.fat_pct,
            water_l_per_day=result.water_l_per_day,
        )


class MetricsResponse(BaseModel):
    """Metrics plus the rendered diet prompt."""

    metrics: MetricsPayload
    prompt: str


class StoredProfileMetricsResponse(BaseModel):
    """Metrics for a profile held by the profile store."""

    profile_id: str
    name: str | None = None
    metrics: MetricsPayload
    prompt: str


class PromptResponse(BaseModel):
    """Rendered diet prompt."""

    prompt: str


class DietPlanResponse(BaseModel):
    """Diet plan produced by the text model."""

    prompt: str
    reply: str
