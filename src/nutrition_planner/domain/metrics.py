"""Domain models for nutrition metrics."""

from dataclasses import dataclass
from enum import Enum

AGE_RANGE = (10, 120)
HEIGHT_RANGE_CM = (100.0, 250.0)
WEIGHT_RANGE_KG = (30.0, 300.0)


class Gender(Enum):
    """Biological sex used to select the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Self-reported activity level."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class BmiCategory(Enum):
    """Weight status derived from BMI."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


class ValidationError(ValueError):
    """Raised when profile input is missing, malformed or out of range."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.fields = fields


@dataclass(frozen=True)
class ProfileInput:
    """Validated biometric snapshot for a single calculation."""

    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel


@dataclass(frozen=True)
class WeightRange:
    """Closed weight interval in kilograms."""

    min_kg: float
    max_kg: float


@dataclass(frozen=True)
class MetricsResult:
    """Daily energy, body-mass and macro targets."""

    daily_calories: int
    bmi: float
    bmi_category: BmiCategory
    normal_weight_range: WeightRange
    protein_g: int
    carbs_g: int
    fat_g: int
    protein_pct: int
    carbs_pct: int
    fat_pct: int
    water_l_per_day: float
