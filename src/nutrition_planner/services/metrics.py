"""Deterministic BMR, BMI, macro and hydration calculations."""

from decimal import ROUND_HALF_UP, Decimal

from nutrition_planner.domain.metrics import (
    AGE_RANGE,
    HEIGHT_RANGE_CM,
    WEIGHT_RANGE_KG,
    ActivityLevel,
    BmiCategory,
    Gender,
    MetricsResult,
    ProfileInput,
    ValidationError,
    WeightRange,
)
from nutrition_planner.services.validation import describe_violations

# Mifflin-St Jeor constant term per gender.
_BMR_OFFSETS = {
    Gender.MALE: 5,
    Gender.FEMALE: -161,
}

_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.LOW: 1.2,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.HIGH: 1.725,
}

# Grams of protein per kg of body weight.
_PROTEIN_FACTORS = {
    ActivityLevel.LOW: 1.0,
    ActivityLevel.MODERATE: 1.2,
    ActivityLevel.HIGH: 1.6,
}

_KCAL_PER_G_PROTEIN = 4
_KCAL_PER_G_CARBS = 4
_KCAL_PER_G_FAT = 9
_FAT_SHARE = 0.25
_WATER_L_PER_KG = 0.035

_BMI_UNDERWEIGHT_BELOW = 18.5
_BMI_OVERWEIGHT_FROM = 25.0
_BMI_OBESE_FROM = 30.0
_NORMAL_BMI_MIN = 18.5
_NORMAL_BMI_MAX = 24.9


def calculate(profile: ProfileInput) -> MetricsResult:
    """Compute daily targets for a validated profile snapshot.

    Each quantity is rounded where it is produced and later steps consume
    the rounded values, so gram and percentage fields stay consistent with
    each other.
    """
    _ensure_in_domain(profile)

    bmr = basal_metabolic_rate(profile)
    daily_calories = _round_int(bmr * _ACTIVITY_MULTIPLIERS[profile.activity_level])

    bmi = _round_float(profile.weight_kg / _height_m_squared(profile.height_cm), 1)

    protein_g = _round_int(
        profile.weight_kg * _PROTEIN_FACTORS[profile.activity_level]
    )
    fat_g = _round_int(_FAT_SHARE * daily_calories / _KCAL_PER_G_FAT)
    protein_kcal = protein_g * _KCAL_PER_G_PROTEIN
    fat_kcal = fat_g * _KCAL_PER_G_FAT
    # Not clamped: the remainder may be negative outside the validated domain.
    carbs_g = _round_int(
        (daily_calories - (protein_kcal + fat_kcal)) / _KCAL_PER_G_CARBS
    )

    protein_pct = _round_int(protein_kcal * 100 / daily_calories)
    fat_pct = _round_int(fat_kcal * 100 / daily_calories)
    carbs_pct = 100 - protein_pct - fat_pct

    return MetricsResult(
        daily_calories=daily_calories,
        bmi=bmi,
        bmi_category=classify_bmi(bmi),
        normal_weight_range=normal_weight_range(profile.height_cm),
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        protein_pct=protein_pct,
        carbs_pct=carbs_pct,
        fat_pct=fat_pct,
        water_l_per_day=_round_float(profile.weight_kg * _WATER_L_PER_KG, 2),
    )


def basal_metabolic_rate(profile: ProfileInput) -> float:
    """Return the Mifflin-St Jeor BMR in kcal/day."""
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age
        + _BMR_OFFSETS[profile.gender]
    )


def classify_bmi(bmi: float) -> BmiCategory:
    """Map a BMI value to its category. Lower bounds are inclusive."""
    if bmi < _BMI_UNDERWEIGHT_BELOW:
        return BmiCategory.UNDERWEIGHT
    if bmi < _BMI_OVERWEIGHT_FROM:
        return BmiCategory.NORMAL
    if bmi < _BMI_OBESE_FROM:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def normal_weight_range(height_cm: float) -> WeightRange:
    """Return the weight interval giving a normal BMI at this height."""
    height_sq = _height_m_squared(height_cm)
    return WeightRange(
        min_kg=_round_float(_NORMAL_BMI_MIN * height_sq, 1),
        max_kg=_round_float(_NORMAL_BMI_MAX * height_sq, 1),
    )


def _height_m_squared(height_cm: float) -> float:
    return (height_cm / 100) ** 2


def _ensure_in_domain(profile: ProfileInput) -> None:
    """Refuse snapshots that bypassed validation with out-of-range values."""
    invalid = []
    if not AGE_RANGE[0] <= profile.age <= AGE_RANGE[1]:
        invalid.append("age")
    if not HEIGHT_RANGE_CM[0] <= profile.height_cm <= HEIGHT_RANGE_CM[1]:
        invalid.append("height")
    if not WEIGHT_RANGE_KG[0] <= profile.weight_kg <= WEIGHT_RANGE_KG[1]:
        invalid.append("weight")
    if invalid:
        raise ValidationError(describe_violations(invalid), fields=tuple(invalid))


def _round_half_up(value: float, places: int) -> Decimal:
    """Round half away from zero on the exact binary value of ``value``."""
    quantum = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def _round_int(value: float) -> int:
    return int(_round_half_up(value, 0))


def _round_float(value: float, places: int) -> float:
    return float(_round_half_up(value, places))
