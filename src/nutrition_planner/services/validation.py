"""Validation of raw planner form input."""

import math
import re
from enum import Enum

from nutrition_planner.domain.metrics import (
    AGE_RANGE,
    HEIGHT_RANGE_CM,
    WEIGHT_RANGE_KG,
    ActivityLevel,
    Gender,
    ProfileInput,
    ValidationError,
)

_DECIMAL_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")

_GENDER_ALIASES = {
    "male": Gender.MALE,
    "m": Gender.MALE,
    "female": Gender.FEMALE,
    "f": Gender.FEMALE,
}

_ACTIVITY_ALIASES = {
    "low": ActivityLevel.LOW,
    "sedentary": ActivityLevel.LOW,
    "moderate": ActivityLevel.MODERATE,
    "active": ActivityLevel.MODERATE,
    "high": ActivityLevel.HIGH,
    "highly_active": ActivityLevel.HIGH,
    "very_active": ActivityLevel.HIGH,
    "athlete": ActivityLevel.HIGH,
}

_NUMERIC_LABELS = {
    "age": "age (10-120)",
    "height": "height (100-250cm)",
    "weight": "weight (30-300kg)",
}

_CHOICE_LABELS = {
    "gender": "gender (male or female)",
    "activity_level": "activity level (low, moderate or high)",
}


def validate_profile_input(
    age: str | None,
    gender: str | None,
    height: str | None,
    weight: str | None,
    activity_level: str | None,
) -> ProfileInput:
    """Parse raw form values into a ProfileInput.

    Every field is checked before anything is returned. When one or more
    fields are invalid a single ValidationError describing all of them is
    raised.
    """
    invalid: list[str] = []

    age_value = _parse_decimal(age)
    parsed_age = int(age_value) if age_value is not None else None
    if parsed_age is None or not _in_range(parsed_age, AGE_RANGE):
        invalid.append("age")

    height_value = _parse_decimal(height)
    if height_value is None or not _in_range(height_value, HEIGHT_RANGE_CM):
        invalid.append("height")

    weight_value = _parse_decimal(weight)
    if weight_value is None or not _in_range(weight_value, WEIGHT_RANGE_KG):
        invalid.append("weight")

    parsed_gender = _parse_choice(gender, _GENDER_ALIASES)
    if parsed_gender is None:
        invalid.append("gender")

    parsed_activity = _parse_choice(activity_level, _ACTIVITY_ALIASES)
    if parsed_activity is None:
        invalid.append("activity_level")

    if invalid:
        raise ValidationError(describe_violations(invalid), fields=tuple(invalid))

    return ProfileInput(
        age=parsed_age,
        gender=parsed_gender,
        height_cm=height_value,
        weight_kg=weight_value,
        activity_level=parsed_activity,
    )


def describe_violations(fields: list[str]) -> str:
    """Build one user-facing message for every invalid field."""
    numeric = [_NUMERIC_LABELS[name] for name in fields if name in _NUMERIC_LABELS]
    choices = [_CHOICE_LABELS[name] for name in fields if name in _CHOICE_LABELS]
    sentences = []
    if numeric:
        sentences.append(f"Please enter valid numbers for {_join(numeric)}.")
    if choices:
        sentences.append(f"Please select a valid {_join(choices)}.")
    return " ".join(sentences)


def _parse_decimal(raw: str | None) -> float | None:
    """Return the value of an unsigned decimal literal, or None."""
    if not raw or not _DECIMAL_PATTERN.fullmatch(raw):
        return None
    value = float(raw)
    return value if math.isfinite(value) else None


def _parse_choice(raw: str | None, aliases: dict[str, Enum]) -> Enum | None:
    if raw is None:
        return None
    return aliases.get(raw.strip().lower())


def _in_range(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def _join(parts: list[str]) -> str:
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:  # noqa: PLR2004
        return f"{parts[0]} and {parts[1]}"
    return ", ".join(parts[:-1]) + f", and {parts[-1]}"
