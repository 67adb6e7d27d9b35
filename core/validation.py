"""
core/validation.py
────────────────────────────────────────────────────────────────────────
RawInput ➜ ValidatedInput.

Numbers are parsed leniently (leading numeric prefix, like a browser
form field), every bound check runs, and failures come back as an
ordered list instead of being raised:  age · weight · height.
"""
from __future__ import annotations

import re

from core.models.health import RawInput, ValidatedInput

AGE_RANGE = (5, 120)
WEIGHT_RANGE = (20, 500)     # kg
HEIGHT_RANGE = (80, 250)     # cm

AGE_MESSAGE = "Please enter a valid age (5–120)."
WEIGHT_MESSAGE = "Please enter a valid weight (kg)."
HEIGHT_MESSAGE = "Please enter a valid height (cm)."

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ValidationError(ValueError):
    """One failed bound check. Collected and returned, never raised by the engine."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def parse_int(text: str | None) -> int | None:
    m = _INT_PREFIX.match(text or "")
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # past the int-string digit limit; far outside any bound anyway
        return None


def parse_float(text: str | None) -> float | None:
    m = _FLOAT_PREFIX.match(text or "")
    return float(m.group(1)) if m else None


def _in_range(value: float | None, bounds: tuple[float, float]) -> bool:
    # zero counts as missing
    if not value:
        return False
    lo, hi = bounds
    return lo <= value <= hi


def validate(raw: RawInput) -> ValidatedInput | list[ValidationError]:
    age = parse_int(raw.age)
    weight = parse_float(raw.weight)
    height = parse_float(raw.height)

    errors: list[ValidationError] = []
    if not _in_range(age, AGE_RANGE):
        errors.append(ValidationError("age", AGE_MESSAGE))
    if not _in_range(weight, WEIGHT_RANGE):
        errors.append(ValidationError("weight", WEIGHT_MESSAGE))
    if not _in_range(height, HEIGHT_RANGE):
        errors.append(ValidationError("height", HEIGHT_MESSAGE))
    if errors:
        return errors

    return ValidatedInput(
        name=(raw.name or "").strip(),
        age=age,  # type: ignore[arg-type]
        weight_kg=weight,  # type: ignore[arg-type]
        height_cm=height,  # type: ignore[arg-type]
        gender=raw.gender,
        activity=raw.activity,
        diet_pref=raw.diet_pref,
        goal=raw.goal,
    )
