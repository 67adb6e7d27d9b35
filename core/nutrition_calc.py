"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Closed-form nutrition maths used by the recommendation engine:

1. BMI + WHO-style category
2. BMR  (Mifflin–St Jeor, with a neutral offset for unlisted gender)
3. TDEE (activity multiplier)
4. Goal calories (deficit floor / surplus)
5. Macro split by diet preference + gram targets

Unknown enumerated tokens never raise – they map to documented defaults.
"""

from __future__ import annotations

import math

from core.models.health import MacroGrams, MacroSplit

# ──────────────────────────────────────────────────────────────────────
#  Lookup tables
# ──────────────────────────────────────────────────────────────────────
ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very": 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

GENDER_OFFSETS: dict[str, float] = {"male": 5, "female": -161}
NEUTRAL_GENDER_OFFSET = -78   # mean of the male / female constants

LOSE_DEFICIT = 500
GAIN_SURPLUS = 400
MIN_CALORIES = 1200           # safe floor when losing

GOAL_LABELS: dict[str, str] = {
    "lose": "Lose weight",
    "gain": "Gain weight",
}
DEFAULT_GOAL_LABEL = "Maintain / Improve habits"

_BALANCED = MacroSplit(carb=0.50, protein=0.20, fat=0.30)
MACRO_SPLITS: dict[str, MacroSplit] = {
    "vegan": _BALANCED,
    "vegetarian": _BALANCED,
    "balanced": _BALANCED,
    "pescatarian": MacroSplit(carb=0.45, protein=0.25, fat=0.30),
    "lowcarb": MacroSplit(carb=0.30, protein=0.35, fat=0.35),
    "keto": MacroSplit(carb=0.05, protein=0.25, fat=0.70),
}

KCAL_PER_G_CARB = 4
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_FAT = 9


# ──────────────────────────────────────────────────────────────────────
#  Rounding
# ──────────────────────────────────────────────────────────────────────
def round_half_away(value: float, digits: int = 0) -> float:
    """Round half away from zero (``round`` would use banker's rounding)."""
    p = 10 ** digits
    return math.copysign(math.floor(abs(value) * p + 0.5) / p, value)


# ──────────────────────────────────────────────────────────────────────
#  BMI / BMR / TDEE
# ──────────────────────────────────────────────────────────────────────
def bmi(weight_kg: float, height_cm: float) -> float:
    h = height_cm / 100
    return weight_kg / (h * h)


def bmi_category(value: float) -> str:
    if value < 18.5:
        return "Underweight"
    if value < 25:
        return "Healthy weight"
    if value < 30:
        return "Overweight"
    return "Obese"


def bmr(weight_kg: float, height_cm: float, age: int, gender: str) -> float:
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + GENDER_OFFSETS.get(gender, NEUTRAL_GENDER_OFFSET)


def activity_multiplier(activity: str) -> float:
    return ACTIVITY_MULTIPLIERS.get(activity, DEFAULT_ACTIVITY_MULTIPLIER)


def tdee(bmr_kcal: float, activity: str) -> int:
    return int(round_half_away(bmr_kcal * activity_multiplier(activity)))


# ──────────────────────────────────────────────────────────────────────
#  Goal
# ──────────────────────────────────────────────────────────────────────
def goal_calories(tdee_kcal: int, goal: str) -> int:
    if goal == "lose":
        return max(MIN_CALORIES, tdee_kcal - LOSE_DEFICIT)
    if goal == "gain":
        return tdee_kcal + GAIN_SURPLUS
    return tdee_kcal  # maintain


def goal_label(goal: str) -> str:
    return GOAL_LABELS.get(goal, DEFAULT_GOAL_LABEL)


# ──────────────────────────────────────────────────────────────────────
#  Macros
# ──────────────────────────────────────────────────────────────────────
def macro_split(diet_pref: str) -> MacroSplit:
    return MACRO_SPLITS.get(diet_pref, _BALANCED)


def macro_grams(calories: float, split: MacroSplit) -> MacroGrams:
    """Each macro is rounded on its own; totals may drift a few kcal."""
    return MacroGrams(
        carb=int(round_half_away(calories * split.carb / KCAL_PER_G_CARB)),
        protein=int(round_half_away(calories * split.protein / KCAL_PER_G_PROTEIN)),
        fat=int(round_half_away(calories * split.fat / KCAL_PER_G_FAT)),
    )
