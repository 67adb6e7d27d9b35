from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawInput:
    """Form values exactly as submitted – nothing here is trusted."""
    name: str = ""
    age: str = ""
    weight: str = ""
    height: str = ""
    gender: str = "other"      # "male" | "female" | anything else
    activity: str = "sedentary"
    diet_pref: str = "balanced"
    goal: str = "maintain"     # "lose" | "gain" | "maintain"


@dataclass(frozen=True)
class ValidatedInput:
    name: str
    age: int                   # 5–120
    weight_kg: float           # 20–500
    height_cm: float           # 80–250
    gender: str
    activity: str
    diet_pref: str
    goal: str


@dataclass(frozen=True)
class MacroSplit:
    carb: float
    protein: float
    fat: float


@dataclass(frozen=True)
class MacroGrams:
    carb: int
    protein: int
    fat: int


@dataclass(frozen=True)
class Meals:
    breakfast: str
    lunch: str
    dinner: str
    snack: str


@dataclass(frozen=True)
class RecommendationResult:
    name: str
    age: int
    gender: str
    weight_kg: float
    height_cm: float
    bmi: float
    bmi_category: str
    bmr: float                 # unrounded, rounded only for display
    tdee: int
    target_calories: int
    macro_percent: MacroSplit
    macro_grams: MacroGrams
    meals: Meals
    tips: tuple[str, ...]
    goal_label: str


@dataclass(frozen=True)
class ErrorPayload:
    errors: tuple[str, ...]
