# api/v1/schemas/rec.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RecRequest(BaseModel):
    """Raw form values; numbers stay text so the engine can report them."""
    name: str = ""
    age: str = Field("", examples=["30"])
    weight: str = Field("", examples=["70"])
    height: str = Field("", examples=["175"])
    gender: str = Field("other", examples=["male", "female", "other"])
    activity: str = Field("sedentary", examples=["sedentary", "light", "moderate", "active", "very"])
    diet_pref: str = Field("balanced", examples=["balanced", "vegan", "keto"])
    goal: str = Field("maintain", examples=["lose", "gain", "maintain"])


class Macros(BaseModel):
    carb:    float
    protein: float
    fat:     float

    model_config = ConfigDict(from_attributes=True)


class GramTargets(BaseModel):
    carb:    int
    protein: int
    fat:     int

    model_config = ConfigDict(from_attributes=True)


class MealSet(BaseModel):
    breakfast: str
    lunch:     str
    dinner:    str
    snack:     str

    model_config = ConfigDict(from_attributes=True)


class RecResponse(BaseModel):
    name:            str
    age:             int
    gender:          str
    weight_kg:       float
    height_cm:       float
    bmi:             float
    bmi_category:    str
    bmr:             float
    tdee:            int
    target_calories: int
    macro_percent:   Macros
    macro_grams:     GramTargets
    meals:           MealSet
    tips:            list[str]
    goal_label:      str

    model_config = ConfigDict(from_attributes=True)
