"""
End-to-end (no HTTP) – RawInput through the whole engine.
"""
import math
import random

from core.meal_selector import HABIT_TIPS, SNACKS, MealSelector
from core.models.health import ErrorPayload, MacroGrams, RawInput, RecommendationResult
from core.recommendation import RecommendationEngine
from core.validation import AGE_MESSAGE

MALE_70KG = RawInput(
    name="Sam",
    age="25",
    gender="male",
    weight="70",
    height="175",
    activity="moderate",
    diet_pref="balanced",
    goal="maintain",
)


def _engine(seed: int = 1) -> RecommendationEngine:
    return RecommendationEngine(MealSelector(random.Random(seed)))


def test_end_to_end_numbers():
    r = _engine().recommend(MALE_70KG)
    assert isinstance(r, RecommendationResult)
    assert r.bmi == 22.9
    assert r.bmi_category == "Healthy weight"
    assert math.isclose(r.bmr, 1673.75)
    assert r.tdee == 2594
    assert r.target_calories == 2594
    assert r.macro_grams == MacroGrams(carb=324, protein=130, fat=86)
    assert r.goal_label == "Maintain / Improve habits"
    assert r.tips == HABIT_TIPS
    assert r.meals.snack in SNACKS


def test_same_seed_same_result():
    assert _engine(3).recommend(MALE_70KG) == _engine(3).recommend(MALE_70KG)


def test_lose_goal_floor():
    small = RawInput(age="80", gender="female", weight="40", height="140",
                     activity="sedentary", goal="lose")
    r = _engine().recommend(small)
    assert isinstance(r, RecommendationResult)
    assert r.target_calories == 1200
    assert r.goal_label == "Lose weight"


def test_unknown_tokens_fall_back_silently():
    raw = RawInput(age="25", weight="70", height="175",
                   gender="?", activity="?", diet_pref="?", goal="?")
    r = _engine().recommend(raw)
    assert isinstance(r, RecommendationResult)
    assert math.isclose(r.bmr, 1673.75 - 5 - 78)
    assert r.tdee == round(r.bmr * 1.2)
    assert r.target_calories == r.tdee
    assert (r.macro_percent.carb, r.macro_percent.protein, r.macro_percent.fat) == (0.50, 0.20, 0.30)


def test_invalid_input_returns_error_payload():
    r = _engine().recommend(RawInput(age="130", weight="70", height="175"))
    assert r == ErrorPayload(errors=(AGE_MESSAGE,))
