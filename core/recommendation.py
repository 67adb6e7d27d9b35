"""
core/recommendation.py
────────────────────────────────────────────────────────────────────────
Stateless recommendation engine:

  RawInput → validate → BMI / BMR / TDEE / goal kcal → macros
           → meals + tips → RecommendationResult   (or ErrorPayload)

All public I/O happens through `RecommendationEngine.recommend(...)`.
The only injected collaborator is the `MealSelector` (and through it the
random source for the snack); everything else is pure arithmetic.
"""
from __future__ import annotations

import logging

from core import nutrition_calc as nc
from core.meal_selector import MealSelector
from core.models.health import ErrorPayload, RawInput, RecommendationResult
from core.validation import validate

_LOG = logging.getLogger(__name__)


class RecommendationEngine:
    def __init__(self, selector: MealSelector | None = None) -> None:
        self._selector = selector or MealSelector()

    def recommend(self, raw: RawInput) -> RecommendationResult | ErrorPayload:
        checked = validate(raw)
        if isinstance(checked, list):
            _LOG.debug("validation failed: %s", [e.field for e in checked])
            return ErrorPayload(errors=tuple(e.message for e in checked))

        bmi = nc.round_half_away(nc.bmi(checked.weight_kg, checked.height_cm), 1)
        bmr = nc.bmr(checked.weight_kg, checked.height_cm, checked.age, checked.gender)
        tdee = nc.tdee(bmr, checked.activity)
        kcal = nc.goal_calories(tdee, checked.goal)
        split = nc.macro_split(checked.diet_pref)

        result = RecommendationResult(
            name=checked.name,
            age=checked.age,
            gender=checked.gender,
            weight_kg=checked.weight_kg,
            height_cm=checked.height_cm,
            bmi=bmi,
            bmi_category=nc.bmi_category(bmi),
            bmr=bmr,
            tdee=tdee,
            target_calories=kcal,
            macro_percent=split,
            macro_grams=nc.macro_grams(kcal, split),
            meals=self._selector.meals(checked.diet_pref),
            tips=self._selector.tips(),
            goal_label=nc.goal_label(checked.goal),
        )
        _LOG.debug("bmi=%.1f bmr=%.2f tdee=%d kcal=%d", bmi, bmr, tdee, kcal)
        return result
