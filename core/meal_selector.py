"""
core/meal_selector.py
────────────────────────────────────────────────────────────────────────
Sample meals + habit tips.

Breakfast / lunch / dinner come from small per-diet lookup tables with a
shared ``default``.  The snack is the only random pick, drawn from the
injected ``random.Random`` so callers can seed it.
"""

from __future__ import annotations

import random

from core.models.health import Meals

BREAKFASTS: dict[str, str] = {
    "default": "Oat porridge with fruit, nuts and a spoon of yogurt or plant-based alternative",
    "vegetarian": "Greek yogurt, berries, granola, and a drizzle of honey",
    "vegan": "Overnight oats with almond milk, chia seeds and banana",
}

LUNCHES: dict[str, str] = {
    "default": "Grain bowl with mixed greens, protein (chicken/legumes/fish), veggies and a light dressing",
    "lowcarb": "Large salad with salmon/eggs, avocado and olive oil dressing",
    "keto": "Grilled salmon or chicken, sautéed greens and generous avocado/olive oil",
}

DINNERS: dict[str, str] = {
    "default": "Lean protein, roasted vegetables and a portion of whole grains (quinoa/brown rice)",
    "vegan": "Lentil curry with mixed vegetables and a side of brown rice",
    "vegetarian": "Paneer/tofu stir fry with vegetables and a small portion of whole grain",
}

SNACKS: tuple[str, ...] = (
    "Handful of nuts and a piece of fruit",
    "Hummus with carrot/cucumber sticks",
    "Cottage cheese or a small protein smoothie",
)

HABIT_TIPS: tuple[str, ...] = (
    "Prioritise whole foods: vegetables, fruits, whole grains, legumes, nuts, seeds, lean proteins.",
    "Hydrate regularly — aim for several glasses of water spread across the day.",
    "Include a protein source at each meal to support satiety and muscle maintenance.",
    "Aim for consistent sleep (7–9 hours) and regular physical activity.",
    "If you have specific medical conditions, consult a registered dietitian or doctor for tailored advice.",
)

# diets that may have their own entry in a meal table
_DIET_KEYS = ("vegan", "vegetarian", "lowcarb", "keto")


def pick(table: dict[str, str], diet_pref: str) -> str:
    if diet_pref in _DIET_KEYS and diet_pref in table:
        return table[diet_pref]
    return table["default"]


class MealSelector:
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def meals(self, diet_pref: str) -> Meals:
        return Meals(
            breakfast=pick(BREAKFASTS, diet_pref),
            lunch=pick(LUNCHES, diet_pref),
            dinner=pick(DINNERS, diet_pref),
            snack=self._rng.choice(SNACKS),
        )

    def tips(self) -> tuple[str, ...]:
        return HABIT_TIPS
