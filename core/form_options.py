# core/form_options.py
"""Recognised tokens for each enumerated form field, in display order."""

GENDERS: tuple[tuple[str, str], ...] = (
    ("male", "Male"),
    ("female", "Female"),
    ("other", "Other / prefer not to say"),
)

ACTIVITY_LEVELS: tuple[tuple[str, str], ...] = (
    ("sedentary", "Sedentary (little or no exercise)"),
    ("light", "Light (1–3 days/week)"),
    ("moderate", "Moderate (3–5 days/week)"),
    ("active", "Active (6–7 days/week)"),
    ("very", "Very active (physical job or twice daily)"),
)

DIET_PREFS: tuple[tuple[str, str], ...] = (
    ("balanced", "Balanced"),
    ("vegetarian", "Vegetarian"),
    ("vegan", "Vegan"),
    ("pescatarian", "Pescatarian"),
    ("lowcarb", "Low carb"),
    ("keto", "Keto"),
)

GOALS: tuple[tuple[str, str], ...] = (
    ("maintain", "Maintain / Improve habits"),
    ("lose", "Lose weight"),
    ("gain", "Gain weight"),
)
