"""
web/renderer.py
────────────────────────────────────────────────────────────────────────
Payload ➜ HTML.

Every free-text value (name, error messages, meals, tips) goes through
`escape_html` before it is embedded.  Only ``&``, ``<`` and ``>`` are
escaped, ampersand first so injected entities are not double-escaped.
"""

from __future__ import annotations

from typing import Mapping

from core import form_options
from core.models.health import ErrorPayload, RecommendationResult
from core.nutrition_calc import round_half_away


def escape_html(text: object) -> str:
    if not text:
        return ""
    return (
        str(text)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _escape_attr(text: object) -> str:
    return escape_html(text).replace('"', "&quot;")


def format_number(n: float | int) -> str:
    if isinstance(n, float) and n.is_integer():
        n = int(n)
    return f"{n:,}"


def _pct(x: float) -> int:
    return int(round_half_away(x * 100))


# ──────────────────────────── panels ─────────────────────────────── #
def render_result(r: RecommendationResult) -> str:
    greeting = escape_html(r.name) if r.name else "there"
    p, g, m = r.macro_percent, r.macro_grams, r.meals
    tips = "".join(f"<li>{escape_html(t)}</li>" for t in r.tips)
    return f"""
      <div class="result-inner">
        <h3>Hi {greeting}, here are your personalised recommendations</h3>

        <section class="results-summary card small">
          <ul>
            <li><strong>BMI:</strong> {format_number(r.bmi)} ({r.bmi_category})</li>
            <li><strong>BMR:</strong> {int(round_half_away(r.bmr))} kcal/day</li>
            <li><strong>Estimated daily needs (TDEE):</strong> {r.tdee} kcal/day</li>
            <li><strong>Target calories ({escape_html(r.goal_label)}):</strong> {r.target_calories} kcal/day</li>
          </ul>
        </section>

        <section class="macros card small">
          <h4>Macro target</h4>
          <p>{_pct(p.carb)}% carbs • {_pct(p.protein)}% protein • {_pct(p.fat)}% fat</p>
          <p><strong>Goal grams / day:</strong> {g.carb}g carbs • {g.protein}g protein • {g.fat}g fat</p>
        </section>

        <section class="meal-suggestions card small">
          <h4>Sample meals</h4>
          <ul>
            <li><strong>Breakfast:</strong> {escape_html(m.breakfast)}</li>
            <li><strong>Lunch:</strong> {escape_html(m.lunch)}</li>
            <li><strong>Dinner:</strong> {escape_html(m.dinner)}</li>
            <li><strong>Snack:</strong> {escape_html(m.snack)}</li>
          </ul>
        </section>

        <section class="tips card small">
          <h4>Daily habit tips</h4>
          <ul>
            {tips}
          </ul>
        </section>
      </div>
    """


def render_errors(payload: ErrorPayload) -> str:
    items = "".join(f"<li>{escape_html(e)}</li>" for e in payload.errors)
    return (
        '<div class="card small error"><strong>Please fix these:</strong>'
        f"<ul>{items}</ul></div>"
    )


def render_panel(payload: RecommendationResult | ErrorPayload) -> str:
    if isinstance(payload, ErrorPayload):
        return render_errors(payload)
    return render_result(payload)


# ───────────────────────────── page ──────────────────────────────── #
def _select(field: str, label: str, pairs: tuple[tuple[str, str], ...], current: str) -> str:
    opts = "".join(
        f'<option value="{_escape_attr(v)}"{" selected" if v == current else ""}>'
        f"{escape_html(lbl)}</option>"
        for v, lbl in pairs
    )
    return (
        f'<label for="{field}">{label}</label>'
        f'<select id="{field}" name="{field}">{opts}</select>'
    )


def _input(field: str, label: str, kind: str, value: str) -> str:
    return (
        f'<label for="{field}">{label}</label>'
        f'<input id="{field}" name="{field}" type="{kind}" value="{_escape_attr(value)}">'
    )


def render_page(panel: str | None = None, values: Mapping[str, str] | None = None) -> str:
    """Whole document: the form (re-filled from `values`) plus the result panel."""
    v = dict(values or {})
    fields = "\n".join([
        _input("name", "Name", "text", v.get("name", "")),
        _input("age", "Age", "number", v.get("age", "")),
        _select("gender", "Gender", form_options.GENDERS, v.get("gender", "")),
        _input("weight", "Weight (kg)", "number", v.get("weight", "")),
        _input("height", "Height (cm)", "number", v.get("height", "")),
        _select("activity", "Activity level", form_options.ACTIVITY_LEVELS, v.get("activity", "")),
        _select("dietPref", "Diet preference", form_options.DIET_PREFS, v.get("dietPref", "")),
        _select("goal", "Goal", form_options.GOALS, v.get("goal", "")),
    ])
    hidden = "" if panel else " visually-hidden"
    return f"""<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Health recommendations</title></head>
<body>
  <main>
    <form id="healthForm" method="post" action="/">
      {fields}
      <button type="submit">Get recommendations</button>
      <a id="resetBtn" href="/reset">Reset</a>
    </form>
    <div id="result" class="result{hidden}" aria-live="polite">{panel or ""}</div>
  </main>
</body>
</html>
"""
