# web/routes.py
"""
Server-rendered form: the UI adapter around the stateless engine.

GET  /       → empty form, results panel hidden
POST /       → run the engine, render result / errors into the panel
GET  /reset  → back to an empty form (nothing is kept between requests)
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse

from core.models.health import RawInput
from core.recommendation import RecommendationEngine
from services.engine import get_engine
from web.renderer import render_page, render_panel

router = APIRouter()
_LOG = logging.getLogger(__name__)


@router.get("/", response_class=HTMLResponse)
def show_form() -> str:
    return render_page()


@router.post("/", response_class=HTMLResponse)
def submit_form(
    name: str = Form(""),
    age: str = Form(""),
    gender: str = Form("other"),
    weight: str = Form(""),
    height: str = Form(""),
    activity: str = Form("sedentary"),
    dietPref: str = Form("balanced"),
    goal: str = Form("maintain"),
    engine: RecommendationEngine = Depends(get_engine),
) -> str:
    raw = RawInput(
        name=name,
        age=age,
        weight=weight,
        height=height,
        gender=gender,
        activity=activity,
        diet_pref=dietPref,
        goal=goal,
    )
    payload = engine.recommend(raw)
    _LOG.info("form submitted → %s", type(payload).__name__)
    values = {
        "name": name, "age": age, "gender": gender, "weight": weight,
        "height": height, "activity": activity, "dietPref": dietPref, "goal": goal,
    }
    return render_page(render_panel(payload), values)


@router.get("/reset")
def reset_form() -> RedirectResponse:
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
