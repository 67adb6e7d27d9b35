from __future__ import annotations

from fastapi import APIRouter

from core import form_options
from api.v1.schemas import FormOptions, Option

router = APIRouter()


def _opts(pairs: tuple[tuple[str, str], ...]) -> list[Option]:
    return [Option(value=v, label=lbl) for v, lbl in pairs]


@router.get("", response_model=FormOptions)
def list_options() -> FormOptions:
    return FormOptions(
        gender=_opts(form_options.GENDERS),
        activity=_opts(form_options.ACTIVITY_LEVELS),
        diet_pref=_opts(form_options.DIET_PREFS),
        goal=_opts(form_options.GOALS),
    )
