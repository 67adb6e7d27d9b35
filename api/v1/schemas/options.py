from __future__ import annotations

from pydantic import BaseModel


class Option(BaseModel):
    value: str
    label: str


class FormOptions(BaseModel):
    gender:    list[Option]
    activity:  list[Option]
    diet_pref: list[Option]
    goal:      list[Option]
