"""Re-export individual schema modules for easy imports."""

from .options import FormOptions, Option
from .rec import GramTargets, Macros, MealSet, RecRequest, RecResponse

__all__ = [
    "FormOptions",
    "Option",
    "GramTargets",
    "Macros",
    "MealSet",
    "RecRequest",
    "RecResponse",
]
