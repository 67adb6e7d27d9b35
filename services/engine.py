# services/engine.py
import random
from functools import lru_cache

from config import settings
from core.meal_selector import MealSelector
from core.recommendation import RecommendationEngine


@lru_cache
def get_engine() -> RecommendationEngine:
    """Process-wide engine; routers take it via `Depends(get_engine)`."""
    rng = random.Random(settings.snack_seed)  # None → OS entropy
    return RecommendationEngine(MealSelector(rng))
