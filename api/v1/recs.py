# api/v1/recs.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from core.models.health import ErrorPayload, RawInput
from core.recommendation import RecommendationEngine
from services.engine import get_engine
from api.v1.schemas import RecRequest, RecResponse

router = APIRouter()


@router.post("", response_model=RecResponse, status_code=status.HTTP_200_OK)
def recommend(
    body: RecRequest,
    engine: RecommendationEngine = Depends(get_engine),
) -> RecResponse:
    result = engine.recommend(RawInput(**body.model_dump()))
    if isinstance(result, ErrorPayload):
        raise HTTPException(
            status_code=422,
            detail={"errors": list(result.errors)},
        )
    return RecResponse.model_validate(result, from_attributes=True)
