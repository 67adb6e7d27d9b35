# api/v1/router.py
from fastapi import APIRouter

from . import options, recs

api_router = APIRouter()

api_router.include_router(recs.router,    prefix="/recommendations", tags=["Recommendations"])
api_router.include_router(options.router, prefix="/options",         tags=["Options"])
