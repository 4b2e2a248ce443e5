"""Liveness check: 200 whenever the process is up."""

from fastapi import APIRouter, status

from numclass_api import __version__
from numclass_api.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check():
    return {
        "status": "healthy",
        "service": "numclass-api",
        "version": __version__,
    }
