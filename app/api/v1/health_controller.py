"""
Health Controller
=================
"""
from fastapi import APIRouter

from app.application.dto.driver_dto import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health() -> HealthResponse:
    """Always answers 200 while the process is serving requests."""
    return HealthResponse(
        status="ok",
        message="API de Transporte funcionando correctamente",
    )
