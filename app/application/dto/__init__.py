from .driver_dto import (
    DriverCreateRequest,
    DriverUpdateRequest,
    DriverResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "DriverCreateRequest",
    "DriverUpdateRequest",
    "DriverResponse",
    "ErrorResponse",
    "HealthResponse",
]
