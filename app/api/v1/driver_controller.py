"""
Driver Controller
=================

FastAPI controller for driver management endpoints.

This is the only place where domain errors become HTTP responses.
"""
import logging
from typing import Dict, List, Optional, Type, Union

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from app.application.dto.driver_dto import (
    DriverCreateRequest,
    DriverResponse,
    DriverUpdateRequest,
    ErrorResponse,
)
from app.api.v1.dependencies import get_driver_service
from app.application.services.driver_service import DriverService
from app.domain.constants import DriverFields
from app.domain.exceptions import (
    DatabaseNotConnectedError,
    DriverDeleteError,
    DriverNotFoundError,
    DriverUpdateError,
    DuplicateLicenseError,
    RepositoryError,
    ValidationError,
)
from app.domain.models.driver import Driver
from app.utils.datetime_utils import parse_date

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conductores"])

REQUIRED_FIELDS_MESSAGE = "Todos los campos son requeridos"
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"

# Exact exception type -> HTTP status. Anything not listed is a 500.
ERROR_STATUS_CODES: Dict[Type[Exception], int] = {
    DriverNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateLicenseError: status.HTTP_400_BAD_REQUEST,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DriverUpdateError: status.HTTP_400_BAD_REQUEST,
    DriverDeleteError: status.HTTP_400_BAD_REQUEST,
    RepositoryError: status.HTTP_400_BAD_REQUEST,
    DatabaseNotConnectedError: status.HTTP_400_BAD_REQUEST,
}

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _error_response(exc: Exception) -> JSONResponse:
    """Translate an exception into the JSON error body and status code."""
    status_code = ERROR_STATUS_CODES.get(type(exc))
    if status_code is None:
        logger.error("Unexpected error handling driver request", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )

    content = {"error": str(exc)}
    if isinstance(exc, ValidationError):
        content["field"] = exc.field
    logger.warning("Driver request failed with %s: %s", type(exc).__name__, exc)
    return JSONResponse(status_code=status_code, content=content)


def _parse_birth_date(value: Optional[str]):
    """Convert the incoming date string; None stays None."""
    if value is None:
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise ValidationError(
            "La fecha de nacimiento no es válida", DriverFields.FECHA_NACIMIENTO
        )
    return parsed


def _to_response(driver: Driver) -> DriverResponse:
    return DriverResponse(**driver.to_dict())


@router.post(
    "",
    response_model=DriverResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Create a driver",
    description="""
    Register a new driver.

    All of nombre, apellido, licencia, telefono, email and fechaNacimiento
    are required. The license must not belong to another driver.
    """
)
async def create_driver(
    request: DriverCreateRequest,
    service: DriverService = Depends(get_driver_service),
) -> Union[DriverResponse, JSONResponse]:
    """Create a driver."""
    payload = request.model_dump()
    missing = [name for name in DriverFields.REQUIRED_ON_CREATE if not payload.get(name)]
    if missing:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": REQUIRED_FIELDS_MESSAGE,
                "campos": list(DriverFields.REQUIRED_ON_CREATE),
            },
        )

    try:
        driver = await service.create_driver(
            nombre=request.nombre,
            apellido=request.apellido,
            licencia=request.licencia,
            telefono=request.telefono,
            email=request.email,
            fecha_nacimiento=_parse_birth_date(request.fechaNacimiento),
        )
    except Exception as e:
        return _error_response(e)
    return _to_response(driver)


@router.get(
    "",
    response_model=List[DriverResponse],
    responses=ERROR_RESPONSES,
    summary="List drivers",
)
async def list_drivers(
    service: DriverService = Depends(get_driver_service),
) -> Union[List[DriverResponse], JSONResponse]:
    """List every driver."""
    try:
        drivers = await service.list_drivers()
    except Exception as e:
        return _error_response(e)
    return [_to_response(driver) for driver in drivers]


@router.get(
    "/{driver_id}",
    response_model=DriverResponse,
    responses=ERROR_RESPONSES,
    summary="Get driver by ID",
)
async def get_driver(
    driver_id: str,
    service: DriverService = Depends(get_driver_service),
) -> Union[DriverResponse, JSONResponse]:
    """Get a specific driver by ID."""
    try:
        driver = await service.get_driver(driver_id)
    except Exception as e:
        return _error_response(e)
    return _to_response(driver)


@router.put(
    "/{driver_id}",
    response_model=DriverResponse,
    responses=ERROR_RESPONSES,
    summary="Update a driver",
    description="Update any subset of a driver's fields. Omitted fields keep their value."
)
async def update_driver(
    driver_id: str,
    request: DriverUpdateRequest,
    service: DriverService = Depends(get_driver_service),
) -> Union[DriverResponse, JSONResponse]:
    """Partially update a driver."""
    try:
        changes = {
            "nombre": request.nombre,
            "apellido": request.apellido,
            "licencia": request.licencia,
            "telefono": request.telefono,
            "email": request.email,
            "fecha_nacimiento": _parse_birth_date(request.fechaNacimiento),
            "activo": request.activo,
        }
        driver = await service.update_driver(driver_id, changes)
    except Exception as e:
        return _error_response(e)
    return _to_response(driver)


@router.delete(
    "/{driver_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete a driver",
)
async def delete_driver(
    driver_id: str,
    service: DriverService = Depends(get_driver_service),
) -> Response:
    """Delete a driver permanently."""
    try:
        await service.delete_driver(driver_id)
    except Exception as e:
        return _error_response(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
