"""
Error Handlers
==============

Application-wide handlers for errors raised outside the controllers:
unknown routes and request bodies that fail schema validation.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Ruta no encontrada"
INVALID_BODY_MESSAGE = "Datos de entrada inválidos"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render routing errors as ``{"error": ...}`` bodies.

    An unknown path and an unsupported method on a known path are both
    reported as an unmatched route.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": ROUTE_NOT_FOUND_MESSAGE},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle malformed request bodies.

    FastAPI answers these with 422 by default; this service reports every
    client input problem as 400.
    """
    details = []
    for error in exc.errors():
        # loc is a tuple like ("body", "email")
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc if part != "body") or "body"
        details.append({"field": field, "message": error.get("msg", "Invalid value")})

    logger.warning("Rejected malformed body on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": INVALID_BODY_MESSAGE, "detalles": details},
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Attach the handlers above to ``application``."""
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
