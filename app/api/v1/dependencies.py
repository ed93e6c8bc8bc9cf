"""
Dependency Container
====================

FastAPI dependencies resolving services from the DI container that was
built at startup and attached to ``app.state``.
"""
from fastapi import Request

from app.application.services.driver_service import DriverService
from app.di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    Get the application's DI container.

    Returns:
        Container stored on app.state during startup
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Application container is not initialized")
    return container


def get_driver_service(request: Request) -> DriverService:
    """
    Get driver service instance (singleton per container).

    Returns:
        DriverService instance
    """
    return get_container(request).get(DriverService)
