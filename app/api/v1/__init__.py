"""
API v1 Package
===============

Version 1 API controllers.
"""
from .driver_controller import router as driver_router
from .health_controller import router as health_router
from .error_handlers import register_exception_handlers

__all__ = ["driver_router", "health_router", "register_exception_handlers"]
