"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup opens the MongoDB connection and builds the DI container;
shutdown closes the connection.
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import driver_router, health_router, register_exception_handlers
from app.core.config import get_settings
from app.core.logging import setup_logging
from app.di.base_container import BaseContainer
from app.di.container import DIContainer
from app.domain.repositories.driver_repository import DriverRepository
from app.infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - Error handlers for unknown routes and malformed bodies
    - API route registration
    - Startup/shutdown event handlers for the MongoDB connection

    Args:
        container: Pre-built DI container. When given, startup does not
            connect to MongoDB and the caller owns the dependencies.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="API de Transporte",
        description="REST API for managing driver (conductor) records",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(driver_router, prefix="/api/conductores")

    application.state.container = container
    application.state.connection = None

    @application.on_event("startup")
    async def startup_event():
        """
        Connect to MongoDB and wire dependencies.

        Startup sequence:
        1. Open the MongoDB connection
        2. Build the DI container around it
        3. Ensure driver indexes (unique license)
        """
        if application.state.container is not None:
            logger.info("Using pre-configured container, skipping MongoDB connection")
            return

        connection = MongoConnection(settings.mongodb_uri, settings.mongo_database_name)
        await connection.connect()
        application.state.connection = connection

        di_container = DIContainer(connection, settings)
        await di_container.get(DriverRepository).ensure_indexes()
        application.state.container = di_container

        logger.info("API de Transporte started")

    @application.on_event("shutdown")
    async def shutdown_event():
        """Close the MongoDB connection when FastAPI shuts down."""
        connection = application.state.connection
        if connection is not None:
            await connection.close()
            application.state.connection = None
            application.state.container = None
        logger.info("API de Transporte stopped")

    return application


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# Create application instance
app = create_application()


if __name__ == "__main__":
    run()
