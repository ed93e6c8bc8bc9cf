"""
Driver Service
==============

Application service that coordinates driver-related operations.
This service orchestrates the driver use cases.
"""
from datetime import date
from typing import Any, Dict, List

from app.domain.models.driver import Driver
from app.domain.repositories.driver_repository import DriverRepository
from app.application.use_cases.driver import (
    CreateDriverUseCase,
    DeleteDriverUseCase,
    GetAllDriversUseCase,
    GetDriverUseCase,
    UpdateDriverUseCase,
)


class DriverService:
    """
    Application service for driver operations.

    This service coordinates multiple use cases and provides
    a high-level interface for driver management.
    """

    def __init__(self, driver_repository: DriverRepository):
        """
        Initialize service with repository.

        Args:
            driver_repository: Repository for driver persistence
        """
        self._repository = driver_repository
        self._create_use_case = CreateDriverUseCase(driver_repository)
        self._get_use_case = GetDriverUseCase(driver_repository)
        self._get_all_use_case = GetAllDriversUseCase(driver_repository)
        self._update_use_case = UpdateDriverUseCase(driver_repository)
        self._delete_use_case = DeleteDriverUseCase(driver_repository)

    async def create_driver(
        self,
        nombre: str,
        apellido: str,
        licencia: str,
        telefono: str,
        email: str,
        fecha_nacimiento: date,
    ) -> Driver:
        """
        Register a new driver.

        Returns:
            Created driver entity
        """
        return await self._create_use_case.execute(
            nombre=nombre,
            apellido=apellido,
            licencia=licencia,
            telefono=telefono,
            email=email,
            fecha_nacimiento=fecha_nacimiento,
        )

    async def get_driver(self, driver_id: str) -> Driver:
        """Get a driver by ID, raising DriverNotFoundError if absent."""
        return await self._get_use_case.execute(driver_id)

    async def list_drivers(self) -> List[Driver]:
        """List every driver."""
        return await self._get_all_use_case.execute()

    async def update_driver(self, driver_id: str, changes: Dict[str, Any]) -> Driver:
        """
        Apply a partial update to a driver.

        Args:
            driver_id: Unique driver identifier
            changes: Entity field names mapped to new values

        Returns:
            Updated driver entity
        """
        return await self._update_use_case.execute(driver_id, changes)

    async def delete_driver(self, driver_id: str) -> None:
        """Delete a driver permanently."""
        await self._delete_use_case.execute(driver_id)
