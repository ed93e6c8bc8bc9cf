"""
Update Driver Use Case
======================

Business use case for partially updating an existing driver.
"""
import logging
from typing import Any, Dict

from app.domain.exceptions import (
    DriverNotFoundError,
    DriverUpdateError,
    DuplicateLicenseError,
)
from app.domain.models.driver import Driver
from app.domain.repositories.driver_repository import DriverRepository

logger = logging.getLogger(__name__)


class UpdateDriverUseCase:
    """
    Use case for updating a driver.

    Only fields present in ``changes`` are modified; the entity
    re-validates the whole resulting record.
    """

    def __init__(self, driver_repository: DriverRepository):
        """
        Initialize use case with repository.

        Args:
            driver_repository: Repository for driver persistence
        """
        self._repository = driver_repository

    async def execute(self, driver_id: str, changes: Dict[str, Any]) -> Driver:
        """
        Execute the update driver use case.

        Args:
            driver_id: Identifier of the driver to update
            changes: Entity field names mapped to new values (None = keep)

        Returns:
            Updated driver entity

        Raises:
            DriverNotFoundError: If the driver does not exist
            DuplicateLicenseError: If the new license belongs to another driver
            ValidationError: If the resulting driver is invalid
            DriverUpdateError: If the driver disappeared before the write
        """
        existing = await self._repository.find_by_id(driver_id)
        if not existing:
            raise DriverNotFoundError(driver_id)

        new_licencia = changes.get("licencia")
        if new_licencia and new_licencia != existing.licencia:
            holder = await self._repository.find_by_licencia(new_licencia)
            if holder:
                logger.warning(
                    "Rejected update of driver %s to duplicate license %s",
                    driver_id,
                    new_licencia,
                )
                raise DuplicateLicenseError(new_licencia)

        updated = existing.update(**changes)
        result = await self._repository.update(driver_id, updated)
        if not result:
            raise DriverUpdateError(driver_id)

        logger.info("Driver %s updated", driver_id)
        return result
