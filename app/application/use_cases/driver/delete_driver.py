"""
Delete Driver Use Case
======================
"""
import logging

from app.domain.exceptions import DriverDeleteError, DriverNotFoundError
from app.domain.repositories.driver_repository import DriverRepository

logger = logging.getLogger(__name__)


class DeleteDriverUseCase:
    """Use case for removing a driver permanently."""

    def __init__(self, driver_repository: DriverRepository):
        self._repository = driver_repository

    async def execute(self, driver_id: str) -> None:
        """
        Delete the driver with ``driver_id``.

        Raises:
            DriverNotFoundError: If the driver does not exist
            DriverDeleteError: If the driver disappeared before the delete
        """
        existing = await self._repository.find_by_id(driver_id)
        if not existing:
            raise DriverNotFoundError(driver_id)

        deleted = await self._repository.delete(driver_id)
        if not deleted:
            raise DriverDeleteError(driver_id)

        logger.info("Driver %s deleted (license %s)", driver_id, existing.licencia)
