"""
Get Driver Use Case
===================
"""
from app.domain.exceptions import DriverNotFoundError
from app.domain.models.driver import Driver
from app.domain.repositories.driver_repository import DriverRepository


class GetDriverUseCase:
    """Use case for fetching a single driver by id."""

    def __init__(self, driver_repository: DriverRepository):
        self._repository = driver_repository

    async def execute(self, driver_id: str) -> Driver:
        """
        Return the driver with ``driver_id``.

        Raises:
            DriverNotFoundError: If no driver has that id
        """
        driver = await self._repository.find_by_id(driver_id)
        if not driver:
            raise DriverNotFoundError(driver_id)
        return driver
