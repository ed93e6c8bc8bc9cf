"""
Get All Drivers Use Case
========================
"""
from typing import List

from app.domain.models.driver import Driver
from app.domain.repositories.driver_repository import DriverRepository


class GetAllDriversUseCase:
    """Use case for listing every driver."""

    def __init__(self, driver_repository: DriverRepository):
        self._repository = driver_repository

    async def execute(self) -> List[Driver]:
        return await self._repository.find_all()
