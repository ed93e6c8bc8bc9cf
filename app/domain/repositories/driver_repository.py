"""
Driver Repository Interface
===========================

Abstract interface for driver data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.driver import Driver


class DriverRepository(ABC):
    """
    Abstract repository for driver persistence operations.

    This interface defines the contract for driver data access.
    Every operation may raise RepositoryError on a storage failure.
    """

    @abstractmethod
    async def save(self, driver: Driver) -> Driver:
        """
        Persist a new driver. No duplicate check happens here.

        Args:
            driver: Driver entity to store

        Returns:
            Stored driver entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, driver_id: str) -> Optional[Driver]:
        """
        Find a driver by its ID.

        Args:
            driver_id: Unique driver identifier

        Returns:
            Driver entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Driver]:
        """
        Find all drivers, in storage natural order.

        Returns:
            List of driver entities
        """
        pass

    @abstractmethod
    async def update(self, driver_id: str, driver: Driver) -> Optional[Driver]:
        """
        Replace the stored fields of an existing driver.

        Args:
            driver_id: Unique driver identifier
            driver: Driver entity with updated data

        Returns:
            Updated driver entity, or None if the id does not exist
        """
        pass

    @abstractmethod
    async def delete(self, driver_id: str) -> bool:
        """
        Delete a driver.

        Args:
            driver_id: Unique driver identifier

        Returns:
            True if a driver was removed, False if the id was absent
        """
        pass

    @abstractmethod
    async def find_by_licencia(self, licencia: str) -> Optional[Driver]:
        """
        Find a driver by its license number.

        Args:
            licencia: License number

        Returns:
            Driver entity if found, None otherwise
        """
        pass
