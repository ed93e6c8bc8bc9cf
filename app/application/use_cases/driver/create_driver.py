"""
Create Driver Use Case
======================

Business use case for registering a new driver.
"""
import logging
from datetime import date
from typing import Optional

from app.domain.exceptions import DuplicateLicenseError
from app.domain.models.driver import Driver
from app.domain.repositories.driver_repository import DriverRepository

logger = logging.getLogger(__name__)


class CreateDriverUseCase:
    """
    Use case for creating a driver.

    Enforces license uniqueness before writing. The check and the insert
    are not atomic; the storage unique index catches the remaining race.
    """

    def __init__(self, driver_repository: DriverRepository):
        """
        Initialize use case with repository.

        Args:
            driver_repository: Repository for driver persistence
        """
        self._repository = driver_repository

    async def execute(
        self,
        nombre: str,
        apellido: str,
        licencia: str,
        telefono: str,
        email: str,
        fecha_nacimiento: date,
        id: Optional[str] = None,
    ) -> Driver:
        """
        Execute the create driver use case.

        Args:
            nombre: First name
            apellido: Last name
            licencia: License number (must be unique)
            telefono: Phone number
            email: Email address
            fecha_nacimiento: Birth date
            id: Optional caller-supplied identifier

        Returns:
            Created driver entity

        Raises:
            DuplicateLicenseError: If another driver already holds the license
            ValidationError: If any field is invalid
        """
        existing = await self._repository.find_by_licencia(licencia)
        if existing:
            logger.warning("Rejected driver with duplicate license %s", licencia)
            raise DuplicateLicenseError(licencia)

        driver = Driver.create(
            nombre=nombre,
            apellido=apellido,
            licencia=licencia,
            telefono=telefono,
            email=email,
            fecha_nacimiento=fecha_nacimiento,
            id=id,
        )
        saved = await self._repository.save(driver)
        logger.info("Driver %s created (license %s)", saved.id, saved.licencia)
        return saved
