from typing import TYPE_CHECKING
from ...domain.repositories.driver_repository import DriverRepository
from ...application.services.driver_service import DriverService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DriverProvider:
    """Driver service provider - registers driver-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register driver service.
        Service is created with repository from container.
        """
        container.register_singleton(
            DriverService,
            DriverService(
                driver_repository=container.get(DriverRepository)
            )
        )
