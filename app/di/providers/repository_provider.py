from typing import TYPE_CHECKING
from ...domain.repositories.driver_repository import DriverRepository
from ...infrastructure.db.mongo_driver_repository import MongoDriverRepository

if TYPE_CHECKING:
    from ..container import DIContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all repository implementations.
        Gets database connection from database provider and creates repository instances.
        """
        connection = container.get("mongo_connection")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            DriverRepository,
            MongoDriverRepository(
                connection.get_collection(container.settings.drivers_collection)
            )
        )
