# Standard library imports
from typing import Optional

# Local application imports
from app.core.config import Settings, get_settings
from app.infrastructure.db.mongo_connection import MongoConnection
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    DriverProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    The MongoDB connection is handed in explicitly; the container never
    opens or closes it.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (DriverProvider) - depend on repositories
    """

    def __init__(self, connection: MongoConnection, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.connection = connection
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register services (depends on repositories)
        DriverProvider.register(self)
