from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..container import DIContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the database connection in the container.
        Change database here, and all repositories automatically get the new connection.
        """
        container.register_singleton("mongo_connection", container.connection)
