# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "America/Bogota")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Database Configuration
        self.mongodb_uri: Final[str] = os.getenv(
            "MONGODB_URI",
            "mongodb://localhost:27017/transport-db"
        )
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "transport-db")

        # Collection Names
        self.drivers_collection: Final[str] = os.getenv("DRIVERS_COLLECTION", "conductores")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
