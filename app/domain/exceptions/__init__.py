"""
Domain Exceptions
=================

Typed errors raised by entities and use cases. The HTTP layer maps each
type to a status code; nothing else inspects their messages.
"""
from typing import Optional


class DriverDomainError(Exception):
    """Base class for expected driver business errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DriverDomainError):
    """A driver field failed validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DuplicateLicenseError(DriverDomainError):
    """Another driver already holds the license."""

    def __init__(self, licencia: str):
        super().__init__(f"Ya existe un conductor con la licencia: {licencia}")
        self.licencia = licencia


class DriverNotFoundError(DriverDomainError):
    """No driver exists with the given id."""

    def __init__(self, driver_id: str):
        super().__init__(f"Conductor con ID {driver_id} no encontrado")
        self.driver_id = driver_id


class DriverUpdateError(DriverDomainError):
    """The driver vanished or could not be written during an update."""

    def __init__(self, driver_id: str, reason: Optional[str] = None):
        message = f"Error al actualizar el conductor con ID {driver_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.driver_id = driver_id
        self.reason = reason


class DriverDeleteError(DriverDomainError):
    """The driver vanished or could not be removed during a delete."""

    def __init__(self, driver_id: str, reason: Optional[str] = None):
        message = f"Error al eliminar el conductor con ID {driver_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.driver_id = driver_id
        self.reason = reason


class RepositoryError(Exception):
    """Generic storage failure surfaced by a repository implementation."""


class DatabaseNotConnectedError(RepositoryError):
    """The storage handle was used before connect() or after close()."""

    def __init__(self) -> None:
        super().__init__("Database not connected")


__all__ = [
    "DriverDomainError",
    "ValidationError",
    "DuplicateLicenseError",
    "DriverNotFoundError",
    "DriverUpdateError",
    "DriverDeleteError",
    "RepositoryError",
    "DatabaseNotConnectedError",
]
