"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .driver_provider import DriverProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "DriverProvider",
]
