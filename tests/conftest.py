"""
Test configuration and fixtures
"""
from datetime import date
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.application.services.driver_service import DriverService
from app.di.base_container import BaseContainer
from app.domain.models.driver import Driver
from app.domain.repositories.driver_repository import DriverRepository
from app.main import create_application


class InMemoryDriverRepository(DriverRepository):
    """DriverRepository backed by a dict, keeps insertion order."""

    def __init__(self):
        self.drivers: Dict[str, Driver] = {}

    async def save(self, driver: Driver) -> Driver:
        self.drivers[driver.id] = driver
        return driver

    async def find_by_id(self, driver_id: str) -> Optional[Driver]:
        return self.drivers.get(driver_id)

    async def find_all(self) -> List[Driver]:
        return list(self.drivers.values())

    async def update(self, driver_id: str, driver: Driver) -> Optional[Driver]:
        if driver_id not in self.drivers:
            return None
        self.drivers[driver_id] = driver
        return driver

    async def delete(self, driver_id: str) -> bool:
        return self.drivers.pop(driver_id, None) is not None

    async def find_by_licencia(self, licencia: str) -> Optional[Driver]:
        for driver in self.drivers.values():
            if driver.licencia == licencia:
                return driver
        return None


@pytest.fixture
def repository():
    """Empty in-memory driver repository."""
    return InMemoryDriverRepository()


@pytest.fixture
def container(repository):
    """DI container wired to the in-memory repository."""
    test_container = BaseContainer()
    test_container.register_singleton(DriverRepository, repository)
    test_container.register_singleton(DriverService, DriverService(driver_repository=repository))
    return test_container


@pytest.fixture
def client(container):
    """Test client for an application that never touches MongoDB."""
    application = create_application(container=container)
    with TestClient(application) as test_client:
        yield test_client


@pytest.fixture
def driver_payload():
    """Valid create payload as sent by API clients."""
    return {
        "nombre": "Juan",
        "apellido": "Pérez",
        "licencia": "LIC-123456",
        "telefono": "+57 300 123 4567",
        "email": "juan.perez@example.com",
        "fechaNacimiento": "1990-05-15",
    }


@pytest.fixture
def sample_driver():
    """Valid driver entity."""
    return Driver.create(
        nombre="Juan",
        apellido="Pérez",
        licencia="LIC-123456",
        telefono="+57 300 123 4567",
        email="juan.perez@example.com",
        fecha_nacimiento=date(1990, 5, 15),
    )
