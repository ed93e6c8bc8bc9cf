"""
End-to-end tests for the HTTP surface.

Requests run through the real routers, service and use cases against the
in-memory repository from conftest.
"""
from unittest.mock import AsyncMock

import pytest

from app.application.services.driver_service import DriverService
from app.domain.exceptions import RepositoryError

BASE_URL = "/api/conductores"
REQUIRED_FIELDS = ["nombre", "apellido", "licencia", "telefono", "email", "fechaNacimiento"]


def _create(client, payload):
    response = client.post(BASE_URL, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealthAndRouting:
    """Test health endpoint and unknown routes."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert "message" in response.json()

    def test_unknown_route(self, client):
        response = client.get("/api/desconocido")

        assert response.status_code == 404
        assert response.json() == {"error": "Ruta no encontrada"}

    @pytest.mark.parametrize(
        "method, path",
        [
            ("delete", BASE_URL),
            ("put", BASE_URL),
            ("patch", f"{BASE_URL}/abc"),
            ("post", f"{BASE_URL}/abc"),
        ],
    )
    def test_unsupported_method_is_unknown_route(self, client, method, path):
        response = getattr(client, method)(path)

        assert response.status_code == 404
        assert response.json() == {"error": "Ruta no encontrada"}


class TestCreateDriver:
    """Test POST /api/conductores."""

    def test_create_valid_driver(self, client, driver_payload):
        response = client.post(BASE_URL, json=driver_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["nombre"] == "Juan"
        assert body["licencia"] == "LIC-123456"
        assert body["fechaNacimiento"] == "1990-05-15"
        assert body["activo"] is True
        assert body["id"]
        assert body["fechaCreacion"] == body["fechaActualizacion"]

    def test_missing_field_lists_required_fields(self, client, repository, driver_payload):
        del driver_payload["telefono"]

        response = client.post(BASE_URL, json=driver_payload)

        assert response.status_code == 400
        body = response.json()
        assert "requeridos" in body["error"]
        assert body["campos"] == REQUIRED_FIELDS
        assert repository.drivers == {}

    def test_empty_field_counts_as_missing(self, client, driver_payload):
        driver_payload["nombre"] = ""

        response = client.post(BASE_URL, json=driver_payload)

        assert response.status_code == 400
        assert "campos" in response.json()

    @pytest.mark.parametrize("email", ["juan.example.com", "juan@example"])
    def test_invalid_email(self, client, driver_payload, email):
        driver_payload["email"] = email

        response = client.post(BASE_URL, json=driver_payload)

        assert response.status_code == 400
        assert "email" in response.json()["error"]
        assert response.json()["field"] == "email"

    def test_invalid_birth_date(self, client, driver_payload):
        driver_payload["fechaNacimiento"] = "not-a-date"

        response = client.post(BASE_URL, json=driver_payload)

        assert response.status_code == 400
        assert response.json()["field"] == "fechaNacimiento"

    def test_duplicate_license(self, client, driver_payload):
        _create(client, driver_payload)
        duplicate = dict(
            driver_payload,
            nombre="Pedro",
            apellido="López",
            email="pedro@example.com",
        )

        response = client.post(BASE_URL, json=duplicate)

        assert response.status_code == 400
        assert "licencia" in response.json()["error"]

    def test_malformed_body_is_400(self, client):
        response = client.post(
            BASE_URL,
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()


class TestReadDrivers:
    """Test GET endpoints."""

    def test_list_empty(self, client):
        response = client.get(BASE_URL)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_all(self, client, driver_payload):
        _create(client, driver_payload)
        _create(client, dict(driver_payload, licencia="LIC-2", email="otro@example.com"))

        response = client.get(BASE_URL)

        assert response.status_code == 200
        assert len(response.json()) == 2
        assert all("id" in driver for driver in response.json())

    def test_get_by_id(self, client, driver_payload):
        created = _create(client, driver_payload)

        response = client.get(f"{BASE_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_id(self, client):
        response = client.get(f"{BASE_URL}/no-existe")

        assert response.status_code == 404
        assert "no encontrado" in response.json()["error"]

    def test_repeated_get_is_stable(self, client, driver_payload):
        created = _create(client, driver_payload)
        url = f"{BASE_URL}/{created['id']}"

        assert client.get(url).json() == client.get(url).json()


class TestUpdateDriver:
    """Test PUT /api/conductores/{id}."""

    def test_update_fields(self, client, driver_payload):
        created = _create(client, driver_payload)

        response = client.put(
            f"{BASE_URL}/{created['id']}",
            json={"nombre": "Juan Carlos", "telefono": "3109998877"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["nombre"] == "Juan Carlos"
        assert body["telefono"] == "3109998877"
        assert body["licencia"] == created["licencia"]
        assert body["id"] == created["id"]
        assert body["fechaCreacion"] == created["fechaCreacion"]

    def test_update_birth_date_and_active_flag(self, client, driver_payload):
        created = _create(client, driver_payload)

        response = client.put(
            f"{BASE_URL}/{created['id']}",
            json={"fechaNacimiento": "1991-12-01", "activo": False},
        )

        assert response.status_code == 200
        assert response.json()["fechaNacimiento"] == "1991-12-01"
        assert response.json()["activo"] is False

    def test_update_unknown_id(self, client):
        response = client.put(f"{BASE_URL}/no-existe", json={"nombre": "X"})

        assert response.status_code == 404
        assert "no encontrado" in response.json()["error"]

    def test_update_invalid_email(self, client, driver_payload):
        created = _create(client, driver_payload)

        response = client.put(f"{BASE_URL}/{created['id']}", json={"email": "invalido"})

        assert response.status_code == 400
        assert "email" in response.json()["error"]

    def test_update_to_taken_license(self, client, driver_payload):
        first = _create(client, driver_payload)
        second = _create(
            client, dict(driver_payload, licencia="LIC-2", email="otro@example.com")
        )

        response = client.put(
            f"{BASE_URL}/{second['id']}", json={"licencia": first["licencia"]}
        )

        assert response.status_code == 400
        assert "licencia" in response.json()["error"]


class TestDeleteDriver:
    """Test DELETE /api/conductores/{id}."""

    def test_delete_then_get(self, client, driver_payload):
        created = _create(client, driver_payload)
        url = f"{BASE_URL}/{created['id']}"

        response = client.delete(url)

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(url).status_code == 404

    def test_delete_unknown_id(self, client):
        response = client.delete(f"{BASE_URL}/no-existe")

        assert response.status_code == 404
        assert "no encontrado" in response.json()["error"]


class TestErrorMapping:
    """Test status codes for storage and unexpected failures."""

    def test_storage_error_is_400(self, client, container):
        service = container.get(DriverService)
        service.list_drivers = AsyncMock(side_effect=RepositoryError("Error listing drivers"))

        response = client.get(BASE_URL)

        assert response.status_code == 400
        assert response.json() == {"error": "Error listing drivers"}

    def test_unexpected_error_is_500_without_detail(self, client, container):
        service = container.get(DriverService)
        service.get_driver = AsyncMock(side_effect=KeyError("internal detail"))

        response = client.get(f"{BASE_URL}/any")

        assert response.status_code == 500
        assert response.json() == {"error": "Error interno del servidor"}
