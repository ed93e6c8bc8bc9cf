"""
Driver DTO
==========

Pydantic models for driver API requests and responses.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class DriverCreateRequest(BaseModel):
    """
    DTO for creating a driver.

    Every field is optional at the schema level; the controller reports
    all missing fields at once.
    """
    nombre: Optional[str] = Field(None, description="First name")
    apellido: Optional[str] = Field(None, description="Last name")
    licencia: Optional[str] = Field(None, description="License number, unique across drivers")
    telefono: Optional[str] = Field(None, description="Phone number")
    email: Optional[str] = Field(None, description="Email address")
    fechaNacimiento: Optional[str] = Field(None, description="Birth date (ISO 8601)")

    class Config:
        json_schema_extra = {
            "example": {
                "nombre": "Juan",
                "apellido": "Pérez",
                "licencia": "LIC-123456",
                "telefono": "+57 300 123 4567",
                "email": "juan.perez@example.com",
                "fechaNacimiento": "1990-05-15"
            }
        }


class DriverUpdateRequest(BaseModel):
    """DTO for partially updating a driver. Omitted or null fields are kept."""
    nombre: Optional[str] = None
    apellido: Optional[str] = None
    licencia: Optional[str] = None
    telefono: Optional[str] = None
    email: Optional[str] = None
    fechaNacimiento: Optional[str] = None
    activo: Optional[bool] = None

    class Config:
        json_schema_extra = {
            "example": {
                "telefono": "+57 310 765 4321",
                "activo": False
            }
        }


class DriverResponse(BaseModel):
    """DTO for driver data."""
    id: str
    nombre: str
    apellido: str
    licencia: str
    telefono: str
    email: str
    fechaNacimiento: str
    activo: bool
    fechaCreacion: str
    fechaActualizacion: str

    class Config:
        json_schema_extra = {
            "example": {
                "id": "0b6f1c1e-9a47-4c53-9d0e-6b1a0c1f6a52",
                "nombre": "Juan",
                "apellido": "Pérez",
                "licencia": "LIC-123456",
                "telefono": "+57 300 123 4567",
                "email": "juan.perez@example.com",
                "fechaNacimiento": "1990-05-15",
                "activo": True,
                "fechaCreacion": "2025-12-20T09:11:50Z",
                "fechaActualizacion": "2025-12-20T09:11:50Z"
            }
        }


class ErrorResponse(BaseModel):
    """DTO for error bodies."""
    error: str
    field: Optional[str] = None
    campos: Optional[List[str]] = None


class HealthResponse(BaseModel):
    """DTO for the health check."""
    status: str
    message: str
