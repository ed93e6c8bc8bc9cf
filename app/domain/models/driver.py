"""
Driver Model
============

Domain model representing a driver in the system.
This is a pure domain object with no infrastructure dependencies.
"""
import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Dict, Optional

from app.domain.constants import DriverFields
from app.domain.exceptions import ValidationError
from app.domain.validators import is_valid_email
from app.utils.datetime_utils import now, to_date_iso, to_iso

# Fields a caller may change through Driver.update()
UPDATABLE_FIELDS = (
    "nombre",
    "apellido",
    "licencia",
    "telefono",
    "email",
    "fecha_nacimiento",
    "activo",
)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


@dataclass(frozen=True)
class Driver:
    """
    Driver domain model.

    Immutable: ``update`` returns a new instance. Every instance is
    validated on construction, so an invalid Driver never exists.
    """
    id: str
    nombre: str
    apellido: str
    licencia: str
    telefono: str
    email: str
    fecha_nacimiento: date
    activo: bool = True
    fecha_creacion: datetime = field(default_factory=now)
    fecha_actualizacion: datetime = field(default_factory=now)

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if _is_blank(self.nombre):
            raise ValidationError("El nombre es requerido", DriverFields.NOMBRE)
        if _is_blank(self.apellido):
            raise ValidationError("El apellido es requerido", DriverFields.APELLIDO)
        if _is_blank(self.licencia):
            raise ValidationError("La licencia es requerida", DriverFields.LICENCIA)
        if not is_valid_email(self.email):
            raise ValidationError("El email no es válido", DriverFields.EMAIL)
        if _is_blank(self.telefono):
            raise ValidationError("El teléfono es requerido", DriverFields.TELEFONO)
        if not isinstance(self.fecha_nacimiento, date):
            raise ValidationError(
                "La fecha de nacimiento es requerida", DriverFields.FECHA_NACIMIENTO
            )

    @classmethod
    def create(
        cls,
        nombre: str,
        apellido: str,
        licencia: str,
        telefono: str,
        email: str,
        fecha_nacimiento: date,
        id: Optional[str] = None,
    ) -> "Driver":
        """
        Build a new, active driver.

        Both timestamps are set to the same instant. A random id is
        generated unless one is given.
        """
        timestamp = now()
        return cls(
            id=id or str(uuid.uuid4()),
            nombre=nombre,
            apellido=apellido,
            licencia=licencia,
            telefono=telefono,
            email=email,
            fecha_nacimiento=fecha_nacimiento,
            activo=True,
            fecha_creacion=timestamp,
            fecha_actualizacion=timestamp,
        )

    def update(self, **changes: Any) -> "Driver":
        """
        Return a copy with ``changes`` applied and the update timestamp refreshed.

        ``None`` values are ignored so a partial payload keeps the current
        value. The id and creation timestamp never change. The resulting
        record is re-validated in full.

        Raises:
            ValueError: If a field outside UPDATABLE_FIELDS is given
            ValidationError: If the resulting driver is invalid
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, fecha_actualizacion=now(), **applied)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the public driver object (dates as ISO 8601 strings)."""
        return {
            DriverFields.ID: self.id,
            DriverFields.NOMBRE: self.nombre,
            DriverFields.APELLIDO: self.apellido,
            DriverFields.LICENCIA: self.licencia,
            DriverFields.TELEFONO: self.telefono,
            DriverFields.EMAIL: self.email,
            DriverFields.FECHA_NACIMIENTO: to_date_iso(self.fecha_nacimiento),
            DriverFields.ACTIVO: self.activo,
            DriverFields.FECHA_CREACION: to_iso(self.fecha_creacion),
            DriverFields.FECHA_ACTUALIZACION: to_iso(self.fecha_actualizacion),
        }
