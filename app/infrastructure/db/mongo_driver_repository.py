"""
MongoDB Driver Repository
=========================

Concrete implementation of DriverRepository using MongoDB.
"""
import logging
from datetime import datetime
from typing import List, Optional

from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.domain.constants import DriverFields
from app.domain.exceptions import DuplicateLicenseError, RepositoryError
from app.domain.models.driver import Driver
from app.domain.repositories.driver_repository import DriverRepository
from app.utils.datetime_utils import date_to_datetime

logger = logging.getLogger(__name__)


class MongoDriverRepository(DriverRepository):
    """
    MongoDB implementation of DriverRepository.

    Drivers are addressed by their own ``id`` field; Mongo's ``_id`` is
    never exposed.
    """

    def __init__(self, collection: AsyncCollection):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Collection holding driver documents
        """
        self._collection = collection

    def _to_entity(self, doc: dict) -> Driver:
        """Convert MongoDB document to Driver entity."""
        birth_date = doc[DriverFields.FECHA_NACIMIENTO]
        if isinstance(birth_date, datetime):
            birth_date = birth_date.date()

        return Driver(
            id=doc[DriverFields.ID],
            nombre=doc[DriverFields.NOMBRE],
            apellido=doc[DriverFields.APELLIDO],
            licencia=doc[DriverFields.LICENCIA],
            telefono=doc[DriverFields.TELEFONO],
            email=doc[DriverFields.EMAIL],
            fecha_nacimiento=birth_date,
            activo=doc.get(DriverFields.ACTIVO, True),
            fecha_creacion=doc[DriverFields.FECHA_CREACION],
            fecha_actualizacion=doc[DriverFields.FECHA_ACTUALIZACION],
        )

    def _to_document(self, driver: Driver) -> dict:
        """Convert Driver entity to MongoDB document."""
        return {
            DriverFields.ID: driver.id,
            DriverFields.NOMBRE: driver.nombre,
            DriverFields.APELLIDO: driver.apellido,
            DriverFields.LICENCIA: driver.licencia,
            DriverFields.TELEFONO: driver.telefono,
            DriverFields.EMAIL: driver.email,
            DriverFields.FECHA_NACIMIENTO: date_to_datetime(driver.fecha_nacimiento),
            DriverFields.ACTIVO: driver.activo,
            DriverFields.FECHA_CREACION: driver.fecha_creacion,
            DriverFields.FECHA_ACTUALIZACION: driver.fecha_actualizacion,
        }

    def _map_duplicate_key(self, error: DuplicateKeyError, driver: Driver) -> Exception:
        """Only a clash on the license index is a duplicate license."""
        key_pattern = (error.details or {}).get("keyPattern") or {}
        if DriverFields.LICENCIA in key_pattern:
            return DuplicateLicenseError(driver.licencia)
        return RepositoryError(f"Duplicate key writing driver {driver.id}: {error}")

    async def ensure_indexes(self) -> None:
        """Create the unique license index and the id lookup index."""
        try:
            await self._collection.create_index(DriverFields.ID, unique=True)
            await self._collection.create_index(DriverFields.LICENCIA, unique=True)
        except PyMongoError as e:
            raise RepositoryError(f"Error creating driver indexes: {e}") from e
        logger.info("Driver indexes ensured on collection '%s'", self._collection.name)

    async def save(self, driver: Driver) -> Driver:
        """Insert a new driver document."""
        try:
            await self._collection.insert_one(self._to_document(driver))
        except DuplicateKeyError as e:
            raise self._map_duplicate_key(e, driver) from e
        except PyMongoError as e:
            raise RepositoryError(f"Error saving driver: {e}") from e
        return driver

    async def find_by_id(self, driver_id: str) -> Optional[Driver]:
        """Find a driver by its ID."""
        try:
            doc = await self._collection.find_one({DriverFields.ID: driver_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error reading driver: {e}") from e
        return self._to_entity(doc) if doc else None

    async def find_all(self) -> List[Driver]:
        """Find all drivers in natural order."""
        try:
            docs = await self._collection.find({}).to_list()
        except PyMongoError as e:
            raise RepositoryError(f"Error listing drivers: {e}") from e
        return [self._to_entity(doc) for doc in docs]

    async def update(self, driver_id: str, driver: Driver) -> Optional[Driver]:
        """Replace the stored fields of an existing driver."""
        try:
            result = await self._collection.find_one_and_update(
                {DriverFields.ID: driver_id},
                {"$set": self._to_document(driver)},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise self._map_duplicate_key(e, driver) from e
        except PyMongoError as e:
            raise RepositoryError(f"Error updating driver: {e}") from e
        return self._to_entity(result) if result else None

    async def delete(self, driver_id: str) -> bool:
        """Delete a driver by ID."""
        try:
            result = await self._collection.delete_one({DriverFields.ID: driver_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting driver: {e}") from e
        return result.deleted_count > 0

    async def find_by_licencia(self, licencia: str) -> Optional[Driver]:
        """Find a driver by license number."""
        try:
            doc = await self._collection.find_one({DriverFields.LICENCIA: licencia})
        except PyMongoError as e:
            raise RepositoryError(f"Error reading driver: {e}") from e
        return self._to_entity(doc) if doc else None
