"""
Key‑value storage for garage records.

Services never touch a database directly; they receive a
``RecordStore`` per entity kind and only call ``insert``, ``get`` and
``values`` on it.  Two backends are provided:

* ``MemoryStore`` keeps records in a dict for the lifetime of the
  process.
* ``SQLiteStore`` persists records as JSON documents in the
  ``records`` table created by ``core.db``.

``GarageStore`` bundles one store per collection and is what the
application injects into its services.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from garage_api.app.schemas.customer import Customer
from garage_api.app.schemas.inventory import InventoryItem
from garage_api.app.schemas.invoice import Invoice
from garage_api.app.schemas.service import ServiceRecord
from garage_api.app.schemas.vehicle import Vehicle

from .config import Settings
from .db import get_cursor, init_db
from .errors import RecordExistsError

RecordT = TypeVar("RecordT", bound=BaseModel)

logger = logging.getLogger(__name__)


class RecordStore(ABC, Generic[RecordT]):
    """Interface shared by all storage backends.

    Inserting under a key that is already present raises
    ``RecordExistsError``; stored records are never overwritten.
    """

    def __init__(self, collection: str) -> None:
        self.collection = collection

    @abstractmethod
    def insert(self, key: str, record: RecordT) -> None:
        ...

    @abstractmethod
    def get(self, key: str) -> Optional[RecordT]:
        ...

    @abstractmethod
    def values(self) -> List[RecordT]:
        ...


class MemoryStore(RecordStore[RecordT]):
    """Dict‑backed store.  ``values`` returns records in insertion order."""

    def __init__(self, collection: str) -> None:
        super().__init__(collection)
        self._records: Dict[str, RecordT] = {}

    def insert(self, key: str, record: RecordT) -> None:
        if key in self._records:
            raise RecordExistsError(self.collection, key)
        self._records[key] = record

    def get(self, key: str) -> Optional[RecordT]:
        return self._records.get(key)

    def values(self) -> List[RecordT]:
        return list(self._records.values())


class SQLiteStore(RecordStore[RecordT]):
    """Store backed by the shared SQLite ``records`` table.

    Records are serialised with ``model_dump_json`` and rebuilt with
    ``model_validate_json`` of ``model``.  The database schema must
    already be initialised (see ``build_store``).
    """

    def __init__(self, collection: str, model: Type[RecordT], database_url: str) -> None:
        super().__init__(collection)
        self.model = model
        self.database_url = database_url

    def insert(self, key: str, record: RecordT) -> None:
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(
                    "INSERT INTO records (collection, id, payload) VALUES (?, ?, ?)",
                    (self.collection, key, record.model_dump_json(by_alias=True)),
                )
        except sqlite3.IntegrityError as exc:
            raise RecordExistsError(self.collection, key) from exc

    def get(self, key: str) -> Optional[RecordT]:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                "SELECT payload FROM records WHERE collection = ? AND id = ?",
                (self.collection, key),
            ).fetchone()
        if row is None:
            return None
        return self.model.model_validate_json(row["payload"])

    def values(self) -> List[RecordT]:
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute(
                "SELECT payload FROM records WHERE collection = ? ORDER BY seq",
                (self.collection,),
            ).fetchall()
        return [self.model.model_validate_json(row["payload"]) for row in rows]


@dataclass
class GarageStore:
    """One ``RecordStore`` per entity kind."""

    customers: RecordStore
    vehicles: RecordStore
    services: RecordStore
    inventory: RecordStore
    invoices: RecordStore


def build_store(settings: Settings) -> GarageStore:
    """Create the ``GarageStore`` selected by ``settings.storage_backend``.

    Raises ``ValueError`` for an unknown backend name.
    """
    models = {
        "customers": Customer,
        "vehicles": Vehicle,
        "services": ServiceRecord,
        "inventory": InventoryItem,
        "invoices": Invoice,
    }
    backend = settings.storage_backend.lower()
    if backend == "memory":
        stores = {name: MemoryStore(name) for name in models}
    elif backend == "sqlite":
        version = init_db(settings.database_url)
        logger.info("SQLite store ready at %s (schema version %s)", settings.database_url, version)
        stores = {
            name: SQLiteStore(name, model, settings.database_url)
            for name, model in models.items()
        }
    else:
        raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")
    return GarageStore(**stores)
