"""
Business logic for service records.
"""

import logging
from typing import Any, List

from garage_api.app.core.errors import RecordNotFoundError
from garage_api.app.core.store import RecordStore
from garage_api.app.schemas.service import ServiceRecord, ServiceRecordCreate, new_service_record
from garage_api.app.services.validation import validate_payload

logger = logging.getLogger(__name__)


class ServiceRecordService:
    """Create, list and look up work performed on vehicles."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def create_service(self, payload: Any) -> ServiceRecord:
        data = validate_payload(ServiceRecordCreate, payload)
        record = new_service_record(data)
        self.store.insert(record.id, record)
        logger.info("Created service %s for vehicle %s", record.id, record.vehicle_id)
        return record

    async def list_services(self) -> List[ServiceRecord]:
        return self.store.values()

    async def get_service(self, service_id: str) -> ServiceRecord:
        record = self.store.get(service_id)
        if record is None:
            raise RecordNotFoundError("Service", service_id)
        return record
