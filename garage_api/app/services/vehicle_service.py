"""
Business logic for customer vehicles.
"""

import logging
from typing import Any, List

from garage_api.app.core.errors import RecordNotFoundError
from garage_api.app.core.store import RecordStore
from garage_api.app.schemas.vehicle import Vehicle, VehicleCreate, new_vehicle
from garage_api.app.services.validation import validate_payload

logger = logging.getLogger(__name__)


class VehicleService:
    """Create, list and look up vehicles.

    The owning customer is not looked up; ``customerId`` is stored as
    sent by the client.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def create_vehicle(self, payload: Any) -> Vehicle:
        data = validate_payload(VehicleCreate, payload)
        vehicle = new_vehicle(data)
        self.store.insert(vehicle.id, vehicle)
        logger.info("Created vehicle %s for customer %s", vehicle.id, vehicle.customer_id)
        return vehicle

    async def list_vehicles(self) -> List[Vehicle]:
        return self.store.values()

    async def get_vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = self.store.get(vehicle_id)
        if vehicle is None:
            raise RecordNotFoundError("Vehicle", vehicle_id)
        return vehicle
