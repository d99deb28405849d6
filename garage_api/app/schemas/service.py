"""
Pydantic schemas for service records (work performed on a vehicle).
"""

from datetime import datetime
from typing import ClassVar, List

from pydantic import BaseModel

from .common import DateValue, GarageModel, GarageRecord, Number, RequiredStr, new_id, utcnow

class ServiceRecordCreate(GarageModel):
    """Schema for recording a service performed on a vehicle."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'vehicleId', 'description', 'cost', and 'date' "
        "are provided and are of the correct types."
    )

    vehicle_id: RequiredStr
    description: RequiredStr
    cost: Number
    date: DateValue

class ServiceRecord(GarageRecord):
    """A stored service record."""

    vehicle_id: str
    description: str
    cost: float
    date: datetime

def new_service_record(data: ServiceRecordCreate) -> ServiceRecord:
    return ServiceRecord(
        id=new_id(),
        vehicle_id=data.vehicle_id,
        description=data.description,
        cost=data.cost,
        date=data.date,
        created_at=utcnow(),
    )

class ServiceRecordResponse(BaseModel):
    message: str
    service: ServiceRecord

class ServiceRecordListResponse(BaseModel):
    message: str
    services: List[ServiceRecord]
