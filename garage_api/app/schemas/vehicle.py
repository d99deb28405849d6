"""
Pydantic schemas for customer vehicles.

The ``customer_id`` of a vehicle is stored as given; it is not checked
against the customer collection.
"""

from typing import ClassVar, List

from pydantic import BaseModel

from .common import GarageModel, GarageRecord, Integer, RequiredStr, new_id, utcnow


class VehicleCreate(GarageModel):
    """Schema for registering a vehicle."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'customerId', 'make', 'model', 'year', and "
        "'licensePlate' are provided and are of the correct types."
    )

    customer_id: RequiredStr
    make: RequiredStr
    model: RequiredStr
    year: Integer
    license_plate: RequiredStr


class Vehicle(GarageRecord):
    """A stored vehicle record."""

    customer_id: str
    make: str
    model: str
    year: int
    license_plate: str


def new_vehicle(data: VehicleCreate) -> Vehicle:
    return Vehicle(
        id=new_id(),
        customer_id=data.customer_id,
        make=data.make,
        model=data.model,
        year=data.year,
        license_plate=data.license_plate,
        created_at=utcnow(),
    )


class VehicleResponse(BaseModel):
    message: str
    vehicle: Vehicle


class VehicleListResponse(BaseModel):
    message: str
    vehicles: List[Vehicle]
