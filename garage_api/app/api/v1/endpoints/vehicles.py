"""
Vehicle endpoints for API v1.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from garage_api.app.api.deps import get_vehicle_service
from garage_api.app.core.errors import RecordNotFoundError, ValidationError
from garage_api.app.schemas.vehicle import VehicleListResponse, VehicleResponse
from garage_api.app.services.vehicle_service import VehicleService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=VehicleResponse, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    payload: Any = Body(...),
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    """Register a vehicle for a customer.

    Expects ``customerId``, ``make``, ``model``, ``licensePlate`` as
    strings and ``year`` as an integer.
    """
    try:
        vehicle = await service.create_vehicle(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except Exception:
        logger.exception("Failed to create vehicle")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the vehicle.",
        )
    return VehicleResponse(message="Vehicle created successfully", vehicle=vehicle)


@router.get("", response_model=VehicleListResponse)
async def list_vehicles(
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleListResponse:
    try:
        vehicles = await service.list_vehicles()
    except Exception:
        logger.exception("Failed to retrieve vehicles")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving vehicles.",
        )
    return VehicleListResponse(message="Vehicles retrieved successfully", vehicles=vehicles)


@router.get("/{vehicle_id}", response_model=VehicleResponse)
async def get_vehicle(
    vehicle_id: str,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleResponse:
    try:
        vehicle = await service.get_vehicle(vehicle_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vehicle not found")
    except Exception:
        logger.exception("Failed to retrieve vehicle %s", vehicle_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving the vehicle.",
        )
    return VehicleResponse(message="Vehicle retrieved successfully", vehicle=vehicle)
