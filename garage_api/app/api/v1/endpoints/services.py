"""
Service record endpoints for API v1.

A service record describes work done on a vehicle: a description, its
cost and the date it was carried out.  Dates are ISO‑8601 strings; a
date that cannot be parsed is rejected with HTTP 400.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from garage_api.app.api.deps import get_service_record_service
from garage_api.app.core.errors import RecordNotFoundError, ValidationError
from garage_api.app.schemas.service import ServiceRecordListResponse, ServiceRecordResponse
from garage_api.app.services.service_record_service import ServiceRecordService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=ServiceRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    payload: Any = Body(...),
    service: ServiceRecordService = Depends(get_service_record_service),
) -> ServiceRecordResponse:
    """Record a service performed on a vehicle."""
    try:
        record = await service.create_service(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except Exception:
        logger.exception("Failed to create service")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the service.",
        )
    return ServiceRecordResponse(message="Service created successfully", service=record)


@router.get("", response_model=ServiceRecordListResponse)
async def list_services(
    service: ServiceRecordService = Depends(get_service_record_service),
) -> ServiceRecordListResponse:
    try:
        records = await service.list_services()
    except Exception:
        logger.exception("Failed to retrieve services")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving services.",
        )
    return ServiceRecordListResponse(message="Services retrieved successfully", services=records)


@router.get("/{service_id}", response_model=ServiceRecordResponse)
async def get_service(
    service_id: str,
    service: ServiceRecordService = Depends(get_service_record_service),
) -> ServiceRecordResponse:
    try:
        record = await service.get_service(service_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    except Exception:
        logger.exception("Failed to retrieve service %s", service_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving the service.",
        )
    return ServiceRecordResponse(message="Service retrieved successfully", service=record)
