"""
Inventory endpoints for API v1.

Both the single item and the list are returned under the
``inventory`` key.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from garage_api.app.api.deps import get_inventory_service
from garage_api.app.core.errors import RecordNotFoundError, ValidationError
from garage_api.app.schemas.inventory import InventoryItemResponse, InventoryListResponse
from garage_api.app.services.inventory_service import InventoryService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def create_inventory_item(
    payload: Any = Body(...),
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryItemResponse:
    """Add a part to the inventory.

    Expects ``partName`` as a string, ``quantity`` as an integer and
    ``cost`` as a number.
    """
    try:
        item = await service.create_item(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except Exception:
        logger.exception("Failed to create inventory item")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the inventory item.",
        )
    return InventoryItemResponse(message="Inventory item created successfully", inventory=item)


@router.get("", response_model=InventoryListResponse)
async def list_inventory_items(
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryListResponse:
    try:
        items = await service.list_items()
    except Exception:
        logger.exception("Failed to retrieve inventory items")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving inventory items.",
        )
    return InventoryListResponse(message="Inventory items retrieved successfully", inventory=items)


@router.get("/{item_id}", response_model=InventoryItemResponse)
async def get_inventory_item(
    item_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> InventoryItemResponse:
    try:
        item = await service.get_item(item_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory item not found")
    except Exception:
        logger.exception("Failed to retrieve inventory item %s", item_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving the inventory item.",
        )
    return InventoryItemResponse(message="Inventory item retrieved successfully", inventory=item)
