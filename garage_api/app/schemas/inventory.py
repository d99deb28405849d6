"""
Pydantic schemas for parts inventory.
"""

from typing import ClassVar, List

from pydantic import BaseModel

from .common import GarageModel, GarageRecord, Integer, Number, RequiredStr, new_id, utcnow


class InventoryItemCreate(GarageModel):
    """Schema for adding a part to the inventory."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'partName', 'quantity', and 'cost' are provided "
        "and are of the correct types."
    )

    part_name: RequiredStr
    quantity: Integer
    cost: Number


class InventoryItem(GarageRecord):
    """
    A stored inventory item.

    Attributes:
        part_name (str): Name of the part or supply
        quantity (int): Units on hand when the item was recorded
        cost (float): Unit cost
    """

    part_name: str
    quantity: int
    cost: float


def new_inventory_item(data: InventoryItemCreate) -> InventoryItem:
    return InventoryItem(
        id=new_id(),
        part_name=data.part_name,
        quantity=data.quantity,
        cost=data.cost,
        created_at=utcnow(),
    )


class InventoryItemResponse(BaseModel):
    message: str
    inventory: InventoryItem


class InventoryListResponse(BaseModel):
    message: str
    inventory: List[InventoryItem]
