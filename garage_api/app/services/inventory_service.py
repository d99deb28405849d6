"""
Business logic for the parts inventory.
"""

import logging
from typing import Any, List

from garage_api.app.core.errors import RecordNotFoundError
from garage_api.app.core.store import RecordStore
from garage_api.app.schemas.inventory import InventoryItem, InventoryItemCreate, new_inventory_item
from garage_api.app.services.validation import validate_payload

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def create_item(self, payload: Any) -> InventoryItem:
        data = validate_payload(InventoryItemCreate, payload)
        item = new_inventory_item(data)
        self.store.insert(item.id, item)
        logger.info("Created inventory item %s (%s x%s)", item.id, item.part_name, item.quantity)
        return item

    async def list_items(self) -> List[InventoryItem]:
        return self.store.values()

    async def get_item(self, item_id: str) -> InventoryItem:
        item = self.store.get(item_id)
        if item is None:
            raise RecordNotFoundError("Inventory item", item_id)
        return item
