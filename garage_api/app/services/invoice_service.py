"""
Business logic for invoices.

As with vehicles, the billed customer is not checked against the
customer collection.
"""

import logging
from typing import Any, List

from garage_api.app.core.errors import RecordNotFoundError
from garage_api.app.core.store import RecordStore
from garage_api.app.schemas.invoice import Invoice, InvoiceCreate, new_invoice
from garage_api.app.services.validation import validate_payload

logger = logging.getLogger(__name__)


class InvoiceService:
    """Create, list and look up invoices."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def create_invoice(self, payload: Any) -> Invoice:
        data = validate_payload(InvoiceCreate, payload)
        invoice = new_invoice(data)
        self.store.insert(invoice.id, invoice)
        logger.info("Created invoice %s for customer %s", invoice.id, invoice.customer_id)
        return invoice

    async def list_invoices(self) -> List[Invoice]:
        return self.store.values()

    async def get_invoice(self, invoice_id: str) -> Invoice:
        invoice = self.store.get(invoice_id)
        if invoice is None:
            raise RecordNotFoundError("Invoice", invoice_id)
        return invoice
