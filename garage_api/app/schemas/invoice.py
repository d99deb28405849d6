"""
Pydantic schemas for customer invoices.
"""

from datetime import datetime
from typing import ClassVar, List

from pydantic import BaseModel

from .common import DateValue, GarageModel, GarageRecord, Number, RequiredStr, new_id, utcnow

class InvoiceCreate(GarageModel):
    """Schema for billing a customer."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'customerId', 'amount', and 'date' are provided "
        "and are of the correct types."
    )

    customer_id: RequiredStr
    amount: Number
    date: DateValue

class Invoice(GarageRecord):
    """A stored invoice record."""

    customer_id: str
    amount: float
    date: datetime

def new_invoice(data: InvoiceCreate) -> Invoice:
    return Invoice(
        id=new_id(),
        customer_id=data.customer_id,
        amount=data.amount,
        date=data.date,
        created_at=utcnow(),
    )

class InvoiceResponse(BaseModel):
    message: str
    invoice: Invoice

class InvoiceListResponse(BaseModel):
    message: str
    invoices: List[Invoice]
