"""
Pydantic schemas for garage customers.

``CustomerCreate`` validates the incoming field bag, including the
format rules for email and contact number.  ``Customer`` is the stored
immutable record; ``new_customer`` builds one with a fresh identifier
and creation timestamp.
"""

import re
from typing import ClassVar, List

from pydantic import BaseModel

from .common import GarageModel, GarageRecord, RequiredStr, new_id, utcnow

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
CONTACT_PATTERN = re.compile(r"[0-9]{10}")


class CustomerCreate(GarageModel):
    """Schema for creating a new customer."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'name', 'contact', and 'email' are provided and are strings."
    )

    name: RequiredStr
    contact: RequiredStr
    email: RequiredStr


class Customer(GarageRecord):
    """A stored customer record."""

    name: str
    contact: str
    email: str


def is_valid_email(email: str) -> bool:
    """Return True if ``email`` has a basic ``local@domain.tld`` shape."""
    return EMAIL_PATTERN.search(email) is not None


def is_valid_contact(contact: str) -> bool:
    """Return True if ``contact`` is exactly ten ASCII digits."""
    return CONTACT_PATTERN.fullmatch(contact) is not None


def new_customer(data: CustomerCreate) -> Customer:
    return Customer(
        id=new_id(),
        name=data.name,
        contact=data.contact,
        email=data.email,
        created_at=utcnow(),
    )


class CustomerResponse(BaseModel):
    message: str
    customer: Customer


class CustomerListResponse(BaseModel):
    message: str
    customers: List[Customer]
