"""
Business logic for garage customers.

Customers are the only entity with rules beyond field types: the
email must look like an address, the contact must be a ten digit
number and no two customers may share an email.  The checks run in
that order so the client sees the first problem only.
"""

import logging
from typing import Any, List

from garage_api.app.core.errors import DuplicateEmailError, RecordNotFoundError, ValidationError
from garage_api.app.core.store import RecordStore
from garage_api.app.schemas.customer import (
    Customer,
    CustomerCreate,
    is_valid_contact,
    is_valid_email,
    new_customer,
)
from garage_api.app.services.validation import validate_payload

logger = logging.getLogger(__name__)


class CustomerService:
    """Create, list and look up customers in a ``RecordStore``."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def create_customer(self, payload: Any) -> Customer:
        """Validate ``payload`` and store a new customer.

        Raises ``ValidationError`` for missing or mistyped fields, a
        malformed email or contact, and ``DuplicateEmailError`` when the
        email is already taken.
        """
        data = validate_payload(CustomerCreate, payload)
        if not is_valid_email(data.email):
            raise ValidationError("Invalid email format: Ensure the email address is valid.")
        if not is_valid_contact(data.contact):
            raise ValidationError(
                "Invalid contact format: Ensure the contact number is a 10-digit number."
            )
        if self.email_exists(data.email):
            logger.warning("Rejected customer with duplicate email %s", data.email)
            raise DuplicateEmailError("Email already exists: Ensure the email address is unique.")

        customer = new_customer(data)
        self.store.insert(customer.id, customer)
        logger.info("Created customer %s", customer.id)
        return customer

    def email_exists(self, email: str) -> bool:
        return any(customer.email == email for customer in self.store.values())

    async def list_customers(self) -> List[Customer]:
        return self.store.values()

    async def get_customer(self, customer_id: str) -> Customer:
        customer = self.store.get(customer_id)
        if customer is None:
            raise RecordNotFoundError("Customer", customer_id)
        return customer
