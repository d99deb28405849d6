"""
Customer endpoints for API v1.

Customers are created with a name, a ten digit contact number and a
unique email address.  Validation failures are returned as HTTP 400
with a message describing the first problem found; any other failure
is logged and reported as HTTP 500.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from garage_api.app.api.deps import get_customer_service
from garage_api.app.core.errors import RecordNotFoundError, ValidationError
from garage_api.app.schemas.customer import CustomerListResponse, CustomerResponse
from garage_api.app.services.customer_service import CustomerService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    payload: Any = Body(...),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    """Register a new customer.

    Expects ``name``, ``contact`` and ``email``.  Rejected with 400 when
    a field is missing or not a string, when the email or contact is
    malformed, or when the email is already registered.
    """
    try:
        customer = await service.create_customer(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except Exception:
        logger.exception("Failed to create customer")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the customer.",
        )
    return CustomerResponse(message="Customer created successfully", customer=customer)


@router.get("", response_model=CustomerListResponse)
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> CustomerListResponse:
    """Return every stored customer."""
    try:
        customers = await service.list_customers()
    except Exception:
        logger.exception("Failed to retrieve customers")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving customers.",
        )
    return CustomerListResponse(message="Customers retrieved successfully", customers=customers)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    """Retrieve a single customer by ID.  Returns 404 if not found."""
    try:
        customer = await service.get_customer(customer_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    except Exception:
        logger.exception("Failed to retrieve customer %s", customer_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving the customer.",
        )
    return CustomerResponse(message="Customer retrieved successfully", customer=customer)
