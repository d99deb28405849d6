"""
Invoice endpoints for API v1.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from garage_api.app.api.deps import get_invoice_service
from garage_api.app.core.errors import RecordNotFoundError, ValidationError
from garage_api.app.schemas.invoice import InvoiceListResponse, InvoiceResponse
from garage_api.app.services.invoice_service import InvoiceService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    payload: Any = Body(...),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    """Bill a customer.  Expects ``customerId``, ``amount`` and ``date``."""
    try:
        invoice = await service.create_invoice(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except Exception:
        logger.exception("Failed to create invoice")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the invoice.",
        )
    return InvoiceResponse(message="Invoice created successfully", invoice=invoice)


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceListResponse:
    try:
        invoices = await service.list_invoices()
    except Exception:
        logger.exception("Failed to retrieve invoices")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving invoices.",
        )
    return InvoiceListResponse(message="Invoices retrieved successfully", invoices=invoices)


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    try:
        invoice = await service.get_invoice(invoice_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    except Exception:
        logger.exception("Failed to retrieve invoice %s", invoice_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving the invoice.",
        )
    return InvoiceResponse(message="Invoice retrieved successfully", invoice=invoice)
