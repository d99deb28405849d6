"""
Top‑level router for version 1 of the API.

This router aggregates the per‑resource routers under their resource
prefixes.  Each resource router declares its collection routes with an
empty path so that they resolve to ``/customers`` rather than
``/customers/``.
"""

from fastapi import APIRouter

from .endpoints import customers, inventory, invoices, services, vehicles

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])
router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
