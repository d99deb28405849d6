"""
FastAPI dependencies shared by the v1 endpoints.

The ``GarageStore`` is created once per application in ``create_app``
and kept on ``app.state``; each request builds a lightweight service
around the collection it needs.
"""

from fastapi import Depends, Request

from garage_api.app.core.store import GarageStore
from garage_api.app.services.customer_service import CustomerService
from garage_api.app.services.inventory_service import InventoryService
from garage_api.app.services.invoice_service import InvoiceService
from garage_api.app.services.service_record_service import ServiceRecordService
from garage_api.app.services.vehicle_service import VehicleService


def get_store(request: Request) -> GarageStore:
    return request.app.state.store


def get_customer_service(store: GarageStore = Depends(get_store)) -> CustomerService:
    return CustomerService(store.customers)


def get_vehicle_service(store: GarageStore = Depends(get_store)) -> VehicleService:
    return VehicleService(store.vehicles)


def get_service_record_service(store: GarageStore = Depends(get_store)) -> ServiceRecordService:
    return ServiceRecordService(store.services)


def get_inventory_service(store: GarageStore = Depends(get_store)) -> InventoryService:
    return InventoryService(store.inventory)


def get_invoice_service(store: GarageStore = Depends(get_store)) -> InvoiceService:
    return InvoiceService(store.invoices)
