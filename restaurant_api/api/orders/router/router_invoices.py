# restaurant_api/api/orders/router/router_invoices.py
from fastapi import APIRouter, Depends

from restaurant_api.api.orders.schemas.schema_invoice import InvoiceResponse
from restaurant_api.api.orders.services.dependencies import get_invoice_service
from restaurant_api.api.orders.services.service_invoice import InvoiceService
from restaurant_api.core.admin_dependencies import require_staff
from restaurant_api.core.responses import success

router = APIRouter(
    prefix="/api/v1/invoices",
    tags=["Invoices"],
    dependencies=[Depends(require_staff)],
)


@router.get("")
def list_invoices(svc: InvoiceService = Depends(get_invoice_service)):
    return success("Invoices retrieved successfully", [InvoiceResponse.model_validate(i) for i in svc.list_invoices()])


@router.get("/{invoice_id}")
def get_invoice(invoice_id: str, svc: InvoiceService = Depends(get_invoice_service)):
    return success("Invoice retrieved successfully", InvoiceResponse.model_validate(svc.get_invoice(invoice_id)))
