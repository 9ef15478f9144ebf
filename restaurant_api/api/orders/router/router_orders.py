# restaurant_api/api/orders/router/router_orders.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from restaurant_api.api.access.models.model_user import UserModel
from restaurant_api.api.orders.models.model_order import OrderStatus
from restaurant_api.api.orders.schemas.schema_invoice import InvoiceResponse
from restaurant_api.api.orders.schemas.schema_order import (
    OrderCreate,
    OrderDetailedResponse,
    OrderDetailsCreate,
    OrderResponse,
    OrderUpdate,
)
from restaurant_api.api.orders.schemas.schema_order_detail import OrderDetailResponse
from restaurant_api.api.orders.schemas.schema_payment import PaymentResponse, ProcessPaymentRequest
from restaurant_api.api.orders.services.dependencies import (
    get_invoice_service,
    get_order_service,
    get_payment_service,
)
from restaurant_api.api.orders.services.service_invoice import InvoiceService
from restaurant_api.api.orders.services.service_order import DEFAULT_PER_PAGE, OrderService
from restaurant_api.api.orders.services.service_payment import PaymentService
from restaurant_api.core.admin_dependencies import require_staff
from restaurant_api.core.responses import created, pagination_metadata, success
from restaurant_api.utils.logger import logger

router = APIRouter(prefix="/api/v1/orders", tags=["Orders"])


# Customers order from the table QR, so creation is public
@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreate, svc: OrderService = Depends(get_order_service)):
    logger.info(f"[ORDERS] New order table={payload.table_number} items={len(payload.details)}")
    order = svc.create_order(payload)
    return created("Order created successfully", OrderDetailedResponse.model_validate(order))


@router.get("")
def list_orders(
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=100),
    status_filter: Optional[OrderStatus] = Query(None, alias="status"),
    svc: OrderService = Depends(get_order_service),
    _: UserModel = Depends(require_staff),
):
    items, total = svc.list_orders(page, per_page, status_filter.value if status_filter else None)
    return success(
        "Orders retrieved successfully",
        [OrderDetailedResponse.model_validate(o) for o in items],
        pagination_metadata(page, per_page, total),
    )


@router.get("/{order_id}")
def get_order(
    order_id: str,
    svc: OrderService = Depends(get_order_service),
    _: UserModel = Depends(require_staff),
):
    return success("Order retrieved successfully", OrderDetailedResponse.model_validate(svc.get_order(order_id)))


@router.put("/{order_id}")
def update_order(
    order_id: str,
    payload: OrderUpdate,
    svc: OrderService = Depends(get_order_service),
    _: UserModel = Depends(require_staff),
):
    order = svc.update_order(order_id, payload)
    return success("Order updated successfully", OrderDetailedResponse.model_validate(order))


@router.post("/{order_id}/cancel")
def cancel_order(
    order_id: str,
    svc: OrderService = Depends(get_order_service),
    current_user: UserModel = Depends(require_staff),
):
    order = svc.cancel_order(order_id, user_id=current_user.id)
    return success("Order cancelled successfully", OrderResponse.model_validate(order))


@router.post("/{order_id}/complete")
def mark_order_completed(
    order_id: str,
    svc: OrderService = Depends(get_order_service),
    _: UserModel = Depends(require_staff),
):
    order = svc.mark_completed(order_id)
    return success("Dish status updated to completed", OrderResponse.model_validate(order))


@router.post("/{order_id}/payment")
def process_payment(
    order_id: str,
    payload: ProcessPaymentRequest,
    svc: OrderService = Depends(get_order_service),
    current_user: UserModel = Depends(require_staff),
):
    payment = svc.process_payment(order_id, payload, user_id=current_user.id)
    return success("Payment processed successfully", PaymentResponse.model_validate(payment))


@router.get("/{order_id}/payments")
def list_order_payments(
    order_id: str,
    svc: PaymentService = Depends(get_payment_service),
    _: UserModel = Depends(require_staff),
):
    payments = svc.list_order_payments(order_id)
    return success("Payments retrieved successfully", [PaymentResponse.model_validate(p) for p in payments])


@router.get("/{order_id}/details")
def list_order_details(
    order_id: str,
    svc: OrderService = Depends(get_order_service),
    _: UserModel = Depends(require_staff),
):
    details = svc.list_order_details(order_id)
    return success("Order details retrieved successfully", [OrderDetailResponse.model_validate(d) for d in details])


@router.post("/{order_id}/details", status_code=status.HTTP_201_CREATED)
def create_order_details(
    order_id: str,
    payload: OrderDetailsCreate,
    svc: OrderService = Depends(get_order_service),
    _: UserModel = Depends(require_staff),
):
    details = svc.create_order_details(order_id, payload)
    return created("Order details created successfully", [OrderDetailResponse.model_validate(d) for d in details])


@router.post("/{order_id}/invoice", status_code=status.HTTP_201_CREATED)
def create_invoice(
    order_id: str,
    svc: InvoiceService = Depends(get_invoice_service),
    _: UserModel = Depends(require_staff),
):
    invoice = svc.create_invoice(order_id)
    return created("Invoice created successfully", InvoiceResponse.model_validate(invoice))


@router.get("/{order_id}/invoice")
def get_order_invoice(
    order_id: str,
    svc: InvoiceService = Depends(get_invoice_service),
    _: UserModel = Depends(require_staff),
):
    return success("Invoice retrieved successfully", InvoiceResponse.model_validate(svc.get_order_invoice(order_id)))
