# restaurant_api/api/orders/router/router_payments.py
from fastapi import APIRouter, Depends, status

from restaurant_api.api.orders.schemas.schema_payment import PaymentCreate, PaymentResponse
from restaurant_api.api.orders.services.dependencies import get_payment_service
from restaurant_api.api.orders.services.service_payment import PaymentService
from restaurant_api.core.admin_dependencies import require_staff
from restaurant_api.core.responses import created, success

router = APIRouter(
    prefix="/api/v1/payments",
    tags=["Payments"],
    dependencies=[Depends(require_staff)],
)


@router.get("")
def list_payments(svc: PaymentService = Depends(get_payment_service)):
    return success("Payments retrieved successfully", [PaymentResponse.model_validate(p) for p in svc.list_payments()])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_payment(payload: PaymentCreate, svc: PaymentService = Depends(get_payment_service)):
    payment = svc.create_payment(payload)
    return created("Payment created successfully", PaymentResponse.model_validate(payment))
