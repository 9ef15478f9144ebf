from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from restaurant_api.api.orders.models.model_payment import PaymentMethod, PaymentStatus


class PaymentIn(BaseModel):
    method: PaymentMethod
    amount: float = Field(..., ge=0)
    transaction_ref: Optional[str] = None


class PaymentCreate(PaymentIn):
    order_id: str
    status: PaymentStatus = PaymentStatus.SUCCESS


class ProcessPaymentRequest(PaymentIn):
    amount: float = Field(..., gt=0)


class PaymentResponse(BaseModel):
    id: str
    order_id: str
    method: str
    amount: float
    status: str
    transaction_ref: Optional[str] = None
    paid_at: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
