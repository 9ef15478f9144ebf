from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from restaurant_api.api.orders.models.model_order import DishStatus, OrderStatus
from restaurant_api.api.orders.schemas.schema_invoice import InvoiceResponse
from restaurant_api.api.orders.schemas.schema_order_detail import OrderDetailIn, OrderDetailResponse
from restaurant_api.api.orders.schemas.schema_payment import PaymentIn, PaymentResponse


class OrderCreate(BaseModel):
    customer_name: str = Field(..., max_length=150)
    customer_phone: str = Field(..., max_length=30)
    table_number: int = Field(..., ge=1)
    notes: Optional[str] = None
    user_id: Optional[str] = None
    qr_id: Optional[str] = None
    details: List[OrderDetailIn] = Field(..., min_length=1)

    @field_validator("customer_name", "customer_phone")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class OrderUpdate(BaseModel):
    """
    Header fields are merged only when non-empty. `items` are appended,
    `deleted_item_ids` removed and `payment` updates the first payment
    (or records one when the order has none).
    """
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    table_number: Optional[int] = Field(None, ge=1)
    notes: Optional[str] = None
    status: Optional[OrderStatus] = None
    dish_status: Optional[DishStatus] = None
    items: List[OrderDetailIn] = []
    deleted_item_ids: List[str] = []
    payment: Optional[PaymentIn] = None


class OrderDetailsCreate(BaseModel):
    details: List[OrderDetailIn] = Field(..., min_length=1)


class OrderResponse(BaseModel):
    id: str
    user_id: Optional[str] = None
    qr_id: Optional[str] = None
    customer_name: str
    customer_phone: str
    table_number: int
    status: str
    dish_status: str
    total_amount: float
    notes: Optional[str] = None
    created_at: datetime
    paid_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class OrderDetailedResponse(OrderResponse):
    details: List[OrderDetailResponse] = []
    payments: List[PaymentResponse] = []
    invoice: Optional[InvoiceResponse] = None
