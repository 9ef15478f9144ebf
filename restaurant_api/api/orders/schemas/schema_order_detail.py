from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderDetailIn(BaseModel):
    """
    One order line as sent by the client.

    When `product_id` is set the name and price come from the catalog; otherwise
    `product_name` and `unit_price` are taken as given.
    """
    product_id: Optional[str] = None
    variation_id: Optional[str] = None
    product_name: Optional[str] = None
    variation_name: Optional[str] = None
    unit_price: float = Field(0, ge=0)
    quantity: int = Field(..., ge=1)
    note: Optional[str] = None


class OrderDetailResponse(BaseModel):
    id: str
    order_id: str
    product_id: Optional[str] = None
    variation_id: Optional[str] = None
    product_name: str
    variation_name: Optional[str] = None
    unit_price: float
    quantity: int
    total_price: float
    note: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
