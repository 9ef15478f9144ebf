from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class InvoiceResponse(BaseModel):
    id: str
    order_id: Optional[str] = None
    invoice_number: str
    customer_snapshot: dict[str, Any]
    items_snapshot: list[dict[str, Any]]
    total: float
    issued_at: datetime
    pdf_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
