from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _QRCodeIn(BaseModel):
    type: Optional[str] = None
    menu_url: Optional[str] = None
    expires_at: Optional[datetime] = None

    @field_validator("expires_at")
    @classmethod
    def _naive_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        # Stored as naive UTC
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class QRCodeCreate(_QRCodeIn):
    store_id: str
    table_number: str = Field(min_length=1, max_length=20)
    type: str = "menu"


class QRCodeBulkCreate(_QRCodeIn):
    store_id: str
    table_count: int = Field(ge=1, le=500)
    start_number: int = Field(1, ge=1)
    type: str = "menu"


class QRCodeUpdate(_QRCodeIn):
    store_id: Optional[str] = None
    table_number: Optional[str] = Field(default=None, min_length=1, max_length=20)


class QRCodeResponse(BaseModel):
    id: str
    code: str
    store_id: Optional[str] = None
    table_number: Optional[str] = None
    type: str
    menu_url: Optional[str] = None
    expires_at: Optional[datetime] = None
    image: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
