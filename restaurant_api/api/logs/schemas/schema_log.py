# restaurant_api/api/logs/schemas/schema_log.py
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, AliasChoices


class LogCreate(BaseModel):
    level: str = Field(min_length=1, max_length=20)
    source: str = Field(min_length=1, max_length=100)
    action: str = Field(min_length=1, max_length=100)
    entity: str = Field(min_length=1, max_length=50)
    environment: str = Field(min_length=1, max_length=20)
    application: str = Field(min_length=1, max_length=50)
    type: str = Field(min_length=1, max_length=20)

    user_id: Optional[str] = None
    entity_id: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    hostname: Optional[str] = None
    timestamp: Optional[datetime] = None


class LogResponse(BaseModel):
    id: str
    timestamp: datetime
    level: str
    source: str
    user_id: Optional[str] = None
    ip_address: Optional[str] = None
    action: str
    entity: str
    entity_id: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("metadata_", "metadata"),
    )
    request_id: Optional[str] = None
    environment: str
    application: str
    hostname: Optional[str] = None
    type: str

    model_config = ConfigDict(from_attributes=True)
