# restaurant_api/api/access/schemas/schema_permission.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from restaurant_api.core.permissions_catalog import PermissionName


def _check_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    return PermissionName(v.strip()).value


class PermissionCreate(BaseModel):
    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _valid_name(cls, v: str) -> str:
        return _check_name(v)


class PermissionUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _valid_name(cls, v: Optional[str]) -> Optional[str]:
        return _check_name(v)


class GeneratePermissionsRequest(BaseModel):
    resource: str = Field(min_length=1)


class PermissionResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class GeneratedPermissionsResponse(BaseModel):
    resource: str
    permissions: List[PermissionResponse]
