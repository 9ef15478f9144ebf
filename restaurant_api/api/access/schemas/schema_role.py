# restaurant_api/api/access/schemas/schema_role.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from restaurant_api.api.access.schemas.schema_permission import PermissionResponse


class RoleCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    permissions: List[str] = Field(default_factory=list, description="Permission ids")


class RoleUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    # When present the role's permission set is replaced entirely
    permissions: Optional[List[str]] = None


class RolePermissionsRequest(BaseModel):
    permission_ids: List[str] = Field(min_length=1)


class ComprehensiveRoleRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    resources: List[str] = Field(min_length=1)


class RoleResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    permissions: List[PermissionResponse] = []

    model_config = ConfigDict(from_attributes=True)
