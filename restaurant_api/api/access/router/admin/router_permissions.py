# restaurant_api/api/access/router/admin/router_permissions.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from restaurant_api.api.access.schemas.schema_permission import (
    GeneratedPermissionsResponse,
    GeneratePermissionsRequest,
    PermissionCreate,
    PermissionResponse,
    PermissionUpdate,
)
from restaurant_api.api.access.services.service_permission import PermissionService
from restaurant_api.core.admin_dependencies import require_admin
from restaurant_api.core.responses import created, success
from restaurant_api.database.db_connection import get_db

router = APIRouter(
    prefix="/api/v1/permissions",
    tags=["Admin - Permissions"],
    dependencies=[Depends(require_admin)],
)


@router.get("")
def list_permissions(db: Session = Depends(get_db)):
    permissions = PermissionService(db).list_permissions()
    return success("Permissions retrieved successfully", [PermissionResponse.model_validate(p) for p in permissions])


@router.get("/{permission_id}")
def get_permission(permission_id: str, db: Session = Depends(get_db)):
    permission = PermissionService(db).get_permission(permission_id)
    return success("Permission retrieved successfully", PermissionResponse.model_validate(permission))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_permission(payload: PermissionCreate, db: Session = Depends(get_db)):
    permission = PermissionService(db).create_permission(payload)
    return created("Permission created successfully", PermissionResponse.model_validate(permission))


@router.post("/generate", status_code=status.HTTP_201_CREATED)
def generate_resource_permissions(payload: GeneratePermissionsRequest, db: Session = Depends(get_db)):
    resource, permissions = PermissionService(db).generate_resource_permissions(payload.resource)
    body = GeneratedPermissionsResponse(
        resource=resource,
        permissions=[PermissionResponse.model_validate(p) for p in permissions],
    )
    return created("Permissions generated successfully", body)


@router.put("/{permission_id}")
def update_permission(permission_id: str, payload: PermissionUpdate, db: Session = Depends(get_db)):
    permission = PermissionService(db).update_permission(permission_id, payload)
    return success("Permission updated successfully", PermissionResponse.model_validate(permission))


@router.delete("/{permission_id}")
def delete_permission(permission_id: str, db: Session = Depends(get_db)):
    PermissionService(db).delete_permission(permission_id)
    return success("Permission deleted successfully")
