# restaurant_api/api/access/router/admin/router_roles.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from restaurant_api.api.access.schemas.schema_role import (
    ComprehensiveRoleRequest,
    RoleCreate,
    RolePermissionsRequest,
    RoleResponse,
    RoleUpdate,
)
from restaurant_api.api.access.services.service_role import RoleService
from restaurant_api.core.admin_dependencies import require_admin
from restaurant_api.core.responses import created, success
from restaurant_api.database.db_connection import get_db

router = APIRouter(
    prefix="/api/v1/roles",
    tags=["Admin - Roles"],
    dependencies=[Depends(require_admin)],
)


@router.get("")
def list_roles(db: Session = Depends(get_db)):
    return success("Roles retrieved successfully", [RoleResponse.model_validate(r) for r in RoleService(db).list_roles()])


@router.get("/{role_id}")
def get_role(role_id: str, db: Session = Depends(get_db)):
    return success("Role retrieved successfully", RoleResponse.model_validate(RoleService(db).get_role(role_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_role(payload: RoleCreate, db: Session = Depends(get_db)):
    role = RoleService(db).create_role(payload)
    return created("Role created successfully", RoleResponse.model_validate(role))


@router.post("/comprehensive", status_code=status.HTTP_201_CREATED)
def create_comprehensive_role(payload: ComprehensiveRoleRequest, db: Session = Depends(get_db)):
    role = RoleService(db).create_comprehensive_role(payload)
    return created("Role created successfully", RoleResponse.model_validate(role))


@router.put("/{role_id}")
def update_role(role_id: str, payload: RoleUpdate, db: Session = Depends(get_db)):
    role = RoleService(db).update_role(role_id, payload)
    return success("Role updated successfully", RoleResponse.model_validate(role))


@router.post("/{role_id}/permissions")
def add_role_permissions(role_id: str, payload: RolePermissionsRequest, db: Session = Depends(get_db)):
    role = RoleService(db).add_permissions(role_id, payload.permission_ids)
    return success("Permissions added to role", RoleResponse.model_validate(role))


@router.delete("/{role_id}/permissions")
def remove_role_permissions(role_id: str, payload: RolePermissionsRequest, db: Session = Depends(get_db)):
    role = RoleService(db).remove_permissions(role_id, payload.permission_ids)
    return success("Permissions removed from role", RoleResponse.model_validate(role))


@router.delete("/{role_id}")
def delete_role(role_id: str, db: Session = Depends(get_db)):
    RoleService(db).delete_role(role_id)
    return success("Role deleted successfully")
