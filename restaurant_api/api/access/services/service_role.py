# restaurant_api/api/access/services/service_role.py
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from restaurant_api.api.access.models.model_role import RoleModel
from restaurant_api.api.access.repositories.repo_permissions import PermissionRepository
from restaurant_api.api.access.repositories.repo_roles import RoleRepository
from restaurant_api.api.access.schemas.schema_role import (
    ComprehensiveRoleRequest,
    RoleCreate,
    RoleUpdate,
)
from restaurant_api.core.permissions_catalog import (
    PermissionName,
    STANDARD_MANAGEMENT_PERMISSIONS,
    normalize_resource,
    permission_bundle,
)
from restaurant_api.utils.logger import logger


class RoleService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = RoleRepository(db)
        self.repo_permissions = PermissionRepository(db)

    def _load_permissions(self, permission_ids: list[str]):
        permissions = self.repo_permissions.list_by_ids(permission_ids)
        if len(permissions) != len(set(permission_ids)):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "One or more permissions were not found")
        return permissions

    def _assert_name_free(self, name: str, role_id: str | None = None) -> None:
        existing = self.repo.get_by_name(name)
        if existing and existing.id != role_id:
            raise HTTPException(status.HTTP_409_CONFLICT, "Role name already exists")

    def list_roles(self):
        return self.repo.list()

    def get_role(self, id: str) -> RoleModel:
        role = self.repo.get(id)
        if not role:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Role not found")
        return role

    def create_role(self, data: RoleCreate) -> RoleModel:
        self._assert_name_free(data.name)
        role = RoleModel(
            name=data.name.strip(),
            description=data.description,
            permissions=self._load_permissions(data.permissions),
        )
        try:
            return self.repo.create(role)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status.HTTP_409_CONFLICT, "Role name already exists")

    def update_role(self, id: str, data: RoleUpdate) -> RoleModel:
        """Updates name/description and, when sent, replaces the whole permission set atomically."""
        role = self.get_role(id)
        if data.name and data.name != role.name:
            self._assert_name_free(data.name, role_id=role.id)

        # Runs inside the request transaction: a failure rolls back name and permissions together
        if data.name:
            role.name = data.name.strip()
        if data.description is not None:
            role.description = data.description
        if data.permissions is not None:
            role.permissions = self._load_permissions(data.permissions)
        try:
            return self.repo.save(role)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status.HTTP_409_CONFLICT, "Role name already exists")

    def add_permissions(self, id: str, permission_ids: list[str]) -> RoleModel:
        role = self.get_role(id)
        current = {p.id for p in role.permissions}
        for permission in self._load_permissions(permission_ids):
            if permission.id not in current:
                role.permissions.append(permission)
        return self.repo.save(role)

    def remove_permissions(self, id: str, permission_ids: list[str]) -> RoleModel:
        role = self.get_role(id)
        to_remove = set(permission_ids)
        role.permissions = [p for p in role.permissions if p.id not in to_remove]
        return self.repo.save(role)

    def delete_role(self, id: str) -> None:
        self.repo.delete(self.get_role(id))

    def create_comprehensive_role(self, data: ComprehensiveRoleRequest) -> RoleModel:
        """
        Creates a role holding the CRUD + manage bundle of every listed resource
        plus the standard management permissions. Invalid resource names are skipped.
        """
        self._assert_name_free(data.name)

        permissions = {}
        for resource in data.resources:
            try:
                resource_name = normalize_resource(resource)
            except ValueError:
                logger.warning("[ROLES] Skipping invalid resource name %r", resource)
                continue
            for p in permission_bundle(resource_name):
                permissions[p.key] = self.repo_permissions.get_or_create(p.key, p.description)

        for key in STANDARD_MANAGEMENT_PERMISSIONS:
            if key not in permissions:
                permissions[key] = self.repo_permissions.get_or_create(key, PermissionName(key).describe())

        role = RoleModel(
            name=data.name.strip(),
            description=data.description,
            permissions=list(permissions.values()),
        )
        return self.repo.create(role)
