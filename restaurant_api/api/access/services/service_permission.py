# restaurant_api/api/access/services/service_permission.py
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from restaurant_api.api.access.models.model_permission import PermissionModel
from restaurant_api.api.access.repositories.repo_permissions import PermissionRepository
from restaurant_api.api.access.schemas.schema_permission import PermissionCreate, PermissionUpdate
from restaurant_api.core.permissions_catalog import PermissionName, permission_bundle, normalize_resource
from restaurant_api.utils.merge import merge_partial


class PermissionService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = PermissionRepository(db)

    def list_permissions(self):
        return self.repo.list()

    def get_permission(self, id: str) -> PermissionModel:
        permission = self.repo.get(id)
        if not permission:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Permission not found")
        return permission

    def create_permission(self, data: PermissionCreate) -> PermissionModel:
        name = PermissionName(data.name)
        if self.repo.get_by_name(name.value):
            raise HTTPException(status.HTTP_409_CONFLICT, "Permission already exists")

        permission = PermissionModel(name=name.value, description=data.description or name.describe())
        try:
            return self.repo.create(permission)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status.HTTP_409_CONFLICT, "Permission already exists")

    def update_permission(self, id: str, data: PermissionUpdate) -> PermissionModel:
        permission = self.get_permission(id)
        if data.name and data.name != permission.name:
            if self.repo.get_by_name(data.name):
                raise HTTPException(status.HTTP_409_CONFLICT, "Permission already exists")
            if data.description is None:
                permission.description = PermissionName(data.name).describe()
        merge_partial(permission, data)
        return self.repo.save(permission)

    def delete_permission(self, id: str) -> None:
        self.repo.delete(self.get_permission(id))

    def generate_resource_permissions(self, resource: str) -> tuple[str, list[PermissionModel]]:
        """Creates (or reuses) read/create/update/delete/manage permissions for a resource."""
        try:
            resource_name = normalize_resource(resource)
        except ValueError as e:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, str(e))

        permissions = [
            self.repo.get_or_create(p.key, p.description)
            for p in permission_bundle(resource_name)
        ]
        return resource_name, permissions
