from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from restaurant_api.api.access.models.model_permission import PermissionModel


class PermissionRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, permission_id: str) -> Optional[PermissionModel]:
        return self.db.query(PermissionModel).filter(PermissionModel.id == permission_id).first()

    def get_by_name(self, name: str) -> Optional[PermissionModel]:
        return self.db.query(PermissionModel).filter(PermissionModel.name == name).first()

    def list(self) -> List[PermissionModel]:
        return self.db.query(PermissionModel).order_by(PermissionModel.name).all()

    def list_by_ids(self, ids: Iterable[str]) -> List[PermissionModel]:
        ids = list(set(ids))
        if not ids:
            return []
        return self.db.query(PermissionModel).filter(PermissionModel.id.in_(ids)).all()

    def list_by_names(self, names: Iterable[str]) -> List[PermissionModel]:
        names = list(set(names))
        if not names:
            return []
        return self.db.query(PermissionModel).filter(PermissionModel.name.in_(names)).all()

    def create(self, permission: PermissionModel) -> PermissionModel:
        self.db.add(permission)
        self.db.flush()
        return permission

    def get_or_create(self, name: str, description: Optional[str]) -> PermissionModel:
        existing = self.get_by_name(name)
        if existing:
            return existing
        return self.create(PermissionModel(name=name, description=description))

    def save(self, permission: PermissionModel) -> PermissionModel:
        self.db.add(permission)
        self.db.flush()
        return permission

    def delete(self, permission: PermissionModel) -> None:
        permission.roles = []
        self.db.flush()
        self.db.delete(permission)
        self.db.flush()
