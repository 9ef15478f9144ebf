from typing import List, Optional
from sqlalchemy.orm import Session

from restaurant_api.api.access.models.model_role import RoleModel


class RoleRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, role_id: str) -> Optional[RoleModel]:
        return self.db.query(RoleModel).filter(RoleModel.id == role_id).first()

    def get_by_name(self, name: str) -> Optional[RoleModel]:
        return self.db.query(RoleModel).filter(RoleModel.name == name).first()

    def list(self) -> List[RoleModel]:
        return self.db.query(RoleModel).order_by(RoleModel.name).all()

    def create(self, role: RoleModel) -> RoleModel:
        self.db.add(role)
        self.db.flush()
        return role

    def save(self, role: RoleModel) -> RoleModel:
        self.db.add(role)
        self.db.flush()
        return role

    def delete(self, role: RoleModel) -> None:
        # Clears the association rows before the role itself
        role.permissions = []
        self.db.flush()
        self.db.delete(role)
        self.db.flush()
