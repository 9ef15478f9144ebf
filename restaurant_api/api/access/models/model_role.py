# restaurant_api/api/access/models/model_role.py
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.api.access.models.model_permission import role_permissions
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class RoleModel(Base):
    __tablename__ = "roles"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    permissions = relationship(
        "PermissionModel",
        secondary=role_permissions,
        back_populates="roles",
        lazy="selectin",
    )
    users = relationship("UserModel", back_populates="role")

    @property
    def permission_names(self) -> list[str]:
        return [p.name for p in self.permissions]
