# restaurant_api/api/access/models/model_permission.py
from sqlalchemy import Column, String, Text, Table, ForeignKey
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid

role_permissions = Table(
    "role_permissions",
    Base.metadata,
    Column("role_id", String(36), ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
    Column("permission_id", String(36), ForeignKey("permissions.id", ondelete="CASCADE"), primary_key=True),
)


class PermissionModel(Base):
    __tablename__ = "permissions"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)

    roles = relationship("RoleModel", secondary=role_permissions, back_populates="permissions")
