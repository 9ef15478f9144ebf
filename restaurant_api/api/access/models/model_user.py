# restaurant_api/api/access/models/model_user.py
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=True)
    is_staff = Column(Boolean, nullable=False, default=False)

    role_id = Column(String(36), ForeignKey("roles.id", ondelete="SET NULL"), nullable=True)
    role = relationship("RoleModel", back_populates="users", lazy="joined")

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    @property
    def role_name(self) -> str | None:
        return self.role.name if self.role else None
