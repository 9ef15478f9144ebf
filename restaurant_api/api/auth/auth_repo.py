from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from restaurant_api.api.access.models.model_role import RoleModel
from restaurant_api.api.access.models.model_user import UserModel


class AuthRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_user_by_email(self, email: str) -> Optional[UserModel]:
        return (
            self.db.query(UserModel)
            .options(joinedload(UserModel.role).selectinload(RoleModel.permissions))
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )

    def get_user_by_id(self, user_id: str) -> Optional[UserModel]:
        return (
            self.db.query(UserModel)
            .options(joinedload(UserModel.role).selectinload(RoleModel.permissions))
            .filter(UserModel.id == str(user_id))
            .first()
        )
