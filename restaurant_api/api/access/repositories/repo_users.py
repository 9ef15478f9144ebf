from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from restaurant_api.api.access.models.model_user import UserModel


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[UserModel]:
        return self.db.query(UserModel).filter(UserModel.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[UserModel]:
        return (
            self.db.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )

    def list(self, skip: int = 0, limit: int = 100) -> List[UserModel]:
        return self.db.query(UserModel).order_by(UserModel.created_at).offset(skip).limit(limit).all()

    def create(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        self.db.refresh(user)
        return user

    def save(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        return user

    def delete(self, user: UserModel) -> None:
        self.db.delete(user)
        self.db.flush()
