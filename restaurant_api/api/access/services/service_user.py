# restaurant_api/api/access/services/service_user.py
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from restaurant_api.api.access.models.model_user import UserModel
from restaurant_api.api.access.repositories.repo_roles import RoleRepository
from restaurant_api.api.access.repositories.repo_users import UserRepository
from restaurant_api.api.access.schemas.schema_user import UserCreate, UserUpdate
from restaurant_api.core.security import hash_password
from restaurant_api.utils.database_utils import now_trimmed
from restaurant_api.utils.merge import merge_partial


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository(db)
        self.repo_roles = RoleRepository(db)

    def _assert_role_exists(self, role_id: str | None) -> None:
        if role_id and not self.repo_roles.get(role_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Role not found")

    def get_user(self, id: str) -> UserModel:
        user = self.repo.get(id)
        if not user:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")
        return user

    def list_users(self, skip: int = 0, limit: int = 100):
        return self.repo.list(skip, limit)

    def create_user(self, data: UserCreate) -> UserModel:
        if self.repo.get_by_email(data.email):
            raise HTTPException(status.HTTP_409_CONFLICT, "Email already exists")
        self._assert_role_exists(data.role_id)

        user = UserModel(
            name=data.name.strip(),
            email=data.email,
            password_hash=hash_password(data.password),
            is_staff=data.is_staff,
            role_id=data.role_id,
        )
        try:
            return self.repo.create(user)
        except IntegrityError:
            # Concurrent insert with the same email
            self.db.rollback()
            raise HTTPException(status.HTTP_409_CONFLICT, "Email already exists")

    def update_user(self, id: str, data: UserUpdate) -> UserModel:
        user = self.get_user(id)

        if data.email and data.email != user.email:
            existing = self.repo.get_by_email(data.email)
            if existing and existing.id != user.id:
                raise HTTPException(status.HTTP_409_CONFLICT, "Email already exists")
        if data.role_id is not None:
            self._assert_role_exists(data.role_id)

        merge_partial(user, data, exclude={"password"})
        if data.password:
            user.password_hash = hash_password(data.password)

        try:
            return self.repo.save(user)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status.HTTP_409_CONFLICT, "Email already exists")

    def delete_user(self, id: str) -> None:
        user = self.get_user(id)
        self.repo.delete(user)

    def touch_last_login(self, user: UserModel) -> UserModel:
        user.last_login_at = now_trimmed()
        return self.repo.save(user)
