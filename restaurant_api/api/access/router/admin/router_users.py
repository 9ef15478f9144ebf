# restaurant_api/api/access/router/admin/router_users.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from restaurant_api.api.access.schemas.schema_user import UserCreate, UserResponse, UserUpdate
from restaurant_api.api.access.services.service_user import UserService
from restaurant_api.core.admin_dependencies import require_admin
from restaurant_api.core.responses import created, success
from restaurant_api.database.db_connection import get_db
from restaurant_api.utils.logger import logger

router = APIRouter(
    prefix="/api/v1/users",
    tags=["Admin - Users"],
    dependencies=[Depends(require_admin)],
)


@router.get("")
def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    users = UserService(db).list_users(skip, limit)
    return success("Users retrieved successfully", [UserResponse.model_validate(u) for u in users])


@router.get("/{user_id}")
def get_user(user_id: str, db: Session = Depends(get_db)):
    return success("User retrieved successfully", UserResponse.model_validate(UserService(db).get_user(user_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    logger.info(f"[USERS] Creating user email={payload.email}")
    user = UserService(db).create_user(payload)
    return created("User created successfully", UserResponse.model_validate(user))


@router.put("/{user_id}")
def update_user(user_id: str, payload: UserUpdate, db: Session = Depends(get_db)):
    user = UserService(db).update_user(user_id, payload)
    return success("User updated successfully", UserResponse.model_validate(user))


@router.delete("/{user_id}")
def delete_user(user_id: str, db: Session = Depends(get_db)):
    UserService(db).delete_user(user_id)
    return success("User deleted successfully")
