# restaurant_api/api/auth/auth_controller.py

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from restaurant_api.api.access.models.model_user import UserModel
from restaurant_api.api.access.schemas.schema_user import UserResponse
from restaurant_api.api.access.services.service_user import UserService
from restaurant_api.api.auth.auth_repo import AuthRepository
from restaurant_api.api.auth.schema_auth import LoginRequest, TokenResponse
from restaurant_api.api.logs.contracts.dependencies import get_app_logger
from restaurant_api.core.admin_dependencies import get_current_user
from restaurant_api.core.responses import success
from restaurant_api.core.security import verify_password, create_access_token
from restaurant_api.database.db_connection import get_db
from restaurant_api.utils.logger import AppLogger

router = APIRouter(tags=["auth"], prefix="/api/v1/auth")


def build_token_claims(user: UserModel) -> dict:
    role = user.role
    return {
        "sub": user.id,
        "user_id": user.id,
        "role_id": role.id if role else None,
        "role_name": role.name if role else None,
        "is_staff": bool(user.is_staff),
        "permissions": role.permission_names if role else [],
    }


@router.post("/login")
def login_user(
    payload: LoginRequest,
    request: Request,
    db: Session = Depends(get_db),
    app_logger: AppLogger = Depends(get_app_logger),
):
    user = AuthRepository(db).get_user_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        app_logger.warn(
            "auth", "user.login_failed", "user",
            f"failed login for {payload.email}",
            ip_address=request.client.host if request.client else None,
        )
        # Keep the failed attempt; get_db rolls back once the 401 is raised
        db.commit()
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    UserService(db).touch_last_login(user)
    token = create_access_token(data=build_token_claims(user))

    app_logger.audit("auth", "user.login", "user", entity_id=user.id, user_id=user.id)
    body = TokenResponse(token=token, user=UserResponse.model_validate(user))
    return success("Login successful", body)


@router.get("/me", summary="Current user from the JWT")
def get_me(current_user: UserModel = Depends(get_current_user)):
    return success("User retrieved successfully", UserResponse.model_validate(current_user))
