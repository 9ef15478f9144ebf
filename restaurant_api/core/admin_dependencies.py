# restaurant_api/core/admin_dependencies.py

from fastapi import Depends, HTTPException, status, Request
from jose import JWTError
from sqlalchemy.orm import Session

from restaurant_api.api.access.models.model_user import UserModel
from restaurant_api.api.auth.auth_repo import AuthRepository
from restaurant_api.core.permissions_catalog import ADMIN_ROLES, has_permission
from restaurant_api.core.security import decode_access_token
from restaurant_api.database.db_connection import get_db
from restaurant_api.utils.logger import logger


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_claims(request: Request) -> dict:
    """
    Validates the `Authorization: Bearer <token>` header and returns the JWT claims.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        logger.warning("[AUTH] Missing Authorization header on %s", request.url.path)
        raise _unauthorized("Missing authorization header")

    if not auth_header.startswith("Bearer "):
        logger.warning("[AUTH] Malformed Authorization header on %s", request.url.path)
        raise _unauthorized("Invalid authorization format")

    token = auth_header[len("Bearer "):].strip()
    try:
        claims = decode_access_token(token)
    except JWTError as e:
        logger.warning(f"[AUTH] Invalid JWT: {e}")
        raise _unauthorized("Invalid or expired token")

    if not claims.get("sub"):
        raise _unauthorized("Invalid or expired token")
    return claims


def get_current_user(
    claims: dict = Depends(get_current_claims),
    db: Session = Depends(get_db),
) -> UserModel:
    """Authenticated user; the account must still exist."""
    user = AuthRepository(db).get_user_by_id(claims["sub"])
    if not user:
        logger.warning("[AUTH] Token subject %s no longer exists", claims["sub"])
        raise _unauthorized("Invalid or expired token")
    return user


def require_staff(current_user: UserModel = Depends(get_current_user)) -> UserModel:
    if not current_user.is_staff:
        logger.warning("[AUTH] Access denied. user=%s is not staff", current_user.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Staff access required")
    return current_user


def require_admin(current_user: UserModel = Depends(get_current_user)) -> UserModel:
    """System, Owner and Admin roles only."""
    if current_user.role_name not in ADMIN_ROLES:
        logger.warning(
            "[AUTH] Access denied. role=%s tried to reach an admin route.",
            current_user.role_name,
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


def require_permission(permission_name: str):
    """Dependency factory checking the user's role permissions (`full:access` passes everything)."""

    def dependency(current_user: UserModel = Depends(get_current_user)) -> UserModel:
        permissions = current_user.role.permission_names if current_user.role else []
        if not has_permission(permissions, permission_name):
            logger.warning(
                "[AUTH] Access denied. user=%s lacks %s",
                current_user.id,
                permission_name,
            )
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return current_user

    return dependency
