"""
Access models: users, roles and permissions.
"""
from restaurant_api.api.access.models.model_permission import PermissionModel, role_permissions
from restaurant_api.api.access.models.model_role import RoleModel
from restaurant_api.api.access.models.model_user import UserModel

__all__ = ["PermissionModel", "RoleModel", "UserModel", "role_permissions"]
