# restaurant_api/api/access/router/router.py

from fastapi import APIRouter

from restaurant_api.api.access.router.admin import router_permissions, router_roles, router_users

api_access = APIRouter(tags=["API - Access"])

api_access.include_router(router_users.router)
api_access.include_router(router_roles.router)
api_access.include_router(router_permissions.router)
