# restaurant_api/api/themes/router/router.py

from fastapi import APIRouter

from restaurant_api.api.themes.router import router_themes

api_themes = APIRouter(tags=["API - Themes"])

api_themes.include_router(router_themes.router)
