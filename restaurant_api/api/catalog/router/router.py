# restaurant_api/api/catalog/router/router.py

from fastapi import APIRouter

from restaurant_api.api.catalog.router import router_categories, router_products, router_variations

api_catalog = APIRouter(tags=["API - Catalog"])

# Reads are public (menu); writes require admin per route
api_catalog.include_router(router_categories.router)
api_catalog.include_router(router_products.router)
api_catalog.include_router(router_variations.router)
