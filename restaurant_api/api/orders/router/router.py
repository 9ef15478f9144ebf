# restaurant_api/api/orders/router/router.py

from fastapi import APIRouter

from restaurant_api.api.orders.router import router_invoices, router_orders, router_payments

api_orders = APIRouter(tags=["API - Orders"])

api_orders.include_router(router_orders.router)
api_orders.include_router(router_payments.router)
api_orders.include_router(router_invoices.router)
