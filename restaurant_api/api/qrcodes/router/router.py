# restaurant_api/api/qrcodes/router/router.py

from fastapi import APIRouter

from restaurant_api.api.qrcodes.router import router_qr_codes

api_qrcodes = APIRouter(tags=["API - QR Codes"])

api_qrcodes.include_router(router_qr_codes.router)
