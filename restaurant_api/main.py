from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from starlette.exceptions import HTTPException as StarletteHTTPException

from restaurant_api.config.settings import (
    APP_NAME,
    BASE_URL,
    CORS_ALLOW_ALL,
    CORS_ORIGINS,
    ENABLE_DOCS,
)
from restaurant_api.core.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from restaurant_api.database.init_db import import_models
from restaurant_api.utils.logger import logger
from restaurant_api.utils.prometheus_metrics import PrometheusMiddleware

# ───────────────────────────
# Models before routes, so every relationship resolves
# ───────────────────────────
import_models()

from restaurant_api.api.access.router.router import api_access  # noqa: E402
from restaurant_api.api.auth import auth_controller  # noqa: E402
from restaurant_api.api.catalog.router.router import api_catalog  # noqa: E402
from restaurant_api.api.logs.router.router_logs import router as logs_router  # noqa: E402
from restaurant_api.api.monitoring.router import router_public as monitoring_router_public  # noqa: E402
from restaurant_api.api.orders.router.router import api_orders  # noqa: E402
from restaurant_api.api.qrcodes.router.router import api_qrcodes  # noqa: E402
from restaurant_api.api.themes.router.router import api_themes  # noqa: E402

# ──────────────────────────
# FastAPI instance
# ──────────────────────────
app = FastAPI(
    title=APP_NAME,
    version="1.0.0",
    description="Restaurant ordering backend: menu catalog, orders, payments, QR tables, users and activity logs",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    servers=([{"url": BASE_URL, "description": "Environment base URL"}] if BASE_URL else None),
    redirect_slashes=False,
)

# ───────────────────────────
# Global exception handlers
# ───────────────────────────
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# Middlewares (last added runs first)
# ───────────────────────────
app.add_middleware(PrometheusMiddleware)

# - CORS_ALLOW_ALL=true => allow_origins=["*"], no credentials
# - otherwise CORS_ORIGINS (falls back to ["*"]); credentials only with explicit origins
if CORS_ALLOW_ALL:
    allowed_origins = ["*"]
    allow_credentials = False
else:
    allowed_origins = CORS_ORIGINS or ["*"]
    allow_credentials = bool(CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ───────────────────────────
# Startup
# ───────────────────────────
@app.on_event("startup")
def startup():
    from restaurant_api.database.init_db import init_db

    logger.info("Starting API and database...")
    init_db()
    logger.info("API started.")


@app.on_event("shutdown")
def shutdown():
    logger.info("API stopped.")


# ───────────────────────────
# Routes
# ───────────────────────────
@app.get("/")
async def root():
    return {"status": "ok", "message": "API is running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(monitoring_router_public)
app.include_router(auth_controller.router)
app.include_router(api_catalog)
app.include_router(api_orders)
app.include_router(api_qrcodes)
app.include_router(api_themes)
app.include_router(api_access)
app.include_router(logs_router)


# ───────────────────────────
# OpenAPI: Bearer/JWT security in Swagger
# ───────────────────────────
PUBLIC_PATHS = {"/", "/health", "/api/v1/auth/login"}


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        servers=app.servers,
    )

    components = openapi_schema.get("components", {})
    security_schemes = components.get("securitySchemes", {})
    security_schemes.update({
        "bearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
    })
    components["securitySchemes"] = security_schemes
    openapi_schema["components"] = components
    openapi_schema["security"] = [{"bearerAuth": []}]

    for path, methods in openapi_schema.get("paths", {}).items():
        if path in PUBLIC_PATHS:
            for method_obj in methods.values():
                method_obj["security"] = []

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi
