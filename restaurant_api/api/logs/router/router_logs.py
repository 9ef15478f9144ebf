# restaurant_api/api/logs/router/router_logs.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from restaurant_api.api.logs.schemas.schema_log import LogCreate, LogResponse
from restaurant_api.api.logs.services.service_log import LogService
from restaurant_api.core.admin_dependencies import require_admin
from restaurant_api.core.responses import created, pagination_metadata, success
from restaurant_api.database.db_connection import get_db

router = APIRouter(prefix="/api/v1/logs", tags=["Logs"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_log(
    payload: LogCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    log = LogService(db).create_log(
        payload,
        ip_address=request.client.host if request.client else None,
        request_id=request.headers.get("X-Request-ID"),
    )
    return created("Log created successfully", LogResponse.model_validate(log))


@router.get("", dependencies=[Depends(require_admin)])
def list_logs(
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=200),
    level: Optional[str] = Query(None),
    entity: Optional[str] = Query(None),
    source: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    items, total = LogService(db).list_logs(page, per_page, level=level, entity=entity, source=source)
    return success(
        "Logs retrieved successfully",
        [LogResponse.model_validate(i) for i in items],
        pagination_metadata(page, per_page, total),
    )
