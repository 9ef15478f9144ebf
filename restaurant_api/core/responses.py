# restaurant_api/core/responses.py
import math
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def pagination_metadata(page: int, per_page: int, total_count: int) -> dict:
    total_pages = math.ceil(total_count / per_page) if per_page > 0 else 0
    return {
        "page": page,
        "per_page": per_page,
        "total_pages": total_pages,
        "total_count": total_count,
    }


def error_info(
    code: str,
    details: str = "",
    field: str = "",
    validation: Optional[list[str]] = None,
) -> dict:
    info = {"code": code}
    if details:
        info["details"] = details
    if field:
        info["field"] = field
    if validation:
        info["validation"] = validation
    return info


def success(message: str, data: Any = None, metadata: Optional[dict] = None) -> dict:
    """Envelope for successful responses: {message, status, data, metadata?, timestamp}."""
    body = {
        "message": message,
        "status": 200,
        "data": jsonable_encoder(data),
        "timestamp": _timestamp(),
    }
    if metadata is not None:
        body["metadata"] = metadata
    return body


def created(message: str, data: Any = None) -> dict:
    body = success(message, data)
    body["status"] = 201
    return body


def error(message: str, status: int, info: Optional[dict] = None) -> dict:
    """Envelope for errors: same shape without data."""
    body = {
        "message": message,
        "status": status,
        "timestamp": _timestamp(),
    }
    if info is not None:
        body["error"] = info
    return body
