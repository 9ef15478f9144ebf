# restaurant_api/api/logs/services/service_log.py
from typing import Optional

from sqlalchemy.orm import Session

from restaurant_api.api.logs.models.model_log import LogModel
from restaurant_api.api.logs.repositories.repo_logs import LogRepository
from restaurant_api.api.logs.schemas.schema_log import LogCreate
from restaurant_api.utils.database_utils import now_trimmed


class LogService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = LogRepository(db)

    def create_log(
        self,
        data: LogCreate,
        ip_address: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> LogModel:
        payload = data.model_dump(exclude={"timestamp"})
        return self.repo.create(
            **payload,
            timestamp=data.timestamp or now_trimmed(),
            ip_address=ip_address,
            request_id=request_id or None,
        )

    def list_logs(
        self,
        page: int,
        per_page: int,
        level: Optional[str] = None,
        entity: Optional[str] = None,
        source: Optional[str] = None,
    ) -> tuple[list[LogModel], int]:
        offset = (page - 1) * per_page
        items = self.repo.list_paginated(offset, per_page, level=level, entity=entity, source=source)
        return items, self.repo.count(level=level, entity=entity, source=source)
