from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from restaurant_api.api.logs.models.model_log import LogModel


class LogRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, metadata: Optional[dict] = None, **data) -> LogModel:
        obj = LogModel(metadata_=metadata or {}, **data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def _filtered(self, query, level: Optional[str], entity: Optional[str], source: Optional[str]):
        if level:
            query = query.filter(LogModel.level == level)
        if entity:
            query = query.filter(LogModel.entity == entity)
        if source:
            query = query.filter(LogModel.source == source)
        return query

    def list_paginated(
        self,
        offset: int,
        limit: int,
        level: Optional[str] = None,
        entity: Optional[str] = None,
        source: Optional[str] = None,
    ) -> List[LogModel]:
        q = self._filtered(self.db.query(LogModel), level, entity, source)
        return q.order_by(LogModel.timestamp.desc()).offset(offset).limit(limit).all()

    def count(self, level: Optional[str] = None, entity: Optional[str] = None, source: Optional[str] = None) -> int:
        q = self._filtered(self.db.query(func.count(LogModel.id)), level, entity, source)
        return int(q.scalar() or 0)
