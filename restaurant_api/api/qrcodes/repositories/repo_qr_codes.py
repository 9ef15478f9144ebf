# restaurant_api/api/qrcodes/repositories/repo_qr_codes.py
from typing import List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from restaurant_api.api.qrcodes.models.model_qr_code import QRCodeModel


class QRCodeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, qr_id: str) -> Optional[QRCodeModel]:
        return self.db.query(QRCodeModel).filter(QRCodeModel.id == qr_id).first()

    def get_by_code(self, code: str) -> Optional[QRCodeModel]:
        return self.db.query(QRCodeModel).filter(QRCodeModel.code == code).first()

    def list_paginated(self, offset: int, limit: int, store_id: Optional[str] = None) -> List[QRCodeModel]:
        q = self.db.query(QRCodeModel)
        if store_id:
            q = q.filter(QRCodeModel.store_id == store_id)
        return q.order_by(QRCodeModel.created_at.desc(), QRCodeModel.table_number).offset(offset).limit(limit).all()

    def count(self, store_id: Optional[str] = None) -> int:
        q = self.db.query(func.count(QRCodeModel.id))
        if store_id:
            q = q.filter(QRCodeModel.store_id == store_id)
        return int(q.scalar() or 0)

    def create(self, qr: QRCodeModel) -> QRCodeModel:
        self.db.add(qr)
        self.db.flush()
        return qr

    def create_many(self, qrs: Sequence[QRCodeModel]) -> List[QRCodeModel]:
        self.db.add_all(qrs)
        self.db.flush()
        return list(qrs)

    def save(self, qr: QRCodeModel) -> QRCodeModel:
        self.db.add(qr)
        self.db.flush()
        return qr

    def delete(self, qr: QRCodeModel) -> None:
        self.db.delete(qr)
        self.db.flush()
