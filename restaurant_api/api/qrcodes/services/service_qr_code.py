# restaurant_api/api/qrcodes/services/service_qr_code.py
import base64
import io
import uuid
from urllib.parse import urlencode

import qrcode
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from restaurant_api.api.qrcodes.models.model_qr_code import QRCodeModel
from restaurant_api.api.qrcodes.repositories.repo_qr_codes import QRCodeRepository
from restaurant_api.api.qrcodes.schemas.schema_qr_code import QRCodeBulkCreate, QRCodeCreate, QRCodeUpdate
from restaurant_api.config.settings import MENU_BASE_URL
from restaurant_api.utils.database_utils import now_trimmed
from restaurant_api.utils.logger import logger
from restaurant_api.utils.merge import merge_partial

DEFAULT_PER_PAGE = 20


def table_url(menu_url: str, store_id: str, table_number: str) -> str:
    return f"{menu_url}?{urlencode({'store_id': store_id, 'table_number': table_number})}"


def render_qr_data_url(value: str) -> str:
    """PNG of `value` as a `data:image/png;base64,...` URL."""
    qr = qrcode.QRCode(version=1, box_size=10, border=4)
    qr.add_data(value)
    qr.make(fit=True)
    image = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


class QRCodeService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = QRCodeRepository(db)

    def _build(self, store_id, table_number, qr_type, menu_url, expires_at) -> QRCodeModel:
        menu_url = menu_url or MENU_BASE_URL
        return QRCodeModel(
            code=str(uuid.uuid4()),
            store_id=store_id,
            table_number=table_number,
            type=qr_type or "menu",
            menu_url=menu_url,
            expires_at=expires_at,
            image=render_qr_data_url(table_url(menu_url, store_id, table_number)),
            created_at=now_trimmed(),
        )

    def list_qr_codes(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE, store_id: str | None = None):
        offset = (page - 1) * per_page
        return self.repo.list_paginated(offset, per_page, store_id=store_id), self.repo.count(store_id=store_id)

    def get_qr_code(self, id: str) -> QRCodeModel:
        qr = self.repo.get(id)
        if not qr:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "QR code not found")
        return qr

    def get_by_code(self, code: str) -> QRCodeModel:
        qr = self.repo.get_by_code(code)
        if not qr:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "QR code not found")
        if qr.expires_at and qr.expires_at < now_trimmed():
            raise HTTPException(status.HTTP_410_GONE, "QR code has expired")
        return qr

    def create_qr_code(self, data: QRCodeCreate) -> QRCodeModel:
        qr = self._build(data.store_id, data.table_number, data.type, data.menu_url, data.expires_at)
        return self.repo.create(qr)

    def bulk_create(self, data: QRCodeBulkCreate) -> list[QRCodeModel]:
        """One code per table, `start_number` .. `start_number + table_count - 1`."""
        qrs = [
            self._build(data.store_id, str(number), data.type, data.menu_url, data.expires_at)
            for number in range(data.start_number, data.start_number + data.table_count)
        ]
        created = self.repo.create_many(qrs)
        logger.info(f"[QR] Created {len(created)} codes for store {data.store_id}")
        return created

    def update_qr_code(self, id: str, data: QRCodeUpdate) -> QRCodeModel:
        qr = self.get_qr_code(id)
        before = (qr.menu_url, qr.store_id, qr.table_number)
        merge_partial(qr, data)
        if (qr.menu_url, qr.store_id, qr.table_number) != before:
            qr.image = render_qr_data_url(table_url(qr.menu_url or MENU_BASE_URL, qr.store_id, qr.table_number))
        return self.repo.save(qr)

    def delete_qr_code(self, id: str) -> None:
        self.repo.delete(self.get_qr_code(id))
