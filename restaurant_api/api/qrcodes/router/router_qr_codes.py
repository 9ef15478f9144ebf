# restaurant_api/api/qrcodes/router/router_qr_codes.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from restaurant_api.api.qrcodes.schemas.schema_qr_code import (
    QRCodeBulkCreate,
    QRCodeCreate,
    QRCodeResponse,
    QRCodeUpdate,
)
from restaurant_api.api.qrcodes.services.service_qr_code import DEFAULT_PER_PAGE, QRCodeService
from restaurant_api.core.admin_dependencies import require_staff
from restaurant_api.core.responses import created, pagination_metadata, success
from restaurant_api.database.db_connection import get_db

router = APIRouter(prefix="/api/v1/qr-codes", tags=["QR Codes"])


def _page(items, page, per_page, total, message):
    return success(message, [QRCodeResponse.model_validate(q) for q in items], pagination_metadata(page, per_page, total))


# Scanned by customers at the table
@router.get("/code/{code}")
def get_qr_code_by_code(code: str, db: Session = Depends(get_db)):
    return success("QR code retrieved successfully", QRCodeResponse.model_validate(QRCodeService(db).get_by_code(code)))


@router.get("", dependencies=[Depends(require_staff)])
def list_qr_codes(
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=200),
    db: Session = Depends(get_db),
):
    items, total = QRCodeService(db).list_qr_codes(page, per_page)
    return _page(items, page, per_page, total, "QR codes retrieved successfully")


@router.get("/store/{store_id}", dependencies=[Depends(require_staff)])
def list_store_qr_codes(
    store_id: str,
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=200),
    db: Session = Depends(get_db),
):
    items, total = QRCodeService(db).list_qr_codes(page, per_page, store_id=store_id)
    return _page(items, page, per_page, total, "QR codes retrieved successfully")


@router.get("/{qr_id}", dependencies=[Depends(require_staff)])
def get_qr_code(qr_id: str, db: Session = Depends(get_db)):
    return success("QR code retrieved successfully", QRCodeResponse.model_validate(QRCodeService(db).get_qr_code(qr_id)))


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_staff)])
def create_qr_code(payload: QRCodeCreate, db: Session = Depends(get_db)):
    qr = QRCodeService(db).create_qr_code(payload)
    return created("QR code created successfully", QRCodeResponse.model_validate(qr))


@router.post("/bulk", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_staff)])
def bulk_create_qr_codes(payload: QRCodeBulkCreate, db: Session = Depends(get_db)):
    qrs = QRCodeService(db).bulk_create(payload)
    return created("QR codes created successfully", [QRCodeResponse.model_validate(q) for q in qrs])


@router.put("/{qr_id}", dependencies=[Depends(require_staff)])
def update_qr_code(qr_id: str, payload: QRCodeUpdate, db: Session = Depends(get_db)):
    qr = QRCodeService(db).update_qr_code(qr_id, payload)
    return success("QR code updated successfully", QRCodeResponse.model_validate(qr))


@router.delete("/{qr_id}", dependencies=[Depends(require_staff)])
def delete_qr_code(qr_id: str, db: Session = Depends(get_db)):
    QRCodeService(db).delete_qr_code(qr_id)
    return success("QR code deleted successfully")
