# restaurant_api/api/themes/router/router_themes.py
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from restaurant_api.api.themes.schemas.schema_theme import ThemeCreate, ThemeResponse, ThemeUpdate
from restaurant_api.api.themes.services.service_theme import ThemeService
from restaurant_api.core.admin_dependencies import require_staff
from restaurant_api.core.responses import created, success
from restaurant_api.database.db_connection import get_db
from restaurant_api.utils.minio_client import MinioStorage, get_storage

router = APIRouter(prefix="/api/v1/themes", tags=["Themes"])


@router.get("")
def list_themes(db: Session = Depends(get_db)):
    return success("Themes retrieved successfully", [ThemeResponse.model_validate(t) for t in ThemeService(db).list_themes()])


@router.get("/{theme_id}")
def get_theme(theme_id: str, db: Session = Depends(get_db)):
    return success("Theme retrieved successfully", ThemeResponse.model_validate(ThemeService(db).get_theme(theme_id)))


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_staff)])
def create_theme(
    name: str = Form(...),
    primary_color: Optional[str] = Form(None),
    secondary_color: Optional[str] = Form(None),
    accent_color: Optional[str] = Form(None),
    background_color: Optional[str] = Form(None),
    favicon_url: Optional[str] = Form(None),
    is_default: bool = Form(False),
    logo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: MinioStorage = Depends(get_storage),
):
    data = ThemeCreate(
        name=name,
        primary_color=primary_color,
        secondary_color=secondary_color,
        accent_color=accent_color,
        background_color=background_color,
        favicon_url=favicon_url,
        is_default=is_default,
    )
    theme = ThemeService(db, storage).create_theme(data, logo=logo)
    return created("Theme created successfully", ThemeResponse.model_validate(theme))


@router.put("/{theme_id}", dependencies=[Depends(require_staff)])
def update_theme(
    theme_id: str,
    name: Optional[str] = Form(None),
    primary_color: Optional[str] = Form(None),
    secondary_color: Optional[str] = Form(None),
    accent_color: Optional[str] = Form(None),
    background_color: Optional[str] = Form(None),
    favicon_url: Optional[str] = Form(None),
    is_default: Optional[bool] = Form(None),
    logo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: MinioStorage = Depends(get_storage),
):
    # Only fields present in the form are merged
    sent = {
        "name": name,
        "primary_color": primary_color,
        "secondary_color": secondary_color,
        "accent_color": accent_color,
        "background_color": background_color,
        "favicon_url": favicon_url,
        "is_default": is_default,
    }
    data = ThemeUpdate(**{k: v for k, v in sent.items() if v is not None})
    theme = ThemeService(db, storage).update_theme(theme_id, data, logo=logo)
    return success("Theme updated successfully", ThemeResponse.model_validate(theme))


@router.delete("/{theme_id}", dependencies=[Depends(require_staff)])
def delete_theme(theme_id: str, db: Session = Depends(get_db)):
    ThemeService(db).delete_theme(theme_id)
    return success("Theme deleted successfully")
