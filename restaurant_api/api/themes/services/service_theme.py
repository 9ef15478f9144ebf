# restaurant_api/api/themes/services/service_theme.py
from typing import Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from restaurant_api.api.themes.models.model_theme import ThemeModel
from restaurant_api.api.themes.repositories.repo_themes import ThemeRepository
from restaurant_api.api.themes.schemas.schema_theme import ThemeCreate, ThemeUpdate
from restaurant_api.utils.logger import logger
from restaurant_api.utils.merge import merge_partial
from restaurant_api.utils.minio_client import MinioStorage


class ThemeService:
    """Menu themes. At most one theme is the default."""

    def __init__(self, db: Session, storage: Optional[MinioStorage] = None):
        self.db = db
        self.repo = ThemeRepository(db)
        self.storage = storage

    def _assert_name_free(self, name: str, theme_id: Optional[str] = None) -> None:
        existing = self.repo.get_by_name(name)
        if existing and existing.id != theme_id:
            raise HTTPException(status.HTTP_409_CONFLICT, "Theme name already exists")

    def _upload_logo(self, theme: ThemeModel, logo: Optional[UploadFile]) -> bool:
        if logo is None or not logo.filename:
            return False
        if self.storage is None:
            raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "File storage is not configured")
        theme.logo_url = self.storage.upload_file(logo, folder="themes")
        return True

    def list_themes(self):
        return self.repo.list()

    def get_theme(self, id: str) -> ThemeModel:
        theme = self.repo.get(id)
        if not theme:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Theme not found")
        return theme

    def create_theme(self, data: ThemeCreate, logo: Optional[UploadFile] = None) -> ThemeModel:
        name = (data.name or "").strip()
        if not name:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "theme name is required")
        self._assert_name_free(name)

        theme = ThemeModel(**data.model_dump(exclude={"name"}), name=name)
        if theme.is_default:
            self.repo.clear_default()
        try:
            theme = self.repo.create(theme)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status.HTTP_409_CONFLICT, "Theme name already exists")

        # Logo goes up only after the row flushed
        if self._upload_logo(theme, logo):
            self.repo.save(theme)
        logger.info(f"[THEMES] Created theme {theme.name} default={theme.is_default}")
        return theme

    def update_theme(self, id: str, data: ThemeUpdate, logo: Optional[UploadFile] = None) -> ThemeModel:
        theme = self.get_theme(id)
        if data.name is not None:
            data.name = data.name.strip()
            if not data.name:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "theme name is required")
            self._assert_name_free(data.name, theme_id=theme.id)

        merge_partial(theme, data)
        if data.is_default:
            self.repo.clear_default(except_id=theme.id)
        try:
            theme = self.repo.save(theme)
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(status.HTTP_409_CONFLICT, "Theme name already exists")

        if self._upload_logo(theme, logo):
            self.repo.save(theme)
        return theme

    def delete_theme(self, id: str) -> None:
        self.repo.delete(self.get_theme(id))
