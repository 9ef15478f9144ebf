# restaurant_api/api/themes/repositories/repo_themes.py
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from restaurant_api.api.themes.models.model_theme import ThemeModel


class ThemeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, theme_id: str) -> Optional[ThemeModel]:
        return self.db.query(ThemeModel).filter(ThemeModel.id == theme_id).first()

    def get_by_name(self, name: str) -> Optional[ThemeModel]:
        return self.db.query(ThemeModel).filter(func.lower(ThemeModel.name) == name.lower()).first()

    def get_default(self) -> Optional[ThemeModel]:
        return self.db.query(ThemeModel).filter(ThemeModel.is_default.is_(True)).first()

    def list(self) -> List[ThemeModel]:
        return self.db.query(ThemeModel).order_by(ThemeModel.name).all()

    def clear_default(self, except_id: Optional[str] = None) -> None:
        q = self.db.query(ThemeModel).filter(ThemeModel.is_default.is_(True))
        if except_id:
            q = q.filter(ThemeModel.id != except_id)
        for theme in q.all():
            theme.is_default = False
        self.db.flush()

    def create(self, theme: ThemeModel) -> ThemeModel:
        self.db.add(theme)
        self.db.flush()
        return theme

    def save(self, theme: ThemeModel) -> ThemeModel:
        self.db.add(theme)
        self.db.flush()
        return theme

    def delete(self, theme: ThemeModel) -> None:
        self.db.delete(theme)
        self.db.flush()
