# restaurant_api/api/themes/models/model_theme.py
from sqlalchemy import Column, String, Text, Boolean

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid


class ThemeModel(Base):
    __tablename__ = "themes"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(100), nullable=False, unique=True)  # e.g. "Dark Mode"
    primary_color = Column(String(20), nullable=True)  # e.g. "#3498db"
    secondary_color = Column(String(20), nullable=True)
    accent_color = Column(String(20), nullable=True)
    background_color = Column(String(20), nullable=True)
    logo_url = Column(Text, nullable=True)
    favicon_url = Column(Text, nullable=True)
    is_default = Column(Boolean, nullable=False, default=False)
