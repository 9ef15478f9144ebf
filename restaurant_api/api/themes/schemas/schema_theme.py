from typing import Optional

from pydantic import BaseModel, ConfigDict


class ThemeCreate(BaseModel):
    name: str
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    background_color: Optional[str] = None
    favicon_url: Optional[str] = None
    is_default: bool = False


class ThemeUpdate(BaseModel):
    name: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    background_color: Optional[str] = None
    favicon_url: Optional[str] = None
    is_default: Optional[bool] = None


class ThemeResponse(BaseModel):
    id: str
    name: str
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    background_color: Optional[str] = None
    logo_url: Optional[str] = None
    favicon_url: Optional[str] = None
    is_default: bool

    model_config = ConfigDict(from_attributes=True)
