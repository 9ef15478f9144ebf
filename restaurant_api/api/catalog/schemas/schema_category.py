# restaurant_api/api/catalog/schemas/schema_category.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from restaurant_api.api.catalog.schemas.schema_product import ProductDetailResponse


class CategoryCreate(BaseModel):
    name: str = ""
    is_active: bool = True
    position: int = 0


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    is_active: Optional[bool] = None
    position: Optional[int] = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    is_active: bool
    position: int

    model_config = ConfigDict(from_attributes=True)


class CategoryWithProductsResponse(CategoryResponse):
    products: List[ProductDetailResponse] = []
