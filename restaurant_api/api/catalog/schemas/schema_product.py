# restaurant_api/api/catalog/schemas/schema_product.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from restaurant_api.api.catalog.schemas.schema_variation import ProductVariationIn, VariationResponse


class ProductCreate(BaseModel):
    category_id: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    image_url: Optional[str] = None
    base_price: float = 0
    is_available: bool = True
    position: int = 0


class ProductUpdate(BaseModel):
    category_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    base_price: Optional[float] = None
    is_available: Optional[bool] = None
    position: Optional[int] = None


class ProductWithVariationsCreate(ProductCreate):
    variations: List[ProductVariationIn] = Field(default_factory=list)


class ProductWithVariationsUpdate(ProductUpdate):
    variations: List[ProductVariationIn] = Field(default_factory=list)
    remove_other_variations: bool = False


class ProductResponse(BaseModel):
    id: str
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    base_price: float
    is_available: bool
    position: int

    model_config = ConfigDict(from_attributes=True)


class ProductDetailResponse(ProductResponse):
    variations: List[VariationResponse] = []
