# restaurant_api/api/catalog/schemas/schema_variation.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VariationOption(BaseModel):
    label: str = Field(min_length=1)
    price_modifier: Optional[float] = None
    price_absolute: Optional[float] = None
    is_default: bool = False


class VariationBase(BaseModel):
    is_default: bool = False
    is_available: bool = True
    is_required: bool = False
    variation_type: str = ""
    options: List[VariationOption] = Field(default_factory=list)


class VariationCreate(VariationBase):
    product_id: str


class VariationUpdate(BaseModel):
    is_default: Optional[bool] = None
    is_available: Optional[bool] = None
    is_required: Optional[bool] = None
    variation_type: Optional[str] = None
    options: Optional[List[VariationOption]] = None


class ProductVariationIn(VariationUpdate):
    """Variation sent together with its product; `id` selects an existing one to update."""
    id: Optional[str] = None


class VariationResponse(VariationBase):
    id: str
    product_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
