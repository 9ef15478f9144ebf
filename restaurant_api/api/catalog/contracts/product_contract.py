from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel


class VariationOptionDTO(BaseModel):
    label: str
    price_modifier: Optional[float] = None
    price_absolute: Optional[float] = None
    is_default: bool = False


class VariationDTO(BaseModel):
    """Variation as seen by other contexts."""
    id: str
    product_id: str
    variation_type: str
    is_available: bool
    options: List[VariationOptionDTO] = []


class ProductDTO(BaseModel):
    """Product as seen by other contexts (orders price their lines from it)."""
    id: str
    name: str
    base_price: float
    is_available: bool
    image_url: Optional[str] = None


class IProductContract(ABC):
    """Read access to the catalog for other contexts."""

    @abstractmethod
    def get_product(self, product_id: str) -> Optional[ProductDTO]:
        raise NotImplementedError

    @abstractmethod
    def get_variation(self, variation_id: str) -> Optional[VariationDTO]:
        raise NotImplementedError
