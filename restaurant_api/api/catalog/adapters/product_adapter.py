from typing import Optional

from sqlalchemy.orm import Session

from restaurant_api.api.catalog.contracts.product_contract import (
    IProductContract,
    ProductDTO,
    VariationDTO,
    VariationOptionDTO,
)
from restaurant_api.api.catalog.repositories.repo_products import ProductRepository
from restaurant_api.api.catalog.repositories.repo_variations import VariationRepository


class ProductAdapter(IProductContract):
    def __init__(self, db: Session):
        self.repo_products = ProductRepository(db)
        self.repo_variations = VariationRepository(db)

    def get_product(self, product_id: str) -> Optional[ProductDTO]:
        product = self.repo_products.get(product_id)
        if not product:
            return None
        return ProductDTO(
            id=product.id,
            name=product.name,
            base_price=float(product.base_price or 0),
            is_available=bool(product.is_available),
            image_url=product.image_url,
        )

    def get_variation(self, variation_id: str) -> Optional[VariationDTO]:
        variation = self.repo_variations.get(variation_id)
        if not variation:
            return None
        return VariationDTO(
            id=variation.id,
            product_id=variation.product_id,
            variation_type=variation.variation_type,
            is_available=bool(variation.is_available),
            options=[VariationOptionDTO(**o) for o in variation.options or []],
        )
