# restaurant_api/api/catalog/services/service_product.py
from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from restaurant_api.api.catalog import validators
from restaurant_api.api.catalog.models.model_product import ProductModel
from restaurant_api.api.catalog.models.model_variation import VariationModel
from restaurant_api.api.catalog.repositories.repo_products import ProductRepository
from restaurant_api.api.catalog.repositories.repo_variations import VariationRepository
from restaurant_api.api.catalog.schemas.schema_product import (
    ProductCreate,
    ProductUpdate,
    ProductWithVariationsCreate,
    ProductWithVariationsUpdate,
)
from restaurant_api.api.catalog.schemas.schema_variation import ProductVariationIn
from restaurant_api.api.catalog.services.service_variation import options_to_json
from restaurant_api.utils.logger import logger
from restaurant_api.utils.merge import merge_partial
from restaurant_api.utils.minio_client import MinioStorage

DEFAULT_PER_PAGE = 10


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)
        self.repo_variations = VariationRepository(db)

    def list_products(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE, category_id: str | None = None):
        offset = (page - 1) * per_page
        items = self.repo.list_paginated(offset, per_page, category_id=category_id)
        return items, self.repo.count(category_id=category_id)

    def get_product(self, id: str, include_variations: bool = False) -> ProductModel:
        product = self.repo.get(id, include_variations=include_variations)
        if not product:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Product not found")
        return product

    def _new_product(self, data: ProductCreate) -> ProductModel:
        product = ProductModel(
            category_id=data.category_id,
            name=(data.name or "").strip(),
            description=data.description,
            image_url=data.image_url,
            base_price=data.base_price,
            is_available=data.is_available,
            position=data.position,
        )
        validators.validate_product(self.db, product)
        return product

    def create_product(self, data: ProductCreate) -> ProductModel:
        product = self.repo.create(self._new_product(data))
        logger.info(f"[CATALOG] Product created id={product.id} name={product.name}")
        return self.get_product(product.id)

    def update_product(self, id: str, data: ProductUpdate) -> ProductModel:
        """Sparse update: fields absent from the request keep their stored values."""
        product = self.get_product(id)
        merge_partial(product, data)
        validators.validate_product(self.db, product)
        self.repo.save(product)
        self.db.expire(product)
        return self.get_product(id)

    def delete_product(self, id: str) -> None:
        self.get_product(id)
        validators.validate_product_deletable(self.db, id)
        self.repo.delete(id)
        logger.info(f"[CATALOG] Product deleted id={id}")

    def upload_image(self, id: str, file: UploadFile, storage: MinioStorage) -> ProductModel:
        product = self.get_product(id)
        product.image_url = storage.upload_file(file, folder="products")
        return self.repo.save(product)

    # ---- product + variations, one transaction (the request's) ----

    def _build_variation(self, product_id: str, data: ProductVariationIn) -> VariationModel:
        variation = VariationModel(
            product_id=product_id,
            is_default=bool(data.is_default),
            is_available=True if data.is_available is None else data.is_available,
            is_required=bool(data.is_required),
            variation_type=(data.variation_type or "").strip(),
            options=options_to_json(data.options),
        )
        validators.validate_variation(self.db, variation)
        return variation

    def create_product_with_variations(self, data: ProductWithVariationsCreate) -> ProductModel:
        product = self.repo.create(self._new_product(data))
        for item in data.variations:
            self.repo_variations.create(self._build_variation(product.id, item))
        logger.info(f"[CATALOG] Product created id={product.id} with {len(data.variations)} variation(s)")
        self.db.expire(product)
        return self.get_product(product.id, include_variations=True)

    def update_product_with_variations(self, id: str, data: ProductWithVariationsUpdate) -> ProductModel:
        product = self.get_product(id, include_variations=True)
        merge_partial(product, data, exclude={"variations", "remove_other_variations"})
        validators.validate_product(self.db, product)
        self.repo.save(product)

        existing = {v.id: v for v in product.variations}
        kept: set[str] = set()
        for item in data.variations:
            if item.id:
                variation = existing.get(item.id)
                if variation is None:
                    raise HTTPException(
                        status.HTTP_400_BAD_REQUEST,
                        f"variation {item.id} does not belong to this product",
                    )
                merge_partial(variation, item, exclude={"id", "options"})
                if item.options is not None:
                    variation.options = options_to_json(item.options)
                validators.validate_variation(self.db, variation)
                self.repo_variations.save(variation)
                kept.add(variation.id)
            else:
                created = self.repo_variations.create(self._build_variation(product.id, item))
                kept.add(created.id)

        if data.remove_other_variations:
            for variation_id, variation in existing.items():
                if variation_id not in kept:
                    self.repo_variations.delete(variation)

        self.db.expire(product)
        return self.get_product(id, include_variations=True)
