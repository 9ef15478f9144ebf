# restaurant_api/api/catalog/services/service_variation.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from restaurant_api.api.catalog import validators
from restaurant_api.api.catalog.models.model_variation import VariationModel
from restaurant_api.api.catalog.repositories.repo_variations import VariationRepository
from restaurant_api.api.catalog.schemas.schema_variation import VariationCreate, VariationUpdate
from restaurant_api.utils.merge import merge_partial


def options_to_json(options) -> list[dict]:
    return [o.model_dump(exclude_none=True) for o in options or []]


class VariationService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = VariationRepository(db)

    def list_variations(self):
        return self.repo.list()

    def list_product_variations(self, product_id: str):
        if not validators.product_exists(self.db, product_id):
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Product not found")
        return self.repo.list_by_product(product_id)

    def get_variation(self, id: str) -> VariationModel:
        variation = self.repo.get(id)
        if not variation:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Variation not found")
        return variation

    def create_variation(self, data: VariationCreate) -> VariationModel:
        variation = VariationModel(
            product_id=data.product_id,
            is_default=data.is_default,
            is_available=data.is_available,
            is_required=data.is_required,
            variation_type=(data.variation_type or "").strip(),
            options=options_to_json(data.options),
        )
        validators.validate_variation(self.db, variation)
        return self.repo.create(variation)

    def update_variation(self, id: str, data: VariationUpdate) -> VariationModel:
        variation = self.get_variation(id)
        merge_partial(variation, data, exclude={"options"})
        if data.options is not None:
            variation.options = options_to_json(data.options)
        validators.validate_variation(self.db, variation)
        return self.repo.save(variation)

    def delete_variation(self, id: str) -> None:
        self.repo.delete(self.get_variation(id))
