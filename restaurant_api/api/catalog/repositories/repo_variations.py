from typing import List, Optional
from sqlalchemy.orm import Session

from restaurant_api.api.catalog.models.model_variation import VariationModel


class VariationRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, variation_id: str) -> Optional[VariationModel]:
        return self.db.query(VariationModel).filter(VariationModel.id == variation_id).first()

    def list(self) -> List[VariationModel]:
        return self.db.query(VariationModel).order_by(VariationModel.created_at).all()

    def list_by_product(self, product_id: str) -> List[VariationModel]:
        return (
            self.db.query(VariationModel)
            .filter(VariationModel.product_id == product_id)
            .order_by(VariationModel.created_at)
            .all()
        )

    def create(self, variation: VariationModel) -> VariationModel:
        self.db.add(variation)
        self.db.flush()
        return variation

    def save(self, variation: VariationModel) -> VariationModel:
        self.db.add(variation)
        self.db.flush()
        return variation

    def delete(self, variation: VariationModel) -> None:
        self.db.delete(variation)
        self.db.flush()
