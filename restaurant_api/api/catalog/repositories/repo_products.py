from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload

from restaurant_api.api.catalog.models.model_product import ProductModel


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: str, include_variations: bool = False) -> Optional[ProductModel]:
        q = self.db.query(ProductModel).options(joinedload(ProductModel.category))
        if include_variations:
            q = q.options(selectinload(ProductModel.variations))
        return q.filter(ProductModel.id == product_id).first()

    def list_paginated(self, offset: int, limit: int, category_id: Optional[str] = None) -> List[ProductModel]:
        q = self.db.query(ProductModel).options(joinedload(ProductModel.category))
        if category_id:
            q = q.filter(ProductModel.category_id == category_id)
        return q.order_by(ProductModel.position, ProductModel.name).offset(offset).limit(limit).all()

    def count(self, category_id: Optional[str] = None) -> int:
        q = self.db.query(func.count(ProductModel.id))
        if category_id:
            q = q.filter(ProductModel.category_id == category_id)
        return int(q.scalar() or 0)

    def create(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def save(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def delete(self, product_id: str) -> bool:
        deleted = self.db.query(ProductModel).filter(ProductModel.id == product_id).delete(
            synchronize_session=False
        )
        self.db.flush()
        return deleted > 0
