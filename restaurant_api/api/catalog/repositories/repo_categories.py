from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from restaurant_api.api.catalog.models.model_category import CategoryModel
from restaurant_api.api.catalog.models.model_product import ProductModel


class CategoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self, include_products: bool):
        q = self.db.query(CategoryModel)
        if include_products:
            q = q.options(
                selectinload(CategoryModel.products).selectinload(ProductModel.variations)
            )
        return q

    def get(self, category_id: str, include_products: bool = False) -> Optional[CategoryModel]:
        return self._query(include_products).filter(CategoryModel.id == category_id).first()

    def list(self, include_products: bool = False) -> List[CategoryModel]:
        return self._query(include_products).order_by(CategoryModel.position, CategoryModel.name).all()

    def create(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.flush()
        return category

    def save(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.flush()
        return category

    def delete(self, category_id: str) -> bool:
        deleted = self.db.query(CategoryModel).filter(CategoryModel.id == category_id).delete(
            synchronize_session=False
        )
        self.db.flush()
        return deleted > 0
