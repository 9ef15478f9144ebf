# restaurant_api/api/catalog/services/service_category.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from restaurant_api.api.catalog import validators
from restaurant_api.api.catalog.models.model_category import CategoryModel
from restaurant_api.api.catalog.repositories.repo_categories import CategoryRepository
from restaurant_api.api.catalog.schemas.schema_category import CategoryCreate, CategoryUpdate
from restaurant_api.utils.logger import logger
from restaurant_api.utils.merge import merge_partial


class CategoryService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CategoryRepository(db)

    def list_categories(self, include_products: bool = False):
        return self.repo.list(include_products=include_products)

    def get_category(self, id: str, include_products: bool = False) -> CategoryModel:
        category = self.repo.get(id, include_products=include_products)
        if not category:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Category not found")
        return category

    def create_category(self, data: CategoryCreate) -> CategoryModel:
        category = CategoryModel(
            name=(data.name or "").strip(),
            is_active=data.is_active,
            position=data.position,
        )
        validators.validate_category(self.db, category)
        category = self.repo.create(category)
        logger.info(f"[CATALOG] Category created id={category.id} name={category.name}")
        return category

    def update_category(self, id: str, data: CategoryUpdate) -> CategoryModel:
        category = self.get_category(id)
        merge_partial(category, data)
        if data.name is not None:
            category.name = category.name.strip()
        validators.validate_category(self.db, category)
        return self.repo.save(category)

    def delete_category(self, id: str) -> None:
        self.get_category(id)
        validators.validate_category_deletable(self.db, id)
        self.repo.delete(id)
        logger.info(f"[CATALOG] Category deleted id={id}")
