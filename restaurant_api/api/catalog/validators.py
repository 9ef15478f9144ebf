"""
Application-level checks run before catalog writes reach the repositories.

They are advisory: a direct repository call bypasses them.
"""
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from restaurant_api.api.catalog.models.model_category import CategoryModel
from restaurant_api.api.catalog.models.model_product import ProductModel
from restaurant_api.api.catalog.models.model_variation import VariationModel


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def category_exists(db: Session, category_id: str) -> bool:
    return db.query(CategoryModel.id).filter(CategoryModel.id == category_id).first() is not None


def category_name_taken(db: Session, name: str, exclude_id: Optional[str] = None) -> bool:
    q = db.query(CategoryModel.id).filter(func.lower(CategoryModel.name) == name.strip().lower())
    if exclude_id:
        q = q.filter(CategoryModel.id != exclude_id)
    return q.first() is not None


def validate_category(db: Session, category: CategoryModel) -> None:
    if not category.name or not category.name.strip():
        raise _bad_request("category name is required")
    if category.position is not None and category.position < 0:
        raise _bad_request("category position cannot be negative")
    if category_name_taken(db, category.name, exclude_id=category.id):
        raise _bad_request("category name already exists")


def validate_category_deletable(db: Session, category_id: str) -> None:
    count = db.query(func.count(ProductModel.id)).filter(ProductModel.category_id == category_id).scalar() or 0
    if count > 0:
        raise _bad_request(f"cannot delete category: {count} associated products found")


def product_exists(db: Session, product_id: str) -> bool:
    return db.query(ProductModel.id).filter(ProductModel.id == product_id).first() is not None


def validate_product(db: Session, product: ProductModel) -> None:
    if not product.category_id:
        raise _bad_request("category_id is required")
    if not category_exists(db, product.category_id):
        raise _bad_request("category not found")
    if not product.name or not product.name.strip():
        raise _bad_request("product name is required")
    if product.base_price is None or float(product.base_price) <= 0:
        raise _bad_request("base price must be greater than zero")


def validate_product_deletable(db: Session, product_id: str) -> None:
    count = db.query(func.count(VariationModel.id)).filter(VariationModel.product_id == product_id).scalar() or 0
    if count > 0:
        raise _bad_request(f"cannot delete product: {count} associated variations found")


def validate_variation(db: Session, variation: VariationModel) -> None:
    if not variation.product_id or not product_exists(db, variation.product_id):
        raise _bad_request("product not found")
    if not variation.variation_type or not variation.variation_type.strip():
        raise _bad_request("variation type is required")
    options = variation.options or []
    if not options:
        raise _bad_request("at least one option is required")
    for option in options:
        if not (option.get("label") or "").strip():
            raise _bad_request("every option needs a label")
