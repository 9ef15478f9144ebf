# restaurant_api/api/catalog/router/router_categories.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from restaurant_api.api.catalog.schemas.schema_category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithProductsResponse,
)
from restaurant_api.api.catalog.services.service_category import CategoryService
from restaurant_api.core.admin_dependencies import require_admin
from restaurant_api.core.responses import created, success
from restaurant_api.database.db_connection import get_db
from restaurant_api.utils.logger import logger

router = APIRouter(prefix="/api/v1/categories", tags=["Catalog - Categories"])


def _out(category, include_products: bool):
    schema = CategoryWithProductsResponse if include_products else CategoryResponse
    return schema.model_validate(category)


@router.get("")
def list_categories(
    include_products: bool = Query(False),
    db: Session = Depends(get_db),
):
    categories = CategoryService(db).list_categories(include_products=include_products)
    return success("Categories retrieved successfully", [_out(c, include_products) for c in categories])


@router.get("/{category_id}")
def get_category(
    category_id: str,
    include_products: bool = Query(False),
    db: Session = Depends(get_db),
):
    logger.info(f"[CATALOG] Get category id={category_id}")
    category = CategoryService(db).get_category(category_id, include_products=include_products)
    return success("Category retrieved successfully", _out(category, include_products))


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    category = CategoryService(db).create_category(payload)
    return created("Category created successfully", CategoryResponse.model_validate(category))


@router.put("/{category_id}", dependencies=[Depends(require_admin)])
def update_category(category_id: str, payload: CategoryUpdate, db: Session = Depends(get_db)):
    category = CategoryService(db).update_category(category_id, payload)
    return success("Category updated successfully", CategoryResponse.model_validate(category))


@router.delete("/{category_id}", dependencies=[Depends(require_admin)])
def delete_category(category_id: str, db: Session = Depends(get_db)):
    CategoryService(db).delete_category(category_id)
    return success("Category deleted successfully")
