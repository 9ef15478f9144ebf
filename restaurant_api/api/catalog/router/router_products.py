# restaurant_api/api/catalog/router/router_products.py
from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from sqlalchemy.orm import Session

from restaurant_api.api.catalog.schemas.schema_product import (
    ProductCreate,
    ProductDetailResponse,
    ProductResponse,
    ProductUpdate,
    ProductWithVariationsCreate,
    ProductWithVariationsUpdate,
)
from restaurant_api.api.catalog.schemas.schema_variation import VariationResponse
from restaurant_api.api.catalog.services.service_product import DEFAULT_PER_PAGE, ProductService
from restaurant_api.api.catalog.services.service_variation import VariationService
from restaurant_api.core.admin_dependencies import require_admin
from restaurant_api.core.responses import created, pagination_metadata, success
from restaurant_api.database.db_connection import get_db
from restaurant_api.utils.minio_client import MinioStorage, get_storage

router = APIRouter(prefix="/api/v1/products", tags=["Catalog - Products"])


@router.get("")
def list_products(
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=100),
    category_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    items, total = ProductService(db).list_products(page, per_page, category_id=category_id)
    return success(
        "Products retrieved successfully",
        [ProductResponse.model_validate(p) for p in items],
        pagination_metadata(page, per_page, total),
    )


@router.get("/{product_id}")
def get_product(product_id: str, db: Session = Depends(get_db)):
    product = ProductService(db).get_product(product_id, include_variations=True)
    return success("Product retrieved successfully", ProductDetailResponse.model_validate(product))


@router.get("/{product_id}/variations")
def list_product_variations(product_id: str, db: Session = Depends(get_db)):
    variations = VariationService(db).list_product_variations(product_id)
    return success("Variations retrieved successfully", [VariationResponse.model_validate(v) for v in variations])


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    product = ProductService(db).create_product(payload)
    return created("Product created successfully", ProductResponse.model_validate(product))


@router.post("/with-variations", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
def create_product_with_variations(payload: ProductWithVariationsCreate, db: Session = Depends(get_db)):
    product = ProductService(db).create_product_with_variations(payload)
    return created("Product created successfully", ProductDetailResponse.model_validate(product))


@router.put("/{product_id}", dependencies=[Depends(require_admin)])
def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    product = ProductService(db).update_product(product_id, payload)
    return success("Product updated successfully", ProductResponse.model_validate(product))


@router.put("/{product_id}/with-variations", dependencies=[Depends(require_admin)])
def update_product_with_variations(
    product_id: str,
    payload: ProductWithVariationsUpdate,
    db: Session = Depends(get_db),
):
    product = ProductService(db).update_product_with_variations(product_id, payload)
    return success("Product updated successfully", ProductDetailResponse.model_validate(product))


@router.post("/{product_id}/image", dependencies=[Depends(require_admin)])
def upload_product_image(
    product_id: str,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: MinioStorage = Depends(get_storage),
):
    product = ProductService(db).upload_image(product_id, file, storage)
    return success("Product image uploaded successfully", ProductResponse.model_validate(product))


@router.delete("/{product_id}", dependencies=[Depends(require_admin)])
def delete_product(product_id: str, db: Session = Depends(get_db)):
    ProductService(db).delete_product(product_id)
    return success("Product deleted successfully")
