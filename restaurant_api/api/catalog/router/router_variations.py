# restaurant_api/api/catalog/router/router_variations.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from restaurant_api.api.catalog.schemas.schema_variation import (
    VariationCreate,
    VariationResponse,
    VariationUpdate,
)
from restaurant_api.api.catalog.services.service_variation import VariationService
from restaurant_api.core.admin_dependencies import require_admin
from restaurant_api.core.responses import created, success
from restaurant_api.database.db_connection import get_db

router = APIRouter(prefix="/api/v1/variations", tags=["Catalog - Variations"])


@router.get("")
def list_variations(db: Session = Depends(get_db)):
    variations = VariationService(db).list_variations()
    return success("Variations retrieved successfully", [VariationResponse.model_validate(v) for v in variations])


@router.get("/{variation_id}")
def get_variation(variation_id: str, db: Session = Depends(get_db)):
    variation = VariationService(db).get_variation(variation_id)
    return success("Variation retrieved successfully", VariationResponse.model_validate(variation))


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
def create_variation(payload: VariationCreate, db: Session = Depends(get_db)):
    variation = VariationService(db).create_variation(payload)
    return created("Variation created successfully", VariationResponse.model_validate(variation))


@router.put("/{variation_id}", dependencies=[Depends(require_admin)])
def update_variation(variation_id: str, payload: VariationUpdate, db: Session = Depends(get_db)):
    variation = VariationService(db).update_variation(variation_id, payload)
    return success("Variation updated successfully", VariationResponse.model_validate(variation))


@router.delete("/{variation_id}", dependencies=[Depends(require_admin)])
def delete_variation(variation_id: str, db: Session = Depends(get_db)):
    VariationService(db).delete_variation(variation_id)
    return success("Variation deleted successfully")
