from fastapi import Depends
from sqlalchemy.orm import Session

from restaurant_api.api.catalog.adapters.product_adapter import ProductAdapter
from restaurant_api.api.catalog.contracts.product_contract import IProductContract
from restaurant_api.database.db_connection import get_db


def get_product_contract(db: Session = Depends(get_db)) -> IProductContract:
    return ProductAdapter(db)
