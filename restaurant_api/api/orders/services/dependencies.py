from fastapi import Depends
from sqlalchemy.orm import Session

from restaurant_api.api.catalog.contracts.dependencies import get_product_contract
from restaurant_api.api.catalog.contracts.product_contract import IProductContract
from restaurant_api.api.logs.contracts.dependencies import get_app_logger
from restaurant_api.api.orders.services.service_invoice import InvoiceService
from restaurant_api.api.orders.services.service_order import OrderService
from restaurant_api.api.orders.services.service_payment import PaymentService
from restaurant_api.database.db_connection import get_db
from restaurant_api.utils.logger import AppLogger


def get_order_service(
    db: Session = Depends(get_db),
    product_contract: IProductContract = Depends(get_product_contract),
    app_logger: AppLogger = Depends(get_app_logger),
) -> OrderService:
    return OrderService(db, product_contract=product_contract, app_logger=app_logger)


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(db)


def get_invoice_service(db: Session = Depends(get_db)) -> InvoiceService:
    return InvoiceService(db)
