# restaurant_api/api/orders/services/service_invoice.py
import uuid

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from restaurant_api.api.orders.models.model_invoice import InvoiceModel
from restaurant_api.api.orders.models.model_order import OrderModel
from restaurant_api.api.orders.repositories.repo_invoices import InvoiceRepository
from restaurant_api.api.orders.repositories.repo_orders import OrderRepository
from restaurant_api.utils.database_utils import now_trimmed
from restaurant_api.utils.logger import logger


def generate_invoice_number(issued_at=None) -> str:
    """INV-YYYYMMDD-XXXXXXXX"""
    issued_at = issued_at or now_trimmed()
    return f"INV-{issued_at:%Y%m%d}-{uuid.uuid4().hex[:8].upper()}"


def _customer_snapshot(order: OrderModel) -> dict:
    return {
        "name": order.customer_name,
        "phone": order.customer_phone,
        "table_number": order.table_number,
    }


def _items_snapshot(order: OrderModel) -> list[dict]:
    return [
        {
            "product_id": d.product_id,
            "product_name": d.product_name,
            "variation_name": d.variation_name,
            "quantity": d.quantity,
            "unit_price": float(d.unit_price),
            "total_price": float(d.total_price),
            "note": d.note,
        }
        for d in order.details
    ]


class InvoiceService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = InvoiceRepository(db)
        self.repo_orders = OrderRepository(db)

    def list_invoices(self):
        return self.repo.list()

    def get_invoice(self, invoice_id: str) -> InvoiceModel:
        invoice = self.repo.get(invoice_id)
        if not invoice:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Invoice not found")
        return invoice

    def get_order_invoice(self, order_id: str) -> InvoiceModel:
        invoice = self.repo.get_by_order(order_id)
        if not invoice:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Invoice not found")
        return invoice

    def create_invoice(self, order_id: str) -> InvoiceModel:
        order = self.repo_orders.get(order_id)
        if not order:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Order not found")
        if self.repo.get_by_order(order_id):
            raise HTTPException(status.HTTP_409_CONFLICT, "Invoice already exists for this order")

        issued_at = now_trimmed()
        number = generate_invoice_number(issued_at)
        while self.repo.number_exists(number):
            number = generate_invoice_number(issued_at)

        invoice = InvoiceModel(
            order_id=order.id,
            customer_snapshot=_customer_snapshot(order),
            items_snapshot=_items_snapshot(order),
            total=order.total_amount,
            invoice_number=number,
            issued_at=issued_at,
        )
        self.repo.create(invoice)
        logger.info(f"[INVOICES] Issued {number} for order {order.id}")
        return invoice
