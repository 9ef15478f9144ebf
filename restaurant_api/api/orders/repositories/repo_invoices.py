# restaurant_api/api/orders/repositories/repo_invoices.py
from typing import List, Optional

from sqlalchemy.orm import Session

from restaurant_api.api.orders.models.model_invoice import InvoiceModel


class InvoiceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, invoice_id: str) -> Optional[InvoiceModel]:
        return self.db.query(InvoiceModel).filter(InvoiceModel.id == invoice_id).first()

    def get_by_order(self, order_id: str) -> Optional[InvoiceModel]:
        return self.db.query(InvoiceModel).filter(InvoiceModel.order_id == order_id).first()

    def number_exists(self, invoice_number: str) -> bool:
        return (
            self.db.query(InvoiceModel.id)
            .filter(InvoiceModel.invoice_number == invoice_number)
            .first()
            is not None
        )

    def list(self) -> List[InvoiceModel]:
        return self.db.query(InvoiceModel).order_by(InvoiceModel.issued_at.desc()).all()

    def create(self, invoice: InvoiceModel) -> InvoiceModel:
        self.db.add(invoice)
        self.db.flush()
        return invoice
