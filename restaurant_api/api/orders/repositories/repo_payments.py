# restaurant_api/api/orders/repositories/repo_payments.py
from typing import List

from sqlalchemy.orm import Session

from restaurant_api.api.orders.models.model_payment import PaymentModel


class PaymentRepository:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[PaymentModel]:
        return self.db.query(PaymentModel).order_by(PaymentModel.created_at.desc()).all()

    def list_by_order(self, order_id: str) -> List[PaymentModel]:
        return (
            self.db.query(PaymentModel)
            .filter(PaymentModel.order_id == order_id)
            .order_by(PaymentModel.created_at)
            .all()
        )

    def create(self, payment: PaymentModel) -> PaymentModel:
        self.db.add(payment)
        self.db.flush()
        return payment
