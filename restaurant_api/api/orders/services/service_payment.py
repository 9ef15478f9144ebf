# restaurant_api/api/orders/services/service_payment.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from restaurant_api.api.orders.models.model_payment import PaymentModel
from restaurant_api.api.orders.repositories.repo_orders import OrderRepository
from restaurant_api.api.orders.repositories.repo_payments import PaymentRepository
from restaurant_api.api.orders.schemas.schema_payment import PaymentCreate
from restaurant_api.api.orders.services.order_pricing import to_money
from restaurant_api.utils.database_utils import now_trimmed


class PaymentService:
    """Raw payment records. Use `OrderService.process_payment` to settle an order."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PaymentRepository(db)
        self.repo_orders = OrderRepository(db)

    def list_payments(self):
        return self.repo.list()

    def list_order_payments(self, order_id: str):
        if not self.repo_orders.get(order_id, with_associations=False):
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Order not found")
        return self.repo.list_by_order(order_id)

    def create_payment(self, data: PaymentCreate) -> PaymentModel:
        if not self.repo_orders.get(data.order_id, with_associations=False):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "order not found")
        payment = PaymentModel(
            order_id=data.order_id,
            method=data.method.value,
            amount=to_money(data.amount),
            status=data.status.value,
            transaction_ref=data.transaction_ref,
            paid_at=now_trimmed(),
        )
        return self.repo.create(payment)
