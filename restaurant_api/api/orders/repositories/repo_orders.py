# restaurant_api/api/orders/repositories/repo_orders.py
from typing import List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload

from restaurant_api.api.orders.models.model_order import OrderModel
from restaurant_api.api.orders.models.model_order_detail import OrderDetailModel
from restaurant_api.utils.logger import logger


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel, details: Sequence[OrderDetailModel]) -> OrderModel:
        """
        Inserts the order and its lines as one unit and commits.

        Any failure rolls back every row written by this call, so an order is
        never visible without its lines. Totals are taken as given.
        """
        try:
            self.db.add(order)
            self.db.flush()
            if not order.id:
                raise RuntimeError("order insert returned no id")

            for detail in details:
                detail.order_id = order.id
                self.db.add(detail)
            self.db.flush()
            self.db.commit()
        except Exception as e:
            logger.error(f"[ORDERS] Order creation rolled back: {e}")
            self.db.rollback()
            raise
        return order

    def _with_associations(self):
        return self.db.query(OrderModel).options(
            selectinload(OrderModel.details).joinedload(OrderDetailModel.product),
            selectinload(OrderModel.details).joinedload(OrderDetailModel.variation),
            selectinload(OrderModel.payments),
            joinedload(OrderModel.invoice),
        )

    def get(self, order_id: str, with_associations: bool = True) -> Optional[OrderModel]:
        q = self._with_associations() if with_associations else self.db.query(OrderModel)
        return q.filter(OrderModel.id == order_id).first()

    def list_paginated(self, offset: int, limit: int, status: Optional[str] = None) -> List[OrderModel]:
        q = self._with_associations()
        if status:
            q = q.filter(OrderModel.status == status)
        return q.order_by(OrderModel.created_at.desc()).offset(offset).limit(limit).all()

    def count(self, status: Optional[str] = None) -> int:
        q = self.db.query(func.count(OrderModel.id))
        if status:
            q = q.filter(OrderModel.status == status)
        return int(q.scalar() or 0)

    def save(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order
