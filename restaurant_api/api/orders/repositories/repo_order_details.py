# restaurant_api/api/orders/repositories/repo_order_details.py
from typing import List

from sqlalchemy.orm import Session, joinedload

from restaurant_api.api.orders.models.model_order_detail import OrderDetailModel


class OrderDetailRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_by_order(self, order_id: str) -> List[OrderDetailModel]:
        return (
            self.db.query(OrderDetailModel)
            .options(joinedload(OrderDetailModel.product))
            .filter(OrderDetailModel.order_id == order_id)
            .order_by(OrderDetailModel.created_at)
            .all()
        )
