# restaurant_api/api/orders/services/service_order.py
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from restaurant_api.api.catalog.contracts.product_contract import IProductContract
from restaurant_api.api.orders.models.model_order import DishStatus, OrderModel, OrderStatus
from restaurant_api.api.orders.models.model_payment import PaymentModel, PaymentStatus
from restaurant_api.api.orders.repositories.repo_order_details import OrderDetailRepository
from restaurant_api.api.orders.repositories.repo_orders import OrderRepository
from restaurant_api.api.orders.schemas.schema_order import OrderCreate, OrderDetailsCreate, OrderUpdate
from restaurant_api.api.orders.schemas.schema_payment import ProcessPaymentRequest
from restaurant_api.api.orders.services.order_pricing import build_details, sum_totals, to_money
from restaurant_api.utils.database_utils import now_trimmed
from restaurant_api.utils.logger import AppLogger
from restaurant_api.utils.prometheus_metrics import orders_created_total

DEFAULT_PER_PAGE = 20


class OrderService:
    """
    Order intake and lifecycle.

    Status is a plain tag: `update_order` may set any value. Only cancel,
    complete and pay check the current state before changing it.
    """

    def __init__(
        self,
        db: Session,
        product_contract: IProductContract,
        app_logger: Optional[AppLogger] = None,
    ):
        self.db = db
        self.repo = OrderRepository(db)
        self.repo_details = OrderDetailRepository(db)
        self.products = product_contract
        self.app_logger = app_logger or AppLogger()

    # ------------- Queries -------------
    def get_order(self, order_id: str) -> OrderModel:
        order = self.repo.get(order_id)
        if not order:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Order not found")
        return order

    def list_orders(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE, status_filter: Optional[str] = None):
        offset = (page - 1) * per_page
        items = self.repo.list_paginated(offset, per_page, status=status_filter)
        return items, self.repo.count(status=status_filter)

    def list_order_details(self, order_id: str):
        self.get_order(order_id)
        return self.repo_details.list_by_order(order_id)

    # ------------- Commands -------------
    def create_order(self, data: OrderCreate, user_id: Optional[str] = None) -> OrderModel:
        if not data.customer_name or not data.customer_phone:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "customer name and phone are required")

        details = build_details(data.details, self.products)
        order = OrderModel(
            user_id=data.user_id or user_id,
            qr_id=data.qr_id,
            customer_name=data.customer_name,
            customer_phone=data.customer_phone,
            table_number=data.table_number,
            notes=data.notes,
            status=OrderStatus.PENDING.value,
            dish_status=DishStatus.IN_PROCESS.value,
            total_amount=sum_totals(details),
        )

        try:
            order = self.repo.create_order(order, details)
        except IntegrityError:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Order references a missing record")

        orders_created_total.inc()
        self.app_logger.info(
            "orders",
            "create",
            "order",
            f"Order created for table {data.table_number}",
            entity_id=order.id,
            user_id=user_id,
            metadata={"total_amount": str(order.total_amount), "items": len(details)},
        )
        return self.get_order(order.id)

    def create_order_details(self, order_id: str, data: OrderDetailsCreate):
        order = self.get_order(order_id)
        if order.status == OrderStatus.CANCELLED.value:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "cannot add items to a cancelled order")

        details = build_details(data.details, self.products)
        order.details.extend(details)
        order.total_amount = sum_totals(order.details)
        self.repo.save(order)
        return details

    def update_order(self, order_id: str, data: OrderUpdate) -> OrderModel:
        """
        Header merge, item removal, new items, payment upsert and total
        recalculation, all inside the request transaction.
        """
        order = self.get_order(order_id)

        if data.customer_name:
            order.customer_name = data.customer_name
        if data.customer_phone:
            order.customer_phone = data.customer_phone
        if data.table_number:
            order.table_number = data.table_number
        if data.notes:
            order.notes = data.notes
        if data.status is not None:
            order.status = data.status.value
        if data.dish_status is not None:
            order.dish_status = data.dish_status.value

        if data.deleted_item_ids:
            to_delete = set(data.deleted_item_ids)
            # delete-orphan removes the rows on flush
            order.details = [d for d in order.details if d.id not in to_delete]

        if data.items:
            order.details.extend(build_details(data.items, self.products))

        order.total_amount = sum_totals(order.details)

        if data.payment is not None:
            if order.payments:
                payment = order.payments[0]
                payment.method = data.payment.method.value
                payment.amount = to_money(data.payment.amount)
                payment.transaction_ref = data.payment.transaction_ref
            else:
                order.payments.append(
                    PaymentModel(
                        method=data.payment.method.value,
                        amount=to_money(data.payment.amount),
                        status=PaymentStatus.SUCCESS.value,
                        transaction_ref=data.payment.transaction_ref,
                        paid_at=now_trimmed(),
                    )
                )

        # An explicit status wins; cancelled orders keep their refunds
        recompute = data.status is None and order.status != OrderStatus.CANCELLED.value
        if recompute and (data.payment is not None or order.payments):
            paid = sum(
                (to_money(p.amount) for p in order.payments if p.status == PaymentStatus.SUCCESS.value),
                to_money(0),
            )
            if paid >= to_money(order.total_amount):
                order.status = OrderStatus.PAID.value
                if data.dish_status is None:
                    order.dish_status = DishStatus.IN_PROCESS.value
                order.paid_at = now_trimmed()
            else:
                order.status = OrderStatus.PENDING.value

        self.repo.save(order)
        return order

    def cancel_order(self, order_id: str, user_id: Optional[str] = None) -> OrderModel:
        order = self.get_order(order_id)
        if order.status == OrderStatus.CANCELLED.value:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "order is already cancelled")
        if order.dish_status == DishStatus.COMPLETED.value:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "cannot cancel order that is already completed")

        order.status = OrderStatus.CANCELLED.value
        order.dish_status = DishStatus.CANCELLED.value
        order.cancelled_at = now_trimmed()
        for payment in order.payments:
            payment.status = PaymentStatus.REFUNDED.value
        self.repo.save(order)

        self.app_logger.audit(
            "orders",
            "cancel",
            "order",
            f"Order cancelled, {len(order.payments)} payment(s) refunded",
            entity_id=order.id,
            user_id=user_id,
        )
        return order

    def mark_completed(self, order_id: str) -> OrderModel:
        order = self.get_order(order_id)
        if order.dish_status != DishStatus.IN_PROCESS.value:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"dish status must be '{DishStatus.IN_PROCESS.value}' to mark as completed, "
                f"current status: {order.dish_status}",
            )
        order.dish_status = DishStatus.COMPLETED.value
        return self.repo.save(order)

    def process_payment(
        self,
        order_id: str,
        data: ProcessPaymentRequest,
        user_id: Optional[str] = None,
    ) -> PaymentModel:
        order = self.get_order(order_id)
        if order.status == OrderStatus.PAID.value:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "order already paid")
        if order.status == OrderStatus.CANCELLED.value:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "cannot pay for cancelled order")

        amount = to_money(data.amount)
        total = to_money(order.total_amount)
        if amount != total:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"payment amount ({amount}) does not match order total ({total})",
            )

        now = now_trimmed()
        payment = PaymentModel(
            method=data.method.value,
            amount=amount,
            status=PaymentStatus.SUCCESS.value,
            transaction_ref=data.transaction_ref,
            paid_at=now,
        )
        order.payments.append(payment)
        order.status = OrderStatus.PAID.value
        order.paid_at = now
        self.repo.save(order)

        self.app_logger.audit(
            "payments",
            "pay",
            "order",
            f"Payment of {amount} via {payment.method}",
            entity_id=order.id,
            user_id=user_id,
            metadata={"payment_id": payment.id, "method": payment.method},
        )
        return payment
