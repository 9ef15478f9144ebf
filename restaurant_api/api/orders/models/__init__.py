"""
Order models: orders, their detail lines, payments and invoices.
"""
from restaurant_api.api.orders.models.model_order import OrderModel, OrderStatus, DishStatus
from restaurant_api.api.orders.models.model_order_detail import OrderDetailModel
from restaurant_api.api.orders.models.model_payment import PaymentModel, PaymentMethod, PaymentStatus
from restaurant_api.api.orders.models.model_invoice import InvoiceModel

__all__ = [
    "OrderModel",
    "OrderStatus",
    "DishStatus",
    "OrderDetailModel",
    "PaymentModel",
    "PaymentMethod",
    "PaymentStatus",
    "InvoiceModel",
]
