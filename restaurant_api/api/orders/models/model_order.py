# restaurant_api/api/orders/models/model_order.py
import enum

from sqlalchemy import Column, String, Integer, Text, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class OrderStatus(str, enum.Enum):
    """Order lifecycle tag. Only cancel/pay apply guards; direct updates are free-form."""
    PENDING = "Pending"
    PAID = "Paid"
    CANCELLED = "Cancelled"


class DishStatus(str, enum.Enum):
    """Kitchen progress of the order's dishes."""
    IN_PROCESS = "In Process"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    qr_id = Column(String(36), ForeignKey("qr_codes.id", ondelete="SET NULL"), nullable=True)

    customer_name = Column(String(150), nullable=False)
    customer_phone = Column(String(30), nullable=False)
    table_number = Column(Integer, nullable=False)

    status = Column(String(20), nullable=False, default=OrderStatus.PENDING.value)
    dish_status = Column(String(20), nullable=False, default=DishStatus.IN_PROCESS.value)
    total_amount = Column(Numeric(10, 2), nullable=False, default=0)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    paid_at = Column(DateTime, nullable=True)
    cancelled_at = Column(DateTime, nullable=True)

    details = relationship(
        "OrderDetailModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderDetailModel.created_at",
    )
    payments = relationship(
        "PaymentModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="PaymentModel.created_at",
    )
    invoice = relationship("InvoiceModel", back_populates="order", uselist=False)
    user = relationship("UserModel")
    qr_code = relationship("QRCodeModel", back_populates="orders")
