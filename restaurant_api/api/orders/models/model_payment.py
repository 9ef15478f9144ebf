# restaurant_api/api/orders/models/model_payment.py
import enum

from sqlalchemy import Column, String, Text, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class PaymentMethod(str, enum.Enum):
    CASH = "Cash"
    QRIS = "QRIS"
    DEBIT = "Debit"
    CREDIT = "Credit"


class PaymentStatus(str, enum.Enum):
    PENDING = "Pending"
    SUCCESS = "Success"
    REFUNDED = "Refunded"


class PaymentModel(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=new_uuid)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    method = Column(String(20), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default=PaymentStatus.PENDING.value)
    transaction_ref = Column(Text, nullable=True)
    paid_at = Column(DateTime, default=now_trimmed, nullable=False)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    order = relationship("OrderModel", back_populates="payments")
