# restaurant_api/api/orders/models/model_invoice.py
from sqlalchemy import Column, String, Text, Numeric, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class InvoiceModel(Base):
    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True, default=new_uuid)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="SET NULL"), nullable=True, unique=True)
    customer_snapshot = Column(JSON, nullable=False, default=dict)
    items_snapshot = Column(JSON, nullable=False, default=list)
    total = Column(Numeric(10, 2), nullable=False, default=0)
    invoice_number = Column(String(50), nullable=False, unique=True)
    issued_at = Column(DateTime, default=now_trimmed, nullable=False)
    pdf_url = Column(Text, nullable=True)

    order = relationship("OrderModel", back_populates="invoice")
