# restaurant_api/api/orders/models/model_order_detail.py
from sqlalchemy import Column, String, Integer, Text, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class OrderDetailModel(Base):
    __tablename__ = "order_details"

    id = Column(String(36), primary_key=True, default=new_uuid)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)

    # Snapshot of the catalog at ordering time
    product_name = Column(String(200), nullable=False)
    variation_name = Column(String(200), nullable=True)
    unit_price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    note = Column(Text, nullable=True)

    product_id = Column(String(36), ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    variation_id = Column(String(36), ForeignKey("variations.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    order = relationship("OrderModel", back_populates="details")
    product = relationship("ProductModel")
    variation = relationship("VariationModel")

    @property
    def image_url(self) -> str | None:
        return self.product.image_url if self.product else None
