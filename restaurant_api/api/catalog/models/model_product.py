# restaurant_api/api/catalog/models/model_product.py
from sqlalchemy import Column, String, Integer, Boolean, Text, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_uuid)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    base_price = Column(Numeric(10, 2), nullable=False, default=0)
    is_available = Column(Boolean, nullable=False, default=True)
    position = Column(Integer, nullable=False, default=0)

    category = relationship("CategoryModel", back_populates="products")
    variations = relationship("VariationModel", back_populates="product")

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category else None
