# restaurant_api/api/catalog/models/model_category.py
from sqlalchemy import Column, String, Integer, Boolean
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(150), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    position = Column(Integer, nullable=False, default=0)

    products = relationship(
        "ProductModel",
        back_populates="category",
        order_by="ProductModel.position",
    )
