# restaurant_api/api/catalog/models/model_variation.py
from sqlalchemy import Column, String, Boolean, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class VariationModel(Base):
    __tablename__ = "variations"

    id = Column(String(36), primary_key=True, default=new_uuid)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False, index=True)
    is_default = Column(Boolean, nullable=False, default=False)
    is_available = Column(Boolean, nullable=False, default=True)
    is_required = Column(Boolean, nullable=False, default=False)
    variation_type = Column(String(100), nullable=False)
    # [{"label": str, "price_modifier": float?, "price_absolute": float?, "is_default": bool}]
    options = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    product = relationship("ProductModel", back_populates="variations")

    def default_option(self) -> dict | None:
        """The option flagged as default, falling back to the first one."""
        options = self.options or []
        for option in options:
            if option.get("is_default"):
                return option
        return options[0] if options else None
