# restaurant_api/api/qrcodes/models/model_qr_code.py
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class QRCodeModel(Base):
    __tablename__ = "qr_codes"

    id = Column(String(36), primary_key=True, default=new_uuid)
    code = Column(String(64), nullable=False, unique=True, index=True)
    store_id = Column(String(36), nullable=True, index=True)
    table_number = Column(String(20), nullable=True)
    type = Column(String(30), nullable=False, default="menu")
    menu_url = Column(Text, nullable=True)
    expires_at = Column(DateTime, nullable=True)
    # data:image/png;base64,...
    image = Column(Text, nullable=True)
    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    orders = relationship("OrderModel", back_populates="qr_code")
