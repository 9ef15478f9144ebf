# restaurant_api/api/logs/models/model_log.py
from sqlalchemy import Column, String, Text, DateTime, JSON

from restaurant_api.database.db_connection import Base
from restaurant_api.utils.database_utils import new_uuid, now_trimmed


class LogModel(Base):
    """Append-only activity/audit entry."""
    __tablename__ = "logs"

    id = Column(String(36), primary_key=True, default=new_uuid)
    timestamp = Column(DateTime, default=now_trimmed, nullable=False, index=True)
    level = Column(String(20), nullable=False)  # info, warn, error, audit
    source = Column(String(100), nullable=False)  # service/module/component
    user_id = Column(String(36), nullable=True)
    ip_address = Column(String(45), nullable=True)
    action = Column(String(100), nullable=False)  # e.g. "order.created"
    entity = Column(String(50), nullable=False, index=True)
    entity_id = Column(String(36), nullable=True)
    description = Column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    metadata_ = Column("metadata", JSON, nullable=True)
    request_id = Column(String(100), nullable=True)
    environment = Column(String(20), nullable=False)
    application = Column(String(50), nullable=False)
    hostname = Column(String(100), nullable=True)
    type = Column(String(20), nullable=False)  # activity, audit...
