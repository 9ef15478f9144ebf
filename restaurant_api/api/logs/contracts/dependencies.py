from fastapi import Depends
from sqlalchemy.orm import Session

from restaurant_api.api.logs.adapters.log_persister_adapter import DatabaseLogPersister
from restaurant_api.database.db_connection import get_db
from restaurant_api.utils.logger import AppLogger


def get_app_logger(db: Session = Depends(get_db)) -> AppLogger:
    return AppLogger(persister=DatabaseLogPersister(db))
