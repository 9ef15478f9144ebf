from sqlalchemy.orm import Session

from restaurant_api.api.logs.contracts.log_contract import ILogPersister
from restaurant_api.api.logs.repositories.repo_logs import LogRepository


class DatabaseLogPersister(ILogPersister):
    """Appends entries to the `logs` table inside the caller's session."""

    def __init__(self, db: Session):
        self.repo = LogRepository(db)

    def persist(self, entry: dict) -> None:
        self.repo.create(**entry)
