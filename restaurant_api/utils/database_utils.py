import uuid
from datetime import datetime, timezone


def now_trimmed():
    """Current UTC datetime without microseconds (naive, as stored in the database)"""
    return datetime.now(timezone.utc).replace(microsecond=0, tzinfo=None)


def new_uuid() -> str:
    return str(uuid.uuid4())
