"""
Logging setup.

`logger` is the process console logger used for diagnostics.
`AppLogger` is the activity logger: it is built per request by the
`get_app_logger` dependency and handed to the services that need it, so it
carries its own persister and never lives in module state.
"""
import logging
import socket
import sys
from typing import Any, Optional

from restaurant_api.config.settings import APP_ENV, APP_NAME, LOG_LEVEL, LOG_SILENT
from restaurant_api.utils.prometheus_metrics import record_log

LOG_FORMAT = "[%(levelname)s] [%(asctime)s] %(name)s - %(message)s"


class _MetricsFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record_log(record.levelname)
        return True


def _build_logger() -> logging.Logger:
    log = logging.getLogger("restaurant_api")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.addFilter(_MetricsFilter())
    log.setLevel(LOG_LEVEL)
    log.propagate = False
    return log


logger = _build_logger()

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "audit": logging.INFO,
}


class AppLogger:
    """
    Writes activity entries to the console and, through its persister, to the
    `logs` table.

    The persister is any object with a `persist(entry: dict)` method
    (see `restaurant_api.api.logs.contracts.log_contract.ILogPersister`).
    """

    def __init__(
        self,
        persister=None,
        environment: str = APP_ENV,
        application: str = APP_NAME,
        hostname: Optional[str] = None,
        silent: bool = LOG_SILENT,
        console: logging.Logger = logger,
    ):
        self.persister = persister
        self.environment = environment
        self.application = application
        self.hostname = hostname or socket.gethostname()
        self.silent = silent
        self.console = console

    def log(
        self,
        level: str,
        source: str,
        action: str,
        entity: str,
        description: str = "",
        *,
        entity_id: Optional[str] = None,
        user_id: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
        ip_address: Optional[str] = None,
        type: str = "activity",
    ) -> dict:
        entry = {
            "level": level,
            "source": source,
            "action": action,
            "entity": entity,
            "entity_id": entity_id,
            "user_id": user_id,
            "description": description,
            "metadata": metadata or {},
            "request_id": request_id,
            "ip_address": ip_address,
            "environment": self.environment,
            "application": self.application,
            "hostname": self.hostname,
            "type": type,
        }

        if not self.silent:
            self.console.log(
                _LEVELS.get(level, logging.INFO),
                "[%s] %s %s id=%s %s",
                source.upper(),
                action,
                entity,
                entity_id or "-",
                description,
            )

        if self.persister is not None:
            self.persister.persist(entry)
        return entry

    def info(self, source: str, action: str, entity: str, description: str = "", **kwargs) -> dict:
        return self.log("info", source, action, entity, description, **kwargs)

    def warn(self, source: str, action: str, entity: str, description: str = "", **kwargs) -> dict:
        return self.log("warn", source, action, entity, description, **kwargs)

    def error(self, source: str, action: str, entity: str, description: str = "", **kwargs) -> dict:
        return self.log("error", source, action, entity, description, **kwargs)

    def audit(self, source: str, action: str, entity: str, description: str = "", **kwargs) -> dict:
        kwargs.setdefault("type", "audit")
        return self.log("audit", source, action, entity, description, **kwargs)
