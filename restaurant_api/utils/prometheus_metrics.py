"""
Prometheus metrics for the HTTP layer and the logger.
"""
import re
from time import time
from typing import Callable

from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

METRICS_PATH = "/api/v1/monitoring/metrics"

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0]
)

http_errors_total = Counter(
    'http_errors_total',
    'Total HTTP errors',
    ['method', 'endpoint', 'status_code']
)

active_connections = Gauge(
    'active_connections',
    'Number of in-flight requests'
)

log_messages_total = Counter(
    'log_messages_total',
    'Total log messages',
    ['level']
)

orders_created_total = Counter(
    'orders_created_total',
    'Total orders created'
)

_UUID_RE = re.compile(r'/[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}')
_ID_RE = re.compile(r'/\d+')


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Collects request metrics for every route except the metrics endpoint itself."""

    async def dispatch(self, request: Request, call_next: Callable):
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        method = request.method
        endpoint = self._normalize_endpoint(request.url.path)

        start_time = time()
        active_connections.inc()

        try:
            response = await call_next(request)
            status_code = response.status_code

            http_requests_total.labels(
                method=method,
                endpoint=endpoint,
                status_code=status_code
            ).inc()
            http_request_duration_seconds.labels(
                method=method,
                endpoint=endpoint
            ).observe(time() - start_time)

            if status_code >= 400:
                http_errors_total.labels(
                    method=method,
                    endpoint=endpoint,
                    status_code=status_code
                ).inc()

            return response

        except Exception:
            http_requests_total.labels(method=method, endpoint=endpoint, status_code=500).inc()
            http_errors_total.labels(method=method, endpoint=endpoint, status_code=500).inc()
            raise
        finally:
            active_connections.dec()

    def _normalize_endpoint(self, endpoint: str) -> str:
        """
        Replaces identifiers to keep label cardinality low.
        Ex: /api/v1/orders/<uuid> -> /api/v1/orders/{uuid}
        """
        endpoint = _UUID_RE.sub('/{uuid}', endpoint)
        return _ID_RE.sub('/{id}', endpoint)


def get_metrics():
    """Metrics in the Prometheus text format."""
    return generate_latest()


def record_log(level: str):
    log_messages_total.labels(level=level.lower()).inc()


__all__ = ["PrometheusMiddleware", "get_metrics", "record_log", "CONTENT_TYPE_LATEST", "METRICS_PATH"]
