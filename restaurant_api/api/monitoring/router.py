"""
Prometheus metrics endpoint.
"""
from fastapi import APIRouter
from fastapi.responses import Response

from restaurant_api.utils.prometheus_metrics import CONTENT_TYPE_LATEST, METRICS_PATH, get_metrics

# Public, scraped by Prometheus
router_public = APIRouter(tags=["Monitoring"])


@router_public.get(METRICS_PATH)
def metrics():
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)
