from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from places_api.models.schemas import MetricsSnapshot
from places_api.observability.metrics import get_metrics
from places_api.observability.middleware import METRICS_PATH


router = APIRouter(tags=["metrics"])


@router.get(METRICS_PATH, response_model=MetricsSnapshot)
async def metrics(request: Request) -> dict:
    settings = request.app.state.settings
    if not settings.enable_metrics_endpoint:
        raise HTTPException(status_code=404, detail="Not found")
    return get_metrics().snapshot()
