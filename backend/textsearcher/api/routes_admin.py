"""Administrative routes for textsearcher."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from textsearcher.api.dependencies import get_app_settings
from textsearcher.core.config import Settings
from textsearcher.core.metrics import metrics_response

router = APIRouter()


@router.get("/health", summary="Liveness check")
def health() -> dict[str, bool]:
    return {"ok": True}


@router.get("/settings", summary="Effective scan settings")
def read_settings(settings: Settings = Depends(get_app_settings)) -> dict[str, object]:
    return settings.model_dump()


@router.get("/metrics", summary="Prometheus metrics")
def metrics() -> Response:
    return metrics_response()
