"""API routers package."""

from holding_metrics.api.routers.series import router as series_router
from holding_metrics.api.routers.metrics import router as metrics_router

__all__ = [
    "series_router",
    "metrics_router",
]
