"""View models for service outputs."""

from holding_metrics.domain.views.metrics import (
    CurrentPrice,
    PortfolioMetrics,
    WindowPerformance,
)

__all__ = [
    "CurrentPrice",
    "PortfolioMetrics",
    "WindowPerformance",
]
