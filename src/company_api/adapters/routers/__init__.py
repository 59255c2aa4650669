"""Routers Package Export (Adapters Layer).

Purpose:
    Stable, explicit exports for the application router aggregator
    (`api_router`) and the metrics router. `main.py` imports these names
    during startup.

Layer:
    adapters/routers
"""

from __future__ import annotations

from .api_router import router as api_router
from .metrics_router import router as metrics_router

__all__ = ["api_router", "metrics_router"]
