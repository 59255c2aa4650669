# src/company_api/infrastructure/observability/metrics.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Prometheus collectors on the default registry.

Histograms are created on first use and reused afterwards, so building the
app more than once in a process (tests, reloads) never registers a metric
twice.
"""

from __future__ import annotations

import threading

from prometheus_client import REGISTRY, Histogram

__all__ = ["get_or_create_hist", "get_readyz_db_latency_seconds"]

DEFAULT_BUCKETS: tuple[float, ...] = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)

_lock = threading.Lock()
_histograms: dict[str, Histogram] = {}


def get_or_create_hist(
    name: str,
    help_text: str,
    *,
    buckets: tuple[float, ...] = DEFAULT_BUCKETS,
    labelnames: tuple[str, ...] = (),
) -> Histogram:
    """Return the histogram called ``name``, registering it on first call."""
    with _lock:
        if name not in _histograms:
            _histograms[name] = Histogram(
                name, help_text, labelnames=labelnames, buckets=buckets, registry=REGISTRY
            )
        return _histograms[name]


def get_readyz_db_latency_seconds() -> Histogram:
    return get_or_create_hist(
        "readyz_db_latency_seconds", "Duration of the readiness database probe in seconds."
    )
