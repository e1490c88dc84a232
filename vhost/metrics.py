from __future__ import annotations

from prometheus_client import Counter

VHOST_REQUESTS_TOTAL = Counter(
    "vhost_requests_total",
    "Requests seen by the virtual host grouped by resolution outcome",
    labelnames=("outcome",),
)
VHOST_NAVIGATIONS_TOTAL = Counter(
    "vhost_navigations_total", "Start page navigations emitted by sessions"
)

__all__ = [
    "VHOST_REQUESTS_TOTAL",
    "VHOST_NAVIGATIONS_TOTAL",
]
