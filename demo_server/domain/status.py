"""Liveness payload shared by the /health route and the smoke runner."""
from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = [
    "HealthStatus",
    "health_payload",
    "is_healthy",
]


class HealthStatus(str, Enum):
    ok = "ok"


def health_payload() -> dict[str, str]:
    """Return the liveness body served on /health.

    The payload is constant: it does not look at the served root or any other
    runtime state, so an instance is live as soon as it accepts connections.
    """
    return {"status": HealthStatus.ok.value}


def is_healthy(body: Any) -> bool:
    """Return True when a decoded /health body reports liveness."""
    return isinstance(body, dict) and body.get("status") == HealthStatus.ok.value
