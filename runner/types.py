from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Check:
    """One request the smoke run makes and the status it expects back."""

    name: str
    path: str
    expected_status: int


@dataclass
class CheckResult:
    """Outcome of a single check against the running instance."""

    name: str
    path: str
    expected_status: int
    status_code: int | None
    size: int
    elapsed_ms: float
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.status_code == self.expected_status


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed."""


class HealthTimeoutError(SmokeError):
    """Raised when /health never reports ok within the timeout."""


class FetchError(SmokeError):
    """Raised when a request fails at the transport level."""
