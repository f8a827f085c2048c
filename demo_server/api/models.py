from __future__ import annotations

from pydantic import BaseModel

from ..domain.status import HealthStatus


class HealthResponse(BaseModel):
    """Liveness payload polled by the orchestrator's target group."""
    status: HealthStatus


class ErrorDetail(BaseModel):
    """Machine-readable error carried in `detail` of error responses."""
    error_code: str
    error_message: str
