"""HTTP routes. Static content is mounted separately in `main.create_app`."""
from __future__ import annotations

from fastapi import APIRouter

from ..domain.status import health_payload
from .models import HealthResponse

router = APIRouter()


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    response_model=HealthResponse,
    summary="Liveness check",
)
async def health() -> HealthResponse:
    """Report liveness; independent of the served root."""
    return HealthResponse(**health_payload())
