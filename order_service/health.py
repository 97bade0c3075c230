"""
health.py — Health Reporter

Answers liveness probes from the deployment platform. The answer never
depends on the order store, so a probe succeeds for any store state.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from .config import get_service_env
from .models import HealthStatus

router = APIRouter()


def get_health() -> HealthStatus:
    """
    Builds the current health status.

    The environment name is read on every call, not cached.

    Returns:
        HealthStatus: Always `status="healthy"` with the current UTC time.
    """
    return HealthStatus(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        environment=get_service_env(),
    )


@router.get("", response_model=HealthStatus)
@router.get("/", response_model=HealthStatus, include_in_schema=False)
def health_check():
    """
    Health check endpoint.

    Used by the container platform to decide whether the instance
    may receive traffic.
    """
    return get_health()
