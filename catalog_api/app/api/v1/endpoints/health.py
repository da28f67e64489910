"""
Health check endpoint.

Mounted at the application root (``/health``), outside the API prefix,
so load balancers can check it without knowing where the API lives.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from catalog_api.app.schemas.common import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus, tags=["health"])
async def health(request: Request) -> HealthStatus:
    started = getattr(request.app.state, "started_at", time.monotonic())
    return HealthStatus(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=round(time.monotonic() - started, 3),
    )
