"""
Health API.

Lightweight liveness endpoint; the service has no external dependencies to probe.
"""

import logging

from fastapi import APIRouter

logger = logging.getLogger("passion")

root_router = APIRouter(tags=["health"])


@root_router.get("/healthz")
def healthz():
    """Lightweight liveness check (no deps)."""
    logger.info("health.ok")
    return {"status": "ok"}
