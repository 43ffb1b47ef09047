"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the engine endpoint is not configured (readiness)
    - Neither probe builds the engine client

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from agent_gateway.config import get_settings
from agent_gateway.infrastructure.service_handle import agent_service_handle

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "agent-gateway",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: engine configuration present."""
    if not get_settings().multi_agent_endpoint:
        logger.warning("Readiness check failed: multi-agent endpoint not configured")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "multi_agent_endpoint_missing",
            },
        )
    return {
        "status": "ready",
        "checks": {
            "multi_agent_endpoint": "configured",
            "multi_agent_client": (
                "initialized" if agent_service_handle.is_initialized else "lazy"
            ),
        },
    }
