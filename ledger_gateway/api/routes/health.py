"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the ledger peer is unreachable (readiness)
    - Probes sit outside the gateway's 200/500 contract: they never touch chaincode

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ledger_gateway import __version__
from ledger_gateway.api.dependencies import get_gateway
from ledger_gateway.services.ledger_gateway import LedgerGateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "ledger-gateway",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(gateway: LedgerGateway = Depends(get_gateway)):
    """Readiness probe: includes ledger peer connectivity."""
    ledger_ok = await gateway.ledger.health_check()
    if not ledger_ok:
        logger.warning("Readiness check failed: ledger unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "ledger_unavailable",
            },
        )
    return {"status": "ready", "checks": {"ledger": "healthy"}}
