"""Ledger Gateway API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GatewayError and Exception to an empty 500
    - CORS configured from settings (not hardcoded)
    - Ledger client and identity resolver built once in the lifespan,
      wrapped in a LedgerGateway on app.state, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Collaborators live on app.state rather than as module globals: tests
      override get_gateway and never start a real ledger client
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledger_gateway import __version__
from ledger_gateway.api.error_handlers import register_error_handlers
from ledger_gateway.api.routes import brokerage, health, resources, things, users
from ledger_gateway.config import get_settings
from ledger_gateway.infrastructure.identity import HeaderIdentityResolver
from ledger_gateway.infrastructure.ledger_client import FabricLedgerClient
from ledger_gateway.infrastructure.observability import setup_logging
from ledger_gateway.services.ledger_gateway import LedgerGateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    ledger = FabricLedgerClient(
        settings.ledger_url,
        settings.chaincode_name,
        timeout_seconds=settings.ledger_timeout_seconds,
    )
    identity = HeaderIdentityResolver(
        settings.identity_header, settings.default_enrollment_id,
    )
    app.state.gateway = LedgerGateway(ledger, identity)
    logger.info(
        f"Ledger Gateway started (peer {settings.ledger_url}, "
        f"chaincode {settings.chaincode_name})",
    )
    yield
    logger.info("Ledger Gateway shutting down")
    await ledger.aclose()


app = FastAPI(
    title="Ledger Gateway", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(things.router)
app.include_router(resources.router)
app.include_router(brokerage.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ledger_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
