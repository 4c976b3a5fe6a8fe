"""Error Handlers: global exception handlers for anything that escapes a route.

Invariants:
    - GatewayError -> empty 500, logged with its code and category
    - Exception (catch-all) -> empty 500, never leaks internal details
    - Same outcome as the gateway's own failure path: callers cannot tell them apart

Design Decisions:
    - Two-layer handler: domain (GatewayError), catch-all (Exception)
    - No RequestValidationError handler: routes declare no pydantic bodies,
      request fields are read unvalidated by design
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response

from ledger_gateway.core.errors import GatewayError
from ledger_gateway.services.ledger_gateway import failure_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gateway_error_handler(app)
    _register_generic_error_handler(app)


def _register_gateway_error_handler(app: FastAPI) -> None:

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError) -> Response:
        logger.error(
            f"GatewayError: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
            exc_info=True,
        )
        return failure_response()


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> Response:
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
            exc_info=True,
        )
        return failure_response()
