"""Ledger Gateway: one HTTP request in, one ledger call, one HTTP response out.

Invariants:
    - Identity resolved exactly once per request, before anything else
    - Exactly one ledger call per request: QUERY calls ledger.query, INVOKE calls ledger.invoke
    - Any failure (identity, body, build, ledger, render) -> empty HTTP 500; never re-raised
    - Failure diagnostics go to the log only, never to the response body
    - No retries, no state kept between requests

Design Decisions:
    - Route modules pass a builder and a renderer: the gateway never knows
      which route it serves, routes never touch the ledger client
    - Collaborators injected through the constructor (FastAPI Depends), so tests
      swap them without patching module globals
    - Catch-all except at this boundary is the contract: every cause collapses
      to the same outcome, the log keeps the distinction
"""

import json
import logging
from collections.abc import Callable
from typing import Any

from starlette.requests import Request
from starlette.responses import Response

from ledger_gateway.core.collaborator_protocols import IdentityResolver, LedgerClient
from ledger_gateway.core.domain_types import DispatchMode
from ledger_gateway.core.errors import GatewayError, MalformedRequestError
from ledger_gateway.core.ledger_calls import CallBuilder, LedgerCall, RequestEnvelope

logger = logging.getLogger(__name__)

Renderer = Callable[[Any], Response]


def failure_response() -> Response:
    """The only failure shape: 500, no body."""
    return Response(status_code=500)


async def read_envelope(request: Request) -> RequestEnvelope:
    """Snapshot the request parts builders may read.

    Empty or non-object bodies read as {}; unparseable JSON is a failure.
    """
    raw = await request.body()
    body: dict = {}
    if raw.strip():
        try:
            parsed = json.loads(raw)
        except ValueError:
            raise MalformedRequestError("request body is not valid JSON")
        if isinstance(parsed, dict):
            body = parsed
    return RequestEnvelope(
        method=request.method,
        path=request.url.path,
        body=body,
        query=dict(request.query_params),
        path_params=dict(request.path_params),
    )


class LedgerGateway:
    """Translates requests into ledger calls and ledger outcomes into responses."""

    def __init__(self, ledger: LedgerClient, identity: IdentityResolver):
        self.ledger = ledger
        self.identity = identity

    async def handle(
        self, request: Request, build: CallBuilder, render: Renderer,
    ) -> Response:
        """Run one request through identity -> build -> dispatch -> render."""
        path = request.url.path
        try:
            caller_id = await self.identity.get_caller_id(request)
            envelope = await read_envelope(request)
            call = build(envelope, caller_id)
            result = await self.dispatch(call)
            return render(result)
        except GatewayError as e:
            if not e.context.path:
                e.context.path = path
            logger.error(
                f"{e.code} on {request.method} {path}: {e.message}",
                extra=e.to_log_extra(), exc_info=True,
            )
            return failure_response()
        except Exception as e:
            logger.error(
                f"Unexpected failure on {request.method} {path}: {e}",
                extra={"path": path, "error_code": "INTERNAL_ERROR"},
                exc_info=True,
            )
            return failure_response()

    async def dispatch(self, call: LedgerCall) -> Any:
        """Send the call down the path its mode names."""
        extra = {
            "operation": call.operation.value,
            "mode": call.mode.value,
            "caller_id": call.caller_id,
        }
        logger.info(f"Dispatching {call.operation.value} ({call.mode.value})", extra=extra)

        if call.mode is DispatchMode.QUERY:
            result = await self.ledger.query(
                call.operation.value, call.args, call.caller_id,
            )
            if isinstance(result, list):
                logger.info(
                    f"Retrieved {len(result)} record(s) from the ledger",
                    extra={**extra, "result_count": len(result)},
                )
            return result

        return await self.ledger.invoke(
            call.operation.value, call.args, call.caller_id,
        )
