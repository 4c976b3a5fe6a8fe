"""Ledger REST Client: JSON-RPC 2.0 calls against the peer's /chaincode endpoint.

Invariants:
    - query() and invoke() send the same envelope; only "method" differs
    - Every argument on the wire is a string (ctorMsg.args)
    - Connection failures and timeouts -> LedgerUnavailableError
    - JSON-RPC errors, non-OK results, non-2xx statuses -> LedgerRejectedError
    - No retries: one HTTP request per call
    - Query payloads: JSON-decoded when they parse, raw text otherwise, None when empty

Design Decisions:
    - httpx.AsyncClient owned by the wrapper: one connection pool per process,
      closed in the FastAPI lifespan
    - Wrapper over raw httpx: isolates wire format and error mapping from the gateway
    - transport injectable: tests use httpx.MockTransport instead of a live peer
"""

import itertools
import json
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from ledger_gateway.core.domain_types import CallerId, DispatchMode
from ledger_gateway.core.errors import (
    ErrorContext, LedgerRejectedError, LedgerUnavailableError,
)

logger = logging.getLogger(__name__)

# Chaincode language type 1 = GOLANG
_CHAINCODE_TYPE = 1
_RPC_OK = "OK"


class FabricLedgerClient:
    """Talks to a ledger peer's REST API. Satisfies core LedgerClient protocol."""

    def __init__(
        self,
        base_url: str,
        chaincode_name: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.chaincode_name = chaincode_name
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )
        self._ids = itertools.count(1)

    async def query(
        self, function_name: str, args: Sequence[str], caller_id: CallerId,
    ) -> Any:
        """Read-only call. Not committed, no consensus round."""
        message = await self._call(
            DispatchMode.QUERY, function_name, args, caller_id,
        )
        return _decode_payload(message)

    async def invoke(
        self, function_name: str, args: Sequence[str], caller_id: CallerId,
    ) -> Any:
        """State-changing call. Returns the peer's message (transaction id)."""
        return await self._call(
            DispatchMode.INVOKE, function_name, args, caller_id,
        )

    async def health_check(self) -> bool:
        """Peer reachable and serving the chain endpoint (for readiness probes)."""
        try:
            response = await self.client.get("/chain")
        except httpx.HTTPError as e:
            logger.warning(f"Ledger health check failed: {e}")
            return False
        return response.status_code == 200

    async def aclose(self) -> None:
        await self.client.aclose()

    def build_payload(
        self,
        mode: DispatchMode,
        function_name: str,
        args: Sequence[str],
        caller_id: CallerId,
    ) -> dict:
        """JSON-RPC request body for one chaincode call."""
        return {
            "jsonrpc": "2.0",
            "method": mode.value,
            "params": {
                "type": _CHAINCODE_TYPE,
                "chaincodeID": {"name": self.chaincode_name},
                "ctorMsg": {"function": function_name, "args": list(args)},
                "secureContext": caller_id,
            },
            "id": next(self._ids),
        }

    async def _call(
        self,
        mode: DispatchMode,
        function_name: str,
        args: Sequence[str],
        caller_id: CallerId,
    ) -> Any:
        context = ErrorContext(operation=function_name, caller_id=caller_id)
        payload = self.build_payload(mode, function_name, args, caller_id)
        try:
            response = await self.client.post("/chaincode", json=payload)
        except httpx.TimeoutException:
            raise LedgerUnavailableError("timeout", context=context)
        except httpx.TransportError as e:
            raise LedgerUnavailableError(str(e) or type(e).__name__, context=context)

        if response.status_code >= 400:
            raise LedgerRejectedError(
                f"HTTP {response.status_code}", context=context,
            )
        try:
            body = response.json()
        except ValueError:
            raise LedgerRejectedError("response is not JSON", context=context)
        return _unwrap_result(body, context)


def _unwrap_result(body: Any, context: ErrorContext) -> Any:
    """Extract result.message from a JSON-RPC response, mapping errors."""
    if not isinstance(body, dict):
        raise LedgerRejectedError("response is not a JSON-RPC object", context=context)
    error = body.get("error")
    if error:
        if not isinstance(error, dict):
            raise LedgerRejectedError(str(error), context=context)
        message = error.get("message", "unknown error")
        if error.get("data"):
            message = f"{message} ({error['data']})"
        raise LedgerRejectedError(message, rpc_code=error.get("code"), context=context)
    result = body.get("result") or {}
    if not isinstance(result, dict):
        raise LedgerRejectedError("malformed result", context=context)
    if result.get("status") != _RPC_OK:
        raise LedgerRejectedError(
            f"status {result.get('status')!r}", context=context,
        )
    return result.get("message")


def _decode_payload(message: Any) -> Any:
    """Chaincode returns bytes; most functions return JSON, some don't."""
    if message is None or message == "":
        return None
    if not isinstance(message, str):
        return message
    try:
        return json.loads(message)
    except ValueError:
        return message
