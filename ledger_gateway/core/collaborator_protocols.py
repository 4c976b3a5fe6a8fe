"""Boundary Protocols: contracts between the gateway core and its collaborators.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - The gateway reaches the ledger and the identity source only through these types
    - Implementations are injected (FastAPI dependency), never looked up globally

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Both ledger methods share one signature; choosing between them IS the
      query/invoke decision, so they stay two methods rather than one with a flag
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from ledger_gateway.core.domain_types import CallerId


class RequestLike(Protocol):
    """Structural contract for the inbound request handed to identity resolvers.

    Starlette's Request satisfies it; tests can pass a plain namespace.
    """
    headers: Mapping[str, str]


class LedgerClient(Protocol):
    """Contract for the ledger peer: implemented by infrastructure."""
    async def query(
        self, function_name: str, args: Sequence[str], caller_id: CallerId,
    ) -> Any: ...
    async def invoke(
        self, function_name: str, args: Sequence[str], caller_id: CallerId,
    ) -> Any: ...
    async def health_check(self) -> bool: ...


class IdentityResolver(Protocol):
    """Contract for deriving the caller's enrollment id from a request."""
    async def get_caller_id(self, request: RequestLike) -> CallerId: ...
