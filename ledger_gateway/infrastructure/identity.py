"""Identity Resolver: enrollment id from a request header, with optional fallback.

Invariants:
    - Returns a non-empty, stripped enrollment id or raises IdentityResolutionError
    - Never inspects the body; identity comes from request context only

Design Decisions:
    - Header-based resolver as the default adapter: the authenticating proxy in
      front of the gateway owns sessions; swap in another IdentityResolver to change that
    - Fallback identity is opt-in (settings.default_enrollment_id) for single-user demos
"""

import logging

from ledger_gateway.core.collaborator_protocols import RequestLike
from ledger_gateway.core.domain_types import CallerId
from ledger_gateway.core.errors import IdentityResolutionError

logger = logging.getLogger(__name__)


class HeaderIdentityResolver:
    """Reads the caller's enrollment id from one configured header."""

    def __init__(self, header: str = "X-Enrollment-Id", default: str | None = None):
        self.header = header
        self.default = default.strip() if default else None

    async def get_caller_id(self, request: RequestLike) -> CallerId:
        value = (request.headers.get(self.header) or "").strip()
        if value:
            return CallerId(value)
        if self.default:
            logger.debug(f"No {self.header} header, using default enrollment id")
            return CallerId(self.default)
        raise IdentityResolutionError(f"missing {self.header} header")
