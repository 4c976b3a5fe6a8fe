"""Error Hierarchy: typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Codes and categories are for the operational log only; every GatewayError
      renders as the same empty HTTP 500 (callers never see diagnostics)
    - to_log_extra() produces the structured fields the JSON log formatter surfaces

Design Decisions:
    - Single hierarchy with GatewayError base: one except clause at the gateway
      boundary, one global handler in main.py
    - Categories kept even though the HTTP outcome is uniform: distinguishing
      "ledger down" from "chaincode said no" in logs costs nothing
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for log routing."""
    IDENTITY = "identity"
    MALFORMED_REQUEST = "malformed_request"
    LEDGER_UNAVAILABLE = "ledger_unavailable"
    LEDGER_REJECTED = "ledger_rejected"


@dataclass
class ErrorContext:
    """Request-scoped context attached to an error for the log line."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    caller_id: str | None = None
    path: str | None = None


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_log_extra(self) -> dict:
        """Fields passed as `extra=` to logger calls."""
        extra = {
            "error_code": self.code,
            "error_category": self.category.value,
        }
        if self.context.operation:
            extra["operation"] = self.context.operation
        if self.context.caller_id:
            extra["caller_id"] = self.context.caller_id
        if self.context.path:
            extra["path"] = self.context.path
        return extra


# ─── Request-side Errors ────────────────────────────────────────

class IdentityResolutionError(GatewayError):
    """Caller identity could not be derived from the request."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "IDENTITY_UNRESOLVED", ErrorCategory.IDENTITY,
            ErrorSeverity.WARNING, context,
        )


class MalformedRequestError(GatewayError):
    """Request body could not be read as JSON."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MALFORMED_REQUEST", ErrorCategory.MALFORMED_REQUEST,
            ErrorSeverity.WARNING, context,
        )


# ─── Ledger Errors ──────────────────────────────────────────────

class LedgerUnavailableError(GatewayError):
    """Ledger peer unreachable or did not answer in time."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Ledger unavailable: {message}",
            "LEDGER_UNAVAILABLE", ErrorCategory.LEDGER_UNAVAILABLE,
            ErrorSeverity.CRITICAL, context,
        )


class LedgerRejectedError(GatewayError):
    """Ledger answered but refused the call (JSON-RPC error, chaincode error, bad status)."""
    def __init__(
        self,
        message: str,
        rpc_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Ledger rejected call: {message}",
            "LEDGER_REJECTED", ErrorCategory.LEDGER_REJECTED,
            ErrorSeverity.ERROR, context,
        )
        self.rpc_code = rpc_code
