"""Error Hierarchy: codes, categories and log fields.

Tests:
    - Each subclass carries its own code and category
    - to_log_extra() only includes context fields that are set
    - ErrorContext carries only the fields the log line reads
"""

from dataclasses import fields

import pytest

from ledger_gateway.core.errors import (
    ErrorCategory, ErrorContext, GatewayError, IdentityResolutionError,
    LedgerRejectedError, LedgerUnavailableError, MalformedRequestError,
)


@pytest.mark.parametrize("error,code,category", [
    (IdentityResolutionError("x"), "IDENTITY_UNRESOLVED", ErrorCategory.IDENTITY),
    (MalformedRequestError("x"), "MALFORMED_REQUEST", ErrorCategory.MALFORMED_REQUEST),
    (LedgerUnavailableError("x"), "LEDGER_UNAVAILABLE", ErrorCategory.LEDGER_UNAVAILABLE),
    (LedgerRejectedError("x"), "LEDGER_REJECTED", ErrorCategory.LEDGER_REJECTED),
])
def test_error_codes_and_categories(error, code, category):
    assert isinstance(error, GatewayError)
    assert error.code == code
    assert error.category is category


def test_log_extra_includes_set_context_only():
    err = LedgerRejectedError(
        "nope", rpc_code=-32003,
        context=ErrorContext(operation="get_user", caller_id="alice"),
    )
    extra = err.to_log_extra()
    assert extra == {
        "error_code": "LEDGER_REJECTED",
        "error_category": "ledger_rejected",
        "operation": "get_user",
        "caller_id": "alice",
    }
    assert err.rpc_code == -32003


def test_messages_are_prefixed():
    assert str(LedgerUnavailableError("timeout")) == "Ledger unavailable: timeout"
    assert LedgerRejectedError("bad").message == "Ledger rejected call: bad"


def test_error_context_fields_are_the_logged_ones():
    names = {f.name for f in fields(ErrorContext)}
    assert names == {"timestamp", "operation", "caller_id", "path"}
