"""Response Renderers: ledger result -> HTTP response, one shape per route family.

Invariants:
    - Renderers run only on success; failures never reach them
    - Collection renderer: empty/absent result -> 200 [], never null
    - Accepted renderer ignores the result entirely
    - Brokerage receipt is a fixed payload, not derived from the ledger

Design Decisions:
    - Per-route renderers kept explicit instead of one general rule:
      the routes genuinely disagree on what a success body is
"""

from typing import Any

from starlette.responses import JSONResponse, Response

BROKERAGE_RECEIPT = {
    "anObject": {"item1": "item1val", "item2": "item2val"},
    "anArray": ["item1", "item2"],
    "another": "item",
}


def render_collection(result: Any) -> Response:
    """Query result as-is, or [] when the ledger found nothing."""
    if not result:
        return JSONResponse([])
    return JSONResponse(result)


def render_accepted(result: Any) -> Response:
    return Response(status_code=200)


def render_brokerage_receipt(result: Any) -> Response:
    return JSONResponse(BROKERAGE_RECEIPT)


def render_ledger_result(result: Any) -> Response:
    """Echo whatever the ledger returned, JSON-encoded (null included)."""
    return JSONResponse(result)
