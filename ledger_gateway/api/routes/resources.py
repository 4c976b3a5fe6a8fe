"""Resources: content-hash references owned by a caller.

Invariants:
    - POST /resources -> add_resource [owner, hash, path] (INVOKE), 200 without body
    - GET /resources?owner=&hash= -> get_resource [owner, hash] (QUERY), 200 with array
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ledger_gateway.api.dependencies import get_gateway
from ledger_gateway.api.responses import render_accepted, render_collection
from ledger_gateway.core.ledger_calls import build_add_resource, build_get_resource
from ledger_gateway.services.ledger_gateway import LedgerGateway

router = APIRouter(prefix="/resources", tags=["resources"])


@router.post("")
async def add_resource(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    return await gateway.handle(request, build_add_resource, render_accepted)


@router.get("")
async def get_resource(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    """owner and hash are read from the query string (or body, if sent)."""
    return await gateway.handle(request, build_get_resource, render_collection)
