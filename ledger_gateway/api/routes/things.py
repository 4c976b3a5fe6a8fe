"""Things: list, fetch and add records.

Invariants:
    - GET /things -> get_all_things [caller id] (QUERY), 200 with array (possibly empty)
    - GET /things/{thingId} -> get_thing [thingId] (QUERY), 200 with record or []
    - POST /things -> add_thing [thingId, json(thing)] (INVOKE), 200 without body
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ledger_gateway.api.dependencies import get_gateway
from ledger_gateway.api.responses import render_accepted, render_collection
from ledger_gateway.core.ledger_calls import (
    build_add_thing, build_get_thing, build_list_things,
)
from ledger_gateway.services.ledger_gateway import LedgerGateway

router = APIRouter(prefix="/things", tags=["things"])


@router.get("")
async def list_things(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    """All records visible to the caller."""
    return await gateway.handle(request, build_list_things, render_collection)


@router.get("/{thingId}")
async def get_thing(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    return await gateway.handle(request, build_get_thing, render_collection)


@router.post("")
async def add_thing(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    return await gateway.handle(request, build_add_thing, render_accepted)
