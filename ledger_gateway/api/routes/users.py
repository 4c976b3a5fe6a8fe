"""Users: create, update, validate and look up users on the ledger.

Invariants:
    - POST /users -> create_user [json(requestId)]
    - PUT /users -> update_user [json(body)]
    - POST /users/validate -> update_user [json(body)]
    - POST /users/query -> get_user ["STATUS", status, requestId]
    - All four are INVOKE and answer 200 with the JSON-encoded ledger result
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ledger_gateway.api.dependencies import get_gateway
from ledger_gateway.api.responses import render_ledger_result
from ledger_gateway.core.ledger_calls import (
    build_create_user, build_get_user, build_update_user, build_validate_user,
)
from ledger_gateway.services.ledger_gateway import LedgerGateway

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
async def create_user(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    return await gateway.handle(request, build_create_user, render_ledger_result)


@router.put("")
async def update_user(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    return await gateway.handle(request, build_update_user, render_ledger_result)


@router.post("/validate")
async def validate_user(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    return await gateway.handle(request, build_validate_user, render_ledger_result)


@router.post("/query")
async def get_user(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    """Look up a user by status and request id."""
    return await gateway.handle(request, build_get_user, render_ledger_result)
