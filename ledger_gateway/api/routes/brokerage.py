"""Brokerage: create requests and attach meeting/video data to applications.

Invariants:
    - POST /brokerage-requests -> create_brokerageRequest [json(body)] (INVOKE),
      200 with the fixed receipt payload
    - POST /meetings -> update_brokerage_application ["MEETING", meeting, requestId]
    - POST /videos -> update_brokerage_application ["VIDEO", json(video), requestId]
    - Meeting and video updates echo the ledger result as JSON

Design Decisions:
    - Receipt payload is not derived from the ledger: clients depend on its shape
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ledger_gateway.api.dependencies import get_gateway
from ledger_gateway.api.responses import render_brokerage_receipt, render_ledger_result
from ledger_gateway.core.ledger_calls import (
    build_create_brokerage_request, build_update_meeting, build_update_video,
)
from ledger_gateway.services.ledger_gateway import LedgerGateway

router = APIRouter(tags=["brokerage"])


@router.post("/brokerage-requests")
async def create_brokerage_request(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    return await gateway.handle(
        request, build_create_brokerage_request, render_brokerage_receipt,
    )


@router.post("/meetings")
async def update_meeting(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    """Save meeting data on a brokerage application."""
    return await gateway.handle(request, build_update_meeting, render_ledger_result)


@router.post("/videos")
async def update_video(
    request: Request, gateway: LedgerGateway = Depends(get_gateway),
) -> Response:
    """Save video data on a brokerage application."""
    return await gateway.handle(request, build_update_video, render_ledger_result)
