"""Dependency Providers: the gateway instance routes receive via Depends().

Invariants:
    - The gateway is built once in the lifespan and stored on app.state
    - Routes never construct collaborators themselves

Design Decisions:
    - app.state over a module-level singleton: tests override get_gateway via
      app.dependency_overrides without touching globals
"""

from fastapi import Request

from ledger_gateway.services.ledger_gateway import LedgerGateway


def get_gateway(request: Request) -> LedgerGateway:
    return request.app.state.gateway
