"""Service test fixtures: fake collaborators + FastAPI test client.

Invariants:
    - Every test gets fresh fakes (no state carried between tests)
    - get_gateway dependency overridden to a gateway over the fakes
    - The app lifespan never runs, so no real ledger client is created

Design Decisions:
    - httpx ASGITransport: requests go through the real routing, renderers
      and error handlers in-process
"""

import pytest
from httpx import ASGITransport, AsyncClient

from ledger_gateway.api.dependencies import get_gateway
from ledger_gateway.main import app
from ledger_gateway.services.ledger_gateway import LedgerGateway

from tests.services.fake_collaborators import FakeIdentity, FakeLedger


@pytest.fixture
def events():
    return []


@pytest.fixture
def ledger(events):
    return FakeLedger(events)


@pytest.fixture
def identity(events):
    return FakeIdentity("alice", events)


@pytest.fixture
def gateway(ledger, identity):
    return LedgerGateway(ledger, identity)


@pytest.fixture
async def client(gateway):
    """FastAPI test client with the gateway dependency overridden."""
    app.dependency_overrides[get_gateway] = lambda: gateway

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
