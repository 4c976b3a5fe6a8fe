"""Ledger Gateway: dispatch and failure handling, without the HTTP stack.

Tests cover:
    - QUERY calls reach ledger.query only, INVOKE calls reach ledger.invoke only
    - Collection results are logged with their count
    - Ledger errors are logged with their code and collapse to an empty 500
    - read_envelope() snapshots body, query and path params
"""

import logging

import pytest
from starlette.requests import Request

from ledger_gateway.api.responses import render_collection
from ledger_gateway.core.domain_types import CallerId, DispatchMode, Operation
from ledger_gateway.core.errors import LedgerRejectedError, MalformedRequestError
from ledger_gateway.core.ledger_calls import (
    GetResourceArgs, LedgerCall, UpdateUserArgs, build_list_things,
)
from ledger_gateway.services.ledger_gateway import LedgerGateway, read_envelope

from tests.services.fake_collaborators import FakeIdentity, FakeLedger


def _request(method="GET", path="/things", body=b"", query=b"", path_params=None):
    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": query,
        "headers": [(b"content-type", b"application/json")],
        "path_params": path_params or {},
    }
    return Request(scope, receive)


async def test_query_mode_uses_query_path():
    ledger = FakeLedger()
    gateway = LedgerGateway(ledger, FakeIdentity())
    call = LedgerCall(
        Operation.GET_RESOURCE, GetResourceArgs("alice", "abc123"),
        DispatchMode.QUERY, CallerId("alice"),
    )

    await gateway.dispatch(call)

    assert [c[0] for c in ledger.calls] == ["query"]


async def test_invoke_mode_uses_invoke_path():
    ledger = FakeLedger()
    gateway = LedgerGateway(ledger, FakeIdentity())
    call = LedgerCall(
        Operation.UPDATE_USER, UpdateUserArgs("{}"),
        DispatchMode.INVOKE, CallerId("alice"),
    )

    await gateway.dispatch(call)

    assert [c[0] for c in ledger.calls] == ["invoke"]


async def test_query_collection_logs_result_count(caplog):
    ledger = FakeLedger()
    ledger.result = [1, 2, 3]
    gateway = LedgerGateway(ledger, FakeIdentity())

    with caplog.at_level(logging.INFO, logger="ledger_gateway.services.ledger_gateway"):
        res = await gateway.handle(_request(), build_list_things, render_collection)

    assert res.status_code == 200
    counted = [r for r in caplog.records if getattr(r, "result_count", None) is not None]
    assert counted and counted[0].result_count == 3


async def test_ledger_rejection_logged_with_code(caplog):
    ledger = FakeLedger()
    ledger.error = LedgerRejectedError("chaincode panic", rpc_code=-32003)
    gateway = LedgerGateway(ledger, FakeIdentity())

    with caplog.at_level(logging.ERROR):
        res = await gateway.handle(_request(), build_list_things, render_collection)

    assert res.status_code == 500
    assert res.body == b""
    record = next(r for r in caplog.records if getattr(r, "error_code", None))
    assert record.error_code == "LEDGER_REJECTED"
    assert record.path == "/things"


async def test_renderer_not_called_on_failure():
    ledger = FakeLedger()
    ledger.error = RuntimeError("boom")
    gateway = LedgerGateway(ledger, FakeIdentity())
    rendered = []

    res = await gateway.handle(
        _request(), build_list_things, lambda result: rendered.append(result),
    )

    assert res.status_code == 500
    assert rendered == []


async def test_read_envelope_collects_all_sources():
    req = _request(
        method="POST", path="/things/t1", body=b'{"a": 1}',
        query=b"owner=alice", path_params={"thingId": "t1"},
    )

    envelope = await read_envelope(req)

    assert envelope.method == "POST"
    assert envelope.body == {"a": 1}
    assert envelope.query == {"owner": "alice"}
    assert envelope.path_params == {"thingId": "t1"}


async def test_read_envelope_non_object_body_reads_as_empty():
    envelope = await read_envelope(_request(method="POST", body=b"[1, 2]"))
    assert envelope.body == {}


async def test_read_envelope_rejects_invalid_json():
    with pytest.raises(MalformedRequestError):
        await read_envelope(_request(method="POST", body=b"{oops"))
