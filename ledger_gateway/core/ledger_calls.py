"""Ledger Calls: request envelope -> (operation, positional string args, mode).

Invariants:
    - One builder per route; each returns exactly one LedgerCall
    - Argument order is fixed by the operation's typed tuple and matches the
      chaincode's positional parameters exactly
    - Every argument is a str; structured values go through encode_structured()
    - Required fields are NOT validated: absent values become "" and are sent as-is
    - Reads are QUERY, anything that touches ledger state is INVOKE
      (get_user is INVOKE: the HTTP handler has always invoked it, even though
      the chaincode dispatches it only from its query entry point)

Design Decisions:
    - NamedTuple per operation over list[str]: a swapped or missing argument
      is a type error at the builder, not a silent mismatch inside chaincode
    - Builders take the caller id even when they ignore it: uniform
      CallBuilder signature keeps the gateway route-agnostic
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Union

from ledger_gateway.core.domain_types import (
    CallerId, DispatchMode, Operation, UpdateKind,
)


# ─── Request Envelope ────────────────────────────────────────────

@dataclass(frozen=True)
class RequestEnvelope:
    """The parts of an inbound HTTP request the builders are allowed to read."""
    method: str
    path: str
    body: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    path_params: Mapping[str, str] = field(default_factory=dict)

    def get(self, name: str) -> Any:
        """Body field or None when absent."""
        return self.body.get(name)

    def param(self, name: str) -> Any:
        """Path param, then body field, then query param; None when absent."""
        for source in (self.path_params, self.body, self.query):
            if name in source:
                return source[name]
        return None


# ─── Argument Encoding ───────────────────────────────────────────

def encode_structured(value: Any) -> str:
    """Canonical compact JSON text for a structured argument slot."""
    if value is None:
        return ""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def encode_scalar(value: Any) -> str:
    """Scalar slot: strings pass through, other values become JSON text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return encode_structured(value)


# ─── Typed Argument Tuples (one per operation contract) ─────────

class GetAllThingsArgs(NamedTuple):
    caller_id: str


class GetThingArgs(NamedTuple):
    thing_id: str


class AddThingArgs(NamedTuple):
    thing_id: str
    thing: str


class AddResourceArgs(NamedTuple):
    owner: str
    content_hash: str
    path: str


class GetResourceArgs(NamedTuple):
    owner: str
    content_hash: str


class CreateBrokerageRequestArgs(NamedTuple):
    request: str


class UpdateBrokerageApplicationArgs(NamedTuple):
    kind: str
    data: str
    request_id: str


class CreateUserArgs(NamedTuple):
    request_id: str


class UpdateUserArgs(NamedTuple):
    user: str


class GetUserArgs(NamedTuple):
    kind: str
    status: str
    request_id: str


LedgerArgs = Union[
    GetAllThingsArgs, GetThingArgs, AddThingArgs, AddResourceArgs,
    GetResourceArgs, CreateBrokerageRequestArgs,
    UpdateBrokerageApplicationArgs, CreateUserArgs, UpdateUserArgs,
    GetUserArgs,
]


@dataclass(frozen=True)
class LedgerCall:
    """One ledger call, built once per request."""
    operation: Operation
    arguments: LedgerArgs
    mode: DispatchMode
    caller_id: CallerId

    @property
    def args(self) -> list[str]:
        """Positional wire form of the typed arguments."""
        return list(self.arguments)


CallBuilder = Callable[[RequestEnvelope, CallerId], LedgerCall]


# ─── Builders: things ────────────────────────────────────────────

def build_list_things(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    return LedgerCall(
        Operation.GET_ALL_THINGS, GetAllThingsArgs(caller_id),
        DispatchMode.QUERY, caller_id,
    )


def build_get_thing(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    return LedgerCall(
        Operation.GET_THING,
        GetThingArgs(encode_scalar(envelope.param("thingId"))),
        DispatchMode.QUERY, caller_id,
    )


def build_add_thing(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    args = AddThingArgs(
        thing_id=encode_scalar(envelope.get("thingId")),
        thing=encode_structured(envelope.get("thing")),
    )
    return LedgerCall(Operation.ADD_THING, args, DispatchMode.INVOKE, caller_id)


# ─── Builders: resources ─────────────────────────────────────────

def build_add_resource(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    args = AddResourceArgs(
        owner=encode_scalar(envelope.get("owner")),
        content_hash=encode_scalar(envelope.get("hash")),
        path=encode_scalar(envelope.get("path")),
    )
    return LedgerCall(Operation.ADD_RESOURCE, args, DispatchMode.INVOKE, caller_id)


def build_get_resource(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    args = GetResourceArgs(
        owner=encode_scalar(envelope.param("owner")),
        content_hash=encode_scalar(envelope.param("hash")),
    )
    return LedgerCall(Operation.GET_RESOURCE, args, DispatchMode.QUERY, caller_id)


# ─── Builders: brokerage ─────────────────────────────────────────

def build_create_brokerage_request(
    envelope: RequestEnvelope, caller_id: CallerId,
) -> LedgerCall:
    args = CreateBrokerageRequestArgs(encode_structured(dict(envelope.body)))
    return LedgerCall(
        Operation.CREATE_BROKERAGE_REQUEST, args, DispatchMode.INVOKE, caller_id,
    )


def build_update_meeting(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    args = UpdateBrokerageApplicationArgs(
        kind=UpdateKind.MEETING.value,
        data=encode_scalar(envelope.get("meeting")),
        request_id=encode_scalar(envelope.get("requestId")),
    )
    return LedgerCall(
        Operation.UPDATE_BROKERAGE_APPLICATION, args, DispatchMode.INVOKE, caller_id,
    )


def build_update_video(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    # video is an object on the wire; meeting is not
    args = UpdateBrokerageApplicationArgs(
        kind=UpdateKind.VIDEO.value,
        data=encode_structured(envelope.get("video")),
        request_id=encode_scalar(envelope.get("requestId")),
    )
    return LedgerCall(
        Operation.UPDATE_BROKERAGE_APPLICATION, args, DispatchMode.INVOKE, caller_id,
    )


# ─── Builders: users ─────────────────────────────────────────────

def build_create_user(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    # requestId is JSON-encoded even when it is a plain string ("R1" -> "\"R1\"")
    args = CreateUserArgs(encode_structured(envelope.get("requestId")))
    return LedgerCall(Operation.CREATE_USER, args, DispatchMode.INVOKE, caller_id)


def build_update_user(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    args = UpdateUserArgs(encode_structured(dict(envelope.body)))
    return LedgerCall(Operation.UPDATE_USER, args, DispatchMode.INVOKE, caller_id)


def build_validate_user(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    """Validation is an update_user call carrying the full body."""
    return build_update_user(envelope, caller_id)


def build_get_user(envelope: RequestEnvelope, caller_id: CallerId) -> LedgerCall:
    args = GetUserArgs(
        kind=UpdateKind.STATUS.value,
        status=encode_scalar(envelope.get("status")),
        request_id=encode_scalar(envelope.get("requestId")),
    )
    return LedgerCall(Operation.GET_USER, args, DispatchMode.INVOKE, caller_id)
