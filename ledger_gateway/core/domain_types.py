"""Domain Types: rich types that replace bare strings across the gateway.

Invariants:
    - Every chaincode function the gateway calls is a member of Operation
    - DispatchMode has exactly two members; there is no third way to reach the ledger
    - update_brokerage_application and get_user take a leading kind tag (UpdateKind)

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enums: serialize straight into the JSON-RPC payload without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CallerId = NewType("CallerId", str)


# ─── Enums ───────────────────────────────────────────────────────

class DispatchMode(str, Enum):
    """How a call reaches the ledger.

    QUERY is read-only and never committed; INVOKE goes through consensus.
    """
    QUERY = "query"
    INVOKE = "invoke"


class Operation(str, Enum):
    """Chaincode function names, exactly as the ledger registers them."""
    GET_ALL_THINGS = "get_all_things"
    GET_THING = "get_thing"
    ADD_THING = "add_thing"
    ADD_RESOURCE = "add_resource"
    GET_RESOURCE = "get_resource"
    CREATE_BROKERAGE_REQUEST = "create_brokerageRequest"
    UPDATE_BROKERAGE_APPLICATION = "update_brokerage_application"
    CREATE_USER = "create_user"
    UPDATE_USER = "update_user"
    GET_USER = "get_user"


class UpdateKind(str, Enum):
    """Leading tag the chaincode switches on for tagged operations."""
    MEETING = "MEETING"
    VIDEO = "VIDEO"
    STATUS = "STATUS"
