"""Domain Types: verifies operation names and dispatch modes.

Tests:
    - Operation values match the chaincode's registered function names
    - DispatchMode has exactly two members and serializes to the JSON-RPC method
"""

from ledger_gateway.core.domain_types import (
    CallerId, DispatchMode, Operation, UpdateKind,
)


def test_caller_id_wraps_str():
    assert CallerId("alice") == "alice"


def test_dispatch_mode_has_exactly_two_members():
    assert set(DispatchMode) == {DispatchMode.QUERY, DispatchMode.INVOKE}
    assert DispatchMode.QUERY.value == "query"
    assert DispatchMode.INVOKE.value == "invoke"


def test_operation_names_match_chaincode():
    assert {op.value for op in Operation} == {
        "get_all_things", "get_thing", "add_thing", "add_resource",
        "get_resource", "create_brokerageRequest",
        "update_brokerage_application", "create_user", "update_user",
        "get_user",
    }


def test_update_kinds_are_upper_case_tags():
    assert [k.value for k in UpdateKind] == ["MEETING", "VIDEO", "STATUS"]
