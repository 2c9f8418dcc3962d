import json

import pytest

from starknet_indexer.storage.enums import CallType, EntrypointType
from starknet_indexer.storage.fee import Fee, FeeFilter


@pytest.fixture
def fee():
    return Fee(
        id=3,
        height=42,
        contract_id=11,
        caller_id=12,
        class_id=13,
        deploy_id=5,
        entrypoint_type=EntrypointType.EXTERNAL,
        call_type=CallType.CALL,
        status=6,
        selector=b"\x01\x02",
        entrypoint="transfer",
        calldata=["0xa"],
        result=["0x1"],
        parsed_calldata={"recipient": "0xa"},
    )


def test_table_name():
    assert Fee().table_name == "fee"


def test_columns_pinned(fee):
    assert fee.columns() == [
        "id", "height", "time", "contract_id", "caller_id",
        "class_id", "invoke_id", "declare_id",
        "deploy_id", "deploy_account_id", "l1_handler_id",
        "entrypoint_type", "call_type", "status", "selector",
        "entrypoint", "calldata", "result", "parsed_calldata",
    ]


def test_flat_matches_columns(fee):
    flat = fee.flat()
    assert len(flat) == len(fee.columns())
    row = dict(zip(fee.columns(), flat))
    assert row["contract_id"] == 11
    assert row["caller_id"] == 12
    assert row["class_id"] == 13
    assert row["deploy_id"] == 5
    assert row["invoke_id"] is None
    assert row["entrypoint_type"] is EntrypointType.EXTERNAL
    assert row["call_type"] is CallType.CALL
    assert row["status"] == 6
    assert row["selector"] == b"\x01\x02"
    assert row["entrypoint"] == "transfer"
    assert row["calldata"] == ["0xa"]
    assert row["result"] == ["0x1"]


def test_parsed_calldata_round_trip(fee):
    assert json.loads(fee.flat()[18]) == {"recipient": "0xa"}


def test_parsed_calldata_absent():
    assert Fee().flat()[18] is None


def test_flat_copies_result(fee):
    fee.flat()[17].clear()
    assert fee.result == ["0x1"]


def test_filter_defaults_are_independent():
    first, second = FeeFilter(), FeeFilter()
    first.call_type.in_.append(int(CallType.DELEGATE))
    assert second.call_type.in_ == []