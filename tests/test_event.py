import json
from datetime import datetime, timezone

import pytest

from starknet_indexer.storage.event import Event, EventFilter


@pytest.fixture
def event():
    return Event(
        id=10,
        height=500,
        time=datetime(2023, 5, 1, tzinfo=timezone.utc),
        invoke_id=4,
        order=2,
        contract_id=7,
        from_id=8,
        keys=["0x1", "0x2"],
        data=["0x3"],
        name="Transfer",
        parsed_data={"from": "0x1", "amount": "100"},
    )


def test_table_name():
    assert Event().table_name == "event"


def test_columns_pinned(event):
    assert event.columns() == [
        "id", "height", "time", "invoke_id", "declare_id",
        "deploy_id", "deploy_account_id", "l1_handler_id",
        "fee_id", "internal_id", "order", "contract_id",
        "from_id", "keys", "data", "name", "parsed_data",
    ]


def test_flat_matches_columns(event):
    row = dict(zip(event.columns(), event.flat()))
    assert len(event.flat()) == len(event.columns())
    assert row["id"] == 10
    assert row["height"] == 500
    assert row["invoke_id"] == 4
    assert row["declare_id"] is None
    assert row["order"] == 2
    assert row["contract_id"] == 7
    assert row["from_id"] == 8
    assert row["keys"] == ["0x1", "0x2"]
    assert row["data"] == ["0x3"]
    assert row["name"] == "Transfer"
    assert row["time"] == event.time


def test_parsed_data_round_trip(event):
    encoded = event.flat()[16]
    assert json.loads(encoded) == event.parsed_data


def test_parsed_data_absent():
    assert Event().flat()[16] is None


def test_parsed_data_unencodable_gives_none():
    assert Event(parsed_data={"x": object()}).flat()[16] is None


def test_flat_copies_lists(event):
    row = event.flat()
    row[13].append("0x9")
    assert event.keys == ["0x1", "0x2"]


def test_filter_defaults_are_independent():
    first, second = EventFilter(), EventFilter()
    first.name.in_.append("Transfer")
    first.parsed_data["a"] = "b"
    assert second.name.in_ == []
    assert second.parsed_data == {}