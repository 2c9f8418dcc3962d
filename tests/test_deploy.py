import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from starknet_indexer.storage.deploy import (
    Deploy,
    DeployAccount,
    DeployAccountFilter,
    DeployFilter,
)

WHEN = datetime(2023, 3, 4, tzinfo=timezone.utc)


def _deploy(**kwargs):
    return Deploy(
        id=1, height=10, class_id=2, contract_id=3, position=0, time=WHEN,
        status=6, hash=b"\x01" * 32, contract_address_salt=b"\x02" * 32,
        constructor_calldata=["0x1", "0x2"], **kwargs,
    )


def _deploy_account(**kwargs):
    return DeployAccount(
        id=5, height=11, class_id=2, contract_id=4, position=1, time=WHEN,
        status=6, hash=b"\x03" * 32, contract_address_salt=b"\x04" * 32,
        max_fee=Decimal("77"), nonce=Decimal("0"),
        constructor_calldata=["0xa"], **kwargs,
    )


@pytest.mark.parametrize("model", [_deploy(), _deploy_account()])
def test_columns_and_flat_align(model):
    assert len(model.columns()) == len(model.flat())


@pytest.mark.parametrize("model", [_deploy(), _deploy_account()])
def test_missing_parsed_calldata_gives_none(model):
    row = dict(zip(model.columns(), model.flat()))
    assert row["parsed_calldata"] is None


def test_parsed_calldata_round_trips():
    parsed = {"owner": "0x1", "amounts": [1, 2], "nested": {"ok": True}}
    deploy = Deploy(parsed_calldata=parsed)
    account = DeployAccount(parsed_calldata=parsed)
    for model in (deploy, account):
        row = dict(zip(model.columns(), model.flat()))
        assert json.loads(row["parsed_calldata"]) == parsed


def test_unencodable_parsed_calldata_gives_none():
    deploy = Deploy(parsed_calldata={"bad": object()})
    account = DeployAccount(parsed_calldata={"bad": object()})
    for model in (deploy, account):
        row = dict(zip(model.columns(), model.flat()))
        assert row["parsed_calldata"] is None


def test_deploy_row_values():
    model = _deploy(error="fail")
    row = dict(zip(model.columns(), model.flat()))
    assert row["constructor_calldata"] == ["0x1", "0x2"]
    assert row["contract_address_salt"] == b"\x02" * 32
    assert row["error"] == "fail"
    assert row["time"] == WHEN


def test_deploy_account_row_values():
    model = _deploy_account()
    row = dict(zip(model.columns(), model.flat()))
    assert row["max_fee"] == Decimal("77")
    assert row["constructor_calldata"] == ["0xa"]
    assert row["contract_id"] == 4


def test_flat_copies_calldata():
    model = _deploy()
    row = dict(zip(model.columns(), model.flat()))
    row["constructor_calldata"].append("0x3")
    assert model.constructor_calldata == ["0x1", "0x2"]


def test_fee_columns_only_on_deploy_account():
    assert "max_fee" not in Deploy().columns()
    assert "nonce" in DeployAccount().columns()


@pytest.mark.parametrize("filter_cls", [DeployFilter, DeployAccountFilter])
def test_filters_have_independent_defaults(filter_cls):
    first, second = filter_cls(), filter_cls()
    first.parsed_calldata["owner"] = "0x1"
    first.class_.in_.append(b"\x01")
    assert second.parsed_calldata == {}
    assert second.class_.in_ == []