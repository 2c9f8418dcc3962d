"""Indexed block."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Optional

from starknet_indexer.storage.address import _EPOCH

_COUNTERS = (
    "tx_count", "invoke_count", "declare_count", "deploy_count",
    "deploy_account_count", "l1_handler_count", "storage_diff_count",
)


@dataclass
class Block:
    """Block header, per-type transaction counters and related operations."""

    table_name: ClassVar[str] = "block"

    id: int = 0
    height: int = 0
    time: datetime = _EPOCH
    version: Optional[str] = None

    tx_count: int = 0
    invoke_count: int = 0
    declare_count: int = 0
    deploy_count: int = 0
    deploy_account_count: int = 0
    l1_handler_count: int = 0
    storage_diff_count: int = 0

    status: int = 0
    hash: bytes = b""
    parent_hash: bytes = b""
    new_root: bytes = b""
    sequencer_address: bytes = b""

    invoke: list[Any] = field(default_factory=list)
    declare: list[Any] = field(default_factory=list)
    deploy: list[Any] = field(default_factory=list)
    deploy_account: list[Any] = field(default_factory=list)
    l1_handler: list[Any] = field(default_factory=list)
    fee: list[Any] = field(default_factory=list)
    storage_diffs: list[Any] = field(default_factory=list)