"""Events emitted by contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Optional

from starknet_indexer.storage.address import (
    _EPOCH,
    Address,
    _CopyRow,
    _TimedFilter,
)
from starknet_indexer.storage.encoding import dump_parsed
from starknet_indexer.storage.filters import IdFilter, StringFilter


@dataclass
class EventFilter(_TimedFilter):
    """Conditions for selecting events."""

    contract: IdFilter = field(default_factory=IdFilter)
    from_: IdFilter = field(default_factory=IdFilter)
    name: StringFilter = field(default_factory=StringFilter)
    parsed_data: dict[str, str] = field(default_factory=dict)


@dataclass
class Event(_CopyRow):
    """Event with its raw keys and data and the data parsed by the contract ABI."""

    table_name: ClassVar[str] = "event"
    _columns = (
        "id", "height", "time", "invoke_id", "declare_id",
        "deploy_id", "deploy_account_id", "l1_handler_id",
        "fee_id", "internal_id", "order", "contract_id",
        "from_id", "keys", "data", "name", "parsed_data",
    )

    id: int = 0
    height: int = 0
    time: datetime = _EPOCH

    invoke_id: Optional[int] = None
    declare_id: Optional[int] = None
    deploy_id: Optional[int] = None
    deploy_account_id: Optional[int] = None
    l1_handler_id: Optional[int] = None
    fee_id: Optional[int] = None
    internal_id: Optional[int] = None

    order: int = 0
    contract_id: int = 0
    from_id: int = 0
    keys: list[str] = field(default_factory=list)
    data: list[str] = field(default_factory=list)
    name: str = ""
    parsed_data: Optional[dict[str, Any]] = None

    from_: Optional[Address] = None
    contract: Optional[Address] = None

    def columns(self) -> list[str]:
        """Column names in the order of :meth:`flat`."""
        return list(self._columns)

    def flat(self) -> list[Any]:
        """Row values in the order of :meth:`columns`."""
        return [
            self.id,
            self.height,
            self.time,
            self.invoke_id,
            self.declare_id,
            self.deploy_id,
            self.deploy_account_id,
            self.l1_handler_id,
            self.fee_id,
            self.internal_id,
            self.order,
            self.contract_id,
            self.from_id,
            list(self.keys),
            list(self.data),
            self.name,
            None if self.parsed_data is None else dump_parsed(self.parsed_data),
        ]