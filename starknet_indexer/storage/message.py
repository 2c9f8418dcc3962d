"""Messages sent between L2 and L1."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Optional

from starknet_indexer.storage.address import (
    _EPOCH,
    Address,
    _CopyRow,
    _TimedFilter,
)
from starknet_indexer.storage.filters import BytesFilter, EqualityFilter


@dataclass
class MessageFilter(_TimedFilter):
    """Conditions for selecting messages."""

    contract: BytesFilter = field(default_factory=BytesFilter)
    from_: BytesFilter = field(default_factory=BytesFilter)
    to: BytesFilter = field(default_factory=BytesFilter)
    selector: EqualityFilter = field(default_factory=EqualityFilter)


@dataclass
class Message(_CopyRow):
    """Message emitted by a transaction or one of its calls."""

    table_name: ClassVar[str] = "message"
    _columns = (
        "id", "height", "time", "invoke_id", "declare_id", "deploy_id",
        "deploy_account_id", "l1_handler_id", "fee_id", "internal_id",
        "contract_id", "order", "from_id", "to_id", "selector", "nonce", "payload",
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

    contract_id: int = 0
    order: int = 0
    from_id: int = 0
    to_id: int = 0
    selector: str = ""
    nonce: Decimal = Decimal(0)
    payload: list[str] = field(default_factory=list)

    from_: Optional[Address] = None
    to: Optional[Address] = None
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
            self.contract_id,
            self.order,
            self.from_id,
            self.to_id,
            self.selector,
            self.nonce,
            list(self.payload),
        ]