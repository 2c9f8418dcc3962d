"""L1 handler transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Optional

from starknet_indexer.storage.address import (
    _EPOCH,
    Address,
    _CalldataFilter,
    _Operation,
)
from starknet_indexer.storage.encoding import dump_parsed
from starknet_indexer.storage.filters import (
    BytesFilter,
    EnumFilter,
    EqualityFilter,
    StringFilter,
)


@dataclass
class L1HandlerFilter(_CalldataFilter):
    """Conditions for selecting L1 handler transactions."""

    status: EnumFilter = field(default_factory=EnumFilter)
    contract: BytesFilter = field(default_factory=BytesFilter)
    selector: EqualityFilter = field(default_factory=EqualityFilter)
    entrypoint: StringFilter = field(default_factory=StringFilter)


@dataclass
class L1Handler(_Operation):
    """Transaction started by a message from L1."""

    table_name: ClassVar[str] = "l1_handler"
    _columns = (
        "id", "height", "time", "status", "hash", "contract_id",
        "position", "selector", "entrypoint", "max_fee",
        "nonce", "call_data", "parsed_calldata", "error",
    )

    id: int = 0
    height: int = 0
    time: datetime = _EPOCH
    status: int = 0
    hash: bytes = b""
    contract_id: int = 0
    position: int = 0
    selector: bytes = b""
    entrypoint: str = ""
    max_fee: Decimal = Decimal(0)
    nonce: Decimal = Decimal(0)
    call_data: list[str] = field(default_factory=list)
    parsed_calldata: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    contract: Optional[Address] = None
    fee: Optional[Any] = None

    def columns(self) -> list[str]:
        """Column names in the order of :meth:`flat`."""
        return list(self._columns)

    def flat(self) -> list[Any]:
        """Row values in the order of :meth:`columns`."""
        return [
            self.id,
            self.height,
            self.time,
            self.status,
            self.hash,
            self.contract_id,
            self.position,
            self.selector,
            self.entrypoint,
            self.max_fee,
            self.nonce,
            list(self.call_data),
            None if self.parsed_calldata is None else dump_parsed(self.parsed_calldata),
            self.error,
        ]