"""Declare transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Optional

from starknet_indexer.storage.address import (
    _EPOCH,
    Address,
    Class,
    _Operation,
    _TimedFilter,
)
from starknet_indexer.storage.filters import EnumFilter


@dataclass
class DeclareFilter(_TimedFilter):
    """Conditions for selecting declare transactions."""

    status: EnumFilter = field(default_factory=EnumFilter)
    version: EnumFilter = field(default_factory=EnumFilter)


@dataclass
class Declare(_Operation):
    """Declare transaction."""

    table_name: ClassVar[str] = "declare"
    _columns = (
        "id", "height", "class_id", "version", "position",
        "sender_id", "contract_id", "time", "status", "hash",
        "max_fee", "nonce", "error",
    )

    id: int = 0
    height: int = 0
    class_id: int = 0
    version: int = 0
    position: int = 0
    sender_id: Optional[int] = None
    contract_id: Optional[int] = None
    time: datetime = _EPOCH
    status: int = 0
    hash: bytes = b""
    max_fee: Decimal = Decimal(0)
    nonce: Decimal = Decimal(0)
    error: Optional[str] = None

    class_: Optional[Class] = None
    sender: Optional[Address] = None
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
            self.class_id,
            self.version,
            self.position,
            self.sender_id,
            self.contract_id,
            self.time,
            self.status,
            self.hash,
            self.max_fee,
            self.nonce,
            self.error,
        ]