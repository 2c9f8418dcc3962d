"""Addresses, contract classes and class replacement history.

Also holds the building blocks shared by the other storage models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

from starknet_indexer.storage.encoding import RawJson, dump_parsed
from starknet_indexer.storage.enums import ClassType
from starknet_indexer.storage.filters import IntegerFilter, TimeFilter

_EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)


def _cell(name: str, value: Any) -> Any:
    """Convert one attribute to the value stored in its column."""
    if name.startswith("parsed_"):
        return dump_parsed(value)
    if isinstance(value, list):
        return list(value)
    return value


class _CopyRow:
    """Row whose attributes named in ``_columns`` are copied in that order."""

    _columns: ClassVar[tuple[str, ...]] = ()

    def columns(self) -> list[str]:
        """Column names in the order of :meth:`flat`."""
        return list(self._columns)

    def flat(self) -> list[Any]:
        """Row values for bulk copying; parsed data is encoded as JSON text."""
        return [_cell(name, getattr(self, name)) for name in self._columns]


@dataclass(kw_only=True)
class _Operation(_CopyRow):
    """Operations produced while executing a transaction or call."""

    internals: list[Any] = field(default_factory=list)
    messages: list[Any] = field(default_factory=list)
    events: list[Any] = field(default_factory=list)
    transfers: list[Any] = field(default_factory=list)


@dataclass
class _HeightFilter:
    id: IntegerFilter = field(default_factory=IntegerFilter)
    height: IntegerFilter = field(default_factory=IntegerFilter)


@dataclass
class _TimedFilter(_HeightFilter):
    time: TimeFilter = field(default_factory=TimeFilter)


@dataclass(kw_only=True)
class _CalldataFilter(_TimedFilter):
    parsed_calldata: dict[str, str] = field(default_factory=dict)


@dataclass
class Class:
    """Contract class: its type mask, hash, raw ABI and Cairo version."""

    table_name: ClassVar[str] = "class"

    id: int = 0
    type: ClassType = ClassType(0)
    hash: bytes = b""
    abi: RawJson = field(default_factory=lambda: RawJson(b""))
    height: int = 0
    cairo: int = 0


@dataclass
class AddressFilter(_HeightFilter):
    """Conditions for selecting addresses."""

    only_starknet: bool = False


@dataclass
class Address:
    """Starknet or Ethereum address; Ethereum addresses have no class."""

    table_name: ClassVar[str] = "address"

    id: int = 0
    class_id: Optional[int] = None
    height: int = 0
    hash: bytes = b""
    class_: Optional[Class] = None

    @property
    def is_starknet(self) -> bool:
        """Whether the address belongs to a Starknet contract class."""
        return self.class_id is not None


@dataclass
class ClassReplace:
    """Record of a contract switching from one class to another."""

    table_name: ClassVar[str] = "class_replace"

    id: int = 0
    contract_id: int = 0
    prev_class_id: int = 0
    next_class_id: int = 0
    height: int = 0
    contract: Optional[Address] = None
    prev_class: Optional[Class] = None
    next_class: Optional[Class] = None