"""Deploy and deploy-account transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Optional

from starknet_indexer.storage.address import (
    _EPOCH,
    Address,
    Class,
    _CalldataFilter,
    _Operation,
)
from starknet_indexer.storage.encoding import dump_parsed
from starknet_indexer.storage.filters import BytesFilter, EnumFilter


def _parsed(value: Optional[dict[str, Any]]) -> Optional[str]:
    return None if value is None else dump_parsed(value)


@dataclass
class _DeployFilterBase(_CalldataFilter):
    status: EnumFilter = field(default_factory=EnumFilter)
    class_: BytesFilter = field(default_factory=BytesFilter)


@dataclass
class DeployFilter(_DeployFilterBase):
    """Conditions for selecting deploy transactions."""


@dataclass
class DeployAccountFilter(_DeployFilterBase):
    """Conditions for selecting deploy-account transactions."""


@dataclass
class Deploy(_Operation):
    """Deploy transaction."""

    table_name: ClassVar[str] = "deploy"
    _columns = (
        "id", "height", "class_id", "contract_id", "position",
        "time", "status", "hash", "contract_address_salt",
        "constructor_calldata", "parsed_calldata", "error",
    )

    id: int = 0
    height: int = 0
    class_id: int = 0
    contract_id: int = 0
    position: int = 0
    time: datetime = _EPOCH
    status: int = 0
    hash: bytes = b""
    contract_address_salt: bytes = b""
    constructor_calldata: list[str] = field(default_factory=list)
    parsed_calldata: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    class_: Optional[Class] = None
    contract: Optional[Address] = None
    fee: Optional[Any] = None
    token: Optional[Any] = None

    def columns(self) -> list[str]:
        """Column names in the order of :meth:`flat`."""
        return list(self._columns)

    def flat(self) -> list[Any]:
        """Row values in the order of :meth:`columns`."""
        return [
            self.id,
            self.height,
            self.class_id,
            self.contract_id,
            self.position,
            self.time,
            self.status,
            self.hash,
            self.contract_address_salt,
            list(self.constructor_calldata),
            _parsed(self.parsed_calldata),
            self.error,
        ]


@dataclass
class DeployAccount(_Operation):
    """Deploy-account transaction."""

    table_name: ClassVar[str] = "deploy_account"
    _columns = (
        "id", "height", "class_id", "contract_id", "position",
        "time", "status", "hash", "contract_address_salt",
        "max_fee", "nonce", "constructor_calldata", "parsed_calldata",
        "error",
    )

    id: int = 0
    height: int = 0
    class_id: int = 0
    contract_id: int = 0
    position: int = 0
    time: datetime = _EPOCH
    status: int = 0
    hash: bytes = b""
    contract_address_salt: bytes = b""
    max_fee: Decimal = Decimal(0)
    nonce: Decimal = Decimal(0)
    constructor_calldata: list[str] = field(default_factory=list)
    parsed_calldata: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    class_: Optional[Class] = None
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
            self.contract_id,
            self.position,
            self.time,
            self.status,
            self.hash,
            self.contract_address_salt,
            self.max_fee,
            self.nonce,
            list(self.constructor_calldata),
            _parsed(self.parsed_calldata),
            self.error,
        ]