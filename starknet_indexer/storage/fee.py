"""Fee invocations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Optional

from starknet_indexer.storage.address import (
    _EPOCH,
    Address,
    Class,
    _CalldataFilter,
    _Operation,
)
from starknet_indexer.storage.encoding import dump_parsed
from starknet_indexer.storage.enums import CallType, EntrypointType
from starknet_indexer.storage.filters import (
    BytesFilter,
    EnumFilter,
    EqualityFilter,
    StringFilter,
)


@dataclass
class FeeFilter(_CalldataFilter):
    """Conditions for selecting fee invocations."""

    status: EnumFilter = field(default_factory=EnumFilter)
    contract: BytesFilter = field(default_factory=BytesFilter)
    caller: BytesFilter = field(default_factory=BytesFilter)
    class_: BytesFilter = field(default_factory=BytesFilter)
    selector: EqualityFilter = field(default_factory=EqualityFilter)
    entrypoint: StringFilter = field(default_factory=StringFilter)
    entrypoint_type: EnumFilter = field(default_factory=EnumFilter)
    call_type: EnumFilter = field(default_factory=EnumFilter)


@dataclass
class Fee(_Operation):
    """Fee invocation attached to a transaction."""

    table_name: ClassVar[str] = "fee"
    _columns = (
        "id", "height", "time", "contract_id", "caller_id",
        "class_id", "invoke_id", "declare_id",
        "deploy_id", "deploy_account_id", "l1_handler_id",
        "entrypoint_type", "call_type", "status", "selector",
        "entrypoint", "calldata", "result", "parsed_calldata",
    )

    id: int = 0
    height: int = 0
    time: datetime = _EPOCH

    contract_id: int = 0
    caller_id: int = 0
    class_id: int = 0

    invoke_id: Optional[int] = None
    declare_id: Optional[int] = None
    deploy_id: Optional[int] = None
    deploy_account_id: Optional[int] = None
    l1_handler_id: Optional[int] = None

    entrypoint_type: EntrypointType = EntrypointType.UNKNOWN
    call_type: CallType = CallType.UNKNOWN
    status: int = 0

    selector: bytes = b""
    entrypoint: str = ""
    calldata: list[str] = field(default_factory=list)
    result: list[str] = field(default_factory=list)
    parsed_calldata: Optional[dict[str, Any]] = None

    class_: Optional[Class] = None
    caller: Optional[Address] = None
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
            self.contract_id,
            self.caller_id,
            self.class_id,
            self.invoke_id,
            self.declare_id,
            self.deploy_id,
            self.deploy_account_id,
            self.l1_handler_id,
            self.entrypoint_type,
            self.call_type,
            self.status,
            self.selector,
            self.entrypoint,
            list(self.calldata),
            list(self.result),
            None if self.parsed_calldata is None else dump_parsed(self.parsed_calldata),
        ]