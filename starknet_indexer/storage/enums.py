"""Enumerations stored alongside indexed Starknet data."""

from __future__ import annotations

import enum

UNKNOWN = "UNKNOWN"


class CallType(enum.IntEnum):
    """Kind of an internal call."""

    UNKNOWN = 1
    CALL = 2
    DELEGATE = 3

    @classmethod
    def parse(cls, value: str) -> "CallType":
        """Map a node's call type string to a member; unknown strings give UNKNOWN."""
        return _CALL_TYPES_BY_NAME.get(value, cls.UNKNOWN)

    def __str__(self) -> str:
        return _CALL_TYPE_NAMES.get(self, UNKNOWN)


_CALL_TYPE_NAMES = {
    CallType.CALL: "CALL",
    CallType.DELEGATE: "DELEGATE",
}
_CALL_TYPES_BY_NAME = {name: member for member, name in _CALL_TYPE_NAMES.items()}


class EntrypointType(enum.IntEnum):
    """Kind of an invoked entrypoint."""

    UNKNOWN = 1
    EXTERNAL = 2
    CONSTRUCTOR = 3
    L1_HANDLER = 4

    @classmethod
    def parse(cls, value: str) -> "EntrypointType":
        """Map a node's entrypoint type string to a member; unknown strings give UNKNOWN."""
        return _ENTRYPOINT_TYPES_BY_NAME.get(value, cls.UNKNOWN)

    def __str__(self) -> str:
        return _ENTRYPOINT_TYPE_NAMES.get(self, UNKNOWN)


_ENTRYPOINT_TYPE_NAMES = {
    EntrypointType.EXTERNAL: "EXTERNAL",
    EntrypointType.CONSTRUCTOR: "CONSTRUCTOR",
    EntrypointType.L1_HANDLER: "L1_HANDLER",
}
_ENTRYPOINT_TYPES_BY_NAME = {
    name: member for member, name in _ENTRYPOINT_TYPE_NAMES.items()
}


class ClassType(enum.IntFlag):
    """Bit mask of the interfaces a contract class implements."""

    ERC20 = 1 << 0
    ERC721 = 1 << 1
    ERC721_METADATA = 1 << 2
    ERC721_RECEIVER = 1 << 3
    ERC1155 = 1 << 4
    ERC1155_METADATA = 1 << 5
    ERC1155_RECEIVER = 1 << 6
    PROXY = 1 << 7
    ARGENTX_0 = 1 << 8
    ARGENTX = 1 << 9
    BRAAVOS = 1 << 10
    ACCOUNT = 1 << 11

    def with_types(self, *types: "ClassType") -> "ClassType":
        """Return this mask with all the given types set."""
        result = ClassType(int(self))
        for typ in types:
            result |= typ
        return result

    def has(self, typ: "ClassType") -> bool:
        """Whether any bit of ``typ`` is set in this mask."""
        return int(self) & int(typ) > 0

    def one_of(self, *types: "ClassType") -> bool:
        """Whether any of the given types is set in this mask."""
        return any(self.has(typ) for typ in types)


_INTERFACE_TYPES = {
    "erc20": ClassType.ERC20,
    "erc721": ClassType.ERC721,
    "erc721_metadata": ClassType.ERC721_METADATA,
    "erc721_receiver": ClassType.ERC721_RECEIVER,
    "proxy": ClassType.PROXY,
    "proxy_l1": ClassType.PROXY,
    "erc1155": ClassType.ERC1155,
    "argentx": ClassType.ARGENTX,
    "argentx_0": ClassType.ARGENTX_0,
    "braavos": ClassType.BRAAVOS,
    "erc1155_metadata": ClassType.ERC1155_METADATA,
    "erc1155_receiver": ClassType.ERC1155_RECEIVER,
    "account": ClassType.ACCOUNT,
}


def class_type_from_interfaces(*interfaces: str) -> ClassType:
    """Build a class type mask from interface names; unknown names are ignored."""
    return ClassType(0).with_types(
        *(_INTERFACE_TYPES[name] for name in interfaces if name in _INTERFACE_TYPES)
    )