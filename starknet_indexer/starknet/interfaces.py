"""Contract ABI model and detection of well-known interfaces."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Union


@dataclass(frozen=True)
class AbiParam:
    """Named, typed ABI argument."""

    name: str
    type: str


@dataclass(frozen=True)
class AbiFunction:
    """Function or L1 handler entry of an ABI."""

    name: str
    inputs: tuple[AbiParam, ...] = ()
    outputs: tuple[AbiParam, ...] = ()


@dataclass(frozen=True)
class AbiEvent:
    """Event entry of an ABI."""

    name: str
    data: tuple[AbiParam, ...] = ()


def _params(items: Iterable[Mapping[str, Any]] | None) -> tuple[AbiParam, ...]:
    result = []
    for item in items or ():
        if not isinstance(item, Mapping):
            raise ValueError(f"ABI parameter must be an object, got {item!r}")
        result.append(AbiParam(str(item.get("name", "")), str(item.get("type", ""))))
    return tuple(result)


@dataclass
class Abi:
    """Functions, L1 handlers and events of a contract class, keyed by name."""

    functions: dict[str, AbiFunction] = field(default_factory=dict)
    l1_handlers: dict[str, AbiFunction] = field(default_factory=dict)
    events: dict[str, AbiEvent] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Union[str, bytes, bytearray, list]) -> "Abi":
        """Build an ABI from its JSON array form, given encoded or already decoded."""
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        if not isinstance(data, list):
            raise ValueError("ABI must be a JSON array")
        abi = cls()
        for entry in data:
            if not isinstance(entry, Mapping):
                raise ValueError(f"ABI entry must be an object, got {entry!r}")
            kind = entry.get("type")
            name = str(entry.get("name", ""))
            if kind == "function":
                abi.functions[name] = AbiFunction(
                    name, _params(entry.get("inputs")), _params(entry.get("outputs"))
                )
            elif kind == "l1_handler":
                abi.l1_handlers[name] = AbiFunction(
                    name, _params(entry.get("inputs")), _params(entry.get("outputs"))
                )
            elif kind == "event":
                abi.events[name] = AbiEvent(name, _params(entry.get("data")))
        return abi


def load_interfaces(directory: Union[str, Path]) -> dict[str, Abi]:
    """Read every ``*.json`` file of a directory as an interface named by its stem."""
    result: dict[str, Abi] = {}
    for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        if entry.is_dir() or entry.suffix != ".json":
            continue
        result[entry.stem] = Abi.from_json(entry.read_bytes())
    return result


def _same_types(expected: tuple[AbiParam, ...], actual: tuple[AbiParam, ...]) -> bool:
    return [p.type for p in expected] == [p.type for p in actual]


def _functions_match(
    expected: Mapping[str, AbiFunction], actual: Mapping[str, AbiFunction]
) -> bool:
    for name, wanted in expected.items():
        found = actual.get(name)
        if found is None:
            return False
        if not (
            _same_types(wanted.inputs, found.inputs)
            and _same_types(wanted.outputs, found.outputs)
        ):
            return False
    return True


def implements_interface(abi: Abi, interface: Abi) -> bool:
    """Whether ``abi`` has every function, L1 handler and event of ``interface`` with equal types."""
    if not _functions_match(interface.functions, abi.functions):
        return False
    if not _functions_match(interface.l1_handlers, abi.l1_handlers):
        return False
    for name, wanted in interface.events.items():
        found = abi.events.get(name)
        if found is None or not _same_types(wanted.data, found.data):
            return False
    return True


def find_interfaces(abi: Abi, interfaces: Mapping[str, Abi]) -> list[str]:
    """Names of the interfaces that ``abi`` implements."""
    return [name for name, iface in interfaces.items() if implements_interface(abi, iface)]