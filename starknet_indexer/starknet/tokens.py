"""Bridged token list, hash validation and well-known proxy storage variables."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class BridgedToken:
    """Token bridged between L1 and Starknet."""

    name: str = ""
    symbol: str = ""
    decimals: int = 0
    l1_token_address: str = ""
    l2_token_address: str = ""
    l1_bridge_address: str = ""
    l2_bridge_address: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BridgedToken":
        """Build a token from its JSON object; missing fields keep their defaults."""
        if not isinstance(data, Mapping):
            raise ValueError(f"bridged token must be an object, got {data!r}")
        decimals = data.get("decimals", 0)
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ValueError(f"invalid decimals: {decimals!r}")
        text_fields = {}
        for key in (
            "name",
            "symbol",
            "l1_token_address",
            "l2_token_address",
            "l1_bridge_address",
            "l2_bridge_address",
        ):
            value = data.get(key, "")
            if not isinstance(value, str):
                raise ValueError(f"invalid {key}: {value!r}")
            text_fields[key] = value
        return cls(decimals=decimals, **text_fields)


class _BridgedTokenRegistry:
    """Token list that is read from disk at most once per process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loaded = False
        self._tokens: list[BridgedToken] = []

    def load(self, filename: Union[str, Path]) -> None:
        with self._lock:
            if self._loaded:
                return
            self._loaded = True
            if not filename:
                return
            raw = json.loads(Path(filename).read_text(encoding="utf-8"))
            if raw is None:
                return
            if not isinstance(raw, list):
                raise ValueError("bridged tokens file must hold a JSON array")
            self._tokens = [BridgedToken.from_dict(item) for item in raw]

    def tokens(self) -> list[BridgedToken]:
        with self._lock:
            return list(self._tokens)


_registry = _BridgedTokenRegistry()


def load_bridged_tokens(filename: Union[str, Path]) -> None:
    """Load the bridged token list; only the first call reads anything, later calls do nothing."""
    _registry.load(filename)


def bridged_tokens() -> list[BridgedToken]:
    """The loaded bridged tokens."""
    return _registry.tokens()


def is_valid_hash(value: bytes) -> bool:
    """Whether ``value`` has the length of a Starknet hash."""
    return len(value) == 32


def _decode_hex(text: str) -> bytes:
    digits = text.removeprefix("0x")
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


_PROXY_STORAGE_KEYS = (
    "0x3ad34fad732b51fe0d1a1350f149f21a0cf14a9382c9c6e7b262c4e0c8dbf18",
    "0xf920571b9f85bdd92a867cfdc73319d0f8836f0e69e06e4c5566b6203f75cc",
    "0x5d2e9527cbeb1a51aa084b0de7501f343b7b1bf24a0c427d6204a7b7988970",
    "0x21001002be3fcf98f1bc5d249803318acc1a9f29c56cfeba1af82abc7157353",
    "0x1c76cd4f3f79786d9e5d1298f47170de4bf0222337c680c5377ec772d3ce96b",
    "0x3f1abe37754ee6ca6d8dfa1036089f78a07ebe8f3b1e336cdbf3274d25becd0",
    "0x77b85848fc3ed85d77b0419b680865f5ba95ff985876cd1409a87ee8a1c86a",
)

PROXY_STORAGE_VARS: dict[str, bytes] = {key: _decode_hex(key) for key in _PROXY_STORAGE_KEYS}