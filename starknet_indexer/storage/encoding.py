"""Raw byte and JSON encodings used by stored models."""

from __future__ import annotations

import binascii
import json
from typing import Any, Mapping

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class RawJson(bytes):
    """Raw, already encoded JSON kept as bytes."""

    def to_json(self) -> bytes:
        """Return the encoded JSON; an empty value encodes as ``null``."""
        if not self:
            return b"null"
        return bytes(self)

    @classmethod
    def from_json(cls, data: bytes) -> "RawJson":
        """Keep a copy of already encoded JSON."""
        return cls(bytes(data))

    @classmethod
    def from_hex(cls, text: str) -> "RawJson":
        """Decode hex leniently: decoding stops at the first malformed pair."""
        pairs = []
        for start in range(0, len(text) - 1, 2):
            pair = text[start : start + 2]
            if not set(pair) <= _HEX_DIGITS:
                break
            pairs.append(pair)
        return cls(bytes.fromhex("".join(pairs)))

    @classmethod
    def parse_hex(cls, text: str) -> "RawJson":
        """Decode a hex string with an optional ``0x`` prefix, raising ValueError if malformed."""
        if not isinstance(text, str):
            raise TypeError(f"expected a hex string, got {type(text).__name__}")
        digits = text.removeprefix("0x")
        try:
            return cls(binascii.unhexlify(digits))
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"invalid hex string {text!r}: {exc}") from exc


_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def dump_parsed(value: Mapping[str, Any] | None) -> str | None:
    """Encode parsed calldata as compact JSON; None when absent or not encodable."""
    if value is None:
        return None
    try:
        encoded = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return None
    for char, escape in _HTML_ESCAPES.items():
        encoded = encoded.replace(char, escape)
    return encoded