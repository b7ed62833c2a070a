"""
Segment-level helpers shared by the header, claim set and token.

Each token segment goes text -> UTF-8 bytes -> base64 on the way out and
the reverse on the way in.  Decoding tolerates missing padding and the
URL-safe alphabet; encoding always emits standard, padded base64.
"""

from __future__ import annotations

import base64
import binascii
import json
from abc import ABC, abstractmethod
from typing import Any, TypeVar

from .errors import ParseError

__all__ = [
    "JsonSerializable",
    "b64decode_text",
    "b64encode_text",
    "dumps_json",
    "loads_json",
]

_T = TypeVar("_T", bound="JsonSerializable")


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def loads_json(text: str) -> Any:
    """Parse strict JSON text (no NaN/Infinity literals)."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ParseError(f"Invalid JSON, parsing failed with:\n{exc}") from exc


def dumps_json(value: Any, sort_keys: bool = False) -> str:
    """Compact JSON encoding: no whitespace, non-ASCII kept, keys unsorted by default."""
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, allow_nan=False, sort_keys=sort_keys
    )


# ---------------------------------------------------------------------------
# Base64
# ---------------------------------------------------------------------------

def _add_base64_padding(data: str) -> str:
    """Add padding characters for base64 decoding."""
    padding = len(data) % 4
    if padding:
        data += "=" * (4 - padding)
    return data


def b64encode_text(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def b64decode_text(segment: str) -> str:
    """Decode a base64 (or base64url) segment into UTF-8 text."""
    data = _add_base64_padding(segment.strip()).replace("-", "+").replace("_", "/")
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ParseError(f"Invalid base64, decoding failed with:\n{exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid UTF-8, decoding failed with:\n{exc}") from exc


# ---------------------------------------------------------------------------
# Serializable protocol
# ---------------------------------------------------------------------------

class JsonSerializable(ABC):
    """Objects losslessly transformable to (optionally base64-encoded) JSON.

    Subclasses provide the plaintext pair; the base64 pair is derived from
    it.  ``Token`` overrides both base64 methods because it encodes each
    segment separately.
    """

    @abstractmethod
    def encode_to_text(self) -> str:
        ...

    @classmethod
    @abstractmethod
    def decode_from_text(cls: type[_T], text: str) -> _T:
        ...

    def encode_to_base64(self) -> str:
        return b64encode_text(self.encode_to_text())

    @classmethod
    def decode_from_base64(cls: type[_T], text: str) -> _T:
        return cls.decode_from_text(b64decode_text(text))

    def __str__(self) -> str:
        return self.encode_to_text()
