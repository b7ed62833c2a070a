"""
Error kinds raised by the token codec.

Every fallible operation raises one of the three flat kinds below; nothing
is recovered locally, so the first failure in a pipeline reaches the caller
unchanged.
"""

from __future__ import annotations

__all__ = [
    "JWTError",
    "ParseError",
    "SchemaError",
    "UnsupportedError",
]


class JWTError(Exception):
    """Base class for all codec errors."""


class ParseError(JWTError):
    """Raised when input is malformed (JSON, base64, UTF-8 or URI).

    ``detail`` carries the message of the underlying cause.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class SchemaError(JWTError):
    """Raised when input parses but does not have the expected shape."""

    def __init__(self, message: str = "Schema error") -> None:
        super().__init__(message)


class UnsupportedError(JWTError, NotImplementedError):
    """Raised when well-formed input asks for a capability this build lacks."""

    def __init__(self, message: str = "Not implemented") -> None:
        super().__init__(message)
