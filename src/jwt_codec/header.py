"""
JOSE header of a token.

Only the unsecured ``none`` algorithm exists in this build.  New algorithms
are added as ``Algorithm`` members; decoding an algorithm name that has no
member raises ``UnsupportedError``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .codec import JsonSerializable, loads_json
from .errors import SchemaError, UnsupportedError

__all__ = ["Algorithm", "Header", "TokenType"]

logger = logging.getLogger(__name__)


class Algorithm(enum.Enum):
    """Protection algorithms, valued by their ``alg`` wire name."""

    NONE = "none"


class TokenType(enum.Enum):
    JWT = "JWT"


@dataclass
class Header(JsonSerializable):
    alg: Algorithm = Algorithm.NONE
    typ: TokenType | None = None
    cty: TokenType | None = None

    def encode_to_text(self) -> str:
        # Only alg is emitted; typ and cty are modelled but not serialized
        return '{"alg": "%s"}' % self.alg.value

    @classmethod
    def decode_from_text(cls, text: str) -> Header:
        """Parse a JSON header.

        ``typ`` and ``cty`` are not read back from *text*; the result always
        has both set to ``None``.

        Raises:
            ParseError: If *text* is not valid JSON.
            SchemaError: If *text* is not an object or ``alg`` is missing,
                null or not a string.
            UnsupportedError: If ``alg`` names an algorithm not in this build.
        """
        document = loads_json(text)
        if not isinstance(document, dict):
            raise SchemaError(
                f"Invalid header: expected a JSON object, got {type(document).__name__}"
            )

        alg_name = document.get("alg")
        if alg_name is None:
            raise SchemaError("Invalid header: missing 'alg'")
        if not isinstance(alg_name, str):
            raise SchemaError(f"Invalid header: 'alg' must be a string, got {alg_name!r}")

        try:
            alg = Algorithm(alg_name)
        except ValueError:
            raise UnsupportedError(f"Unsupported algorithm: {alg_name!r}") from None

        logger.debug("Decoded header with alg=%s", alg.value)
        return cls(alg=alg)
