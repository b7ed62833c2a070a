"""
Three-segment compact serialization of a token.

Segments are joined by ``"\\n.\\n"`` on output.  On input the text is split
on ``.`` and every space, CR and LF is removed from each segment, so both
the visual plaintext form and bare ``a.b.c`` tokens are accepted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .claims import ClaimSet
from .codec import JsonSerializable
from .errors import SchemaError
from .header import Header

__all__ = ["SEGMENT_SEPARATOR", "Token"]

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = "\n.\n"

# Space, LF, CR
_STRIP_TABLE = str.maketrans("", "", " \n\r")


def _split_segments(text: str) -> list[str]:
    """Split *text* into exactly three whitespace-stripped segments.

    Raises:
        SchemaError: If the segment count is not three.
    """
    segments = [s.translate(_STRIP_TABLE) for s in text.split(".")]
    if len(segments) != 3:
        raise SchemaError(
            f"Invalid token format: expected 3 segments (header.payload.signature), "
            f"got {len(segments)}"
        )
    logger.debug("Split token into segments of length %s", [len(s) for s in segments])
    return segments


@dataclass
class Token(JsonSerializable):
    """A header plus claim set.

    ``signature`` holds the third segment of parsed input as opaque text.
    It is not verified and not re-emitted: the ``none`` algorithm always
    encodes an empty signature.
    """

    header: Header = field(default_factory=Header)
    claims: ClaimSet = field(default_factory=ClaimSet)
    signature: str = field(default="", compare=False)

    @classmethod
    def from_plain_text(cls, claims_text: str) -> Token:
        """Wrap claim-set JSON text in an unsecured token."""
        return cls(claims=ClaimSet.decode_from_text(claims_text))

    # --- Encoding ------------------------------------------------------------

    def encode_to_text(self) -> str:
        return (
            self.header.encode_to_text() + SEGMENT_SEPARATOR
            + self.claims.encode_to_text() + SEGMENT_SEPARATOR
        )

    def encode_to_base64(self) -> str:
        return (
            self.header.encode_to_base64() + SEGMENT_SEPARATOR
            + self.claims.encode_to_base64() + SEGMENT_SEPARATOR
        )

    # --- Decoding ------------------------------------------------------------

    @classmethod
    def decode_from_text(cls, text: str) -> Token:
        """Parse the plaintext form.

        Whitespace is removed from every segment, including inside JSON
        strings, and a ``.`` anywhere in the JSON changes the segment count.

        Raises:
            SchemaError: On a wrong segment count or header shape.
            ParseError: On malformed header or claims JSON.
            UnsupportedError: On an unknown algorithm.
        """
        header_seg, claims_seg, signature = _split_segments(text)
        header = Header.decode_from_text(header_seg)
        claims = ClaimSet.decode_from_text(claims_seg)
        return cls(header=header, claims=claims, signature=signature)

    @classmethod
    def decode_from_base64(cls, text: str) -> Token:
        """Parse the base64 compact form.

        Raises:
            SchemaError: On a wrong segment count or header shape.
            ParseError: On malformed base64, UTF-8 or JSON in any segment.
            UnsupportedError: On an unknown algorithm.
        """
        header_seg, claims_seg, signature = _split_segments(text)
        header = Header.decode_from_base64(header_seg)
        claims = ClaimSet.decode_from_base64(claims_seg)
        return cls(header=header, claims=claims, signature=signature)
