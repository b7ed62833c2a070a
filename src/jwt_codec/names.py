"""
Claim name parsing and classification.

A claim name is either a plain string or, when it contains a colon, a URI
reference.  URIs are collision-resistant by construction and therefore
always public; plain names are registered when they appear in the RFC 7519
registered set and private otherwise.
"""

from __future__ import annotations

import enum
import re
import uuid
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from .errors import ParseError

__all__ = [
    "REGISTERED_CLAIM_NAMES",
    "ClaimKind",
    "NameForm",
    "PlainName",
    "UriName",
    "classify",
    "generate_collision_name",
    "parse_name",
]

# RFC 7519 section 4.1
REGISTERED_CLAIM_NAMES = frozenset({"iss", "sub", "aud", "exp", "nbf", "iat", "jti"})

# RFC 3986 section 3.1
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Characters never allowed unescaped in a URI reference.
_ILLEGAL_URI_CHARS = re.compile(r'[\x00-\x20\x7f<>"{}|\\^`]')

# A '%' not followed by two hex digits.
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


# ---------------------------------------------------------------------------
# Name forms
# ---------------------------------------------------------------------------

class ClaimKind(enum.Enum):
    REGISTERED = "registered"
    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True)
class PlainName:
    """A claim name without a colon.  Any text is legal, including ``""``."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class UriName:
    """A claim name holding the canonical form of a URI reference."""

    text: str

    def __str__(self) -> str:
        return self.text


NameForm = PlainName | UriName


# ---------------------------------------------------------------------------
# URI parsing
# ---------------------------------------------------------------------------

def _canonical_uri(text: str) -> str:
    """Validate *text* as a URI reference and return its re-serialization.

    Raises:
        ParseError: If *text* is not a valid absolute or relative URI.
    """
    bad = _ILLEGAL_URI_CHARS.search(text)
    if bad:
        raise ParseError(f"Invalid URI {text!r}: illegal character {bad.group()!r}")
    if _BAD_PERCENT.search(text):
        raise ParseError(f"Invalid URI {text!r}: malformed percent-encoding")

    # The first colon belongs to the scheme unless a '/', '?' or '#' comes first
    colon = text.index(":")
    delims = [i for i in (text.find("/"), text.find("?"), text.find("#")) if i != -1]
    if not delims or colon < min(delims):
        scheme = text[:colon]
        if not _SCHEME_RE.match(scheme):
            raise ParseError(f"Invalid URI {text!r}: {scheme!r} is not a valid scheme")
        hier_part = re.split(r"[?#]", text[colon + 1:], maxsplit=1)[0]
        if not hier_part:
            raise ParseError(f"Invalid URI {text!r}: empty host or path after scheme")

    try:
        parts = urlsplit(text)
        parts.port  # validates the port range
    except ValueError as exc:
        raise ParseError(f"Invalid URI {text!r}: {exc}") from exc

    userinfo, at, hostport = parts.netloc.rpartition("@")
    netloc = userinfo + at + hostport.lower()
    uri = urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))

    # urlunsplit drops an empty authority ("foo:///x" -> "foo:/x") for
    # schemes outside urllib's uses_netloc list
    prefix = parts.scheme + ":" if parts.scheme else ""
    had_authority = text[len(prefix):].startswith("//")
    if had_authority and not uri[len(prefix):].startswith("//"):
        uri = prefix + "//" + uri[len(prefix):]
    return uri


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_name(text: str) -> NameForm:
    """Parse claim name text into its plain or URI form.

    Raises:
        ParseError: If *text* contains a colon but is not a valid URI.
    """
    if ":" in text:
        return UriName(_canonical_uri(text))
    return PlainName(text)


def classify(name: NameForm) -> ClaimKind:
    if isinstance(name, UriName):
        return ClaimKind.PUBLIC
    if name.text in REGISTERED_CLAIM_NAMES:
        return ClaimKind.REGISTERED
    return ClaimKind.PRIVATE


def generate_collision_name(fragment: str) -> str:
    """Return ``"<uuid4>-<fragment>"``, a name unlikely to collide with others."""
    return f"{uuid.uuid4()}-{fragment}"
