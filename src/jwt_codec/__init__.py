"""JWT compact-serialization codec: claims, headers and unsecured tokens."""

from .claims import Claim, ClaimSet
from .errors import JWTError, ParseError, SchemaError, UnsupportedError
from .header import Algorithm, Header, TokenType
from .names import (
    REGISTERED_CLAIM_NAMES,
    ClaimKind,
    PlainName,
    UriName,
    classify,
    generate_collision_name,
    parse_name,
)
from .token import Token

__version__ = "0.1.0"

__all__ = [
    "REGISTERED_CLAIM_NAMES",
    "Algorithm",
    "Claim",
    "ClaimKind",
    "ClaimSet",
    "Header",
    "JWTError",
    "ParseError",
    "PlainName",
    "SchemaError",
    "Token",
    "TokenType",
    "UnsupportedError",
    "UriName",
    "classify",
    "generate_collision_name",
    "parse_name",
]
