"""
Claims and claim sets: the JWT payload.

A ``ClaimSet`` maps flattened claim name text to ``Claim`` objects and
guarantees that names are unique.  Its text encoding is built by hand from
the per-claim JSON fragments so that the exact bytes a signer would cover
do not depend on a generic object serializer.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .codec import JsonSerializable, dumps_json, loads_json
from .errors import ParseError, SchemaError
from .names import ClaimKind, NameForm, classify, parse_name

__all__ = ["Claim", "ClaimSet"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Claim
# ---------------------------------------------------------------------------

class Claim:
    """A single name/value pair of a claim set.

    The kind is derived from the name on every access; the only stored
    classification state is the explicit public override.

    The value is stored in the form it takes after a JSON round trip
    (tuples become lists, non-string keys become strings), so what a claim
    holds is exactly what its encoding decodes back to.
    """

    __slots__ = ("_name", "_value", "_public")

    def __init__(self, name: NameForm, value: Any) -> None:
        if parse_name(name.text) != name:
            raise ParseError(f"Claim name {name!r} does not match its parsed form")
        self._name = name
        try:
            self._value = loads_json(dumps_json(value))
        except (TypeError, ValueError, RecursionError) as exc:
            raise ParseError(f"Claim {name.text!r} has a non-JSON value: {exc}") from exc
        self._public = False

    @classmethod
    def parse(cls, name_text: str, value: Any) -> Claim:
        """Build a claim from raw name text and a JSON value.

        Raises:
            ParseError: If the name is an invalid URI or *value* is not JSON.
        """
        return cls(parse_name(name_text), value)

    @property
    def name(self) -> NameForm:
        return self._name

    @property
    def name_text(self) -> str:
        return self._name.text

    @property
    def value(self) -> Any:
        """A copy of the claim value; changing it leaves the claim as it was."""
        return copy.deepcopy(self._value)

    @property
    def kind(self) -> ClaimKind:
        if self._public:
            return ClaimKind.PUBLIC
        return classify(self._name)

    def promote_to_public(self) -> None:
        self._public = True

    def to_json_fragment(self) -> str:
        """Render ``{"<name>":<value>}`` in compact JSON."""
        return "{" + dumps_json(self._name.text) + ":" + dumps_json(self._value) + "}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Claim):
            return NotImplemented
        return (self._name, self._value_key(), self.kind) == (
            other._name, other._value_key(), other.kind
        )

    def _value_key(self) -> str:
        # JSON text keeps true/1 and 1/1.0 apart where Python == does not
        return dumps_json(self._value, sort_keys=True)

    def __repr__(self) -> str:
        return f"Claim(kind={self.kind.name}, name={self._name!r}, value={self._value!r})"


# ---------------------------------------------------------------------------
# ClaimSet
# ---------------------------------------------------------------------------

class ClaimSet(JsonSerializable):
    """A name-unique collection of claims."""

    def __init__(self) -> None:
        self._claims: dict[str, Claim] = {}

    # --- Construction --------------------------------------------------------

    def insert(self, claim: Claim) -> None:
        """Add *claim*.

        Raises:
            SchemaError: If a claim with the same name is already present.
        """
        key = claim.name_text
        if key in self._claims:
            raise SchemaError(f"Duplicate claim name: {key!r}")
        self._claims[key] = claim
        logger.debug("Inserted %s claim %r", claim.kind.value, key)

    @classmethod
    def from_dict(cls, claims: Mapping[str, Any]) -> ClaimSet:
        claim_set = cls()
        for name_text, value in claims.items():
            claim_set.insert(Claim.parse(name_text, value))
        return claim_set

    # --- Access --------------------------------------------------------------

    def get(self, name_text: str) -> Claim:
        """Return the claim called *name_text*.

        Raises:
            SchemaError: If there is no such claim.
        """
        try:
            return self._claims[name_text]
        except KeyError:
            raise SchemaError(f"No claim named {name_text!r}") from None

    def names(self) -> list[str]:
        return list(self._claims)

    def to_dict(self) -> dict[str, Any]:
        return {name: claim.value for name, claim in self._claims.items()}

    def __contains__(self, name_text: object) -> bool:
        return name_text in self._claims

    def __iter__(self) -> Iterator[Claim]:
        return iter(self._claims.values())

    def __len__(self) -> int:
        return len(self._claims)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClaimSet):
            return NotImplemented
        return self._value_keys() == other._value_keys()

    def _value_keys(self) -> dict[str, str]:
        return {name: claim._value_key() for name, claim in self._claims.items()}

    def __repr__(self) -> str:
        return f"ClaimSet({list(self._claims.values())!r})"

    # --- Serialization -------------------------------------------------------

    def encode_to_text(self) -> str:
        # Hand-built join: signers may cover these exact bytes
        return "{" + ",".join(c.to_json_fragment()[1:-1] for c in self._claims.values()) + "}"

    @classmethod
    def decode_from_text(cls, text: str) -> ClaimSet:
        """Parse a JSON object into a claim set.

        Duplicate keys in *text* are resolved by the JSON parser (last wins)
        before any claim is built.

        Raises:
            ParseError: If *text* is not a JSON object or a name is invalid.
            SchemaError: If two keys flatten to the same claim name.
        """
        document = loads_json(text)
        if not isinstance(document, dict):
            raise ParseError(
                f"Invalid claim set: expected a JSON object, got {type(document).__name__}"
            )
        claim_set = cls.from_dict(document)
        logger.debug("Decoded claim set with %d claim(s)", len(claim_set))
        return claim_set
