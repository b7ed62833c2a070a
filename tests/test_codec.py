import pytest

from jwt_codec.codec import b64decode_text, b64encode_text, dumps_json, loads_json
from jwt_codec.errors import ParseError


def test_b64encode_is_standard_and_padded() -> None:
    assert b64encode_text("{}") == "e30="
    assert b64encode_text('{"alg": "none"}') == "eyJhbGciOiAibm9uZSJ9"


@pytest.mark.parametrize("segment", ["e30=", "e30", " e30= "])
def test_b64decode_padding_is_optional(segment: str) -> None:
    assert b64decode_text(segment) == "{}"


def test_b64decode_accepts_urlsafe_alphabet() -> None:
    # "//4=" in the standard alphabet is "__4" in base64url
    with pytest.raises(ParseError, match="UTF-8"):
        b64decode_text("__4")


def test_b64decode_rejects_foreign_characters() -> None:
    with pytest.raises(ParseError, match="base64"):
        b64decode_text("e3*=")


def test_json_helpers() -> None:
    assert dumps_json({"a": [1, "é"]}) == '{"a":[1,"é"]}'
    assert loads_json('{"a": [1, "\\u00e9"]}') == {"a": [1, "é"]}


@pytest.mark.parametrize("text", ["NaN", "[Infinity]", "{", ""])
def test_loads_json_rejects_invalid(text: str) -> None:
    with pytest.raises(ParseError, match="Invalid JSON"):
        loads_json(text)


def test_loads_json_too_deep_is_parse_error() -> None:
    with pytest.raises(ParseError, match="Invalid JSON"):
        loads_json("[" * 100_000 + "]" * 100_000)


def test_dumps_json_sort_keys() -> None:
    assert dumps_json({"b": 1, "a": True}) == '{"b":1,"a":true}'
    assert dumps_json({"b": 1, "a": True}, sort_keys=True) == '{"a":true,"b":1}'
