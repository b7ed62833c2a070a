import pytest

from jwt_codec.errors import ParseError, SchemaError, UnsupportedError
from jwt_codec.header import Algorithm, Header, TokenType


def test_default_header() -> None:
    header = Header()
    assert header.alg is Algorithm.NONE
    assert header.typ is None
    assert header.cty is None


def test_encode_to_text() -> None:
    assert Header().encode_to_text() == '{"alg": "none"}'
    assert str(Header()) == '{"alg": "none"}'


def test_typ_and_cty_are_not_emitted() -> None:
    header = Header(typ=TokenType.JWT, cty=TokenType.JWT)
    assert header.encode_to_text() == '{"alg": "none"}'


def test_base64_round_trip() -> None:
    header = Header.decode_from_base64("eyJhbGciOiAibm9uZSJ9")
    assert header.alg is Algorithm.NONE
    assert header.encode_to_base64() == "eyJhbGciOiAibm9uZSJ9"


def test_decode_does_not_read_typ_or_cty() -> None:
    header = Header.decode_from_text('{"alg": "none", "typ": "JWT", "cty": "JWT"}')
    assert header == Header()


@pytest.mark.parametrize(
    "text",
    ['{}', '{"alg": null}', '{"typ": "JWT"}', '{"alg": 5}', '[]', '"none"'],
)
def test_schema_errors(text: str) -> None:
    with pytest.raises(SchemaError):
        Header.decode_from_text(text)


def test_unknown_algorithm_is_unsupported() -> None:
    with pytest.raises(UnsupportedError) as excinfo:
        Header.decode_from_text('{"alg": "HS256"}')
    assert isinstance(excinfo.value, NotImplementedError)
    assert "HS256" in str(excinfo.value)


def test_algorithm_names_are_case_sensitive() -> None:
    with pytest.raises(UnsupportedError):
        Header.decode_from_text('{"alg": "None"}')


def test_unsupported_via_base64() -> None:
    with pytest.raises(UnsupportedError):
        Header.decode_from_base64("eyJhbGciOiJIUzI1NiJ9")


@pytest.mark.parametrize("text", ["not json", "{'alg': 'none'}"])
def test_invalid_json(text: str) -> None:
    with pytest.raises(ParseError):
        Header.decode_from_text(text)


@pytest.mark.parametrize("text", ["****", "//4="])
def test_invalid_base64_or_utf8(text: str) -> None:
    with pytest.raises(ParseError):
        Header.decode_from_base64(text)


def test_missing_alg_via_base64() -> None:
    with pytest.raises(SchemaError):
        Header.decode_from_base64("eyJ0eXAiOiJKV1QifQ==")
