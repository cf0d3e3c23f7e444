"""Tests for document encoding and decode/encode round-trips."""
import pytest

from rdpfile.domain.keys import FULL_ADDRESS, PASSWORD_51, USERNAME
from rdpfile.errors import EncodingError
from rdpfile.parsing.document import decode_document, encode_document, encode_text, to_document, to_raw
from rdpfile.parsing.values import RDPValue


def test_encode_lines_in_mapping_order():
    doc = {
        FULL_ADDRESS: RDPValue.string("host:3389"),
        "server port": RDPValue.integer(-42),
        PASSWORD_51: RDPValue.binary(b"\x0a\xff"),
    }
    assert encode_document(doc) == b"full address:s:host:3389\nserver port:i:-42\npassword 51:b:0AFF"


def test_encode_empty_document():
    assert encode_document({}) == b""


def test_encode_no_trailing_newline():
    assert not encode_text({USERNAME: RDPValue.string("bob")}).endswith("\n")


def test_encode_is_utf8():
    assert encode_document({USERNAME: RDPValue.string("Zoë")}) == "username:s:Zoë".encode("utf-8")


def test_encode_lone_surrogate_fails():
    with pytest.raises(EncodingError) as excinfo:
        encode_document({USERNAME: RDPValue.string("\ud800")})
    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)


def test_encode_rejects_non_values():
    with pytest.raises(TypeError):
        encode_document({USERNAME: "bob"})


def test_negative_integer_round_trip():
    doc = {"k": RDPValue.integer(-42)}
    assert decode_document(encode_document(doc)) == doc


def test_round_trip_mixed_document():
    doc = {
        USERNAME: RDPValue.string("CORP\\alice"),
        FULL_ADDRESS: RDPValue.string("10.0.0.5:3390"),
        "empty": RDPValue.string(""),
        "desktopwidth": RDPValue.integer(2560),
        "min": RDPValue.integer(-(2 ** 63)),
        PASSWORD_51: RDPValue.binary(bytes(range(32))),
        "blob": RDPValue.binary(b""),
        "spaced key": RDPValue.string("value with: colons"),
    }
    assert decode_document(encode_document(doc)) == doc


def test_reencoding_decoded_file_is_stable():
    source = b"username:s:bob\r\n\r\npassword 51:b:0a0b\r\nscreen mode id:i:2\r\n"
    first = encode_document(decode_document(source))
    assert first == b"username:s:bob\npassword 51:b:0A0B\nscreen mode id:i:2"
    assert encode_document(decode_document(first)) == first


def test_to_document_and_back():
    doc = to_document({USERNAME: "bob", "server port": 3389, PASSWORD_51: b"\x01", "kept": RDPValue.integer(1)})
    assert doc[USERNAME] == RDPValue.string("bob")
    assert doc["server port"] == RDPValue.integer(3389)
    assert to_raw(doc) == {USERNAME: "bob", "server port": 3389, PASSWORD_51: b"\x01", "kept": 1}


def test_to_document_rejects_unsupported():
    with pytest.raises(TypeError, match="'flag'"):
        to_document({"flag": True})
