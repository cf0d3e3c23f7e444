"""Tests for well-known property keys."""
from rdpfile.domain.keys import FULL_ADDRESS, KEY_TYPES, PASSWORD_51, SENSITIVE_KEYS, USERNAME
from rdpfile.parsing.document import decode_document
from rdpfile.parsing.values import RDPValue, ValueType


def test_key_constants_are_plain_strings():
    assert USERNAME == "username"
    assert FULL_ADDRESS == "full address"


def test_constants_index_decoded_documents():
    doc = decode_document("username:s:bob\nfull address:s:host")
    assert doc[USERNAME] == RDPValue.string("bob")
    assert doc[FULL_ADDRESS] == RDPValue.string("host")


def test_key_types():
    assert KEY_TYPES[USERNAME] is ValueType.STRING
    assert KEY_TYPES["server port"] is ValueType.INT
    assert KEY_TYPES[PASSWORD_51] is ValueType.BINARY


def test_well_known_keys_need_no_escaping():
    for key in KEY_TYPES:
        assert ":" not in key
        assert key == key.strip()


def test_password_is_sensitive():
    assert PASSWORD_51 in SENSITIVE_KEYS
    assert USERNAME not in SENSITIVE_KEYS


def test_keys_have_no_special_decode_behaviour():
    # A well-known key written with an unconventional type is still accepted.
    doc = decode_document("server port:s:not a number")
    assert doc["server port"] == RDPValue.string("not a number")
