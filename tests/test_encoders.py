from __future__ import annotations

import pytest

from b2x.decoders.base64 import base64_to_bytes, base64url_to_bytes
from b2x.decoders.hex import hex_to_bytes
from b2x.encoders import (
    bytes_to_base64,
    bytes_to_c_escape,
    bytes_to_hex,
    bytes_to_hex_array,
    bytes_to_postgres_bytea,
    bytes_to_utf8,
)

_HELLO_WAVE = bytes(
    [0x48, 0x65, 0x6C, 0x6C, 0x6F, 0x21, 0x20, 0xF0, 0x9F, 0x91, 0x8B, 0x0A]
)


def test_bytes_to_base64():
    assert bytes_to_base64(_HELLO_WAVE) == "SGVsbG8hIPCfkYsK"


def test_base64_urlsafe_alphabet():
    # "~~~~~~" encodes to characters that differ between the alphabets
    assert bytes_to_base64(b"~" * 6) == "fn5+fn5+"
    assert bytes_to_base64(b"~" * 6, urlsafe=True) == "fn5-fn5-"


def test_base64_keeps_padding():
    assert bytes_to_base64(b"light w") == "bGlnaHQgdw=="
    assert bytes_to_base64(b"\xff\xff", urlsafe=True) == "__8="


def test_bytes_to_utf8():
    assert bytes_to_utf8(b"\xf0\x9f\x91\x8b") == "👋"


def test_bytes_to_utf8_keeps_bom():
    assert bytes_to_utf8(b"\xef\xbb\xbfhello\n") == "\ufeffhello\n"


def test_bytes_to_utf8_replaces_malformed():
    assert bytes_to_utf8(b"a\xffb") == "a\N{REPLACEMENT CHARACTER}b"


def test_hex_variants():
    data = b"\x0a\xbc\xde"
    assert bytes_to_hex(data) == "0abcde"
    assert bytes_to_hex(data, uppercase=True) == "0ABCDE"
    assert bytes_to_hex(data, " ") == "0a bc de"
    assert bytes_to_hex(data, " ", uppercase=True) == "0A BC DE"
    assert bytes_to_hex(b"") == ""


def test_hex_array():
    assert bytes_to_hex_array(b"ABC") == "[0x41, 0x42, 0x43]"
    assert bytes_to_hex_array(b"\xff") == "[0xff]"
    assert bytes_to_hex_array(b"") == "[]"


def test_postgres_bytea():
    assert bytes_to_postgres_bytea(b"ABC") == "\\x414243"
    assert bytes_to_postgres_bytea(b"\xab") == "\\xab"


def test_c_escape_ascii():
    assert bytes_to_c_escape(b"ABC") == '"ABC"'


def test_c_escape_utf8_per_code_point():
    assert bytes_to_c_escape(_HELLO_WAVE) == '"Hello! \\U0001f44b\\n"'
    assert bytes_to_c_escape("déçu ✅".encode()) == '"d\\xe9\\xe7u \\u2705"'


def test_c_escape_mapping():
    assert bytes_to_c_escape(b"\x00\x08\t\n\x0b\x0c\r\"'\\") == (
        '"\\0\\b\\t\\n\\v\\f\\r\\"\\\'\\\\"'
    )
    assert bytes_to_c_escape(b"\x07\x1b\x7f") == '"\\x07\\x1b\\x7f"'


def test_c_escape_nul_before_octal_digit():
    assert bytes_to_c_escape(b"\x001") == '"\\x001"'
    assert bytes_to_c_escape(b"\x00a") == '"\\0a"'


def test_c_escape_binary_per_byte():
    assert bytes_to_c_escape(b"\xff\xfeA") == '"\\xff\\xfeA"'


def test_c_escape_forced_modes():
    assert bytes_to_c_escape("é".encode(), utf8=False) == '"\\xc3\\xa9"'
    assert bytes_to_c_escape(b"a\xffb", utf8=True) == '"a\\ufffdb"'


def test_roundtrip_hex(random_buffers: list[bytes]):
    for data in random_buffers:
        assert hex_to_bytes(bytes_to_hex(data)) == data
        assert hex_to_bytes(bytes_to_hex(data, " ", uppercase=True)) == data
        assert hex_to_bytes(bytes_to_postgres_bytea(data)) == data


@pytest.mark.parametrize("urlsafe", [False, True])
def test_roundtrip_base64(random_buffers: list[bytes], urlsafe: bool):
    decode = base64url_to_bytes if urlsafe else base64_to_bytes
    for data in random_buffers:
        assert decode(bytes_to_base64(data, urlsafe=urlsafe)) == data
