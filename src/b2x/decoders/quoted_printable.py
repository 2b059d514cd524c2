"""Quoted-printable decoding.

Decoding is lenient: an ``=`` that is neither a soft line break nor followed
by two hex digits is kept as a literal character rather than rejected.
"""

from __future__ import annotations

import re

from b2x._utils import encode_utf8

_TRAILING_WHITESPACE: re.Pattern[str] = re.compile(r"[\t ]+(?=\r\n|\r|\n|\Z)")
_SOFT_LINE_BREAK: re.Pattern[str] = re.compile(r"=(?:\r\n?|\n|\Z)")
_ENCODED_OCTET: re.Pattern[str] = re.compile(r"=([0-9A-Fa-f]{2})")


def qp_to_bytes(text: str) -> bytes:
    """Decode quoted-printable *text*.

    Trailing spaces and tabs are removed from every line, soft line breaks
    (``=`` at the end of a line) are joined, and ``=HH`` is replaced by the
    byte ``0xHH``.  Literal characters are encoded as UTF-8.
    """
    text = _TRAILING_WHITESPACE.sub("", text)
    text = _SOFT_LINE_BREAK.sub("", text)
    out = bytearray()
    pos = 0
    for match in _ENCODED_OCTET.finditer(text):
        out += encode_utf8(text[pos : match.start()])
        out.append(int(match.group(1), 16))
        pos = match.end()
    out += encode_utf8(text[pos:])
    return bytes(out)
