"""Internal shared patterns and helpers for b2x."""

from __future__ import annotations

import re

#: Prefixes accepted in front of hexadecimal input (``0x414243``, ``\x414243``).
HEX_PREFIXES: tuple[str, ...] = ("0x", "\\x")

#: Hex digits with optional space, tab, CR and LF separators.
HEX_SHAPE: re.Pattern[str] = re.compile(r"[0-9A-Fa-f \t\r\n]+")

#: Standard Base64 alphabet with whitespace and up to two padding characters.
BASE64_SHAPE: re.Pattern[str] = re.compile(r"[A-Za-z0-9+/ \t\r\n]+=?=?[ \t\r\n]*")

#: URL-safe Base64 alphabet (``-`` and ``_`` in place of ``+`` and ``/``).
BASE64URL_SHAPE: re.Pattern[str] = re.compile(r"[A-Za-z0-9\-_ \t\r\n]+=?=?")

#: A single recognized C escape token; group 1 is the text after the backslash.
ESCAPE_TOKEN: re.Pattern[str] = re.compile(
    r"""\\([abefnrtv\\'"]|[0-7]{1,3}|x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8})"""
)

#: A quoted-printable ``=HH`` octet or soft line break.
QP_SHAPE: re.Pattern[str] = re.compile(r"=(?:[0-9A-Fa-f]{2}|\r\n?|\n)")

_SURROGATE: re.Pattern[str] = re.compile("[\ud800-\udfff]")


def strip_hex_prefix(text: str) -> str:
    """Remove a leading ``0x`` or ``\\x`` from *text*, if present."""
    if text.startswith(HEX_PREFIXES):
        return text[2:]
    return text


def encode_utf8(text: str) -> bytes:
    """Encode *text* as UTF-8 the way a WHATWG ``TextEncoder`` does.

    A high surrogate directly followed by a low surrogate is joined into one
    code point; any other surrogate becomes U+FFFD.
    """
    if _SURROGATE.search(text):
        text = text.encode("utf-16-le", "surrogatepass").decode(
            "utf-16-le", "replace"
        )
    return text.encode("utf-8")
