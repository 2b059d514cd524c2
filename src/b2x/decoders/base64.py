"""Base64 and Base64URL decoding.

Decoding is "forgiving" in the way browsers' ``atob`` is: ASCII whitespace
is ignored and missing ``=`` padding is accepted, but a stray ``=``, a
character outside the alphabet, or a length that cannot hold whole bytes is
rejected.
"""

from __future__ import annotations

import base64
import binascii
import re

from b2x.decoders import ConversionError

_ASCII_WHITESPACE: re.Pattern[str] = re.compile(r"[ \t\n\f\r]+")
_STANDARD_ALPHABET: re.Pattern[str] = re.compile(r"[A-Za-z0-9+/]*")
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def base64_to_bytes(text: str, urlsafe: bool = False) -> bytes:
    """Decode standard or URL-safe Base64.

    :param text: The Base64 text to decode.
    :param urlsafe: Treat ``-`` and ``_`` as the 62nd and 63rd characters.
    :returns: The decoded bytes.
    :raises ConversionError: If *text* is not valid Base64.
    """
    msg = "not base64url" if urlsafe else "not base64"
    data = _ASCII_WHITESPACE.sub("", text)
    if urlsafe:
        data = data.translate(_URLSAFE_TO_STANDARD)
    if len(data) % 4 == 0 and data.endswith("="):
        data = data[:-2] if data.endswith("==") else data[:-1]
    if len(data) % 4 == 1 or not _STANDARD_ALPHABET.fullmatch(data):
        raise ConversionError(msg)
    data += "=" * (-len(data) % 4)
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise ConversionError(msg) from e


def base64url_to_bytes(text: str) -> bytes:
    """Decode URL-safe Base64 (``-`` and ``_`` alphabet)."""
    return base64_to_bytes(text, urlsafe=True)
