"""Hexadecimal decoding."""

from __future__ import annotations

import re

from b2x._utils import HEX_SHAPE, strip_hex_prefix
from b2x.decoders import ConversionError

_WHITESPACE: re.Pattern[str] = re.compile(r"\s+")


def hex_to_bytes(text: str) -> bytes:
    """Decode hex digits, optionally prefixed with ``0x`` or ``\\x``.

    Whitespace between digits is ignored, so ``"68 65 6c"`` and
    ``"68656c"`` decode identically.  Empty input decodes to empty bytes.

    :param text: The hex text to decode.
    :returns: The decoded bytes.
    :raises ConversionError: If *text* contains non-hex characters or an
        odd number of hex digits.
    """
    text = strip_hex_prefix(text)
    if text and not HEX_SHAPE.fullmatch(text):
        msg = "not hex"
        raise ConversionError(msg)
    cleaned = _WHITESPACE.sub("", text)
    if len(cleaned) % 2 != 0:
        msg = "not hex (odd length)"
        raise ConversionError(msg)
    return bytes.fromhex(cleaned)
