"""C-style escape sequence decoding.

Recognized escapes are ``\\a \\b \\e \\f \\n \\r \\t \\v \\\\ \\' \\"``, octal
``\\DDD`` (one to three digits), ``\\xHH``, ``\\uHHHH`` and ``\\UHHHHHHHH``.
``\\?`` is not supported, as trigraphs are not a concern here.
"""

from __future__ import annotations

import re

from b2x._utils import encode_utf8
from b2x.decoders import ConversionError

# The ``invalid`` alternative catches every backslash that is not one of the
# recognized escapes, including a lone backslash at the end of input.
_ESCAPE_OR_INVALID: re.Pattern[str] = re.compile(
    r"""\\(?:(?P<simple>[abefnrtv\\'"])"""
    r"""|(?P<octal>[0-7]{1,3})"""
    r"""|x(?P<hex>[0-9A-Fa-f]{2})"""
    r"""|u(?P<unicode>[0-9A-Fa-f]{4})"""
    r"""|U(?P<unicode_long>[0-9A-Fa-f]{8})"""
    r"""|(?P<invalid>.?))""",
    re.DOTALL,
)

_SIMPLE_ESCAPES: dict[str, str] = {
    "a": "\x07",
    "b": "\x08",
    "e": "\x1b",
    "f": "\x0c",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\x0b",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

_MAX_CODE_POINT = 0x10FFFF


def _expand(match: re.Match[str]) -> str:
    """Return the character a single escape token stands for."""
    kind = match.lastgroup
    token = match.group(kind)

    if kind == "simple":
        return _SIMPLE_ESCAPES[token]

    if kind == "hex":
        return chr(int(token, 16))

    if kind == "octal":
        value = int(token, 8)
        if value > 0xFF:
            # Out of range: pass the escape through untouched
            return match.group(0)
        return chr(value)

    if kind in ("unicode", "unicode_long"):
        code_point = int(token, 16)
        if code_point > _MAX_CODE_POINT:
            return match.group(0)
        return chr(code_point)

    msg = f"invalid escape sequence: \\{token}"
    raise ConversionError(msg)


def escape_sequence_to_bytes(text: str) -> bytes:
    """Expand C-style escape sequences in *text*, left to right.

    Every numeric escape names a code point, so ``\\xe9``, ``\\351`` and
    ``\\u00e9`` all decode to the UTF-8 encoding of ``é``.  A high surrogate
    escape directly followed by a low surrogate escape, as in
    ``\\ud83d\\ude00``, is joined into one character; unpaired surrogates
    become U+FFFD.  Octal escapes above ``\\377`` and Unicode escapes above
    U+10FFFF are left in place, backslash included.

    :param text: The escaped text to decode.
    :returns: The UTF-8 encoding of the expanded text.
    :raises ConversionError: If *text* contains an unrecognized escape.
    """
    parts = []
    pos = 0
    for match in _ESCAPE_OR_INVALID.finditer(text):
        parts.append(text[pos : match.start()])
        parts.append(_expand(match))
        pos = match.end()
    parts.append(text[pos:])
    return encode_utf8("".join(parts))
