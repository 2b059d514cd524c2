"""Encoders from bytes to textual representations.

Every encoder accepts any byte buffer and never raises for one.
"""

from __future__ import annotations

import base64

from b2x.utf8 import is_valid_utf8


def bytes_to_utf8(data: bytes) -> str:
    """Decode *data* as UTF-8, keeping a leading byte order mark.

    Malformed sequences are replaced with U+FFFD.
    """
    return bytes(data).decode("utf-8", errors="replace")


def bytes_to_base64(data: bytes, urlsafe: bool = False) -> str:
    """Encode *data* as padded Base64, optionally with the URL-safe alphabet."""
    if urlsafe:
        return base64.urlsafe_b64encode(data).decode("ascii")
    return base64.b64encode(data).decode("ascii")


def bytes_to_hex(data: bytes, separator: str = "", uppercase: bool = False) -> str:
    """Encode *data* as hex digit pairs joined by *separator*."""
    text = bytes(data).hex(separator) if separator else bytes(data).hex()
    return text.upper() if uppercase else text


def bytes_to_hex_array(data: bytes) -> str:
    """Encode *data* as an array literal such as ``[0x41, 0x42]``."""
    return "[" + ", ".join(f"0x{b:02x}" for b in data) + "]"


def bytes_to_postgres_bytea(data: bytes) -> str:
    """Encode *data* as a PostgreSQL bytea hex literal (``\\x4142``)."""
    return "\\x" + bytes_to_hex(data)


_C_ESCAPES: dict[int, str] = {
    0x00: "\\0",
    0x08: "\\b",
    0x09: "\\t",
    0x0A: "\\n",
    0x0B: "\\v",
    0x0C: "\\f",
    0x0D: "\\r",
    0x22: '\\"',
    0x27: "\\'",
    0x5C: "\\\\",
}

_OCTAL_DIGITS = frozenset("01234567")


def _escape_code_point(code_point: int) -> str:
    escaped = _C_ESCAPES.get(code_point)
    if escaped is not None:
        return escaped
    if 0x20 <= code_point <= 0x7E:
        return chr(code_point)
    if code_point <= 0xFF:
        return f"\\x{code_point:02x}"
    if code_point <= 0xFFFF:
        return f"\\u{code_point:04x}"
    return f"\\U{code_point:08x}"


def bytes_to_c_escape(data: bytes, utf8: bool | None = None) -> str:
    """Encode *data* as a double-quoted C string literal.

    When *data* is UTF-8 each code point is escaped on its own, so ``é``
    becomes ``\\xe9`` and an emoji becomes ``\\U0001f44b``.  Otherwise each
    byte is escaped individually.

    :param data: The bytes to encode.
    :param utf8: Force per-code-point (``True``) or per-byte (``False``)
        escaping.  ``None`` (the default) picks per-code-point escaping only
        if *data* is valid UTF-8.  Forcing it on malformed data renders the
        malformed sequences as ``\\ufffd``.
    :returns: The quoted, escaped literal.
    """
    if utf8 is None:
        utf8 = is_valid_utf8(data)
    if utf8:
        code_points = [ord(c) for c in bytes_to_utf8(data)]
    else:
        code_points = list(data)
    parts = [_escape_code_point(cp) for cp in code_points]
    # "\0" must not run into a following octal digit
    for i in range(len(parts) - 1):
        if parts[i] == "\\0" and parts[i + 1] in _OCTAL_DIGITS:
            parts[i] = "\\x00"
    return '"' + "".join(parts) + '"'
