"""Detect, decode and re-encode hex, Base64, C escapes and other byte formats."""

from __future__ import annotations

from b2x.convert import ConversionResult, export_data, input_to_bytes, run_conversion
from b2x.decoders import ConversionError
from b2x.detect import autodetect_data_type, autodetect_input_type
from b2x.enums import (
    CopyType,
    DataType,
    InputType,
    friendly_data_type,
    friendly_input_type,
)
from b2x.utf8 import is_double_encoded_utf8, is_valid_utf8, repair_double_encoded_utf8

__version__ = "1.0.0"
__all__ = [
    "ConversionError",
    "ConversionResult",
    "CopyType",
    "DataType",
    "InputType",
    "autodetect_data_type",
    "autodetect_input_type",
    "decode",
    "encode",
    "friendly_data_type",
    "friendly_input_type",
    "inspect",
    "is_double_encoded_utf8",
    "is_valid_utf8",
    "repair_double_encoded_utf8",
]


def _as_bytes(data: bytes | bytearray) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, bytearray):
        return bytes(data)
    msg = f"expected bytes or bytearray, not {type(data).__name__}"
    raise TypeError(msg)


def decode(text: str, input_type: InputType | None = None) -> bytes:
    """Decode *text* to bytes.

    :param text: The input string.
    :param input_type: The encoding *text* is written in.  If ``None`` (the
        default), it is autodetected.
    :returns: The decoded bytes, or the UTF-8 bytes of *text* if it cannot
        be decoded as *input_type*.
    """
    if input_type is None:
        input_type = autodetect_input_type(text)
    return input_to_bytes(text, input_type)


def encode(data: bytes | bytearray, copy_type: CopyType | str) -> str:
    """Encode *data* in the textual form named by *copy_type*.

    :param data: The bytes to encode.
    :param copy_type: A :class:`CopyType` or its string value, such as
        ``"lowerhex"`` or ``"postgresbytea"``.
    :returns: The encoded text.
    :raises ValueError: If *copy_type* is not a known copy type.
    """
    return export_data(CopyType(copy_type), _as_bytes(data))


def inspect(text: str, input_type: InputType | None = None) -> ConversionResult:
    """Decode *text* and describe the result.

    :param text: The input string.
    :param input_type: The encoding *text* is written in, or ``None`` to
        autodetect it.
    :returns: A :class:`ConversionResult` with the input type used, the
        decoded bytes, their :class:`DataType`, and whether they look
        double-encoded.
    """
    return run_conversion(text, input_type)
