"""Autodetection of input encodings and of decoded data types."""

from __future__ import annotations

import logging
from collections.abc import Callable

from b2x._utils import (
    BASE64_SHAPE,
    BASE64URL_SHAPE,
    ESCAPE_TOKEN,
    HEX_SHAPE,
    QP_SHAPE,
    strip_hex_prefix,
)
from b2x.decoders import ConversionError
from b2x.decoders.base64 import base64_to_bytes, base64url_to_bytes
from b2x.decoders.escape import escape_sequence_to_bytes
from b2x.decoders.hex import hex_to_bytes
from b2x.enums import DataType, InputType
from b2x.utf8 import is_valid_utf8

logger = logging.getLogger(__name__)

# Printable ASCII (0x20-0x7E) plus tab, LF and CR.  bytes.translate deletes
# these; if anything remains, the data is not printable ASCII.
_ASCII_PRINTABLE: bytes = bytes([0x09, 0x0A, 0x0D, *range(0x20, 0x7F)])


def _probe(decoder: Callable[[str], bytes], text: str) -> bytes | None:
    """Run *decoder* on *text*, returning ``None`` if it rejects the input.

    Only :class:`ConversionError` counts as a rejection; anything else
    propagates.
    """
    try:
        return decoder(text)
    except ConversionError as e:
        logger.debug("autodetect rejected %s: %s", decoder.__name__, e)
        return None


def autodetect_input_type(text: str) -> InputType:
    """Guess which textual encoding *text* is written in.

    Candidates are tried from the narrowest to the broadest: hexadecimal,
    Base64, Base64URL, C escape sequences, quoted-printable, ASCII, and
    finally UTF-8.  Each encoded candidate must pass a cheap shape check and
    then decode successfully to be chosen.

    :param text: The input string to classify.
    :returns: The first :class:`InputType` that fits.
    """
    if HEX_SHAPE.fullmatch(strip_hex_prefix(text)):
        if _probe(hex_to_bytes, text) is not None:
            return InputType.HEXADECIMAL
    # TODO: report missing or invalid Base64 padding based on length
    if BASE64_SHAPE.fullmatch(text):
        if _probe(base64_to_bytes, text) is not None:
            return InputType.BASE64
    if BASE64URL_SHAPE.fullmatch(text):
        if _probe(base64url_to_bytes, text) is not None:
            return InputType.BASE64URL
    if ESCAPE_TOKEN.search(text):
        if _probe(escape_sequence_to_bytes, text) is not None:
            return InputType.C_ESCAPE
    if QP_SHAPE.search(text):
        return InputType.QUOTED_PRINTABLE
    if text.isascii():
        return InputType.ASCII
    return InputType.UTF8


def autodetect_data_type(data: bytes) -> DataType:
    """Classify the character semantics of *data*.

    :param data: The raw byte data to examine.
    :returns: :attr:`DataType.UNKNOWN` for empty input, otherwise the most
        restrictive of printable ASCII, ASCII, UTF-8 and binary that fits.
    """
    if not data:
        return DataType.UNKNOWN
    if not data.translate(None, _ASCII_PRINTABLE):
        return DataType.ASCII_PRINTABLE
    if data.isascii():
        return DataType.ASCII
    if is_valid_utf8(data):
        return DataType.UTF8
    return DataType.BINARY
