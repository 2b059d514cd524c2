"""Dispatch from input and copy types to decoders and encoders."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable

from b2x._utils import encode_utf8
from b2x.decoders import ConversionError
from b2x.decoders.base64 import base64_to_bytes, base64url_to_bytes
from b2x.decoders.escape import escape_sequence_to_bytes
from b2x.decoders.hex import hex_to_bytes
from b2x.decoders.quoted_printable import qp_to_bytes
from b2x.detect import autodetect_data_type, autodetect_input_type
from b2x.encoders import (
    bytes_to_base64,
    bytes_to_c_escape,
    bytes_to_hex,
    bytes_to_hex_array,
    bytes_to_postgres_bytea,
    bytes_to_utf8,
)
from b2x.enums import CopyType, DataType, InputType
from b2x.utf8 import is_double_encoded_utf8

logger = logging.getLogger(__name__)

# ASCII, UTF8 and UNKNOWN input is plain text and has no entry here.
_DECODERS: dict[InputType, Callable[[str], bytes]] = {
    InputType.C_ESCAPE: escape_sequence_to_bytes,
    InputType.HEXADECIMAL: hex_to_bytes,
    InputType.BASE64: base64_to_bytes,
    InputType.BASE64URL: base64url_to_bytes,
    InputType.QUOTED_PRINTABLE: qp_to_bytes,
}

_ENCODERS: dict[CopyType, Callable[[bytes], str]] = {
    CopyType.UTF8: bytes_to_utf8,
    CopyType.BASE64: bytes_to_base64,
    CopyType.BASE64URL: lambda data: bytes_to_base64(data, urlsafe=True),
    CopyType.LOWER_HEX: bytes_to_hex,
    CopyType.UPPER_HEX: lambda data: bytes_to_hex(data, uppercase=True),
    CopyType.LOWER_HEX_SPACE: lambda data: bytes_to_hex(data, " "),
    CopyType.UPPER_HEX_SPACE: lambda data: bytes_to_hex(data, " ", uppercase=True),
    CopyType.HEX_ARRAY: bytes_to_hex_array,
    CopyType.POSTGRES_BYTEA: bytes_to_postgres_bytea,
    CopyType.C_ESCAPE: bytes_to_c_escape,
}


def input_to_bytes(text: str, input_type: InputType) -> bytes:
    """Decode *text* as *input_type*.

    If the decoder rejects the text, the UTF-8 bytes of the text itself are
    returned instead, so there is always something to display.

    :param text: The input string.
    :param input_type: The encoding to decode *text* from.
    :returns: The decoded bytes.
    """
    input_type = InputType(input_type)
    decoder = _DECODERS.get(input_type)
    if decoder is None:
        return encode_utf8(text)
    try:
        return decoder(text)
    except ConversionError as e:
        logger.warning(
            "error decoding input as %s, falling back to text: %s",
            input_type.name,
            e,
        )
        return encode_utf8(text)


def export_data(copy_type: CopyType, data: bytes) -> str:
    """Encode *data* in the textual form named by *copy_type*."""
    return _ENCODERS[copy_type](data)


@dataclasses.dataclass(frozen=True, slots=True)
class ConversionResult:
    """The outcome of decoding one input string.

    Holds the input type the text was decoded as, the resulting bytes, the
    data type of those bytes, and whether they look double-encoded.
    """

    input_type: InputType
    data: bytes
    data_type: DataType
    double_encoded: bool

    def to_dict(self) -> dict[str, InputType | DataType | bytes | bool]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'input_type'``, ``'data'``, ``'data_type'``
            and ``'double_encoded'`` keys.
        """
        return {
            "input_type": self.input_type,
            "data": self.data,
            "data_type": self.data_type,
            "double_encoded": self.double_encoded,
        }


def run_conversion(text: str, input_type: InputType | None = None) -> ConversionResult:
    """Detect (unless given), decode and classify *text*."""
    if input_type is None:
        input_type = autodetect_input_type(text)
    else:
        input_type = InputType(input_type)
    data = input_to_bytes(text, input_type)
    return ConversionResult(
        input_type=input_type,
        data=data,
        data_type=autodetect_data_type(data),
        double_encoded=is_double_encoded_utf8(data),
    )
