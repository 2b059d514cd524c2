"""Enumerations for b2x."""

import enum


class InputType(enum.IntEnum):
    """Textual encodings that an input string can be decoded from."""

    UNKNOWN = 0
    ASCII = 1
    UTF8 = 2
    C_ESCAPE = 3
    HEXADECIMAL = 4
    BASE64 = 5
    BASE64URL = 6
    QUOTED_PRINTABLE = 7


class DataType(enum.IntEnum):
    """Character semantics of a decoded byte buffer."""

    UNKNOWN = 0
    BINARY = 1
    ASCII_PRINTABLE = 2
    ASCII = 3
    UTF8 = 4


class CopyType(str, enum.Enum):
    """Textual serializations that a byte buffer can be exported as."""

    UTF8 = "utf8"
    BASE64 = "base64"
    BASE64URL = "base64url"
    LOWER_HEX = "lowerhex"
    UPPER_HEX = "upperhex"
    LOWER_HEX_SPACE = "lowerhexspace"
    UPPER_HEX_SPACE = "upperhexspace"
    HEX_ARRAY = "hexarray"
    POSTGRES_BYTEA = "postgresbytea"
    C_ESCAPE = "cescape"


INPUT_TYPE_NAMES: dict[InputType, str] = {
    InputType.UNKNOWN: "Unknown",
    InputType.ASCII: "ASCII",
    InputType.UTF8: "UTF-8",
    InputType.C_ESCAPE: "C-like Escape Sequence",
    InputType.HEXADECIMAL: "Hexadecimal",
    InputType.BASE64: "Base 64",
    InputType.BASE64URL: "Base 64 URL",
    InputType.QUOTED_PRINTABLE: "Quoted Printable",
}

DATA_TYPE_NAMES: dict[DataType, str] = {
    DataType.UNKNOWN: "Unknown",
    DataType.BINARY: "Binary",
    DataType.ASCII_PRINTABLE: "ASCII (Printable)",
    DataType.ASCII: "ASCII",
    DataType.UTF8: "UTF-8",
}


def friendly_input_type(value: InputType) -> str:
    """Return the display name of an :class:`InputType`."""
    return INPUT_TYPE_NAMES.get(value, InputType(value).name)


def friendly_data_type(value: DataType) -> str:
    """Return the display name of a :class:`DataType`."""
    return DATA_TYPE_NAMES.get(value, DataType(value).name)
