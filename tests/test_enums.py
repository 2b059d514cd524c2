import enum

from b2x.enums import (
    DATA_TYPE_NAMES,
    INPUT_TYPE_NAMES,
    CopyType,
    DataType,
    InputType,
    friendly_data_type,
    friendly_input_type,
)


def test_input_type_is_int_enum():
    assert issubclass(InputType, enum.IntEnum)
    assert InputType.UNKNOWN == 0


def test_input_type_members_exist():
    expected = {
        "UNKNOWN",
        "ASCII",
        "UTF8",
        "C_ESCAPE",
        "HEXADECIMAL",
        "BASE64",
        "BASE64URL",
        "QUOTED_PRINTABLE",
    }
    assert set(InputType.__members__.keys()) == expected


def test_data_type_members_exist():
    expected = {"UNKNOWN", "BINARY", "ASCII_PRINTABLE", "ASCII", "UTF8"}
    assert set(DataType.__members__.keys()) == expected


def test_copy_type_values():
    assert [c.value for c in CopyType] == [
        "utf8",
        "base64",
        "base64url",
        "lowerhex",
        "upperhex",
        "lowerhexspace",
        "upperhexspace",
        "hexarray",
        "postgresbytea",
        "cescape",
    ]
    assert CopyType("cescape") is CopyType.C_ESCAPE


def test_every_member_has_a_friendly_name():
    assert set(INPUT_TYPE_NAMES) == set(InputType)
    assert set(DATA_TYPE_NAMES) == set(DataType)


def test_friendly_names():
    assert friendly_input_type(InputType.C_ESCAPE) == "C-like Escape Sequence"
    assert friendly_input_type(InputType.BASE64URL) == "Base 64 URL"
    assert friendly_input_type(InputType.QUOTED_PRINTABLE) == "Quoted Printable"
    assert friendly_data_type(DataType.UTF8) == "UTF-8"
    assert friendly_data_type(DataType.ASCII_PRINTABLE) == "ASCII (Printable)"
