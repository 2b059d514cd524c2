"""UTF-8 structural validation and double-encoding detection.

Both checks work from the UTF-8 byte map
(https://en.wikipedia.org/wiki/UTF-8#Byte_map) rather than from Python's
codec, so the accepted grammar is spelled out here byte by byte.
"""

from __future__ import annotations

from b2x.decoders import ConversionError


def _build_lead_bytes() -> dict[int, tuple[int, int, int]]:
    """Map each valid lead byte to (sequence length, min second byte, max second byte).

    0xC0, 0xC1 and 0xF5-0xFF are absent: they only ever begin overlong
    encodings or code points above U+10FFFF.
    """
    table: dict[int, tuple[int, int, int]] = {}
    for lead in range(0xC2, 0xE0):
        table[lead] = (2, 0x80, 0xBF)
    for lead in range(0xE0, 0xF0):
        table[lead] = (3, 0x80, 0xBF)
    for lead in range(0xF0, 0xF5):
        table[lead] = (4, 0x80, 0xBF)
    # 0xE0: second byte >= 0xA0 prevents overlong 3-byte encodings
    table[0xE0] = (3, 0xA0, 0xBF)
    # 0xED: second byte <= 0x9F prevents UTF-16 surrogates U+D800-U+DFFF
    table[0xED] = (3, 0x80, 0x9F)
    # 0xF0: second byte >= 0x90 prevents overlong 4-byte encodings
    table[0xF0] = (4, 0x90, 0xBF)
    # 0xF4: second byte <= 0x8F prevents code points above U+10FFFF
    table[0xF4] = (4, 0x80, 0x8F)
    return table


_LEAD_BYTES: dict[int, tuple[int, int, int]] = _build_lead_bytes()


def _is_continuation(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


def is_valid_utf8(data: bytes) -> bool:
    """Return True if *data* is entirely well-formed UTF-8.

    Overlong encodings, surrogates, code points above U+10FFFF, stray
    continuation bytes and a truncated final sequence are all rejected.
    Noncharacters such as U+FFFE and U+10FFFF are accepted: this checks
    encoding well-formedness, not character assignment.

    :param data: The raw byte data to examine.
    :returns: ``True`` if every byte belongs to a well-formed sequence.
    """
    if data.isascii():
        return True

    i = 0
    length = len(data)
    while i < length:
        byte = data[i]
        if byte < 0x80:
            i += 1
            continue

        sequence = _LEAD_BYTES.get(byte)
        if sequence is None:
            # Continuation byte without a lead, or a byte never used in UTF-8
            return False
        seq_len, low, high = sequence
        if i + seq_len > length:
            return False
        if not low <= data[i + 1] <= high:
            return False
        for j in range(i + 2, i + seq_len):
            if not _is_continuation(data[j]):
                return False
        i += seq_len

    return True


def _matches_double_encoded(data: bytes, start: int) -> bool:
    """Check for a double-encoded UTF-8 sequence beginning at *start*.

    When UTF-8 is misread as Latin-1 and encoded again, every original byte
    0xC0-0xFF becomes ``C3 xx`` (original byte minus 0x40) and every byte
    0x80-0xBF becomes ``C2 xx``.  A double-encoded character is therefore a
    re-encoded lead byte followed by one ``C2 xx`` pair per continuation
    byte, with the same second-byte limits that :func:`is_valid_utf8` uses.
    """
    sequence = _LEAD_BYTES.get(data[start + 1] + 0x40)
    if sequence is None:
        return False
    seq_len, low, high = sequence
    end = start + 2 * seq_len
    if end > len(data):
        return False
    for pos in range(start + 2, end, 2):
        if data[pos] != 0xC2:
            return False
    if not low <= data[start + 3] <= high:
        return False
    return all(_is_continuation(data[pos]) for pos in range(start + 5, end, 2))


def is_double_encoded_utf8(data: bytes) -> bool:
    """Return True if *data* contains UTF-8 that was encoded to UTF-8 twice.

    Looks for the ``C3 xx C2 xx`` signature (and its 6- and 8-byte
    extensions) left behind when UTF-8 bytes are decoded as Latin-1 and
    re-encoded.  This is a heuristic: it recognizes the pattern, it does
    not prove the data was mangled.

    See https://blogs.perl.org/users/chansen/2010/10/coping-with-double-encoded-utf-8.html

    :param data: The raw byte data to examine.
    :returns: ``True`` on the first matching sequence found.
    """
    length = len(data)
    pos = data.find(b"\xc3")
    while 0 <= pos < length - 3:
        if data[pos + 2] == 0xC2 and _matches_double_encoded(data, pos):
            return True
        pos = data.find(b"\xc3", pos + 1)
    return False


def repair_double_encoded_utf8(data: bytes) -> bytes:
    """Undo one level of Latin-1 double encoding.

    :param data: Double-encoded UTF-8 bytes.
    :returns: The bytes as they were before the second encoding.
    :raises ConversionError: If *data* is not valid UTF-8 or holds
        characters that Latin-1 cannot represent.
    """
    try:
        return data.decode("utf-8").encode("latin-1")
    except (UnicodeDecodeError, UnicodeEncodeError) as e:
        msg = f"cannot repair double encoding: {e.reason}"
        raise ConversionError(msg) from e
