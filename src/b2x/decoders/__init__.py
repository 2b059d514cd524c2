"""Decoders from textual representations to bytes, and their shared error type."""

from __future__ import annotations


class ConversionError(ValueError):
    """Raised when input does not conform to the encoding it is decoded as.

    Autodetection treats this as "try the next candidate"; any other
    exception raised by a decoder is a programming error and propagates.
    """
