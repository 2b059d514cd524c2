"""Shared test fixtures."""

from __future__ import annotations

import random

import pytest

_SEED = 0xB2


@pytest.fixture
def rng() -> random.Random:
    """A seeded random generator so property-style tests are reproducible."""
    return random.Random(_SEED)


@pytest.fixture
def random_buffers(rng: random.Random) -> list[bytes]:
    """Random byte buffers of every length from 0 to 64, plus a few larger ones."""
    lengths = [*range(65), 255, 256, 1000, 4096]
    return [rng.randbytes(n) for n in lengths]


def double_encode(text: str) -> bytes:
    """Encode *text* to UTF-8, misread it as Latin-1, and encode it again."""
    return text.encode("utf-8").decode("latin-1").encode("utf-8")
