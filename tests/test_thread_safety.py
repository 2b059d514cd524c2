"""Thread-safety integration tests for concurrent detection and conversion."""

from __future__ import annotations

import threading

import b2x
from b2x.enums import CopyType, InputType

# (input text, expected input type, expected hex of the decoded bytes)
_SAMPLES: list[tuple[str, InputType, str]] = [
    ("0xabc123", InputType.HEXADECIMAL, "abc123"),
    ("SGVsbG8hIPCfkYsK", InputType.BASE64, "48656c6c6f2120f09f918b0a"),
    ("fn5-fn5-", InputType.BASE64URL, "7e7e7e7e7e7e"),
    ("abc\\n123", InputType.C_ESCAPE, "6162630a313233"),
    ("Exup=C3=A9ry", InputType.QUOTED_PRINTABLE, "45787570c3a97279"),
    ("Die Größe", InputType.UTF8, "446965204772c3b6c39f65"),
]


def _run_concurrent_convert(n_workers: int, iterations: int) -> list[str]:
    """Spawn *n_workers* threads per sample, each converting it *iterations* times.

    Returns a list of error strings (empty = success).
    """
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(text: str, expected_type: InputType, expected_hex: str) -> None:
        barrier.wait()
        for _ in range(iterations):
            result = b2x.inspect(text)
            if result.input_type is not expected_type:
                errors.append(f"Expected {expected_type!r}, got {result.input_type!r}")
            got_hex = b2x.encode(result.data, CopyType.LOWER_HEX)
            if got_hex != expected_hex:
                errors.append(f"Expected {expected_hex}, got {got_hex}")

    threads = []
    for _ in range(n_workers):
        for text, expected_type, expected_hex in _SAMPLES:
            t = threading.Thread(
                target=worker, args=(text, expected_type, expected_hex)
            )
            threads.append(t)
            t.start()

    for t in threads:
        t.join()

    return errors


def test_concurrent_convert_no_corruption():
    """Multiple threads converting simultaneously must not corrupt results."""
    errors = _run_concurrent_convert(n_workers=3, iterations=50)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])


def test_concurrent_convert_high_concurrency():
    """Stress test with a higher thread count."""
    errors = _run_concurrent_convert(n_workers=8, iterations=20)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])
