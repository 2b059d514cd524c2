"""Command-line interface for b2x."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import b2x
from b2x.convert import export_data, run_conversion
from b2x.decoders import ConversionError
from b2x.detect import autodetect_data_type
from b2x.enums import CopyType, InputType, friendly_data_type, friendly_input_type
from b2x.utf8 import repair_double_encoded_utf8

_INPUT_TYPE_NAMES = ["auto"] + [
    t.name.lower() for t in InputType if t is not InputType.UNKNOWN
]
_COPY_TYPE_NAMES = [c.value for c in CopyType]


def _convert(
    label: str,
    text: str,
    input_type: InputType | None,
    copy_type: CopyType,
    repair: bool,
    minimal: bool,
) -> bool:
    """Convert and print one input; return False if the repair failed."""
    result = run_conversion(text, input_type)
    data = result.data
    data_type = result.data_type
    note = ", double-encoded" if result.double_encoded else ""
    ok = True
    if repair and result.double_encoded:
        try:
            data = repair_double_encoded_utf8(data)
        except ConversionError as e:
            print(f"b2x: {label}: {e}", file=sys.stderr)
            ok = False
        else:
            data_type = autodetect_data_type(data)
            note = ", repaired"
    if not minimal:
        print(
            f"{label}: {friendly_input_type(result.input_type)}"
            f" -> {friendly_data_type(data_type)}{note}"
        )
    print(export_data(copy_type, data))
    return ok


def main(argv: list[str] | None = None) -> None:
    """Run the ``b2x`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the encoding of text input and convert it to another."
    )
    parser.add_argument("files", nargs="*", help="Files to read input text from")
    parser.add_argument(
        "-s",
        "--string",
        action="append",
        default=[],
        metavar="TEXT",
        help="Input text given directly (may be repeated)",
    )
    parser.add_argument(
        "-f",
        "--from",
        dest="input_type",
        default="auto",
        choices=_INPUT_TYPE_NAMES,
        help="Input encoding (default: autodetect)",
    )
    parser.add_argument(
        "-t",
        "--to",
        dest="copy_type",
        default=CopyType.LOWER_HEX_SPACE.value,
        choices=_COPY_TYPE_NAMES,
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--repair",
        action="store_true",
        help="Undo double UTF-8 encoding when it is detected",
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the converted data"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection details"
    )
    parser.add_argument(
        "--version", action="version", version=f"b2x {b2x.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    input_type = (
        None if args.input_type == "auto" else InputType[args.input_type.upper()]
    )
    copy_type = CopyType(args.copy_type)

    failed = False
    for text in args.string:
        if not _convert(
            "string", text, input_type, copy_type, args.repair, args.minimal
        ):
            failed = True
    for filepath in args.files:
        try:
            text = Path(filepath).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            print(f"b2x: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        if not _convert(
            filepath, text, input_type, copy_type, args.repair, args.minimal
        ):
            failed = True
    if not args.string and not args.files:
        text = sys.stdin.buffer.read().decode("utf-8", errors="replace")
        if not _convert(
            "stdin", text, input_type, copy_type, args.repair, args.minimal
        ):
            failed = True

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
