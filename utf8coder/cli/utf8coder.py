"""utf8coder CLI entrypoint."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from utf8coder.core import (
    DEFAULT_SAMPLES,
    ByteFormatter,
    ConformanceRunner,
    TraceLog,
    TranscodeError,
    UnitBuffer,
    decode,
    load_samples,
    to_utf8_bytes,
    transcode,
    units_from_string,
)


def parse_units(raw: str) -> List[int]:
    """Parse ``"d83d,de00"`` or ``"0xD83D 0xDE00"`` into code units."""
    tokens = raw.replace(",", " ").split()
    return [int(token, 16) for token in tokens]


def read_input(args: argparse.Namespace) -> UnitBuffer:
    if args.units is not None:
        return UnitBuffer.from_units(parse_units(args.units))
    if args.file is not None:
        text = Path(args.file).read_text(encoding="utf-8", errors="surrogatepass")
        return units_from_string(text)
    if args.text is None:
        raise SystemExit("encode: provide TEXT, --units or --file")
    return units_from_string(args.text)


def encode(args: argparse.Namespace) -> int:
    trace = TraceLog(Path(args.trace_log) if args.trace_log else None)
    formatter = ByteFormatter(style=args.format)

    try:
        buffer = read_input(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    trace.log(f"units {len(buffer)}")
    try:
        code_points = decode(buffer)
        trace.log(f"code-points {len(code_points)}")
        data = to_utf8_bytes(code_points)
    except TranscodeError as exc:
        trace.log(f"rejected {type(exc).__name__}")
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    trace.log(f"bytes {len(data)}")

    print(formatter.format(data))
    return 0


def compare(args: argparse.Namespace) -> int:
    formatter = ByteFormatter(style=args.format)
    try:
        print(formatter.format(transcode(args.text)))
    except TranscodeError as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    print(formatter.format(args.text.encode("utf-8")))
    return 0


def run_conformance(args: argparse.Namespace) -> int:
    samples = load_samples(Path(args.samples)) if args.samples else DEFAULT_SAMPLES
    runner = ConformanceRunner(artifacts_path=Path(args.artifacts).resolve())
    summary = runner.run(samples, notes=args.notes)
    print(json.dumps(summary, indent=2))
    return 1 if summary["totals"]["mismatched"] else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UTF-16 to UTF-8 transcoder")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    format_choices = ["buffer", "hex", "list"]

    encode_parser = subparsers.add_parser("encode", help="Transcode text to UTF-8 bytes")
    encode_parser.add_argument("text", nargs="?", help="Text to transcode")
    source = encode_parser.add_mutually_exclusive_group()
    source.add_argument("--units", help="Comma or space separated hex UTF-16 code units")
    source.add_argument("--file", help="Read the text from a UTF-8 file")
    encode_parser.add_argument(
        "--format", choices=format_choices, default="buffer", help="Byte rendering style"
    )
    encode_parser.add_argument("--trace-log", default=None, help="Append stage checkpoints to this file")
    encode_parser.set_defaults(func=encode)

    compare_parser = subparsers.add_parser(
        "compare", help="Print the transcoder output next to the platform encoder output"
    )
    compare_parser.add_argument("text", help="Text to transcode")
    compare_parser.add_argument(
        "--format", choices=format_choices, default="buffer", help="Byte rendering style"
    )
    compare_parser.set_defaults(func=compare)

    conformance_parser = subparsers.add_parser(
        "conformance", help="Check samples against the platform encoder and write artifacts"
    )
    conformance_parser.add_argument(
        "--samples", default=None, help="JSON file of {name, text} samples (default: built-in set)"
    )
    conformance_parser.add_argument(
        "--artifacts", default="artifacts", help="Directory where result artifacts are written"
    )
    conformance_parser.add_argument(
        "--notes", default="", help="Optional notes captured in artifacts"
    )
    conformance_parser.set_defaults(func=run_conformance)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
