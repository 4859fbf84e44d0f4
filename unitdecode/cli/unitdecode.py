"""unitdecode CLI entrypoint."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from unitdecode.core import (
    DecodeError,
    Encoding,
    TraceLog,
    UnitSource,
    decode_char,
    decode_string,
    lookup,
    source_for,
)


def load_source(path: Path, encoding: Encoding) -> UnitSource:
    return source_for(path.read_bytes(), encoding)


def encoding_arg(value: str) -> Encoding:
    try:
        return lookup(value)
    except LookupError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def make_trace(args: argparse.Namespace) -> TraceLog:
    return TraceLog(Path(args.trace_log) if args.trace_log else None)


def format_codepoints(text: str) -> str:
    return " ".join(f"U+{ord(ch):04X}" for ch in text)


def stop_reason(source: UnitSource, encoding: Encoding) -> str:
    try:
        decode_char(source, encoding)
    except DecodeError as exc:
        return str(exc)
    return "decoding stopped"


def decode_file(args: argparse.Namespace) -> int:
    encoding = args.encoding
    trace = make_trace(args)
    path = Path(args.path)
    source = load_source(path, encoding)
    trace.log(f"decode {path} as {encoding.value} units={len(source.units)}")

    text = decode_string(source, encoding)
    trace.log(f"decoded scalars={len(text)} stop={source.position}")

    if args.codepoints:
        print(format_codepoints(text))
    else:
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")

    if source.at_end():
        return 0
    reason = stop_reason(source, encoding)
    trace.log(f"stopped at unit {source.position}: {reason}")
    print(f"{path}: {reason} at unit {source.position}", file=sys.stderr)
    return 1


def scan_file(args: argparse.Namespace) -> int:
    trace = make_trace(args)
    path = Path(args.path)
    data = path.read_bytes()
    trace.log(f"scan {path} bytes={len(data)}")

    for encoding in Encoding:
        try:
            source = source_for(data, encoding)
        except ValueError:
            print(f"{encoding.value:<10} n/a (not a whole number of units)")
            continue
        text = decode_string(source, encoding)
        status = "complete" if source.at_end() else "stopped"
        line = (
            f"{encoding.value:<10} scalars={len(text)} "
            f"units={source.position}/{len(source.units)} {status}"
        )
        trace.log(line)
        print(line)
    return 0


def list_encodings(_: argparse.Namespace) -> int:
    for encoding in Encoding:
        print(f"{encoding.value:<10} {encoding.unit_width}-bit units")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode ASCII/UTF-8/UTF-16/UTF-32 code units")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Decode a file until the first invalid unit")
    decode_parser.add_argument("path", help="File to decode")
    decode_parser.add_argument(
        "-e",
        "--encoding",
        type=encoding_arg,
        default=Encoding.UTF8,
        help="Encoding variant (see 'encodings')",
    )
    decode_parser.add_argument(
        "--codepoints", action="store_true", help="Print U+XXXX per scalar instead of text"
    )
    decode_parser.add_argument("--trace-log", default=None, help="Append a decode trace to this file")
    decode_parser.set_defaults(func=decode_file)

    scan_parser = subparsers.add_parser(
        "scan", help="Report how far each encoding decodes a file"
    )
    scan_parser.add_argument("path", help="File to scan")
    scan_parser.add_argument("--trace-log", default=None, help="Append a decode trace to this file")
    scan_parser.set_defaults(func=scan_file)

    encodings_parser = subparsers.add_parser("encodings", help="List supported encodings")
    encodings_parser.set_defaults(func=list_encodings)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
