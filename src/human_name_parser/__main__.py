"""Command line entry point for the Human Name Parser library."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from .errors import NameParserError
from .parser import FIELDS, NameParser, ParserConfig
from .runner import ParseFileConfig, parse_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split personal names into their components.")
    parser.add_argument("names", nargs="*", help="Names to parse and print")
    parser.add_argument("--input", type=Path, help="Path to an input CSV or Excel file")
    parser.add_argument("--output", type=Path, help="Path where the annotated results will be written")
    parser.add_argument(
        "--name-column",
        default=os.getenv("NAME_PARSER_COLUMN", "name"),
        help="Column containing the raw names (default: name)",
    )
    parser.add_argument(
        "--format",
        choices=("json", "tsv"),
        default="json",
        help="Output format for names given on the command line",
    )
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Record names that fail to parse instead of stopping",
    )
    parser.add_argument(
        "--fix-text",
        action="store_true",
        help="Repair mojibake in the input before parsing",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    args = parser.parse_args(argv)
    if args.input is None and not args.names:
        parser.error("give at least one name or --input")
    return args


def _print_names(names: list[str], parser: NameParser, output_format: str, skip_errors: bool) -> int:
    status = 0
    if output_format == "tsv":
        print("\t".join(FIELDS))
    for raw in names:
        try:
            parsed = parser.parse(raw)
        except NameParserError as exc:
            print(f"ERROR: {raw!r}: {exc}", file=sys.stderr)
            status = 1
            if skip_errors:
                continue
            return status
        if output_format == "tsv":
            print("\t".join(parsed.as_list()))
        else:
            print(json.dumps(parsed.as_dict(), ensure_ascii=False))
    return status


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    parser_config = ParserConfig(fix_text=args.fix_text)

    if args.input is not None:
        config = ParseFileConfig(
            name_column=args.name_column,
            use_tqdm=not args.disable_tqdm,
            verbose=not args.quiet,
            on_error="skip" if args.skip_errors else "raise",
            parser=parser_config,
        )
        if parse_file(args.input, args.output, config) is None:
            return 1

    if args.names:
        return _print_names(args.names, NameParser(parser_config), args.format, args.skip_errors)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
