"""Command-line access to the EDTF parser.

Usage:
    edtf parse "2004-(06)?-11" [--json]
    edtf normalize "2004-06-11?"
    edtf validate 1984?/2004~ 2001-21 "[1667, 1668]"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from edtf_parsing import DatePairList
from edtf_parsing.config import load_config
from edtf_parsing.date import Date

logger = logging.getLogger(__name__)


def _describe_date(label: str, date: Date) -> str:
    line = f"  {label}: {date.status.value}"
    if date.is_normal:
        line += f" {date.format()} (precision: {date.precision})"
        flags = [
            name
            for name, part in (("year", date.year), ("month", date.month), ("day", date.day))
            if part.has_value and (part.is_uncertain or part.is_approximate)
        ]
        if flags:
            line += f" qualified: {', '.join(flags)}"
    return line


def _cmd_parse(args: argparse.Namespace) -> int:
    value = DatePairList.parse(args.text)
    if args.json:
        print(json.dumps(value.to_dict(), indent=2))
    else:
        print(f"{value.format()} [{value.mode.value}]")
        for index, pair in enumerate(value):
            kind = "range" if pair.is_range else ("date" if pair.is_single else "interval")
            print(f"item {index}: {kind}")
            print(_describe_date("start", pair.start))
            if not pair.is_single:
                print(_describe_date("end", pair.end))

    if not value.is_valid:
        print(f"Invalid EDTF value: {args.text!r}", file=sys.stderr)
        return 1
    return 0


def _cmd_normalize(args: argparse.Namespace) -> int:
    value = DatePairList.parse(args.text)
    if not value.is_valid:
        print(f"Invalid EDTF value: {args.text!r}", file=sys.stderr)
        return 1
    print(value.format())
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    failures = 0
    for text in args.texts:
        valid = DatePairList.parse(text).is_valid
        if not valid:
            failures += 1
        print(f"{'OK' if valid else 'INVALID'}\t{text}")
    logger.info("Validated %d values, %d invalid", len(args.texts), failures)
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edtf",
        description="Parse, normalize and validate Extended Date/Time Format values",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Show the parsed structure of a value")
    parse_cmd.add_argument("text", help="EDTF value")
    parse_cmd.add_argument(
        "--json",
        action="store_true",
        help="Print the structure as JSON",
    )
    parse_cmd.set_defaults(handler=_cmd_parse)

    normalize_cmd = subparsers.add_parser("normalize", help="Print the canonical form of a value")
    normalize_cmd.add_argument("text", help="EDTF value")
    normalize_cmd.set_defaults(handler=_cmd_normalize)

    validate_cmd = subparsers.add_parser("validate", help="Check one or more values")
    validate_cmd.add_argument("texts", nargs="+", metavar="text", help="EDTF values")
    validate_cmd.set_defaults(handler=_cmd_validate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()
    logging.basicConfig(level=config.log_level_value)

    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
