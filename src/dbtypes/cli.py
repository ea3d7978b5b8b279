# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dbtypes.config import ConfigurationError, configure_logging
from dbtypes.date import DATE_LAYOUT, Date, parse_date, today
from dbtypes.errors import DbTypesError

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect and compute calendar dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    today_cmd = subparsers.add_parser("today", help="Print today's date in the local timezone")
    today_cmd.add_argument(
        "--format",
        type=str,
        default=DATE_LAYOUT,
        help="strftime pattern for the output (default: %(default)s)",
    )

    parse = subparsers.add_parser("parse", help="Parse a YYYY-MM-DD date")
    parse.add_argument("text", type=str, help="Date text to parse")

    add = subparsers.add_parser("add", help="Add years, months and days to a date")
    add.add_argument("date", type=str, help="Starting date (YYYY-MM-DD)")
    add.add_argument("--years", type=int, default=0, help="Years to add")
    add.add_argument("--months", type=int, default=0, help="Months to add")
    add.add_argument("--days", type=int, default=0, help="Days to add")

    between = subparsers.add_parser("between", help="Count whole days between two dates")
    between.add_argument("start", type=str, help="First date (YYYY-MM-DD)")
    between.add_argument("end", type=str, help="Second date (YYYY-MM-DD)")

    info = subparsers.add_parser("info", help="Show month and year lengths for a date")
    info.add_argument("date", type=str, help="Date to inspect (YYYY-MM-DD)")

    return parser.parse_args(list(argv))


def _run(args: argparse.Namespace) -> list[str]:
    if args.command == "today":
        return [today().format(args.format)]
    if args.command == "parse":
        parsed = parse_date(args.text)
        return [str(parsed), parsed.marshal_json().decode()]
    if args.command == "add":
        shifted = parse_date(args.date).add_date(args.years, args.months, args.days)
        return [str(shifted)]
    if args.command == "between":
        return [str(parse_date(args.start).days_between(parse_date(args.end)))]
    if args.command == "info":
        return _describe(parse_date(args.date))
    raise ValueError(f"Unsupported command: {args.command}")


def _describe(value: Date) -> list[str]:
    return [
        f"date: {value}",
        f"zero: {value.is_zero()}",
        f"days in month: {value.days_in_month()}",
        f"days in year: {value.days_in_year()}",
    ]


def main(argv: Sequence[str] | None = None) -> None:
    """Command line entry point."""
    load_dotenv()
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        lines = _run(parsed_args)
    except (DbTypesError, ConfigurationError) as exc:
        log.error("Invalid input: %s", exc)  # noqa: TRY400
        sys.exit(2)

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
