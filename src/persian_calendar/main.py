import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any, Dict, List, Optional

from persian_calendar.errors import JalaaliYearOutOfRange
from persian_calendar.logging_setup import setup_logging
from persian_calendar.settings import load_settings
from persian_calendar.utils.date_utils import gregorian_to_jalaali, jalaali_to_gregorian
from persian_calendar.utils.leap_breaks import jalaali_year_info

logger = logging.getLogger(__name__)


def _fmt_ymd(y: int, m: int, d: int) -> str:
    return f"{y:04d}-{m:02d}-{d:02d}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="persian-calendar",
        description="Convert dates between the Jalaali and Gregorian calendars.",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as a JSON object")
    parser.add_argument("--log-level", default=None, help="Override PERSIAN_CALENDAR_LOG_LEVEL")
    parser.add_argument("--log-file", default=None, help="Override PERSIAN_CALENDAR_LOG_FILE")

    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("to-jalaali", "Gregorian YEAR MONTH DAY → Jalaali"),
        ("to-gregorian", "Jalaali YEAR MONTH DAY → Gregorian"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("year", type=int)
        p.add_argument("month", type=int)
        p.add_argument("day", type=int)

    p = sub.add_parser("year-info", help="Leap status and Nowruz date of a Jalaali year")
    p.add_argument("year", type=int)

    return parser


def run_command(args: argparse.Namespace) -> Dict[str, Any]:
    if args.command == "to-jalaali":
        return gregorian_to_jalaali(args.year, args.month, args.day).as_dict()
    if args.command == "to-gregorian":
        return jalaali_to_gregorian(args.year, args.month, args.day).as_dict()

    info = jalaali_year_info(args.year)
    return {
        "year": args.year,
        "leap": info.leap,
        "is_leap": info.leap == 0,
        "gregorian_year": info.gregorian_year,
        "march": info.march,
    }


def _render(command: str, result: Dict[str, Any]) -> str:
    if command == "year-info":
        return (
            f"{result['year']}: leap={result['leap']} is_leap={result['is_leap']} "
            f"nowruz={_fmt_ymd(result['gregorian_year'], 3, result['march'])}"
        )
    return _fmt_ymd(result["year"], result["month"], result["day"])


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except RuntimeError as exc:
        parser.error(str(exc))
    if args.log_file:
        settings = replace(settings, log_file=args.log_file)

    level = None
    if args.log_level:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            parser.error(f"unknown log level: {args.log_level}")

    setup_logging(settings, level=level)
    logger.debug("🧭 main: command=%s", args.command)

    try:
        result = run_command(args)
    except JalaaliYearOutOfRange as exc:
        logger.error("💥 %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result, ensure_ascii=False))
    else:
        print(_render(args.command, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
