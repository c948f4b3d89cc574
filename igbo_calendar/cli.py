"""Command line interface for igbo_calendar.

Примеры:
    igbo-calendar year 2025 --start 2025-02-18 --market-day Afo --validate
    igbo-calendar phase 2025-02-28
    igbo-calendar market-day 2026-01-07
"""

import argparse
import json
import logging
import sys
from datetime import MAXYEAR, MINYEAR, date
from typing import Any, Dict, Optional, Sequence

from igbo_calendar.core.contracts import IgboYearValidator
from igbo_calendar.core.math.moon_phase import phase_info
from igbo_calendar.engine.market_days import market_day_for_date
from igbo_calendar.engine.new_moon import DEFAULT_WINDOW_DAYS, approximate_year_start
from igbo_calendar.engine.year_builder import (
    DEFAULT_ANCHOR_MARKET_DAY,
    YearBuilder,
    YearBuilderConfig,
)

logger = logging.getLogger(__name__)


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def _check_year_range(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    # Окно новолуния и ~366 дней года не должны выходить за пределы datetime.date
    first_year, last_year = MINYEAR + 1, MAXYEAR - 1
    if args.start is None and not MINYEAR <= args.index <= last_year:
        parser.error(f"year index {args.index} needs --start (supported: {MINYEAR}..{last_year})")
    if args.start is not None and not first_year <= args.start.year <= last_year:
        parser.error(f"--start {args.start.isoformat()} out of range (supported years: {first_year}..{last_year})")


def _print_json(payload: Dict[str, Any], indent: Optional[int]) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=indent))


def cmd_year(args: argparse.Namespace) -> int:
    start = args.start or approximate_year_start(args.index, args.prefer_market_day)
    builder = YearBuilder(YearBuilderConfig(window_days=args.window_days))
    year = builder.build_year(start, args.index, args.market_day)
    payload = year.to_contract()

    if args.validate:
        problems = IgboYearValidator().describe_errors(payload)
        if problems:
            for problem in problems:
                print(f"contract violation at {problem}", file=sys.stderr)
            return 1
        logger.info("igbo_year contract valid for %s", year.label)

    _print_json(payload, args.indent)
    return 0


def cmd_phase(args: argparse.Namespace) -> int:
    info = phase_info(args.date)
    payload = {"date": args.date.isoformat(), **info.model_dump(mode="json")}
    _print_json(payload, args.indent)
    return 0


def cmd_market_day(args: argparse.Namespace) -> int:
    payload = {
        "date": args.date.isoformat(),
        "market_day": market_day_for_date(args.date),
    }
    _print_json(payload, args.indent)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="igbo-calendar",
        description="Igbo hybrid lunisolar calendar engine",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--indent", type=int, default=2, help="JSON indentation (default: 2)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    year = sub.add_parser("year", help="Build a full Igbo year as JSON")
    year.add_argument("index", type=int, help="Igbo year index (e.g. 2025)")
    year.add_argument(
        "--start",
        type=_iso_date,
        default=None,
        help="Approximate Gregorian start date (default: new moon seed from Feb 15-28 of INDEX)",
    )
    year.add_argument(
        "--market-day",
        default=DEFAULT_ANCHOR_MARKET_DAY,
        help=f"Market day of Ọnwa Mbụ day 1 (default: {DEFAULT_ANCHOR_MARKET_DAY})",
    )
    year.add_argument(
        "--prefer-market-day",
        default=None,
        help="Without --start: prefer the February new moon candidate falling on this market day",
    )
    year.add_argument(
        "--window-days",
        type=int,
        default=DEFAULT_WINDOW_DAYS,
        help=f"New moon search half-window in days (default: {DEFAULT_WINDOW_DAYS})",
    )
    year.add_argument(
        "--validate",
        action="store_true",
        help="Validate output against the igbo_year JSON Schema",
    )
    year.set_defaults(func=cmd_year)

    phase = sub.add_parser("phase", help="Moon phase for a date (noon UTC)")
    phase.add_argument("date", type=_iso_date, help="Gregorian date YYYY-MM-DD")
    phase.set_defaults(func=cmd_phase)

    market = sub.add_parser("market-day", help="Market day for a Gregorian date")
    market.add_argument("date", type=_iso_date, help="Gregorian date YYYY-MM-DD")
    market.set_defaults(func=cmd_market_day)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.command == "year":
        _check_year_range(parser, args)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
