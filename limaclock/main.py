#!/usr/bin/env python3
"""
limaclock - current date and time in a fixed timezone.

Prints the current moment, or reformats a date/time string for display.
"""

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from limaclock.clock import Clock
from limaclock.config import ClockSettings
from limaclock.formatting import format_date_for_display, format_time_for_display
from limaclock.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="limaclock",
        description="limaclock - current date and time in a fixed timezone",
    )
    parser.add_argument(
        "--tz",
        metavar="NAME",
        help="IANA timezone name (default: $LIMACLOCK_TZ or America/Lima)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the current moment as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on the console",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Write a rotating debug log to this directory",
    )

    subparsers = parser.add_subparsers(dest="command")
    date_parser = subparsers.add_parser(
        "display-date", help="Reformat YYYY-MM-DD as DD/MM/YYYY"
    )
    date_parser.add_argument("date")
    time_parser = subparsers.add_parser(
        "display-time", help="Trim a time string to HH:MM:SS"
    )
    time_parser.add_argument("time")
    return parser


def main(argv: list[str] | None = None, clock: Clock | None = None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    console_level = logging.DEBUG if args.debug else logging.WARNING
    if args.log_dir is not None:
        log_path = setup_logging(args.log_dir, console_level=console_level)
        logger.debug(f"Logging to {log_path}")

    if args.command == "display-date":
        print(format_date_for_display(args.date))
        return 0
    if args.command == "display-time":
        print(format_time_for_display(args.time))
        return 0

    try:
        settings = ClockSettings(timezone=args.tz) if args.tz else ClockSettings.from_env()
    except ValidationError as e:
        logger.warning(f"Rejected timezone configuration: {e.errors()[0]['msg']}")
        parser.error(f"unknown timezone: {args.tz or '$LIMACLOCK_TZ'}")

    moment = settings.provider(clock=clock).current_moment()

    if args.json:
        print(moment.model_dump_json(indent=2))
        return 0

    print(f"Timezone: {settings.timezone}")
    print(f"Date:     {moment.date} ({format_date_for_display(moment.date)})")
    print(f"Time:     {moment.time}")
    print(f"Weekday:  {moment.weekday}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
