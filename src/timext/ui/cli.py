from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from timext.common.formatting import parse_duration, parse_partial
from timext.config import CliConfig, ConfigurationError, configure_logging, get_cli_config
from timext.domain.arithmetic import (
    calendar_add,
    calendar_sub,
    saturating_calendar_add,
    saturating_calendar_sub,
)
from timext.domain.partial import PartialOffsetDateTime, PartialPrimitiveDateTime, PartialTime

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import FrameType

    from timext.domain.duration import CalendarDuration

log = logging.getLogger(__name__)

type Shift = Callable[[date, CalendarDuration], date]


def _parse_args(argv: Sequence[str], *, saturate_default: bool) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calendar arithmetic and partial timestamps")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("add", "Add a calendar duration to a date or datetime"),
        ("sub", "Subtract a calendar duration from a date or datetime"),
    ):
        shift = subparsers.add_parser(name, help=help_text)
        shift.add_argument("value", type=str, help="ISO-8601 date or datetime")
        shift.add_argument(
            "duration",
            type=str,
            help="Calendar duration such as 1y2mo, 13mo or a bare month count (-14); "
            "put -- before notation with a leading sign, e.g. -- -13mo",
        )
        shift.add_argument(
            "--saturating",
            action=argparse.BooleanOptionalAction,
            default=saturate_default,
            help="Clamp to the representable range instead of failing (default: %(default)s)",
        )

    complete = subparsers.add_parser("complete", help="Resolve a partial timestamp")
    complete.add_argument(
        "partial",
        type=str,
        help="Partial timestamp with x placeholders, e.g. 1998-xx-02",
    )
    complete.add_argument(
        "--fallback",
        type=str,
        help="ISO-8601 value supplying the components the partial timestamp lacks",
    )

    return parser.parse_args(list(argv))


def _parse_iso_value(value: str) -> date:
    normalized = value.strip()
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"
    try:
        if "T" in normalized or " " in normalized:
            return datetime.fromisoformat(normalized)
        return date.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(f"Invalid ISO value: {value}") from exc


def _select_shift(command: str, *, saturating: bool) -> Shift:
    if command == "add":
        return saturating_calendar_add if saturating else calendar_add
    return saturating_calendar_sub if saturating else calendar_sub


def _complete(text: str, fallback_text: str | None) -> str:
    partial = parse_partial(text)
    if fallback_text is None:
        return partial.into_complete().isoformat()

    fallback = _parse_iso_value(fallback_text)
    if isinstance(partial, PartialTime):
        if not isinstance(fallback, datetime):
            raise ValueError("A partial time needs a datetime fallback")
        return partial.fallback(fallback.time()).isoformat()
    if isinstance(partial, PartialOffsetDateTime | PartialPrimitiveDateTime):
        if not isinstance(fallback, datetime):
            fallback = datetime.combine(fallback, datetime.min.time())
        if isinstance(partial, PartialPrimitiveDateTime):
            fallback = fallback.replace(tzinfo=None)
        elif fallback.tzinfo is None:
            fallback = fallback.replace(tzinfo=partial.offset)
        return partial.fallback(fallback).isoformat()
    if isinstance(fallback, datetime):
        fallback = fallback.date()
    return partial.fallback(fallback).isoformat()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_cli_config()
    except ConfigurationError:
        configure_logging(CliConfig())
        log.exception("Invalid configuration")
        sys.exit(2)
    configure_logging(config)

    try:
        parsed_args = _parse_args(args_list, saturate_default=config.saturate)
        if parsed_args.command in {"add", "sub"}:
            value = _parse_iso_value(parsed_args.value)
            duration = parse_duration(parsed_args.duration)
            shift = _select_shift(parsed_args.command, saturating=parsed_args.saturating)
            result = shift(value, duration).isoformat()
        elif parsed_args.command == "complete":
            result = _complete(parsed_args.partial, parsed_args.fallback)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ValueError, OverflowError):
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)

    print(result)  # noqa: T201


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
