"""CLI commands for the date/time helpers."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

import typer

from ..base import BaseCLI
from ...utils.time import (
    adjust_to_same_day,
    current_rounded_time,
    format_time,
    is_same_month,
    is_same_year,
    is_similar_month,
    parse_time_smart,
    round_to_minute,
)

time_app = typer.Typer(help="Date and time-of-day helpers.")


def _parse_instant(value: str, *, name: str) -> datetime:
    """Parse an ISO 8601 date or datetime given on the command line."""
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise ValueError(
            f"Invalid {name}: {value!r} (expected ISO format, e.g. 2024-03-15T09:30)"
        ) from e


class TimeCLI(BaseCLI):
    """CLI helpers for the date/time utilities."""

    def __init__(self) -> None:
        """Initialize TimeCLI with time domain name."""
        super().__init__("time")

    def now(self) -> str:
        return self.handle_cli_operation(
            operation="now",
            op_callable=lambda: current_rounded_time().isoformat(timespec="minutes"),
        )

    def round_instant(self, *, instant: str) -> str:
        return self.handle_cli_operation(
            operation="round",
            op_callable=lambda: round_to_minute(
                _parse_instant(instant, name="instant")
            ).isoformat(timespec="minutes"),
        )

    def parse(self, *, text: str) -> str:
        """Parse a user-typed time and return it as HH:MM.

        Blank input yields "(blank)" rather than an error.
        """

        def _operation() -> str:
            parsed = parse_time_smart(text)
            return "(blank)" if parsed is None else format_time(parsed)

        return self.handle_cli_operation(operation="parse", op_callable=_operation)

    def same_day(self, *, day: str, time_value: str) -> str:
        def _operation() -> str:
            adjusted = adjust_to_same_day(
                _parse_instant(day, name="day"),
                _parse_instant(time_value, name="time"),
            )
            return adjusted.isoformat()

        return self.handle_cli_operation(operation="same-day", op_callable=_operation)

    def compare(self, *, first: str, second: str) -> dict[str, Any]:
        """Compare two instants by year, month and similar month.

        Returns:
            Dictionary with one boolean per comparison.
        """

        def _operation() -> dict[str, Any]:
            a = _parse_instant(first, name="first instant")
            b = _parse_instant(second, name="second instant")
            return {
                "same_year": is_same_year(a, b),
                "same_month": is_same_month(a, b),
                "similar_month": is_similar_month(a, b),
            }

        return self.handle_cli_operation(operation="compare", op_callable=_operation)


cli = TimeCLI()


@time_app.command("now")
def now_command() -> None:
    """Print the current local time rounded to the minute."""
    cli.now()


@time_app.command("round")
def round_command(
    instant: Annotated[str, typer.Argument(help="ISO datetime to round")],
) -> None:
    """Round a datetime to the nearest minute; exactly 30 seconds rounds up."""
    cli.round_instant(instant=instant)


@time_app.command("parse")
def parse_command(
    text: Annotated[str, typer.Argument(help="Time to parse, e.g. 9, 09, 14:30")],
) -> None:
    """Parse a time of day leniently.

    A single digit or two digits are read as an hour ("9" and "09" both mean
    09:00). Anything else must be HH:MM. Exits with code 1 on bad input.
    """
    cli.parse(text=text)


@time_app.command("same-day")
def same_day_command(
    day: Annotated[str, typer.Argument(help="ISO date or datetime giving the day")],
    time_value: Annotated[
        str, typer.Argument(metavar="TIME", help="ISO datetime giving the time of day")
    ],
) -> None:
    """Combine the calendar day of DAY with the time of day of TIME."""
    cli.same_day(day=day, time_value=time_value)


@time_app.command("compare")
def compare_command(
    first: Annotated[str, typer.Argument(help="First ISO date or datetime")],
    second: Annotated[str, typer.Argument(help="Second ISO date or datetime")],
) -> None:
    """Report whether two instants share a year, a month, or just a month name."""
    cli.compare(first=first, second=second)


app = time_app
