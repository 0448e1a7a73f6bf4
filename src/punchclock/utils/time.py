"""Calendar date and time-of-day helpers.

This module is the single home for the small date/time operations the
time-tracking application needs:
- Current local time rounded to the minute (half-ceiling)
- Moving a time-of-day onto another calendar day
- Era-aware same-year / same-month checks and the era-blind similar-month check
- Lenient parsing of user-typed times ("9", "09", "14:30")

Instants are naive `datetime` values in the host's local calendar. Nothing here
converts between timezones.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import NamedTuple

# Era numbering: BCE=0, CE=1
ERA_BCE = 0
ERA_CE = 1

# Canonical time-of-day format: HH:MM, 24-hour, zero padded
TIME_FORMAT = "%H:%M"
HHMM_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")

_HALF_MINUTE = timedelta(seconds=30)


class InvalidArgumentError(ValueError):
    """Raised when a required instant is missing or out of range."""


class TimeParseError(ValueError):
    """Raised when text cannot be read as an HH:MM time of day.

    Carries the original, untransformed input. The position is always -1
    since padding may have changed the string that was matched.
    """

    def __init__(self, text: str, position: int = -1) -> None:
        self.text = text
        self.position = position
        super().__init__(f"Could not parse time from '{text}'.")


class CalendarFields(NamedTuple):
    """Calendar fields of an instant, used for comparisons."""

    era: int
    year: int
    month: int
    day_of_year: int


def _require(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")


def local_now() -> datetime:
    """Return the current local time as a naive datetime."""
    return datetime.now()


def calendar_fields(instant: date) -> CalendarFields:
    """Extract era, year, month and day-of-year from a date or datetime.

    Args:
        instant: Date or datetime to inspect.

    Returns:
        CalendarFields for the instant.

    Raises:
        InvalidArgumentError: If instant is None.
    """
    _require(instant, "instant")
    # datetime years start at 1, so every value it can hold is CE
    era = ERA_CE if instant.year >= 1 else ERA_BCE
    return CalendarFields(
        era=era,
        year=instant.year,
        month=instant.month,
        day_of_year=instant.timetuple().tm_yday,
    )


def round_to_minute(instant: datetime) -> datetime:
    """Round a datetime to the nearest minute, ties going up.

    A remainder of exactly thirty seconds rounds toward the later minute.
    Rounding up may carry into the next hour, day, month or year.

    Args:
        instant: Datetime to round.

    Returns:
        Datetime with second and microsecond set to zero.

    Raises:
        InvalidArgumentError: If instant is None, or if rounding up would
            pass datetime.max.
    """
    _require(instant, "instant")
    truncated = instant.replace(second=0, microsecond=0)
    remainder = instant - truncated
    if remainder >= _HALF_MINUTE:
        try:
            return truncated + timedelta(minutes=1)
        except OverflowError as e:
            raise InvalidArgumentError(
                f"Cannot round {instant.isoformat()} up past the last representable minute"
            ) from e
    return truncated


def current_rounded_time() -> datetime:
    """Return the current local time rounded to the minute (half-ceiling)."""
    return round_to_minute(local_now())


def adjust_to_same_day(day: date, time_to_adjust: datetime) -> datetime:
    """Move the time-of-day of one instant onto the calendar day of another.

    Year and day-of-year come from `day`; hour, minute, second, microsecond,
    tzinfo and fold come from `time_to_adjust`.

    Args:
        day: Date or datetime supplying the calendar day.
        time_to_adjust: Datetime supplying the time of day.

    Returns:
        New datetime on `day` at the time of `time_to_adjust`.

    Raises:
        InvalidArgumentError: If either argument is None.
    """
    _require(day, "day")
    _require(time_to_adjust, "time_to_adjust")
    fields = calendar_fields(day)
    target = date(fields.year, 1, 1) + timedelta(days=fields.day_of_year - 1)
    return time_to_adjust.replace(
        year=target.year, month=target.month, day=target.day
    )


def is_same_month(a: date, b: date) -> bool:
    """Check whether two instants fall in the same month of the same year.

    Raises:
        InvalidArgumentError: If either argument is None.
    """
    _require(a, "a")
    _require(b, "b")
    fields_a = calendar_fields(a)
    fields_b = calendar_fields(b)
    return (
        fields_a.era == fields_b.era
        and fields_a.year == fields_b.year
        and fields_a.month == fields_b.month
    )


def is_same_year(a: date, b: date) -> bool:
    """Check whether two instants fall in the same year (and era).

    Raises:
        InvalidArgumentError: If either argument is None.
    """
    _require(a, "a")
    _require(b, "b")
    fields_a = calendar_fields(a)
    fields_b = calendar_fields(b)
    return fields_a.era == fields_b.era and fields_a.year == fields_b.year


def is_similar_month(a: date, b: date) -> bool:
    """Check whether two instants share a month, e.g. both in March.

    Year and era are ignored.

    Raises:
        InvalidArgumentError: If either argument is None.
    """
    _require(a, "a")
    _require(b, "b")
    return calendar_fields(a).month == calendar_fields(b).month


def parse_time_smart(text: str | None) -> time | None:
    """Parse a user-typed time of day, filling in what is obviously meant.

    Resolution order on the stripped input:
    1. Blank input returns None.
    2. A single character is treated as an hour and left-padded ("9" -> "09").
    3. Two characters are treated as an hour ("09" -> "09:00").
    4. The result must then match HH:MM (00-23, 00-59, zero padded).

    Nothing else is special-cased, so "9:5" is rejected.

    Args:
        text: Raw input from the user.

    Returns:
        Parsed time with second and microsecond zero, or None for blank input.

    Raises:
        TimeParseError: If the input cannot be read as a time of day.
    """
    if text is None or not text.strip():
        return None

    candidate = text.strip()
    if len(candidate) == 1:
        candidate = "0" + candidate
    if len(candidate) == 2:
        candidate = candidate + ":00"

    match = HHMM_PATTERN.match(candidate)
    if match is None:
        raise TimeParseError(text)
    return time(hour=int(match.group(1)), minute=int(match.group(2)))


def format_time(value: time) -> str:
    """Format a time of day as HH:MM."""
    return value.strftime(TIME_FORMAT)
