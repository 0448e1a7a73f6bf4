"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .time import (
    ERA_BCE,
    ERA_CE,
    HHMM_PATTERN,
    TIME_FORMAT,
    CalendarFields,
    InvalidArgumentError,
    TimeParseError,
    adjust_to_same_day,
    calendar_fields,
    current_rounded_time,
    format_time,
    is_same_month,
    is_same_year,
    is_similar_month,
    local_now,
    parse_time_smart,
    round_to_minute,
)

__all__ = [
    # Time utilities (date/time helpers for time tracking)
    "ERA_BCE",
    "ERA_CE",
    "HHMM_PATTERN",
    "TIME_FORMAT",
    "CalendarFields",
    "InvalidArgumentError",
    "TimeParseError",
    "adjust_to_same_day",
    "calendar_fields",
    "current_rounded_time",
    "format_time",
    "is_same_month",
    "is_same_year",
    "is_similar_month",
    "local_now",
    "parse_time_smart",
    "round_to_minute",
]
