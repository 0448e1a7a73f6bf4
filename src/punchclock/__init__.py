"""
punchclock core package.

Date and time-of-day helpers for a time-tracking application:
- Pure helpers in `punchclock.utils.time` (rounding, same-day adjustment,
  month/year comparisons, lenient time parsing)
- A small Typer-based CLI (`punchclock.cli`) for trying them from a shell

Configuration:
- Shared, project-wide constants live in `punchclock.global_config`.
"""
