from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any

import typer

from ..global_config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV

_LOGGING_CONFIGURED = False


def _resolve_log_level(value: str | None) -> int:
    """Map a level name such as "debug" to its logging constant.

    None and unrecognised names fall back to DEFAULT_LOG_LEVEL.
    """
    resolved = logging.getLevelName((value or DEFAULT_LOG_LEVEL).strip().upper())
    if isinstance(resolved, int):
        return resolved
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def configure_logging() -> None:
    """Configure CLI-wide logging once.

    Sets up basic logging configuration for the CLI. Safe to call multiple
    times; only configures on first call. The level is read from the
    PUNCHCLOCK_LOG_LEVEL environment variable, falling back to WARNING when
    unset or unrecognised.

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=_resolve_log_level(os.environ.get(LOG_LEVEL_ENV)),
        format=LOG_FORMAT,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration.

    Args:
        name: Logger name. Uses module name if None.

    Returns:
        Configured Logger instance.
    """
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Context manager that catches exceptions, logs them, displays user-friendly
    error messages, and exits with code 1. Re-raises typer.Exit to allow
    normal CLI exit flow.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Raises:
        typer.Exit: Always exits with code 1 on exception (except typer.Exit
            which is re-raised).

    Logs:
        - ERROR: "Error during {operation}" with full exception traceback.

    User Output:
        - Prints error message via typer.secho() in red: "✗ {operation} failed: {exc}".
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc


def format_result(result: str | dict[str, Any], *, operation: str) -> str:
    """Format a command result into CLI-friendly text.

    Strings are shown on one line after the operation name. Dictionaries are
    shown as a header line followed by one `key: value` line per entry, with
    booleans rendered as yes/no.

    Args:
        result: Result string or dictionary to format.
        operation: Operation name to include in formatted output.

    Returns:
        Formatted string ready for CLI display.
    """
    if isinstance(result, dict):
        return _format_result_dict(result, operation)
    return f"{operation}: {result}"


class BaseCLI:
    """Utility base class for CLI command groups."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        self.logger = get_logger(__name__)

    def handle_cli_operation(
        self,
        *,
        operation: str,
        op_callable: Callable[[], Any],
    ) -> Any:
        """Run an operation with consistent logging, formatting, and errors.

        Args:
            operation: Human-readable operation name for error handling.
            op_callable: Callable that performs the operation and returns
                a string or dictionary result.

        Returns:
            Result from op_callable.

        User Output:
            - Prints formatted result via typer.echo().
            - Error messages handled by handle_errors context manager.
        """
        with handle_errors(operation, logger=self.logger):
            result = op_callable()

        self.logger.debug("%s %s -> %r", self.domain, operation, result)
        typer.echo(format_result(result, operation=operation))
        return result


def _format_result_dict(result: dict[str, Any], op_label: str) -> str:
    lines = [f"✓ {op_label}"]
    for key, value in result.items():
        if isinstance(value, bool):
            value = "yes" if value else "no"
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)
