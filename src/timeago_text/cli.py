"""timeago-text command line interface.

Examples:
    timeago-text duration 2D12h                  # 3 days
    timeago-text since 2024-01-01T12:00:00Z      # about 1 year ago
    timeago-text delta -- -45m                   # about 1 hour from now

"""

import logging
from datetime import UTC, datetime
from pathlib import Path

import typer

from timeago_text.classifier import format_duration
from timeago_text.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    _error,
    _setup_logging,
    console,
)
from timeago_text.core.config import get_config, load_config
from timeago_text.core.exceptions import ConfigError, TimeagoError
from timeago_text.core.timing import parse_iso, utc_now
from timeago_text.parsing import parse_duration
from timeago_text.relative import format_delta, format_time

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="timeago-text",
    help="Describe time spans as approximate English phrases",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.timeago-text/config.yaml)",
    ),
) -> None:
    """Describe time spans as approximate English phrases."""
    try:
        loaded = load_config(config)
    except ConfigError as e:
        _error(f"Config error: {e}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    _setup_logging(verbose=verbose, quiet=quiet, default_level=loaded.log_level)


def _parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware datetime.

    Naive timestamps are interpreted per the naive_timezone setting.

    Raises:
        typer.Exit: If value is not a valid ISO 8601 timestamp.

    """
    try:
        parsed = parse_iso(value)
    except ValueError:
        _error(f"Invalid ISO 8601 timestamp: {value!r}")
        raise typer.Exit(code=EXIT_ERROR) from None

    if parsed.tzinfo is not None:
        return parsed
    if get_config().naive_timezone == "local":
        return parsed.astimezone()
    return parsed.replace(tzinfo=UTC)


@app.command("duration")
def duration_command(
    span: str = typer.Argument(..., help="Compact duration, e.g. 45m, 2D12h, 1Y6M"),
) -> None:
    """Describe the magnitude of a duration.

    Examples:
        timeago-text duration 90s        # 2 minutes
        timeago-text duration 1Y276D     # almost 2 years

    """
    try:
        phrase = format_duration(parse_duration(span))
    except TimeagoError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None
    console.print(phrase, highlight=False)


@app.command("delta")
def delta_command(
    span: str = typer.Argument(
        ...,
        help="Signed duration as now minus reference; negative means future",
    ),
) -> None:
    """Describe a signed duration with "ago" or "from now".

    Negative values need a "--" separator so they are not read as options.

    Examples:
        timeago-text delta 45m           # about 1 hour ago
        timeago-text delta -- -2D12h     # 3 days from now

    """
    try:
        phrase = format_delta(parse_duration(span))
    except TimeagoError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None
    console.print(phrase, highlight=False)


@app.command("since")
def since_command(
    timestamp: str = typer.Argument(..., help="ISO 8601 timestamp to describe"),
    now: str | None = typer.Option(
        None,
        "--now",
        "-n",
        help="ISO 8601 timestamp to use as now (default: current time)",
    ),
) -> None:
    """Describe a timestamp relative to now.

    Examples:
        timeago-text since 2024-05-01T09:30:00+02:00
        timeago-text since 2024-05-01 --now 2024-05-03T12:00:00

    """
    reference = _parse_timestamp(timestamp)
    current = _parse_timestamp(now) if now is not None else utc_now()
    logger.debug("Describing %s relative to %s", reference.isoformat(), current.isoformat())
    console.print(format_time(reference, now=current), highlight=False)
