"""Command-line front end (Typer-based).

Provides :func:`build_cli` which constructs a Typer app with
global options (``--version``, ``--log-level``, ``--log-format``,
``--env-file``) and three commands:

- ``convert VALUE UNIT [--to UNIT]`` — re-express a duration.
- ``deadline VALUE UNIT`` — the wall-clock deadline a timer would be
  armed with, or ``never``.
- ``since TIMESTAMP [--to UNIT]`` — interval between an ISO 8601
  timestamp and now (negative for past timestamps).

Naive timestamps are local time, matching :func:`interval_since_now`.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated, get_args

import typer
from pydantic import ValidationError

from intervalkit._clock import ClockPort, SystemClock
from intervalkit._dates import interval_since_now
from intervalkit._errors import UnknownUnitError
from intervalkit._interval import Interval
from intervalkit._logging import configure_logging
from intervalkit._settings import LoggingSettings, Settings
from intervalkit._timer import compute_deadline, never_fires
from intervalkit._units import canonical_unit, interval_of, project

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_USAGE_ERROR = 2

# ---------------------------------------------------------------------------
# Allowed values (extracted from LoggingSettings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)


def _resolve_interval(value: float, unit: str) -> Interval:
    try:
        return interval_of(value, unit)
    except UnknownUnitError as exc:
        raise typer.BadParameter(str(exc), param_hint="'UNIT'") from exc


def _resolve_unit(unit: str) -> str:
    try:
        return canonical_unit(unit)
    except UnknownUnitError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--to'") from exc


def _parse_timestamp(raw: str) -> datetime:
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        msg = f"Invalid ISO 8601 timestamp '{raw}'"
        raise typer.BadParameter(msg, param_hint="'TIMESTAMP'") from exc


def build_cli(
    *,
    settings_class: type[Settings] = Settings,
    clock: ClockPort | None = None,
) -> typer.Typer:
    """Construct the intervalkit Typer CLI.

    Args:
        settings_class: Settings model instantiated at startup.
            Tests pass an isolated subclass.
        clock: Clock sampled for "now".  Defaults to
            :class:`SystemClock`.

    Returns:
        A configured :class:`typer.Typer` ready to invoke.
    """
    resolved_clock: ClockPort = clock if clock is not None else SystemClock()

    cli = typer.Typer(
        help="Convert durations and compute timer deadlines.",
    )

    # -- global options -----------------------------------------------------

    @cli.callback(invoke_without_command=True)
    def main(
        ctx: typer.Context,
        version_flag: Annotated[
            bool | None,
            typer.Option(
                "--version",
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
    ) -> None:
        from intervalkit import __version__

        if version_flag:
            typer.echo(f"intervalkit v{__version__}")
            raise typer.Exit()

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )

        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )

        try:
            settings = settings_class(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        if log_level is not None:
            settings.logging = settings.logging.model_copy(
                update={"level": log_level.upper()},
            )

        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format.lower()},
            )

        configure_logging(settings.logging, service="intervalkit", version=__version__)
        ctx.obj = settings

    # -- commands -----------------------------------------------------------

    @cli.command()
    def convert(
        ctx: typer.Context,
        value: Annotated[float, typer.Argument(help="Magnitude of the duration.")],
        unit: Annotated[str, typer.Argument(help="Unit of VALUE, e.g. 'ms' or 'hours'.")],
        to: Annotated[
            str | None,
            typer.Option("--to", help="Unit to print in (default: output_unit)."),
        ] = None,
    ) -> None:
        """Re-express VALUE UNIT in another unit."""
        settings: Settings = ctx.obj
        interval = _resolve_interval(value, unit)
        target = _resolve_unit(to) if to is not None else settings.output_unit
        logger.debug("Converting %r to %s", interval, target)
        typer.echo(f"{project(interval, target)} {target}")

    @cli.command()
    def deadline(
        ctx: typer.Context,
        value: Annotated[float, typer.Argument(help="Magnitude of the delay.")],
        unit: Annotated[str, typer.Argument(help="Unit of VALUE.")],
    ) -> None:
        """Print the wall-clock deadline (ns since epoch) for a delay."""
        settings: Settings = ctx.obj
        interval = _resolve_interval(value, unit)
        if never_fires(interval):
            typer.echo("never")
            return
        result = compute_deadline(
            interval,
            resolved_clock.now_ns(),
            max_deadline_ns=settings.max_deadline_ns,
        )
        typer.echo(str(result))

    @cli.command()
    def since(
        ctx: typer.Context,
        timestamp: Annotated[str, typer.Argument(help="ISO 8601 timestamp.")],
        to: Annotated[
            str | None,
            typer.Option("--to", help="Unit to print in (default: output_unit)."),
        ] = None,
    ) -> None:
        """Print the interval between TIMESTAMP and now."""
        settings: Settings = ctx.obj
        point = _parse_timestamp(timestamp)
        target = _resolve_unit(to) if to is not None else settings.output_unit
        interval = interval_since_now(point, clock=resolved_clock)
        typer.echo(f"{project(interval, target)} {target}")

    return cli


def run() -> None:
    """Console-script entry point."""
    build_cli()()
