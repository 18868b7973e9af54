"""Configuration via pydantic-settings.

Configuration is loaded from ``INTERVALKIT_``-prefixed environment
variables and/or a ``.env`` file.  Nested models use ``__`` as the
delimiter in env var names, e.g. ``INTERVALKIT_LOGGING__LEVEL=DEBUG``.

The library API (:class:`~intervalkit.Interval`, the unit ladder,
:func:`~intervalkit.schedule_after`) takes no configuration; these
settings drive the command-line front end and its logging.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from intervalkit._timer import MAX_DEADLINE_NS

UnitName = Literal[
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
]

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings, nested via composition)
# -------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).  When
    ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"json"`` — structured JSON lines for log aggregators.
    - ``"text"`` (default) — human-readable timestamped lines; the
      CLI is mostly run from a terminal.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description=(
            "Log output format. "
            "'json' emits structured JSON lines; "
            "'text' emits human-readable timestamped lines."
        ),
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for the intervalkit CLI.

    Example ``.env``::

        INTERVALKIT_OUTPUT_UNIT=minutes
        INTERVALKIT_LOGGING__LEVEL=DEBUG
        INTERVALKIT_LOGGING__FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="INTERVALKIT_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
    output_unit: UnitName = Field(
        default="seconds",
        description="Unit intervals are printed in when no --to is given.",
    )
    max_deadline_ns: Annotated[int, Field(ge=1, le=MAX_DEADLINE_NS)] = Field(
        default=MAX_DEADLINE_NS,
        description=(
            "Upper bound (wall-clock nanoseconds since the epoch) "
            "that computed deadlines saturate at."
        ),
    )
