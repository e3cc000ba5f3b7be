"""Logging setup for the PATTERNBOOK CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr, whose records carry a short `prefix`
  saying where they came from (a pattern demo, or a third-party library);
- an in-memory "flight recorder" that keeps recent records at DEBUG and
  writes them to a file once something goes wrong.

`log_startup` writes a one-line banner plus the diagnostics needed to make
sense of a flight-recorder dump afterwards.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "patternbook"
PATTERNS_LOGGER = f"{PROJECT_PREFIX}.patterns"

# (label, distribution name) pairs reported at startup
LIBRARIES: tuple[tuple[str, str], ...] = (
    ("Click", "click"),
    ("Click-Extra", "click-extra"),
    ("Rich", "rich"),
    ("PyYAML", "PyYAML"),
)

FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def record_prefix(logger_name: str) -> str:
    """Short console tag for a logger name.

    Examples:
        >>> record_prefix("markdown_it.rules_block")
        '[markdown_it]'
        >>> record_prefix("patternbook.patterns.composite")
        '[demo:composite]'
        >>> record_prefix("patternbook.posts.filesystem")
        ''
    """
    if logger_name.startswith(f"{PATTERNS_LOGGER}."):
        return f"[demo:{logger_name.split('.')[2]}]"
    if logger_name == PROJECT_PREFIX or logger_name.startswith(f"{PROJECT_PREFIX}."):
        return ""
    return f"[{logger_name.split('.')[0]}]"


class RecordPrefixFilter(logging.Filter):
    """Sets `record.prefix` from the logger name; never drops a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.prefix = record_prefix(record.name)
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown. Ignored in debug mode, which shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations instead
            of the short record prefix.
        color: Allow ANSI colour (mirrors click-extra's ``--color/--no-color``).

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(RecordPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a bounded buffer in front of a log file.

    The file is truncated when the recorder is created, and its parent
    directory is created if needed. Buffered records reach the file when one
    at `flush_level` or above arrives, when `capacity` is reached, or on close
    if `flush_on_close` is set.

    Args:
        path: Log file the buffer is flushed to.
        capacity: Number of records kept in memory.
        flush_level: Level that triggers a flush.
        flush_on_close: Flush whatever is buffered when the handler closes.

    Returns:
        MemoryHandler: The buffer; its `target` is the underlying FileHandler.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:  # pragma: no cover
        return "<unknown>"


@dataclass(frozen=True)
class StartupReport:
    """What a run was configured with, as logged by `log_startup`.

    `posts_source` says where `posts_dir` came from: ``"--posts-dir"``, the
    environment variable name, or ``"bundled"`` when `posts_dir` is None.
    """

    app_version: str
    console_level: int
    handlers: tuple[str, ...] = ()
    log_path: Path | None = None
    flight_capacity: int | None = None
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)
    posts_dir: Path | None = None
    posts_source: str = "bundled"

    @property
    def flight_recorder(self) -> bool:
        return self.flight_capacity is not None

    def banner(self) -> str:
        return (
            f"PATTERNBOOK {self.app_version} - "
            f"console={logging.getLevelName(self.console_level)}, "
            f"flight-recorder={'ON' if self.flight_recorder else 'OFF'}"
        )


def log_startup(logger: Logger, report: StartupReport) -> None:
    """Log the banner at INFO, then environment and settings at DEBUG."""
    logger.info(report.banner())

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for label, dist in LIBRARIES:
        logger.debug("%s: %s", label, _distribution_version(dist))
    logger.debug("Handlers: %s", list(report.handlers))

    if report.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            report.log_path if report.log_path else "<none>",
            report.flight_capacity,
            report.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in report.logger_levels.items()}
        or "<none>",
    )
    if report.posts_dir is None:
        logger.debug("Posts directory: <bundled>")
    else:
        logger.debug("Posts directory: %s (from %s)", report.posts_dir, report.posts_source)
