"""PATTERNBOOK CLI entry point.

Defines the top-level ``patternbook`` command (via Click-Extra) and registers
its subcommand groups.

Currently available groups
- ``patternbook posts``   : list, show and check the blog posts.
- ``patternbook patterns``: list the covered patterns and run their examples.

Notes
- The CLI version is sourced from `patternbook.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The resolved posts directory is stored on ``ctx.obj["posts_dir"]`` for the
  subcommands.

Examples
    $ patternbook --version
    $ patternbook posts list
    $ patternbook patterns demo composite
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from click.core import ParameterSource
from platformdirs import user_log_dir

from patternbook import __version__, config
from patternbook.logging import (
    StartupReport,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers import hyperlink, parse_log_level
from .patterns import patterns as patterns_group
from .posts import posts as posts_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """PATTERNBOOK command-line interface.

    Browse the design-pattern blog posts, check their front matter, and run
    the Python example that accompanies each pattern.
    """

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Patterns: " + hyperlink("https://refactoring.guru/design-patterns"),
        "  YAML    : " + hyperlink("https://yaml.org/spec/1.2.2/"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("patternbook", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="PATTERNBOOK_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PATTERNBOOK_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on clean exit if "
        "--force-flush is set. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="PATTERNBOOK_LOGGER_LEVELS",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level, so it applies to BOTH console and flight-recorder. "
        "Repeatable (e.g. -L markdown_it=INFO -L patternbook.framework=DEBUG) "
        "or via PATTERNBOOK_LOGGER_LEVELS (comma/space list)."
    ),
    default=("markdown_it=WARNING",),
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--posts-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=config.POSTS_DIR_ENV,
    show_envvar=True,
    help="Directory of Markdown posts to read (defaults to the bundled posts).",
    default=None,
)
@clickx.pass_context
def patternbook(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    posts_dir: Path | None,
) -> None:
    """PATTERNBOOK command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) resolve where posts come from
    try:
        resolved_posts_dir = config.get_posts_dir(posts_dir)
    except config.PostsDirNotFoundError as e:
        raise click.BadParameter(str(e), param_hint="--posts-dir") from e
    ctx.ensure_object(dict)
    ctx.obj["posts_dir"] = resolved_posts_dir

    # 6) startup info
    posts_source = "bundled"
    if posts_dir is not None:
        source = ctx.get_parameter_source("posts_dir")
        posts_source = (
            f"${config.POSTS_DIR_ENV}"
            if source is ParameterSource.ENVIRONMENT
            else "--posts-dir"
        )
    log_startup(
        logger,
        StartupReport(
            app_version=__version__,
            console_level=level,
            handlers=tuple(type(h).__name__ for h in handlers),
            log_path=log_path,
            flight_capacity=flight_recorder_capacity if flight_recorder else None,
            force_flush=force_flush_flight_recorder,
            logger_levels=logger_levels,
            posts_dir=resolved_posts_dir if posts_dir is not None else None,
            posts_source=posts_source,
        ),
    )

    # 7) flush and close handlers once the command returns
    ctx.call_on_close(logging.shutdown)


patternbook.add_command(posts_group)
patternbook.add_command(patterns_group)
