"""Fixtures and helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits one message per level on a
project logger and on a third-party logger, plus fixtures to register it, get
a CliRunner, and run inside an isolated filesystem.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from patternbook.entrypoints.cli.main import patternbook

# pylint: disable=redefined-outer-name

E2E_ROOT = Path(__file__).parent.parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]  # pylint: disable=unused-argument
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            if not any(marker.name == "e2e" for marker in item.iter_markers()):
                item.add_marker(pytest.mark.e2e)


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("patternbook.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any sections Click-Extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the top-level group for the duration of a test."""
    patternbook.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(patternbook, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Invoke `patternbook` with the flight recorder writing into the sandbox."""

    def _invoke(*args: str, env: dict[str, str] | None = None):
        return runner.invoke(
            patternbook, ["--log-path", "latest.log", *args], env=env
        )

    return _invoke
