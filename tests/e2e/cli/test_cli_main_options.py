"""End-to-end tests for the top-level `patternbook` command's options.

Exercises verbosity flags, logger-level overrides, debug formatting, the
flight recorder and startup logging by invoking the `log-demo` command.
"""

import re
from pathlib import Path

import pytest

from patternbook.entrypoints.cli.main import patternbook

# pylint: disable=unused-argument


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def test_default_shows_warning(registered_log_demo, invoke):
    """Default invocation shows WARNING and above but not INFO."""
    result = invoke("log-demo")
    assert result.exit_code == 0
    assert_in_output("WARNING", result.output)
    assert_not_in_output("INFO", result.output)


def test_verbose_shows_info(registered_log_demo, invoke):
    result = invoke("-v", "log-demo")
    assert result.exit_code == 0
    assert_in_output("INFO", result.output)
    assert_not_in_output("DEBUG", result.output)


def test_vv_shows_debug(registered_log_demo, invoke):
    result = invoke("-vv", "log-demo")
    assert result.exit_code == 0
    assert_in_output("DEBUG", result.output)


def test_quiet_suppresses_warning(registered_log_demo, invoke):
    result = invoke("-q", "log-demo")
    assert result.exit_code == 0
    assert_in_output("ERROR", result.output)
    assert_not_in_output("WARNING", result.output)


def test_qq_leaves_only_critical(registered_log_demo, invoke):
    result = invoke("-qq", "log-demo")
    assert result.exit_code == 0
    assert_in_output("CRITICAL", result.output)
    assert_not_in_output("ERROR", result.output)


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
        ({"PATTERNBOOK_LOGGER_LEVELS": "some.thirdparty=INFO"}, ["-vv"]),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_silences_debug(registered_log_demo, invoke, env, cli_args):
    """Logger-level overrides silence third-party DEBUG while keeping INFO+."""
    result = invoke(*cli_args, "log-demo", env=env)
    assert result.exit_code == 0
    assert_not_in_output("This is a debug-level third-party test message.", result.output)
    assert_in_output("This is an info-level third-party test message.", result.output)


def test_third_party_records_are_prefixed(registered_log_demo, invoke):
    result = invoke("log-demo")
    assert_in_output(r"\[some\] This is a warning-level third-party", result.output)


def test_debug_mode_shows_paths(registered_log_demo, invoke):
    result = invoke("--debug", "log-demo")
    assert result.exit_code == 0
    assert_in_output(r"conftest\.py:\d+\b", result.output)


def test_debug_mode_is_off_by_default(registered_log_demo, invoke):
    result = invoke("log-demo")
    assert result.exit_code == 0
    assert_not_in_output(r"conftest\.py:\d+\b", result.output)


def test_flight_recorder_flush_on_warning(registered_log_demo, invoke):
    """Buffered DEBUG records reach the log file once a WARNING is emitted."""
    result = invoke("-L", "some.thirdparty=INFO", "log-demo")
    assert result.exit_code == 0
    content = Path("latest.log").read_text(encoding="utf-8")
    assert_in_output("This is a debug-level test message.", content)
    assert_not_in_output("This is a debug-level third-party test message.", content)
    assert_in_output("This is an info-level third-party test message.", content)
    assert_in_output("This is a critical-level test message.", content)
    # nothing after the last WARNING is flushed without --force-flush
    assert_not_in_output("This is a final debug-level test message.", content)


def test_flight_recorder_force_flush(registered_log_demo, invoke):
    result = invoke("--force-flush", "log-demo")
    assert result.exit_code == 0
    content = Path("latest.log").read_text(encoding="utf-8")
    assert_in_output("This is a final debug-level test message.", content)


def test_flight_recorder_can_be_disabled(registered_log_demo, runner, fs):
    result = runner.invoke(
        patternbook, ["--log-path", "off.log", "--no-flight-recorder", "log-demo"]
    )
    assert result.exit_code == 0
    assert not Path("off.log").exists()


def test_flight_recorder_truncates_log(registered_log_demo, invoke):
    """The log file is rewritten on every run, not appended to."""
    assert invoke("log-demo").exit_code == 0
    first = Path("latest.log").read_text(encoding="utf-8").count("\n")
    assert invoke("log-demo").exit_code == 0
    second = Path("latest.log").read_text(encoding="utf-8").count("\n")
    assert first == second


def test_startup_logging(registered_log_demo, invoke):
    result = invoke(
        "--force-flush",
        "log-demo",
        env={"PATTERNBOOK_LOGGER_LEVELS": "some.thirdparty=INFO"},
    )
    assert result.exit_code == 0
    content = Path("latest.log").read_text(encoding="utf-8")
    assert_in_output(r"PATTERNBOOK \d+\.\d+\.\d+", content)
    assert_in_output(r"console=WARNING", content)
    assert_in_output(r"flight-recorder=ON", content)
    assert_in_output(r"Python: \d+\.\d+\.\d+", content)
    assert_in_output(r"PyYAML: \d+\.\d+", content)
    assert_in_output(r"Rich: \d+\.\d+", content)
    assert_in_output(
        r"Flight recorder: path=latest\.log, capacity=2000, flush_on_close=True",
        content,
    )
    assert_in_output(
        r"Per-logger overrides: {'markdown_it': 'WARNING', 'some.thirdparty': 'INFO'}",
        content,
    )
    assert_in_output(r"Posts directory: <bundled>", content)


@pytest.mark.parametrize(
    "use_env, source",
    [(False, "--posts-dir"), (True, r"\$PATTERNBOOK_POSTS_DIR")],
    ids=["cli-flag", "env-var"],
)
def test_startup_logging_names_posts_source(invoke, posts_dir, use_env, source):
    if use_env:
        result = invoke(
            "--force-flush", "posts", "list", env={"PATTERNBOOK_POSTS_DIR": str(posts_dir)}
        )
    else:
        result = invoke("--force-flush", "--posts-dir", str(posts_dir), "posts", "list")
    assert result.exit_code == 0, result.output
    content = Path("latest.log").read_text(encoding="utf-8")
    assert_in_output(rf"Posts directory: .*{posts_dir.name} \(from {source}\)", content)


def test_pattern_demo_records_are_prefixed(invoke):
    result = invoke("-vv", "patterns", "demo", "facade")
    assert result.exit_code == 0, result.output
    assert_in_output(r"\[demo:facade\] Order 2 x MUG-01 placed", result.output)
