"""End-to-end tests for the global options of the ``leasing`` command.

Verbosity, per-logger overrides, debug formatting and the flight recorder are
observed by running the test-only `log-demo` subcommand.
"""

import re
from pathlib import Path

import pytest

from leasing.entrypoints.cli.main import leasing
from tests.helpers.log_demo import (
    DEMO_CRITICAL,
    DEMO_ERROR,
    DEMO_WARNING,
    EARLY_DEBUG,
    LATE_DEBUG,
    LIB_DEBUG,
    LIB_INFO,
)

# pylint: disable=unused-argument

LOG_FILE = "flight_recorder.log"


def search(pattern: str, text: str) -> bool:
    """Whether the regex `pattern` occurs anywhere in `text`."""
    return re.search(pattern, text, re.MULTILINE) is not None


def run(runner, *args: str, env: dict[str, str] | None = None):
    """Invoke ``leasing ARGS log-demo`` and check it succeeded."""
    result = runner.invoke(leasing, [*args, "log-demo"], env=env)
    assert result.exit_code == 0, result.output
    return result


def read_log(path: str = LOG_FILE) -> str:
    """Contents of the flight recorder file."""
    return Path(path).read_text(encoding="utf-8")


@pytest.mark.usefixtures("registered_log_demo", "fs")
class TestConsoleVerbosity:
    """-v/-q move the console threshold one level per repetition."""

    @staticmethod
    @pytest.mark.parametrize(
        "args, shown, hidden",
        [
            ((), "WARNING", "INFO"),
            (("-v",), "INFO", "DEBUG"),
            (("-vv",), "DEBUG", None),
            (("-q",), "ERROR", "WARNING"),
            (("-qq",), "CRITICAL", "ERROR"),
        ],
        ids=["default", "v", "vv", "q", "qq"],
    )
    def test_threshold(runner, args, shown, hidden):
        """The level at the threshold is printed, the one below it is not."""
        output = run(runner, *args).output
        assert search(shown, output)
        if hidden is not None:
            assert not search(hidden, output)

    @staticmethod
    def test_verbosity_is_clamped(runner):
        """Extra repetitions past DEBUG change nothing."""
        assert search("DEBUG", run(runner, "-vvvv").output)

    @staticmethod
    @pytest.mark.parametrize(
        "env, args",
        [
            ({}, ("-vv", "-L", "some.thirdparty=INFO")),
            ({"LEASING_LOGGER_LEVELS": "some.thirdparty=INFO"}, ("-vv",)),
        ],
        ids=["cli-flag", "env-var"],
    )
    def test_logger_levels_override(runner, env, args):
        """A per-logger level silences that logger's DEBUG but keeps its INFO."""
        output = run(runner, *args, env=env).output
        assert LIB_DEBUG not in output
        assert LIB_INFO in output
        assert EARLY_DEBUG in output

    @staticmethod
    def test_bad_logger_level_is_a_usage_error(runner):
        """An unknown level name stops the command before it runs."""
        result = runner.invoke(leasing, ["-L", "leasing=LOUD", "log-demo"])
        assert result.exit_code == 2
        assert "Invalid log level: LOUD" in result.output


@pytest.mark.usefixtures("registered_log_demo", "fs")
class TestDebugMode:
    """--debug adds source locations to console records."""

    @staticmethod
    def test_debug_mode_shows_paths(runner):
        """Records carry the emitting file and line."""
        assert search(r"log_demo\.py:\d+\b", run(runner, "--debug").output)

    @staticmethod
    def test_debug_mode_is_off_by_default(runner):
        """Without --debug no source location is printed."""
        assert not search(r"log_demo\.py:\d+\b", run(runner).output)


@pytest.mark.usefixtures("registered_log_demo", "fs")
class TestFlightRecorder:
    """The in-memory buffer and the file it is dumped to."""

    @staticmethod
    def test_dumped_on_warning(runner):
        """A WARNING writes everything buffered so far, at DEBUG granularity."""
        run(runner, "--log-path", LOG_FILE, "-L", "some.thirdparty=INFO")
        content = read_log()
        for message in (EARLY_DEBUG, DEMO_WARNING, DEMO_ERROR, DEMO_CRITICAL, LIB_INFO):
            assert message in content
        # per-logger overrides apply to the recorder too
        assert LIB_DEBUG not in content
        # nothing after the last flush-triggering record
        assert LATE_DEBUG not in content

    @staticmethod
    @pytest.mark.parametrize(
        "env, args",
        [({}, ("--force-flush",)), ({"LEASING_FORCE_FLUSH_FLIGHT_RECORDER": "true"}, ())],
        ids=["cli-flag", "env-var"],
    )
    def test_force_flush_on_exit(runner, env, args):
        """With force-flush the tail of the buffer is written on exit."""
        run(runner, "--log-path", LOG_FILE, *args, env=env)
        assert LATE_DEBUG in read_log()

    @staticmethod
    @pytest.mark.parametrize(
        "env, args",
        [({}, ("--no-flight-recorder",)), ({"LEASING_FLIGHT_RECORDER": "0"}, ())],
        ids=["cli-flag", "env-var"],
    )
    def test_can_be_disabled(runner, env, args):
        """A disabled recorder writes no file at all."""
        run(runner, "--log-path", LOG_FILE, *args, env=env)
        assert not Path(LOG_FILE).exists()

    @staticmethod
    def test_file_is_truncated_between_runs(runner):
        """Each run replaces the previous dump instead of appending to it."""
        run(runner, "--log-path", LOG_FILE)
        first = read_log().splitlines()
        run(runner, "--log-path", LOG_FILE)
        assert len(read_log().splitlines()) == len(first)


@pytest.mark.usefixtures("registered_log_demo", "fs")
def test_startup_summary(runner):
    """The dump starts with the version line and the environment diagnostics."""
    run(
        runner,
        "--log-path",
        "startup.log",
        "--force-flush",
        env={"LEASING_LOGGER_LEVELS": "some.thirdparty=INFO"},
    )
    content = read_log("startup.log")
    for pattern in (
        r"LEASING \d+\.\d+\.\d+: console=WARNING, flight-recorder=ON",
        r"Python: \d+\.\d+\.\d+",
        r"Platform: .+",
        r"PID: \d+",
        r"CWD: .+",
        r"Click-Extra: \d+\.\d+\.\d+",
        r"Handlers: \['RichHandler', 'MemoryHandler'\]",
        r"Flight recorder: path=startup\.log, capacity=2000, flush_on_close=True",
        r"Per-logger overrides: \{'click_extra': 'WARNING', 'some\.thirdparty': 'INFO'\}",
    ):
        assert search(pattern, content), pattern
