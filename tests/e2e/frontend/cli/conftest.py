"""Fixtures for end-to-end tests of the ``leasing`` command."""

import click
import pytest
from click.testing import CliRunner

from leasing.entrypoints.cli.main import leasing
from tests.helpers.log_demo import log_demo

# pylint: disable=redefined-outer-name


def _unregister(group: click.Group, name: str) -> None:
    # Click-Extra keeps its own per-section registries next to `commands`.
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Attach `log-demo` to the ``leasing`` group for one test."""
    leasing.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(leasing, "log-demo")


@pytest.fixture
def runner():
    """A Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated temporary working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def no_matching_env(monkeypatch):
    """Make sure the ambient environment does not pick a path matching rule."""
    monkeypatch.delenv("LEASING_PATH_MATCHING", raising=False)
