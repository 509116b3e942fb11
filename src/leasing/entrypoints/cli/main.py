"""The ``leasing`` command.

Built on Click-Extra, which contributes ``--color``, ``--time`` and
``--version``. The group callback sets up logging for every subcommand:
Rich console output filtered by -v/-q, plus the flight recorder that keeps
recent DEBUG records in memory and writes them out when something goes wrong.

Subcommands
- ``leasing tenancy``: parent/parents/children queries on tenancy paths.

Examples
    $ leasing --version
    $ leasing -vv tenancy parent /it/rome
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from leasing import __version__
from leasing.logging import configure_logging, console_level, log_startup

from .helpers import parse_logger_levels
from .tenancy import tenancy as tenancy_group

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("leasing", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """LEASING command-line interface.

    Tools around a real-estate lease management kernel: hierarchical
    application tenancies that scope who sees which property, lease or
    numerator, and contiguous timelines of agreement roles and lease items.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("Environment:", fg="blue", bold=True, underline=True),
        "  LEASING_PATH_MATCHING  segment (default) or prefix",
        "  LEASING_LOG_PATH       flight recorder file",
        "  LEASING_LOGGER_LEVELS  NAME=LEVEL overrides, comma or space separated",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    epilog=EPILOG,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show one more level of console logging per repetition (-v INFO, -vv DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show one less level of console logging per repetition (-q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps, logger names and source lines.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="LEASING_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="LEASING_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of records the flight recorder holds.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer recent records at DEBUG, whatever -v/-q say, and write them to "
        "--log-path as soon as a WARNING or worse is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_logger_levels,
    envvar="LEASING_LOGGER_LEVELS",
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum LEVEL for the logger NAME, as NAME=LEVEL, for the console and "
        "the flight recorder alike (e.g. -L leasing.domain=INFO)."
    ),
)
@clickx.pass_context
def leasing(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """LEASING command-line interface."""
    level = console_level(verbose_count, quiet_count)
    capacity = flight_recorder_capacity if flight_recorder else None

    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_capacity=capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=capacity,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # flushes the flight recorder once the subcommand has returned
    ctx.call_on_close(logging.shutdown)


leasing.add_command(tenancy_group)
