"""Parse ``-L NAME=LEVEL`` logger overrides.

Values may be given as a repeatable option or as one comma/space separated
string (which is how ``LEASING_LOGGER_LEVELS`` arrives). Library defaults are
applied first so a chatty dependency stays quiet unless explicitly raised.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SPLIT = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SPLIT.split(chunk) if item]


def _parse_item(item: str) -> tuple[str, int]:
    name, sep, level_name = item.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return name.strip(), level


def parse_logger_levels(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a logger->level mapping.

    Args:
        ctx: Click context (unused).
        param: Click parameter (unused).
        value: The raw option value(s).

    Returns:
        `DEFAULT_LIB_LEVELS` updated with the parsed overrides; later items win.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    levels.update(_parse_item(item) for item in _split_items(value))
    return levels
