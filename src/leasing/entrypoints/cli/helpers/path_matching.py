"""Resolve the ``--matching`` option against the environment default."""

import click

from leasing import config
from leasing.domain.tenancy import PathMatching


def resolve_path_matching(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | None,
) -> PathMatching:
    """Click callback returning the explicit choice or the configured default.

    Raises:
        click.BadParameter: If the option is omitted and `LEASING_PATH_MATCHING`
            holds an unknown value.
    """
    if value is not None:
        return PathMatching(value.lower())
    try:
        return config.get_path_matching()
    except config.InvalidConfigError as exc:
        raise click.BadParameter(str(exc)) from exc
