"""``leasing tenancy``: inspect the tenancy path hierarchy.

Examples
    $ leasing tenancy parent /it/rome
    /it
    $ leasing tenancy children /it /it/rome /fr /it/milan
    /it/rome
    /it/milan
    $ leasing tenancy parents --matching prefix /ab /a /abc
    /a
"""

import click

from leasing.domain.errors import NoParentError
from leasing.domain.tenancy import TenancyPath, children_of, parents_of

from .helpers import resolve_path_matching

matching_option = click.option(
    "--matching",
    type=click.Choice(["segment", "prefix"], case_sensitive=False),
    default=None,
    callback=resolve_path_matching,
    help=(
        "Containment rule. 'segment' compares whole path segments, so /ab is not "
        "below /a; 'prefix' compares raw strings, so it is. "
        "Defaults to LEASING_PATH_MATCHING, or 'segment' if unset."
    ),
)


@click.group()
def tenancy() -> None:
    """Inspect application tenancy paths."""


@tenancy.command()
@click.argument("path")
def parent(path: str) -> None:
    """Print the parent of PATH."""
    try:
        click.echo(TenancyPath(path).parent())
    except NoParentError as exc:
        raise click.ClickException(str(exc)) from exc


@tenancy.command()
@matching_option
@click.argument("path")
@click.argument("candidates", nargs=-1)
def parents(matching, path: str, candidates: tuple[str, ...]) -> None:
    """Print the CANDIDATES that lie above PATH, in the order given."""
    for candidate in parents_of(TenancyPath(path), candidates, matching=matching):
        click.echo(candidate)


@tenancy.command()
@matching_option
@click.argument("path")
@click.argument("candidates", nargs=-1)
def children(matching, path: str, candidates: tuple[str, ...]) -> None:
    """Print the CANDIDATES that lie below PATH, in the order given."""
    for candidate in children_of(TenancyPath(path), candidates, matching=matching):
        click.echo(candidate)
