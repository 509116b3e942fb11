"""Tenancy cascades.

When a root entity moves to another application tenancy, the entities that
depend on it must follow. `TENANCY_CASCADES` maps each concrete entity type to
the functions returning those dependents. Lookup is by exact type: a subclass
that needs cascading gets its own entry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from leasing.domain.entities import Agreement, Lease, Property, TenantedEntity

logger = logging.getLogger(__name__)

DependentsOf = Callable[[Any], Iterable[TenantedEntity]]


def units_of(source: Property) -> Iterable[TenantedEntity]:
    """The units of a property."""
    return list(source.units)


def roles_of(source: Agreement) -> Iterable[TenantedEntity]:
    """The roles of an agreement."""
    return list(source.roles)


def items_of(source: Lease) -> Iterable[TenantedEntity]:
    """The items of a lease."""
    return list(source.items)


TENANCY_CASCADES: dict[type[TenantedEntity], list[DependentsOf]] = {
    Property: [units_of],
    Agreement: [roles_of],
    Lease: [roles_of, items_of],
}


def cascade_tenancy(
    source: TenantedEntity,
    cascades: dict[type[TenantedEntity], list[DependentsOf]] | None = None,
) -> list[TenantedEntity]:
    """Copy the tenancy path of `source` to all of its dependents.

    Args:
        source: The entity whose tenancy changed.
        cascades: Cascade table to use; defaults to `TENANCY_CASCADES`.

    Returns:
        The dependents that were updated, in cascade order.
    """
    table = TENANCY_CASCADES if cascades is None else cascades
    updated: list[TenantedEntity] = []
    for dependents_of in table.get(type(source), []):
        for target in dependents_of(source):
            target.application_tenancy_path = source.application_tenancy_path
            updated.append(target)
    logger.debug(
        "Cascaded tenancy %s from %r to %d dependents",
        source.application_tenancy_path,
        source,
        len(updated),
    )
    return updated
