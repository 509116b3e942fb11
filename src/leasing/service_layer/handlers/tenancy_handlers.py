"""Handlers for application tenancies and tenancy moves."""

import logging
from collections.abc import Callable

from leasing.domain.entities import TenantedEntity
from leasing.domain.events import (
    ApplicationTenancyChanged,
    ApplicationTenancyMovedDown,
    ApplicationTenancyMovedUp,
)
from leasing.domain.tenancy import (
    ROOT_PATH,
    ApplicationTenancy,
    PathMatching,
    TenancyPath,
)
from leasing.interfaces.repositories import (
    AgreementNotFoundError,
    PropertyNotFoundError,
    TenancyNotFoundError,
)
from leasing.interfaces.unit_of_work import AbstractUnitOfWork
from leasing.service_layer import commands
from leasing.service_layer.cascades import cascade_tenancy

logger = logging.getLogger(__name__)

# the root tenancy always exists, whether or not it was ever stored
ROOT_TENANCY = ApplicationTenancy(ROOT_PATH)


def add_application_tenancy(
    cmd: commands.AddApplicationTenancy, uow: AbstractUnitOfWork
) -> None:
    """Add an application tenancy below an existing one (idempotent)."""

    level = TenancyPath(cmd.path)

    with uow:
        if uow.tenancies.find_by_path(cmd.path) is not None:
            logger.debug("AddApplicationTenancy %s: already exists; noop", cmd.path)
            return

        if not level.is_root:
            parent = level.parent()
            if not parent.is_root and uow.tenancies.find_by_path(parent.path) is None:
                raise TenancyNotFoundError(parent.path)

        uow.tenancies.add(ApplicationTenancy(cmd.path, cmd.name))
        uow.commit()


def _find_root_entity(
    uow: AbstractUnitOfWork, kind: commands.EntityKind, reference: str
) -> TenantedEntity:
    if kind is commands.EntityKind.PROPERTY:
        if (prop := uow.properties.find_by_reference(reference)) is None:
            raise PropertyNotFoundError(reference)
        return prop
    if (agreement := uow.agreements.find_by_reference(reference)) is None:
        raise AgreementNotFoundError(reference)
    return agreement


def _known_tenancies(uow: AbstractUnitOfWork) -> list[ApplicationTenancy]:
    stored = uow.tenancies.all()
    if any(t.level.is_root for t in stored):
        return stored
    return [ROOT_TENANCY, *stored]


def _find_target(uow: AbstractUnitOfWork, path: str) -> ApplicationTenancy:
    if (target := uow.tenancies.find_by_path(path)) is not None:
        return target
    if TenancyPath(path).is_root:
        return ROOT_TENANCY
    raise TenancyNotFoundError(path)


def move_down_application_tenancy(
    cmd: commands.MoveDownApplicationTenancy,
    uow: AbstractUnitOfWork,
    path_matching: PathMatching,
) -> None:
    """Move a property or agreement to a tenancy below its current one."""

    with uow:
        entity = _find_root_entity(uow, cmd.kind, cmd.reference)
        target = _find_target(uow, cmd.target_path)
        entity.move_down(target, _known_tenancies(uow), path_matching)
        uow.commit()


def move_up_application_tenancy(
    cmd: commands.MoveUpApplicationTenancy,
    uow: AbstractUnitOfWork,
    path_matching: PathMatching,
) -> None:
    """Move a property or agreement to a tenancy above its current one."""

    with uow:
        entity = _find_root_entity(uow, cmd.kind, cmd.reference)
        target = _find_target(uow, cmd.target_path)
        entity.move_up(target, _known_tenancies(uow), path_matching)
        uow.commit()


def cascade_application_tenancy(
    event: ApplicationTenancyChanged, uow: AbstractUnitOfWork
) -> None:
    """Copy a moved entity's new tenancy path to its dependents."""

    with uow:
        if event.source_type == "Property":
            source = uow.properties.get(event.source_id)
        else:
            source = uow.agreements.get(event.source_id)

        if source is None:
            logger.warning(
                "%s %s vanished before its tenancy could cascade",
                event.source_type,
                event.source_id,
            )
            return

        cascade_tenancy(source)
        uow.commit()


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.AddApplicationTenancy: add_application_tenancy,
    commands.MoveDownApplicationTenancy: move_down_application_tenancy,
    commands.MoveUpApplicationTenancy: move_up_application_tenancy,
}

EVENT_HANDLERS: dict[type, list[Callable[..., None]]] = {
    ApplicationTenancyMovedDown: [cascade_application_tenancy],
    ApplicationTenancyMovedUp: [cascade_application_tenancy],
}
