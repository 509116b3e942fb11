"""Handlers for leases, agreement roles and lease items."""

import logging
from collections.abc import Callable

from leasing.domain.entities import Agreement, AgreementRole, Lease, LeaseItem
from leasing.domain.value_objects import LeaseItemType
from leasing.interfaces.id_generator import IdGenerator
from leasing.interfaces.repositories import (
    AgreementNotFoundError,
    DuplicateEntityError,
    NotFoundError,
)
from leasing.interfaces.unit_of_work import AbstractUnitOfWork
from leasing.service_layer import commands

# pylint: disable=consider-using-assignment-expr

logger = logging.getLogger(__name__)


def _get_agreement(uow: AbstractUnitOfWork, reference: str) -> Agreement:
    if (agreement := uow.agreements.find_by_reference(reference)) is None:
        raise AgreementNotFoundError(reference)
    return agreement


def _get_lease(uow: AbstractUnitOfWork, reference: str) -> Lease:
    agreement = _get_agreement(uow, reference)
    if not isinstance(agreement, Lease):
        raise NotFoundError("lease", reference)
    return agreement


def _get_role(agreement: Agreement, role_id: str) -> AgreementRole:
    for role in agreement.roles:
        if role.entity_id == role_id:
            return role
    raise NotFoundError("agreement role", role_id)


def _get_item(lease: Lease, item_type: LeaseItemType, sequence: int) -> LeaseItem:
    item = lease.find_item(item_type, sequence)
    if item is None:
        raise NotFoundError("lease item", f"{lease.reference}/{item_type.name}/{sequence}")
    return item


# ============================================================================
#                               Leases
# ============================================================================


def register_lease(
    cmd: commands.RegisterLease,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> None:
    """Register a new lease in the root tenancy."""

    with uow:
        if uow.agreements.find_by_reference(cmd.reference) is not None:
            raise DuplicateEntityError("agreement", cmd.reference)

        lease = Lease(id_generator.new_id(), cmd.reference)
        lease.change_dates(cmd.start_date, cmd.end_date)
        uow.agreements.add(lease)
        uow.commit()


# ============================================================================
#                               Agreement roles
# ============================================================================


def add_agreement_role(cmd: commands.AddAgreementRole, uow: AbstractUnitOfWork) -> None:
    """Add a role to an agreement."""

    with uow:
        agreement = _get_agreement(uow, cmd.agreement_reference)
        if (
            error := agreement.validate_change_dates(cmd.start_date, cmd.end_date)
        ) is not None:
            raise error
        agreement.create_role(cmd.role_type, cmd.party, cmd.start_date, cmd.end_date)
        uow.commit()


def change_agreement_role_dates(
    cmd: commands.ChangeAgreementRoleDates, uow: AbstractUnitOfWork
) -> None:
    """Change both dates of an agreement role."""

    with uow:
        role = _get_role(
            _get_agreement(uow, cmd.agreement_reference), cmd.role_id
        )
        if role.start_date == cmd.start_date and role.end_date == cmd.end_date:
            logger.debug("ChangeAgreementRoleDates %s: no changes; noop", cmd.role_id)
            return
        role.change_dates(cmd.start_date, cmd.end_date)
        uow.commit()


def succeed_agreement_role(
    cmd: commands.SucceedAgreementRole, uow: AbstractUnitOfWork
) -> None:
    """Hand an agreement role over to another party."""

    with uow:
        role = _get_role(
            _get_agreement(uow, cmd.agreement_reference), cmd.role_id
        )
        role.succeeded_by(cmd.party, cmd.start_date, cmd.end_date)
        uow.commit()


def precede_agreement_role(
    cmd: commands.PrecedeAgreementRole, uow: AbstractUnitOfWork
) -> None:
    """Insert an earlier holder of an agreement role."""

    with uow:
        role = _get_role(
            _get_agreement(uow, cmd.agreement_reference), cmd.role_id
        )
        role.preceded_by(cmd.party, cmd.start_date, cmd.end_date)
        uow.commit()


# ============================================================================
#                               Lease items
# ============================================================================


def add_lease_item(cmd: commands.AddLeaseItem, uow: AbstractUnitOfWork) -> None:
    """Add an item to a lease."""

    with uow:
        lease = _get_lease(uow, cmd.lease_reference)
        if (
            error := lease.validate_change_dates(cmd.start_date, cmd.end_date)
        ) is not None:
            raise error
        lease.new_item(cmd.item_type, cmd.start_date, cmd.end_date)
        uow.commit()


def change_lease_item_dates(
    cmd: commands.ChangeLeaseItemDates, uow: AbstractUnitOfWork
) -> None:
    """Change both dates of a lease item."""

    with uow:
        item = _get_item(
            _get_lease(uow, cmd.lease_reference), cmd.item_type, cmd.sequence
        )
        if item.start_date == cmd.start_date and item.end_date == cmd.end_date:
            logger.debug("ChangeLeaseItemDates %s: no changes; noop", item.entity_id)
            return
        item.change_dates(cmd.start_date, cmd.end_date)
        uow.commit()


def succeed_lease_item(cmd: commands.SucceedLeaseItem, uow: AbstractUnitOfWork) -> None:
    """Create the next item in a lease item's timeline."""

    with uow:
        item = _get_item(
            _get_lease(uow, cmd.lease_reference), cmd.item_type, cmd.sequence
        )
        item.succeeded_by(cmd.start_date, cmd.end_date)
        uow.commit()


def precede_lease_item(cmd: commands.PrecedeLeaseItem, uow: AbstractUnitOfWork) -> None:
    """Create an earlier item in a lease item's timeline."""

    with uow:
        item = _get_item(
            _get_lease(uow, cmd.lease_reference), cmd.item_type, cmd.sequence
        )
        item.preceded_by(cmd.start_date, cmd.end_date)
        uow.commit()


def copy_lease_item(cmd: commands.CopyLeaseItem, uow: AbstractUnitOfWork) -> None:
    """Continue a lease item as a new one, closing the original."""

    with uow:
        item = _get_item(
            _get_lease(uow, cmd.lease_reference), cmd.item_type, cmd.sequence
        )
        item.copy(cmd.start_date)
        uow.commit()


def remove_lease_item(cmd: commands.RemoveLeaseItem, uow: AbstractUnitOfWork) -> None:
    """Remove a lease item that has no terms."""

    with uow:
        lease = _get_lease(uow, cmd.lease_reference)
        lease.remove_item(_get_item(lease, cmd.item_type, cmd.sequence))
        uow.commit()


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.RegisterLease: register_lease,
    commands.AddAgreementRole: add_agreement_role,
    commands.ChangeAgreementRoleDates: change_agreement_role_dates,
    commands.SucceedAgreementRole: succeed_agreement_role,
    commands.PrecedeAgreementRole: precede_agreement_role,
    commands.AddLeaseItem: add_lease_item,
    commands.ChangeLeaseItemDates: change_lease_item_dates,
    commands.SucceedLeaseItem: succeed_lease_item,
    commands.PrecedeLeaseItem: precede_lease_item,
    commands.CopyLeaseItem: copy_lease_item,
    commands.RemoveLeaseItem: remove_lease_item,
}
