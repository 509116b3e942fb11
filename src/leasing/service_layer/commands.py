"""Module defining Commands."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from leasing.domain.value_objects import AgreementRoleType, LeaseItemType, Party

# pylint: disable=too-many-instance-attributes


class EntityKind(Enum):
    """The kinds of root entity a tenancy move can target."""

    PROPERTY = "property"
    AGREEMENT = "agreement"


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# --- Tenancies ---


@dataclass(frozen=True)
class AddApplicationTenancy(Command):
    """Command to add an application tenancy."""

    path: str
    name: str = ""


@dataclass(frozen=True)
class MoveDownApplicationTenancy(Command):
    """Command to move an entity to a tenancy below its current one."""

    kind: EntityKind
    reference: str
    target_path: str


@dataclass(frozen=True)
class MoveUpApplicationTenancy(Command):
    """Command to move an entity to a tenancy above its current one."""

    kind: EntityKind
    reference: str
    target_path: str


# --- Properties ---


@dataclass(frozen=True)
class RegisterProperty(Command):
    """Command to register a property and its units."""

    reference: str
    name: str = ""
    unit_references: tuple[str, ...] = ()


# --- Agreements ---


@dataclass(frozen=True)
class RegisterLease(Command):
    """Command to register a lease."""

    reference: str
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class AddAgreementRole(Command):
    """Command to add a role to an agreement."""

    agreement_reference: str
    role_type: AgreementRoleType
    party: Party
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class ChangeAgreementRoleDates(Command):
    """Command to change both dates of an agreement role."""

    agreement_reference: str
    role_id: str
    start_date: date | None
    end_date: date | None


@dataclass(frozen=True)
class SucceedAgreementRole(Command):
    """Command to hand an agreement role over to another party."""

    agreement_reference: str
    role_id: str
    party: Party
    start_date: date
    end_date: date | None = None


@dataclass(frozen=True)
class PrecedeAgreementRole(Command):
    """Command to insert an earlier holder of an agreement role."""

    agreement_reference: str
    role_id: str
    party: Party
    start_date: date | None
    end_date: date


# --- Lease items ---


@dataclass(frozen=True)
class AddLeaseItem(Command):
    """Command to add an item to a lease."""

    lease_reference: str
    item_type: LeaseItemType
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class ChangeLeaseItemDates(Command):
    """Command to change both dates of a lease item."""

    lease_reference: str
    item_type: LeaseItemType
    sequence: int
    start_date: date | None
    end_date: date | None


@dataclass(frozen=True)
class SucceedLeaseItem(Command):
    """Command to create the next item of a lease item's timeline."""

    lease_reference: str
    item_type: LeaseItemType
    sequence: int
    start_date: date
    end_date: date | None = None


@dataclass(frozen=True)
class PrecedeLeaseItem(Command):
    """Command to create an earlier item of a lease item's timeline."""

    lease_reference: str
    item_type: LeaseItemType
    sequence: int
    start_date: date | None
    end_date: date


@dataclass(frozen=True)
class CopyLeaseItem(Command):
    """Command to continue a lease item as a new item from a start date."""

    lease_reference: str
    item_type: LeaseItemType
    sequence: int
    start_date: date


@dataclass(frozen=True)
class RemoveLeaseItem(Command):
    """Command to remove a lease item that has no terms."""

    lease_reference: str
    item_type: LeaseItemType
    sequence: int


# --- Numerators ---


@dataclass(frozen=True)
class CreateNumerator(Command):
    """Command to create a global or scoped numerator (find-or-create)."""

    name: str
    format: str
    last_increment: int | None = None
    object_type: str | None = None
    object_identifier: str | None = None
