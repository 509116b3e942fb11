"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True, slots=True)
class LocalDateInterval:
    """An inclusive date interval; either bound may be open (None)."""

    start_date: date | None = None
    end_date: date | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the interval does not start after it ends."""
        return (
            self.start_date is None
            or self.end_date is None
            or self.start_date <= self.end_date
        )

    @property
    def end_date_excluding(self) -> date | None:
        """The day after the inclusive end date, or None if open-ended."""
        return self.end_date + ONE_DAY if self.end_date is not None else None

    def contains(self, day: date) -> bool:
        """Whether `day` falls inside the interval."""
        if self.start_date is not None and day < self.start_date:
            return False
        if self.end_date is not None and day > self.end_date:
            return False
        return True

    def overlaps(self, other: LocalDateInterval) -> bool:
        """Whether the two intervals share at least one day."""
        return self.overlap(other) is not None

    def overlap(self, other: LocalDateInterval) -> LocalDateInterval | None:
        """Return the intersection of the two intervals, or None if disjoint."""
        start = _latest(self.start_date, other.start_date)
        end = _earliest(self.end_date, other.end_date)
        if start is not None and end is not None and start > end:
            return None
        return LocalDateInterval(start, end)


def _latest(a: date | None, b: date | None) -> date | None:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


def _earliest(a: date | None, b: date | None) -> date | None:
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


@dataclass(frozen=True, slots=True)
class Party:
    """A person or organisation that can play a role in an agreement."""

    reference: str
    name: str = ""


class AgreementType(Enum):
    """Enumeration of agreement types."""

    LEASE = "Lease"
    BANK_MANDATE = "Bank Mandate"


@dataclass(frozen=True, slots=True)
class AgreementRoleType:
    """The role a party plays in an agreement (e.g. tenant, landlord)."""

    title: str
    applies_to: AgreementType = AgreementType.LEASE


class LeaseItemType(Enum):
    """Enumeration of lease item types."""

    RENT = "Rent"
    SERVICE_CHARGE = "Service Charge"
    TURNOVER_RENT = "Turnover Rent"
    RENTAL_FEE = "Rental Fee"
    DISCOUNT = "Discount"
    DEPOSIT = "Deposit"
    TAX = "Tax"


class LeaseItemStatus(Enum):
    """Enumeration of lease item statuses."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
