"""Leases, their items and the terms attached to those items.

Term valuation and invoicing are not modelled here: a `LeaseTerm` only marks
that an item has dependent data, which blocks the item's removal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from leasing.domain.errors import (
    DomainValidationError,
    InvalidIntervalError,
    InvalidTransitionError,
    RemovalBlockedError,
)
from leasing.domain.intervals import ContiguousIntervalHelper, interval_of
from leasing.domain.tenancy import ROOT_PATH
from leasing.domain.value_objects import (
    ONE_DAY,
    AgreementType,
    LeaseItemStatus,
    LeaseItemType,
    LocalDateInterval,
)

from .agreement import Agreement
from .base import TenantedEntity

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments,too-many-positional-arguments


@dataclass(slots=True)
class LeaseTerm:
    """A dated term of a lease item."""

    sequence: int
    start_date: date | None
    end_date: date | None = None

    @property
    def interval(self) -> LocalDateInterval:
        """The inclusive interval of the term."""
        return interval_of(self)


class Lease(Agreement):
    """A lease agreement holding a collection of lease items."""

    def __init__(
        self,
        entity_id: str,
        reference: str,
        start_date: date | None = None,
        end_date: date | None = None,
        application_tenancy_path: str = ROOT_PATH,
    ) -> None:
        super().__init__(
            entity_id,
            reference,
            AgreementType.LEASE,
            start_date,
            end_date,
            application_tenancy_path,
        )
        self.items: list[LeaseItem] = []

    def next_item_sequence(self, item_type: LeaseItemType) -> int:
        """The sequence number the next item of `item_type` will receive."""
        sequences = [i.sequence for i in self.items if i.item_type is item_type]
        return max(sequences, default=0) + 1

    def new_item(
        self,
        item_type: LeaseItemType,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> LeaseItem:
        """Create an item of `item_type` with the next free sequence number."""
        sequence = self.next_item_sequence(item_type)
        item = LeaseItem(
            entity_id=f"{self.entity_id}/items/{item_type.name}/{sequence}",
            lease=self,
            item_type=item_type,
            sequence=sequence,
            start_date=start_date,
            end_date=end_date,
        )
        self.items.append(item)
        logger.debug("Created %r in lease %s", item, self.reference)
        return item

    def find_item(self, item_type: LeaseItemType, sequence: int) -> LeaseItem | None:
        """The item with the given type and sequence, if any."""
        for item in self.items:
            if item.item_type is item_type and item.sequence == sequence:
                return item
        return None

    def remove_item(self, item: LeaseItem) -> None:
        """Remove `item` from this lease.

        Raises:
            RemovalBlockedError: If the item still has terms.
        """
        if (error := item.validate_remove()) is not None:
            raise error
        self.items.remove(item)
        logger.debug("Removed %r from lease %s", item, self.reference)


class LeaseItem(TenantedEntity):
    """A typed, sequenced, dated item of a lease (rent, service charge...).

    Items of one type within one lease form a contiguous timeline.
    """

    def __init__(
        self,
        entity_id: str,
        lease: Lease,
        item_type: LeaseItemType,
        sequence: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> None:
        super().__init__(entity_id, lease.application_tenancy_path)
        self.lease = lease
        self.item_type = item_type
        self.sequence = sequence
        self.start_date = start_date
        self.end_date = end_date
        self.status = LeaseItemStatus.ACTIVE
        self.terms: list[LeaseTerm] = []
        self._helper: ContiguousIntervalHelper[LeaseItem] = ContiguousIntervalHelper(
            self
        )

    # --- Interval ---

    @property
    def interval(self) -> LocalDateInterval:
        """The inclusive interval of the item."""
        return interval_of(self)

    @property
    def effective_interval(self) -> LocalDateInterval | None:
        """The item's interval clipped to the lease's, or None if disjoint."""
        return self.interval.overlap(self.lease.effective_interval)

    def is_active_on(self, on: date) -> bool:
        """Whether the item is in force on the given date."""
        effective = self.effective_interval
        return effective is not None and effective.contains(on)

    def validate_change_dates(
        self, start_date: date | None, end_date: date | None
    ) -> DomainValidationError | None:
        """Return why `change_dates` would fail, or None."""
        return self._helper.validate_change_dates(start_date, end_date)

    def change_dates(self, start_date: date | None, end_date: date | None) -> LeaseItem:
        """Change both dates of this item."""
        return self._helper.change_dates(start_date, end_date)

    def default_termination_date(self) -> date | None:
        """Suggested end date for `terminate`: the lease's end date."""
        return self.lease.end_date

    def terminate(self, end_date: date) -> LeaseItem:
        """End this item on `end_date`, keeping its start date."""
        return self.change_dates(self.start_date, end_date)

    def validate_copy(self, start_date: date | None) -> DomainValidationError | None:
        """Return why `copy` would fail, or None."""
        if start_date is None:
            return InvalidIntervalError("A copied lease item needs a start date")
        if not self.interval.contains(start_date):
            return InvalidIntervalError(
                f"Copy start date {start_date} lies outside lease item {self.entity_id}"
            )
        return self.validate_change_dates(self.start_date, start_date - ONE_DAY)

    def copy(self, start_date: date) -> LeaseItem:
        """Continue this item as a new item of the same type from `start_date`.

        The terms in force on `start_date` are copied to the new item, and this
        item is closed the day before the new one starts.

        Raises:
            InvalidIntervalError: If `start_date` is missing, outside this item,
                or equal to its start date.
        """
        if (error := self.validate_copy(start_date)) is not None:
            raise error
        new_item = self.lease.new_item(self.item_type, start_date)
        self._copy_terms(start_date, new_item)
        self.change_dates(self.start_date, start_date - ONE_DAY)
        logger.debug("Copied %r to %r from %s", self, new_item, start_date)
        return new_item

    # --- Status ---

    def suspend(self, reason: str) -> LeaseItem:
        """Suspend an active item.

        Raises:
            InvalidTransitionError: If the item is already suspended.
        """
        if self.status is LeaseItemStatus.SUSPENDED:
            raise InvalidTransitionError(f"Lease item {self.entity_id} is already suspended.")
        self.status = LeaseItemStatus.SUSPENDED
        logger.info("Suspended %r: %s", self, reason)
        return self

    def resume(self, reason: str) -> LeaseItem:
        """Resume a suspended item.

        Raises:
            InvalidTransitionError: If the item is not suspended.
        """
        if self.status is not LeaseItemStatus.SUSPENDED:
            raise InvalidTransitionError(f"Lease item {self.entity_id} is not suspended.")
        self.status = LeaseItemStatus.ACTIVE
        logger.info("Resumed %r: %s", self, reason)
        return self

    # --- Terms ---

    def default_term_start_date(self) -> date | None:
        """Suggested start date of a new term."""
        if not self.terms:
            return self.start_date
        last = self.terms[-1]
        return last.end_date + ONE_DAY if last.end_date is not None else None

    def new_term(self, start_date: date | None, end_date: date | None = None) -> LeaseTerm:
        """Attach a new term to this item."""
        term = LeaseTerm(len(self.terms) + 1, start_date, end_date)
        self.terms.append(term)
        return term

    def _copy_terms(self, on: date, new_item: LeaseItem) -> None:
        # the first copy stays open-ended; later ones keep their own end date
        copied = [term for term in self.terms if term.interval.contains(on)]
        for index, term in enumerate(copied):
            new_item.new_term(term.start_date, term.end_date if index else None)

    def validate_remove(self) -> DomainValidationError | None:
        """Return why this item cannot be removed, or None."""
        if self.terms:
            return RemovalBlockedError("Cannot remove a lease item that has terms")
        return None

    # --- Timeline ---

    def _matches_type(self, item: LeaseItem) -> bool:
        return item.item_type is self.item_type

    @property
    def predecessor(self) -> LeaseItem | None:
        """The item of the same type ending the day before this one starts."""
        return self._helper.predecessor(self.lease.items, self._matches_type)

    @property
    def successor(self) -> LeaseItem | None:
        """The item of the same type starting the day after this one ends."""
        return self._helper.successor(self.lease.items, self._matches_type)

    @property
    def timeline(self) -> list[LeaseItem]:
        """All items of the same type in this lease, latest start first."""
        return self._helper.timeline(self.lease.items, self._matches_type)

    def _new_sibling(self, start_date: date | None, end_date: date | None) -> LeaseItem:
        return self.lease.new_item(self.item_type, start_date, end_date)

    def default_successor_start_date(self) -> date | None:
        """Suggested start date for `succeeded_by`."""
        return self._helper.default_successor_start_date()

    def validate_succeeded_by(
        self, start_date: date | None, end_date: date | None
    ) -> DomainValidationError | None:
        """Return why `succeeded_by` would fail, or None."""
        return self._helper.validate_succeeded_by(start_date, end_date, self.successor)

    def succeeded_by(
        self, start_date: date | None, end_date: date | None = None
    ) -> LeaseItem:
        """Create the next item of this type and close this one before it."""
        return self._helper.succeeded_by(
            start_date, end_date, self._new_sibling, self.successor
        )

    def default_predecessor_end_date(self) -> date | None:
        """Suggested end date for `preceded_by`."""
        return self._helper.default_predecessor_end_date()

    def validate_preceded_by(
        self, start_date: date | None, end_date: date | None
    ) -> DomainValidationError | None:
        """Return why `preceded_by` would fail, or None."""
        return self._helper.validate_preceded_by(start_date, end_date, self.predecessor)

    def preceded_by(self, start_date: date | None, end_date: date | None) -> LeaseItem:
        """Create an earlier item of this type and open this one after it."""
        return self._helper.preceded_by(
            start_date, end_date, self._new_sibling, self.predecessor
        )
