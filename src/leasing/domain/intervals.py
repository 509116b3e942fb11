"""Date-interval bookkeeping for records that form contiguous timelines.

Agreement roles and lease items carry an inclusive ``[start_date, end_date]``
interval (``end_date`` None means open-ended). Siblings that share a grouping
key form a *timeline*: at most one of them is active on any given day, and a
record created as a successor or predecessor of another abuts it exactly.

The helpers here are composed into the entities rather than inherited. Each
mutating action has a ``validate_*`` twin that returns the reason the action
would fail (or None) without touching any state; the action itself runs the
validator first and raises the returned error, so a failed action never leaves
partial changes behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date
from typing import Generic, Protocol, TypeVar

from leasing.domain.errors import (
    ContiguityError,
    DomainValidationError,
    InvalidIntervalError,
    OverlapError,
)
from leasing.domain.value_objects import ONE_DAY, LocalDateInterval

logger = logging.getLogger(__name__)


class IntervalRecord(Protocol):
    """Capability required from a record taking part in a timeline."""

    start_date: date | None
    end_date: date | None


R = TypeVar("R", bound=IntervalRecord)

SiblingFactory = Callable[[date | None, date | None], R]
"""Creates a sibling record for the given dates and links it to its parent."""


def interval_of(record: IntervalRecord) -> LocalDateInterval:
    """Return the inclusive interval of `record`."""
    return LocalDateInterval(record.start_date, record.end_date)


def timeline_key(record: IntervalRecord) -> tuple[bool, int]:
    """Sort key ordering records by start date descending, None last."""
    start = record.start_date
    return (start is None, -start.toordinal() if start is not None else 0)


class MutableIntervalHelper(Generic[R]):
    """Validated date changes for a single interval record."""

    def __init__(self, record: R) -> None:
        self.record = record

    def default_start_date(self) -> date | None:
        """Suggested start date when prompting for new dates."""
        return self.record.start_date

    def default_end_date(self) -> date | None:
        """Suggested end date when prompting for new dates."""
        return self.record.end_date

    def validate_change_dates(
        self, start_date: date | None, end_date: date | None
    ) -> DomainValidationError | None:
        """Return why `change_dates` would fail, or None if it is allowed."""
        if not LocalDateInterval(start_date, end_date).is_valid:
            return InvalidIntervalError("End date cannot be earlier than start date")
        return None

    def change_dates(self, start_date: date | None, end_date: date | None) -> R:
        """Set both dates on the record. Neighbouring records are not adjusted.

        Raises:
            InvalidIntervalError: If `start_date` is after `end_date`.
        """
        if (error := self.validate_change_dates(start_date, end_date)) is not None:
            raise error
        self.record.start_date = start_date
        self.record.end_date = end_date
        return self.record


class ContiguousIntervalHelper(MutableIntervalHelper[R]):
    """Succession and precession of records within a timeline."""

    # --- Queries ---

    def timeline(
        self,
        siblings: Iterable[R],
        predicate: Callable[[R], bool] | None = None,
    ) -> list[R]:
        """Return the siblings matching `predicate`, latest start first."""
        matching = [s for s in siblings if predicate is None or predicate(s)]
        return sorted(matching, key=timeline_key)

    def predecessor(
        self,
        siblings: Iterable[R],
        predicate: Callable[[R], bool] | None = None,
    ) -> R | None:
        """Return the sibling ending the day before this record starts."""
        start_date = self.record.start_date
        if start_date is None:
            return None
        for sibling in self.timeline(siblings, predicate):
            if sibling is not self.record and sibling.end_date == start_date - ONE_DAY:
                return sibling
        return None

    def successor(
        self,
        siblings: Iterable[R],
        predicate: Callable[[R], bool] | None = None,
    ) -> R | None:
        """Return the sibling starting the day after this record ends."""
        end_date = self.record.end_date
        if end_date is None:
            return None
        for sibling in self.timeline(siblings, predicate):
            if sibling is not self.record and sibling.start_date == end_date + ONE_DAY:
                return sibling
        return None

    # --- Defaults ---

    def default_successor_start_date(self) -> date | None:
        """Suggested start date of a new successor: the day after this ends."""
        end_date = self.record.end_date
        return end_date + ONE_DAY if end_date is not None else None

    def default_predecessor_end_date(self) -> date | None:
        """Suggested end date of a new predecessor: the day before this starts."""
        start_date = self.record.start_date
        return start_date - ONE_DAY if start_date is not None else None

    # --- Succession ---

    def validate_succeeded_by(
        self,
        start_date: date | None,
        end_date: date | None,
        successor: R | None = None,
    ) -> DomainValidationError | None:
        """Return why `succeeded_by` would fail, or None if it is allowed.

        Args:
            start_date: Start date of the proposed successor (required).
            end_date: End date of the proposed successor, None if open-ended.
            successor: The existing successor of this record, if any.
        """
        if start_date is None:
            return InvalidIntervalError("Must specify start date")
        if end_date is not None and start_date > end_date:
            return InvalidIntervalError("End date cannot be earlier than start date")
        record = self.record
        if record.start_date is not None and start_date <= record.start_date:
            return OverlapError("Successor must start after existing")
        if record.end_date is not None and start_date > record.end_date + ONE_DAY:
            return ContiguityError(
                "Successor must start no later than the day after this one ends"
            )
        if successor is not None:
            if end_date is None:
                return OverlapError(
                    "An end date is required because a successor already exists"
                )
            if successor.start_date is not None and end_date >= successor.start_date:
                return OverlapError("Successor must end prior to existing successor")
        return None

    def succeeded_by(
        self,
        start_date: date | None,
        end_date: date | None,
        factory: SiblingFactory[R],
        successor: R | None = None,
    ) -> R:
        """Create a successor and close this record the day before it starts.

        Raises:
            DomainValidationError: If `validate_succeeded_by` reports a problem.
        """
        if (
            error := self.validate_succeeded_by(start_date, end_date, successor)
        ) is not None:
            raise error
        assert start_date is not None
        new_record = factory(start_date, end_date)
        self.record.end_date = start_date - ONE_DAY
        logger.debug(
            "Succeeded %r by %r from %s", self.record, new_record, start_date
        )
        return new_record

    # --- Precession ---

    def validate_preceded_by(
        self,
        start_date: date | None,
        end_date: date | None,
        predecessor: R | None = None,
    ) -> DomainValidationError | None:
        """Return why `preceded_by` would fail, or None if it is allowed.

        Args:
            start_date: Start date of the proposed predecessor, None if open.
            end_date: End date of the proposed predecessor (required).
            predecessor: The existing predecessor of this record, if any.
        """
        if end_date is None:
            return InvalidIntervalError("Must specify end date")
        if start_date is not None and start_date > end_date:
            return InvalidIntervalError("End date cannot be earlier than start date")
        record = self.record
        if record.end_date is not None and end_date >= record.end_date:
            return OverlapError("Predecessor must end before existing")
        if record.start_date is not None and end_date < record.start_date - ONE_DAY:
            return ContiguityError(
                "Predecessor must end no earlier than the day before this one starts"
            )
        if predecessor is not None:
            if start_date is None:
                return OverlapError(
                    "A start date is required because a predecessor already exists"
                )
            if predecessor.end_date is not None and start_date <= predecessor.end_date:
                return OverlapError(
                    "Predecessor must start after existing predecessor"
                )
        return None

    def preceded_by(
        self,
        start_date: date | None,
        end_date: date | None,
        factory: SiblingFactory[R],
        predecessor: R | None = None,
    ) -> R:
        """Create a predecessor and open this record the day after it ends.

        Raises:
            DomainValidationError: If `validate_preceded_by` reports a problem.
        """
        if (
            error := self.validate_preceded_by(start_date, end_date, predecessor)
        ) is not None:
            raise error
        assert end_date is not None
        new_record = factory(start_date, end_date)
        self.record.start_date = end_date + ONE_DAY
        logger.debug("Preceded %r by %r until %s", self.record, new_record, end_date)
        return new_record
