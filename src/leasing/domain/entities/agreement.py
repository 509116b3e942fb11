"""Agreements and the roles parties play in them."""

from __future__ import annotations

import logging
from datetime import date

from leasing.domain.errors import (
    DomainValidationError,
    DuplicatePartyError,
    DuplicateRoleError,
)
from leasing.domain.intervals import (
    ContiguousIntervalHelper,
    MutableIntervalHelper,
    interval_of,
    timeline_key,
)
from leasing.domain.tenancy import ROOT_PATH
from leasing.domain.value_objects import (
    AgreementRoleType,
    AgreementType,
    LocalDateInterval,
    Party,
)

from .base import TenantedEntity

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments,too-many-positional-arguments


class Agreement(TenantedEntity):
    """An agreement between parties, valid over an optional date interval."""

    def __init__(
        self,
        entity_id: str,
        reference: str,
        agreement_type: AgreementType,
        start_date: date | None = None,
        end_date: date | None = None,
        application_tenancy_path: str = ROOT_PATH,
    ) -> None:
        super().__init__(entity_id, application_tenancy_path)
        self.reference = reference
        self.agreement_type = agreement_type
        self.start_date = start_date
        self.end_date = end_date
        self.roles: list[AgreementRole] = []
        self._role_counter = 0
        self._dates = MutableIntervalHelper(self)

    @property
    def interval(self) -> LocalDateInterval:
        """The inclusive interval of the agreement."""
        return interval_of(self)

    @property
    def effective_interval(self) -> LocalDateInterval:
        """The interval over which the agreement is in force."""
        return self.interval

    def validate_change_dates(
        self, start_date: date | None, end_date: date | None
    ) -> DomainValidationError | None:
        """Return why `change_dates` would fail, or None."""
        return self._dates.validate_change_dates(start_date, end_date)

    def change_dates(self, start_date: date | None, end_date: date | None) -> Agreement:
        """Change the agreement's own dates."""
        self._dates.change_dates(start_date, end_date)
        return self

    # --- Roles ---

    def create_role(
        self,
        role_type: AgreementRoleType,
        party: Party,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> AgreementRole:
        """Create a role for `party` in this agreement."""
        self._role_counter += 1
        role = AgreementRole(
            entity_id=f"{self.entity_id}/roles/{self._role_counter}",
            agreement=self,
            party=party,
            role_type=role_type,
            start_date=start_date,
            end_date=end_date,
        )
        self.roles.append(role)
        logger.debug("Created %r for %s in %s", role, party.reference, self.reference)
        return role

    def roles_of_type(self, role_type: AgreementRoleType) -> list[AgreementRole]:
        """All roles of the given type, latest start first."""
        return sorted(
            (r for r in self.roles if r.role_type == role_type), key=timeline_key
        )

    def find_role(
        self, role_type: AgreementRoleType, on: date | None = None
    ) -> AgreementRole | None:
        """The role of the given type active on `on` (today by default)."""
        on = on or date.today()
        for role in self.roles_of_type(role_type):
            if role.interval.contains(on):
                return role
        return None


class AgreementRole(TenantedEntity):
    """A party playing a role in an agreement over a date interval.

    Roles of one type within one agreement form a contiguous timeline.
    """

    def __init__(
        self,
        entity_id: str,
        agreement: Agreement,
        party: Party,
        role_type: AgreementRoleType,
        start_date: date | None = None,
        end_date: date | None = None,
        external_reference: str | None = None,
    ) -> None:
        super().__init__(entity_id, agreement.application_tenancy_path)
        self.agreement = agreement
        self.party = party
        self.role_type = role_type
        self.start_date = start_date
        self.end_date = end_date
        self.external_reference = external_reference
        self._helper: ContiguousIntervalHelper[AgreementRole] = (
            ContiguousIntervalHelper(self)
        )

    def change_external_reference(self, external_reference: str | None) -> AgreementRole:
        """Change the external reference of this role."""
        self.external_reference = external_reference
        return self

    # --- Interval ---

    @property
    def interval(self) -> LocalDateInterval:
        """The inclusive interval of the role."""
        return interval_of(self)

    @property
    def effective_interval(self) -> LocalDateInterval | None:
        """The role's interval clipped to the agreement's, or None if disjoint."""
        return self.interval.overlap(self.agreement.effective_interval)

    def is_active_on(self, on: date) -> bool:
        """Whether the role is active on the given date."""
        return self.interval.contains(on)

    def is_current(self, today: date | None = None) -> bool:
        """Whether the role is active today."""
        return self.is_active_on(today or date.today())

    def default_start_date(self) -> date | None:
        """Suggested start date for `change_dates`."""
        return self._helper.default_start_date()

    def default_end_date(self) -> date | None:
        """Suggested end date for `change_dates`."""
        return self._helper.default_end_date()

    def validate_change_dates(
        self, start_date: date | None, end_date: date | None
    ) -> DomainValidationError | None:
        """Return why `change_dates` would fail, or None."""
        return self._helper.validate_change_dates(start_date, end_date)

    def change_dates(
        self, start_date: date | None, end_date: date | None
    ) -> AgreementRole:
        """Change both dates of this role."""
        return self._helper.change_dates(start_date, end_date)

    # --- Timeline ---

    def _matches_type(self, role: AgreementRole) -> bool:
        return role.role_type == self.role_type

    @property
    def predecessor(self) -> AgreementRole | None:
        """The role of the same type ending the day before this one starts."""
        return self._helper.predecessor(self.agreement.roles, self._matches_type)

    @property
    def successor(self) -> AgreementRole | None:
        """The role of the same type starting the day after this one ends."""
        return self._helper.successor(self.agreement.roles, self._matches_type)

    @property
    def timeline(self) -> list[AgreementRole]:
        """All roles of the same type in this agreement, latest start first."""
        return self._helper.timeline(self.agreement.roles, self._matches_type)

    def _sibling_factory(self, party: Party):
        def new_role(start_date: date | None, end_date: date | None) -> AgreementRole:
            return self.agreement.create_role(
                self.role_type, party, start_date, end_date
            )

        return new_role

    # --- Succession ---

    def default_successor_start_date(self) -> date | None:
        """Suggested start date for `succeeded_by`."""
        return self._helper.default_successor_start_date()

    def validate_succeeded_by(
        self, party: Party, start_date: date | None, end_date: date | None
    ) -> DomainValidationError | None:
        """Return why `succeeded_by` would fail, or None."""
        successor = self.successor
        if (
            reason := self._helper.validate_succeeded_by(start_date, end_date, successor)
        ) is not None:
            return reason
        if party == self.party:
            return DuplicatePartyError(
                "Successor's party cannot be the same as this object's party"
            )
        if successor is not None and party == successor.party:
            return DuplicateRoleError(
                "Successor's party cannot be the same as that of existing successor"
            )
        return None

    def succeeded_by(
        self, party: Party, start_date: date | None, end_date: date | None = None
    ) -> AgreementRole:
        """Hand this role over to `party` from `start_date`.

        Raises:
            DomainValidationError: If `validate_succeeded_by` reports a problem.
        """
        if (error := self.validate_succeeded_by(party, start_date, end_date)) is not None:
            raise error
        return self._helper.succeeded_by(
            start_date, end_date, self._sibling_factory(party), self.successor
        )

    # --- Precession ---

    def default_predecessor_end_date(self) -> date | None:
        """Suggested end date for `preceded_by`."""
        return self._helper.default_predecessor_end_date()

    def validate_preceded_by(
        self, party: Party, start_date: date | None, end_date: date | None
    ) -> DomainValidationError | None:
        """Return why `preceded_by` would fail, or None."""
        predecessor = self.predecessor
        if (
            reason := self._helper.validate_preceded_by(
                start_date, end_date, predecessor
            )
        ) is not None:
            return reason
        if party == self.party:
            return DuplicatePartyError(
                "Predecessor's party cannot be the same as this object's party"
            )
        if predecessor is not None and party == predecessor.party:
            return DuplicateRoleError(
                "Predecessor's party cannot be the same as that of existing predecessor"
            )
        return None

    def preceded_by(
        self, party: Party, start_date: date | None, end_date: date | None
    ) -> AgreementRole:
        """Let `party` play this role until `end_date`, before this role starts.

        Raises:
            DomainValidationError: If `validate_preceded_by` reports a problem.
        """
        if (error := self.validate_preceded_by(party, start_date, end_date)) is not None:
            raise error
        return self._helper.preceded_by(
            start_date, end_date, self._sibling_factory(party), self.predecessor
        )
