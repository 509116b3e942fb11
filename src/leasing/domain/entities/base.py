"""Base class for all entities scoped to an application tenancy."""

from __future__ import annotations

import abc
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from leasing.domain.errors import (
    DomainValidationError,
    InvalidMoveError,
    NoHigherLevelsError,
    NoLowerLevelsError,
)
from leasing.domain.events import (
    ApplicationTenancyChanged,
    ApplicationTenancyMovedDown,
    ApplicationTenancyMovedUp,
    DomainEvent,
)
from leasing.domain.tenancy import (
    ROOT_PATH,
    ApplicationTenancy,
    PathMatching,
    TenancyPath,
    children_of,
    parents_of,
)

if TYPE_CHECKING:
    from typing import Self

logger = logging.getLogger(__name__)


class TenantedEntity(abc.ABC):
    """Generic base class for entities that live in an application tenancy.

    Every entity starts in the root tenancy. It can be moved down to one of the
    tenancies below its current one, or up to one above it. Moves enqueue a
    domain event so the service layer can cascade the new path to dependents.
    """

    def __init__(
        self, entity_id: str, application_tenancy_path: str = ROOT_PATH
    ) -> None:
        self.entity_id: str = entity_id
        self.application_tenancy_path: str = application_tenancy_path
        self._pending_events: list[DomainEvent] = []

    @property
    def level(self) -> TenancyPath:
        """The tenancy path this entity is scoped to."""
        return TenancyPath(self.application_tenancy_path)

    # --- Move down ---

    def move_down_choices(
        self,
        tenancies: Sequence[ApplicationTenancy],
        matching: PathMatching = PathMatching.SEGMENT,
    ) -> list[ApplicationTenancy]:
        """Tenancies strictly below the current one."""
        return children_of(self.level, tenancies, matching=matching)

    def validate_move_down(
        self,
        target: ApplicationTenancy,
        tenancies: Sequence[ApplicationTenancy],
        matching: PathMatching = PathMatching.SEGMENT,
    ) -> DomainValidationError | None:
        """Return why `move_down` would fail, or None if it is allowed."""
        choices = self.move_down_choices(tenancies, matching)
        if not choices:
            return NoLowerLevelsError(self.application_tenancy_path, target.path)
        if target not in choices:
            return InvalidMoveError(self.application_tenancy_path, target.path)
        return None

    def move_down(
        self,
        target: ApplicationTenancy,
        tenancies: Sequence[ApplicationTenancy],
        matching: PathMatching = PathMatching.SEGMENT,
    ) -> Self:
        """Move this entity to a tenancy below its current one.

        Raises:
            NoLowerLevelsError: If there is no tenancy below the current one.
            InvalidMoveError: If `target` is not below the current tenancy.
        """
        if (error := self.validate_move_down(target, tenancies, matching)) is not None:
            raise error
        self._change_tenancy(target.path, ApplicationTenancyMovedDown)
        return self

    # --- Move up ---

    def move_up_choices(
        self,
        tenancies: Sequence[ApplicationTenancy],
        matching: PathMatching = PathMatching.SEGMENT,
    ) -> list[ApplicationTenancy]:
        """Tenancies strictly above the current one."""
        return parents_of(self.level, tenancies, matching=matching)

    def validate_move_up(
        self,
        target: ApplicationTenancy,
        tenancies: Sequence[ApplicationTenancy],
        matching: PathMatching = PathMatching.SEGMENT,
    ) -> DomainValidationError | None:
        """Return why `move_up` would fail, or None if it is allowed."""
        choices = self.move_up_choices(tenancies, matching)
        if not choices:
            return NoHigherLevelsError(self.application_tenancy_path, target.path)
        if target not in choices:
            return InvalidMoveError(self.application_tenancy_path, target.path)
        return None

    def move_up(
        self,
        target: ApplicationTenancy,
        tenancies: Sequence[ApplicationTenancy],
        matching: PathMatching = PathMatching.SEGMENT,
    ) -> Self:
        """Move this entity to a tenancy above its current one.

        Raises:
            NoHigherLevelsError: If there is no tenancy above the current one.
            InvalidMoveError: If `target` is not above the current tenancy.
        """
        if (error := self.validate_move_up(target, tenancies, matching)) is not None:
            raise error
        self._change_tenancy(target.path, ApplicationTenancyMovedUp)
        return self

    # --- Plumbing ---

    def _change_tenancy(
        self, new_path: str, event_type: type[ApplicationTenancyChanged]
    ) -> None:
        old_path = self.application_tenancy_path
        self.application_tenancy_path = new_path
        logger.debug(
            "%s %s moved from %s to %s",
            type(self).__name__,
            self.entity_id,
            old_path,
            new_path,
        )
        self._pending_events.append(
            event_type(
                source_id=self.entity_id,
                source_type=type(self).__name__,
                old_path=old_path,
                new_path=new_path,
            )
        )

    def dequeue_uncommitted(self) -> list[DomainEvent]:
        """Dequeue all uncommitted events.

        Returns:
            A list of all uncommitted events since the last call to this method.

        Note: This is NOT thread-safe. It is the caller's responsibility to ensure
        that no other operations are performed on the entity between calls to this
        method.
        """

        uncommitted_events = self._pending_events
        self._pending_events = []
        return uncommitted_events

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.entity_id!r})"
