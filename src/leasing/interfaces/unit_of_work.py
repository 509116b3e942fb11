"""Unit of Work interface for LEASING.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the repositories and abstract commit/rollback methods.
"""

from __future__ import annotations

import abc
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .repositories import (
    AgreementRepository,
    ApplicationTenancyRepository,
    EntityRepository,
    NumeratorRepository,
    PropertyRepository,
)

if TYPE_CHECKING:
    from leasing.domain.events import DomainEvent


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    tenancies: ApplicationTenancyRepository
    properties: PropertyRepository
    agreements: AgreementRepository
    numerators: NumeratorRepository

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    def _entity_repositories(self) -> list[EntityRepository]:
        return [
            repo
            for repo in (
                getattr(self, "properties", None),
                getattr(self, "agreements", None),
                getattr(self, "numerators", None),
            )
            if repo is not None
        ]

    def collect_new_events(self) -> Iterator[DomainEvent]:
        """Drain the pending domain events of every entity handed out so far."""
        for repo in self._entity_repositories():
            for entity in list(repo.seen):
                yield from entity.dequeue_uncommitted()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
