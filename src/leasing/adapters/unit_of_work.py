"""In-memory Unit of Work for LEASING.

Snapshots the shared `InMemoryData` on entry and restores that snapshot on
rollback unless the unit was committed in between, so uncommitted changes
never survive the context.
"""

from __future__ import annotations

import copy
import logging

from leasing.interfaces.unit_of_work import AbstractUnitOfWork

from .memory import (
    InMemoryAgreementRepository,
    InMemoryApplicationTenancyRepository,
    InMemoryData,
    InMemoryNumeratorRepository,
    InMemoryPropertyRepository,
)

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """In-memory Unit of Work."""

    def __init__(self, data: InMemoryData | None = None) -> None:
        self.data = data if data is not None else InMemoryData()
        self._snapshot: InMemoryData | None = None
        self.commits = 0
        self._build_repositories()

    def _build_repositories(self) -> None:
        self.tenancies = InMemoryApplicationTenancyRepository(self.data)
        self.properties = InMemoryPropertyRepository(self.data)
        self.agreements = InMemoryAgreementRepository(self.data)
        self.numerators = InMemoryNumeratorRepository(self.data)

    def __enter__(self):
        self._snapshot = copy.deepcopy(self.data)
        self._build_repositories()
        return super().__enter__()

    def commit(self):
        self._snapshot = None
        self.commits += 1
        logger.debug("Committed unit of work (%d commits)", self.commits)

    def rollback(self):
        if self._snapshot is not None:
            self.data.restore(self._snapshot)
            self._snapshot = None
