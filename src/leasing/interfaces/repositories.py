"""Repository interfaces for LEASING.

Repositories hand out already-loaded entities together with their sibling
collections (units of a property, roles of an agreement, items of a lease).
They also remember every entity they handed out, so the unit of work can
collect the domain events those entities raised.
"""

from __future__ import annotations

import abc
from collections.abc import Iterator
from typing import Generic, TypeVar

from leasing.domain.entities import Agreement, Numerator, Property, TenantedEntity
from leasing.domain.tenancy import ApplicationTenancy

E = TypeVar("E", bound=TenantedEntity)


class RepositoryError(Exception):
    """Base class for repository errors."""

    def __init__(self, kind: str, key: str, message: str | None = None) -> None:
        if message is None:
            message = f"{kind} ({key}) repository error"
        super().__init__(message)
        self.kind = kind
        self.key = key


class NotFoundError(RepositoryError, LookupError):
    """Raised when an entity cannot be found."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(kind, key, f"{kind} ({key}) not found")


class DuplicateEntityError(RepositoryError):
    """Raised when adding an entity whose ID or natural key is already taken."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(kind, key, f"{kind} ({key}) already exists")


class TenancyNotFoundError(NotFoundError):
    """Raised when an application tenancy path is unknown."""

    def __init__(self, key: str) -> None:
        super().__init__("tenancy", key)


class PropertyNotFoundError(NotFoundError):
    """Raised when a property cannot be found."""

    def __init__(self, key: str) -> None:
        super().__init__("property", key)


class AgreementNotFoundError(NotFoundError):
    """Raised when an agreement cannot be found."""

    def __init__(self, key: str) -> None:
        super().__init__("agreement", key)


class NumeratorNotFoundError(NotFoundError):
    """Raised when a numerator cannot be found."""

    def __init__(self, key: str) -> None:
        super().__init__("numerator", key)


class ApplicationTenancyRepository(abc.ABC):
    """Contract for the store of application tenancies."""

    @abc.abstractmethod
    def all(self) -> list[ApplicationTenancy]:
        """Return every tenancy, ordered by path."""

    @abc.abstractmethod
    def find_by_path(self, path: str) -> ApplicationTenancy | None:
        """Return the tenancy with the given path, if any."""

    @abc.abstractmethod
    def add(self, tenancy: ApplicationTenancy) -> None:
        """Store a new tenancy.

        Raises:
            DuplicateEntityError: If a tenancy with the same path exists.
        """


class EntityRepository(abc.ABC, Generic[E]):
    """Shared mechanics for entity repositories: get, add and event tracking."""

    def __init__(self) -> None:
        self.seen: set[TenantedEntity] = set()

    def add(self, entity: E) -> None:
        """Store a new entity."""
        self._add(entity)
        self.seen.add(entity)

    def get(self, entity_id: str) -> E | None:
        """Return the entity with the given ID, if any."""
        entity = self._get(entity_id)
        if entity is not None:
            self.seen.add(entity)
        return entity

    def __iter__(self) -> Iterator[E]:
        for entity in self._list():
            self.seen.add(entity)
            yield entity

    @abc.abstractmethod
    def _add(self, entity: E) -> None: ...

    @abc.abstractmethod
    def _get(self, entity_id: str) -> E | None: ...

    @abc.abstractmethod
    def _list(self) -> list[E]: ...


class PropertyRepository(EntityRepository[Property]):
    """Contract for the property store."""

    def find_by_reference(self, reference: str) -> Property | None:
        """Return the property with the given reference, if any."""
        for prop in self:
            if prop.reference == reference:
                return prop
        return None


class AgreementRepository(EntityRepository[Agreement]):
    """Contract for the agreement store (leases included)."""

    def find_by_reference(self, reference: str) -> Agreement | None:
        """Return the agreement with the given reference, if any."""
        for agreement in self:
            if agreement.reference == reference:
                return agreement
        return None


class NumeratorRepository(EntityRepository[Numerator]):
    """Contract for the numerator store."""

    def find_global(self, name: str) -> Numerator | None:
        """Return the unscoped numerator with the given name, if any."""
        for numerator in self:
            if numerator.name == name and not numerator.is_scoped:
                return numerator
        return None

    def find_scoped(
        self, name: str, object_type: str, object_identifier: str
    ) -> Numerator | None:
        """Return the numerator with the given name scoped to an object, if any."""
        for numerator in self:
            if (
                numerator.name == name
                and numerator.object_type == object_type
                and numerator.object_identifier == object_identifier
            ):
                return numerator
        return None
