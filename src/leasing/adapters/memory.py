"""In-memory repositories for LEASING.

Used by tests, the CLI and anywhere a real persistence collaborator is not
wired in. All repositories read and write a single shared `InMemoryData`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from leasing.domain.entities import Agreement, Numerator, Property
from leasing.domain.tenancy import ApplicationTenancy
from leasing.interfaces.repositories import (
    AgreementRepository,
    ApplicationTenancyRepository,
    DuplicateEntityError,
    NumeratorRepository,
    PropertyRepository,
)


@dataclass(slots=True)
class InMemoryData:
    """Shared in-memory backing store for the in-memory repositories.

    Each mapping is keyed by the entity ID, except tenancies which are keyed
    by path.
    """

    tenancies: dict[str, ApplicationTenancy] = field(default_factory=dict)
    properties: dict[str, Property] = field(default_factory=dict)
    agreements: dict[str, Agreement] = field(default_factory=dict)
    numerators: dict[str, Numerator] = field(default_factory=dict)

    def restore(self, other: InMemoryData) -> None:
        """Replace the contents of every mapping with those of `other`."""
        for name in ("tenancies", "properties", "agreements", "numerators"):
            bucket = getattr(self, name)
            bucket.clear()
            bucket.update(getattr(other, name))


class InMemoryApplicationTenancyRepository(ApplicationTenancyRepository):
    """In-memory store of application tenancies."""

    def __init__(self, data: InMemoryData) -> None:
        self._data = data

    def all(self) -> list[ApplicationTenancy]:
        return sorted(self._data.tenancies.values(), key=lambda t: t.path)

    def find_by_path(self, path: str) -> ApplicationTenancy | None:
        return self._data.tenancies.get(path)

    def add(self, tenancy: ApplicationTenancy) -> None:
        if tenancy.path in self._data.tenancies:
            raise DuplicateEntityError("tenancy", tenancy.path)
        self._data.tenancies[tenancy.path] = tenancy


class InMemoryPropertyRepository(PropertyRepository):
    """In-memory property store."""

    def __init__(self, data: InMemoryData) -> None:
        super().__init__()
        self._data = data

    def _add(self, entity: Property) -> None:
        if entity.entity_id in self._data.properties:
            raise DuplicateEntityError("property", entity.entity_id)
        self._data.properties[entity.entity_id] = entity

    def _get(self, entity_id: str) -> Property | None:
        return self._data.properties.get(entity_id)

    def _list(self) -> list[Property]:
        return list(self._data.properties.values())


class InMemoryAgreementRepository(AgreementRepository):
    """In-memory agreement store."""

    def __init__(self, data: InMemoryData) -> None:
        super().__init__()
        self._data = data

    def _add(self, entity: Agreement) -> None:
        if entity.entity_id in self._data.agreements:
            raise DuplicateEntityError("agreement", entity.entity_id)
        self._data.agreements[entity.entity_id] = entity

    def _get(self, entity_id: str) -> Agreement | None:
        return self._data.agreements.get(entity_id)

    def _list(self) -> list[Agreement]:
        return list(self._data.agreements.values())


class InMemoryNumeratorRepository(NumeratorRepository):
    """In-memory numerator store."""

    def __init__(self, data: InMemoryData) -> None:
        super().__init__()
        self._data = data

    def _add(self, entity: Numerator) -> None:
        if entity.entity_id in self._data.numerators:
            raise DuplicateEntityError("numerator", entity.entity_id)
        self._data.numerators[entity.entity_id] = entity

    def _get(self, entity_id: str) -> Numerator | None:
        return self._data.numerators.get(entity_id)

    def _list(self) -> list[Numerator]:
        return list(self._data.numerators.values())
