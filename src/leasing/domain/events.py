"""Events"""

import abc
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.
    Requires a way to determine the owning entity ID.
    """

    @property
    @abc.abstractmethod
    def entity_id(self) -> str:
        """Return the ID of the entity this event belongs to."""


@dataclass(frozen=True, slots=True)
class ApplicationTenancyChanged(DomainEvent):
    """Event indicating that an entity's application tenancy path changed."""

    source_id: str
    source_type: str
    old_path: str
    new_path: str

    @property
    def entity_id(self) -> str:
        return self.source_id


@dataclass(frozen=True, slots=True)
class ApplicationTenancyMovedDown(ApplicationTenancyChanged):
    """Event indicating that an entity moved to a lower tenancy."""


@dataclass(frozen=True, slots=True)
class ApplicationTenancyMovedUp(ApplicationTenancyChanged):
    """Event indicating that an entity moved to a higher tenancy."""
