"""Fixed assets: properties and the units they are divided into."""

from __future__ import annotations

from leasing.domain.tenancy import ROOT_PATH

from .base import TenantedEntity


class Unit(TenantedEntity):
    """A lettable unit within a property."""

    def __init__(
        self,
        entity_id: str,
        reference: str,
        name: str = "",
        application_tenancy_path: str = ROOT_PATH,
    ) -> None:
        super().__init__(entity_id, application_tenancy_path)
        self.reference = reference
        self.name = name
        self.property: Property | None = None


class Property(TenantedEntity):
    """A real-estate property holding a collection of units."""

    def __init__(
        self,
        entity_id: str,
        reference: str,
        name: str = "",
        application_tenancy_path: str = ROOT_PATH,
    ) -> None:
        super().__init__(entity_id, application_tenancy_path)
        self.reference = reference
        self.name = name
        self.units: list[Unit] = []

    def new_unit(self, entity_id: str, reference: str, name: str = "") -> Unit:
        """Create a unit in this property, sharing the property's tenancy."""
        unit = Unit(entity_id, reference, name, self.application_tenancy_path)
        unit.property = self
        self.units.append(unit)
        return unit
