"""Unit tests for the register_property handler."""

import pytest

from leasing.interfaces.repositories import DuplicateEntityError
from leasing.service_layer import commands
from tests.unit.service_layer.handlers.base import HandlerTestBase

# pylint: disable=magic-value-comparison


class TestRegisterProperty(HandlerTestBase):
    """Tests for the register_property handler via the message bus."""

    def test_registers_property_with_units(self):
        """The property and its units are stored with generated ids."""
        self.bus.handle(
            commands.RegisterProperty("OXF", "Oxford", ("OXF-001", "OXF-002"))
        )
        prop = self.uow.properties.find_by_reference("OXF")
        assert prop is not None
        assert prop.entity_id == "id-000001"
        assert prop.name == "Oxford"
        assert [u.reference for u in prop.units] == ["OXF-001", "OXF-002"]
        assert [u.entity_id for u in prop.units] == ["id-000002", "id-000003"]
        assert all(u.property is prop for u in prop.units)
        self.assert_committed()

    def test_duplicate_reference_rejected(self):
        """References are unique."""
        self.bus.handle(commands.RegisterProperty("OXF"))
        with pytest.raises(DuplicateEntityError, match=r"property \(OXF\) already exists"):
            self.bus.handle(commands.RegisterProperty("OXF"))
        assert len(list(self.uow.properties)) == 1
