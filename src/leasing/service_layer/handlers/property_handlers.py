"""Handlers for properties and their units."""

from collections.abc import Callable

from leasing.domain.entities import Property
from leasing.interfaces.id_generator import IdGenerator
from leasing.interfaces.repositories import DuplicateEntityError
from leasing.interfaces.unit_of_work import AbstractUnitOfWork
from leasing.service_layer import commands


def register_property(
    cmd: commands.RegisterProperty,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> None:
    """Register a new property, creating its units in the same tenancy."""

    with uow:
        if uow.properties.find_by_reference(cmd.reference) is not None:
            raise DuplicateEntityError("property", cmd.reference)

        prop = Property(id_generator.new_id(), cmd.reference, cmd.name)
        for unit_reference in cmd.unit_references:
            prop.new_unit(id_generator.new_id(), unit_reference)

        uow.properties.add(prop)
        uow.commit()


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.RegisterProperty: register_property,
}
