"""Handlers for numerators."""

import logging
from collections.abc import Callable

from leasing.domain.entities import Numerator
from leasing.interfaces.id_generator import IdGenerator
from leasing.interfaces.unit_of_work import AbstractUnitOfWork
from leasing.service_layer import commands

logger = logging.getLogger(__name__)


def create_numerator(
    cmd: commands.CreateNumerator,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
) -> None:
    """Create a global or scoped numerator unless one already exists.

    Scoped numerators are identified by name plus the object they are scoped
    to; global ones by name alone. An existing numerator is left untouched.
    A scope must name both the object type and its identifier.
    """

    if (error := Numerator.validate_format(cmd.format, cmd.last_increment)) is not None:
        raise error
    scope_error = Numerator.validate_scope(cmd.object_type, cmd.object_identifier)
    if scope_error is not None:
        raise scope_error

    with uow:
        if cmd.object_type is not None and cmd.object_identifier is not None:
            existing = uow.numerators.find_scoped(
                cmd.name, cmd.object_type, cmd.object_identifier
            )
        else:
            existing = uow.numerators.find_global(cmd.name)

        if existing is not None:
            logger.warning(
                "Numerator %r already exists (%s); keeping it",
                cmd.name,
                existing.entity_id,
            )
            return

        uow.numerators.add(
            Numerator(
                id_generator.new_id(),
                cmd.name,
                cmd.format,
                last_increment=cmd.last_increment,
                object_type=cmd.object_type,
                object_identifier=cmd.object_identifier,
            )
        )
        uow.commit()


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.CreateNumerator: create_numerator,
}
