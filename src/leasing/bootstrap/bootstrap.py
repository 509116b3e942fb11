"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from leasing import config
from leasing.adapters.id_generators import ULIDGenerator
from leasing.adapters.memory import InMemoryData
from leasing.adapters.unit_of_work import InMemoryUnitOfWork
from leasing.domain.tenancy import PathMatching
from leasing.interfaces.id_generator import IdGenerator
from leasing.interfaces.unit_of_work import AbstractUnitOfWork
from leasing.service_layer.handlers import COMMAND_HANDLERS, EVENT_HANDLERS
from leasing.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from leasing.domain.events import DomainEvent
    from leasing.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    path_matching: PathMatching


def build_uow(data: InMemoryData | None = None) -> AbstractUnitOfWork:
    """Build a new unit of work over the given in-memory data."""
    return InMemoryUnitOfWork(data)


def build_message_bus(  # pylint: disable=too-many-arguments
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., None]],
    event_handlers: dict[type[DomainEvent], list[Callable[..., None]]] | None = None,
    *,
    id_generator: IdGenerator | None = None,
    path_matching: PathMatching = PathMatching.SEGMENT,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {
        "uow": uow,
        "id_generator": id_generator or ULIDGenerator(),
        "path_matching": path_matching,
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    injected_event_handlers = {
        event_type: [inject_dependencies(handler, dependencies) for handler in handlers]
        for event_type, handlers in (event_handlers or {}).items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
        event_handlers=injected_event_handlers,
    )


def bootstrap(data: InMemoryData | None = None) -> AppContainer:
    """Bootstrap the message bus with handlers and unit of work."""
    path_matching = config.get_path_matching()
    uow = build_uow(data)
    message_bus = build_message_bus(
        uow,
        COMMAND_HANDLERS,
        EVENT_HANDLERS,
        path_matching=path_matching,
    )

    return AppContainer(
        message_bus=message_bus,
        path_matching=path_matching,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
