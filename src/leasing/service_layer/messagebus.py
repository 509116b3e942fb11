"""Routing of commands to their handler and of domain events to subscribers."""

import logging
from collections import deque
from collections.abc import Callable

from leasing.domain.events import DomainEvent
from leasing.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

CommandHandler = Callable[[Command], None]
EventHandler = Callable[[DomainEvent], None]


class NoHandlerForCommand(LookupError):
    """Raised when a command type has no registered handler."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Dispatch a command, then every domain event it caused.

    Each command type maps to exactly one handler. Once that handler returns,
    the bus asks the unit of work for the events raised by the entities it
    handed out and passes each event to every handler registered for the
    event's exact type, so `ApplicationTenancyMovedDown` subscribers never see
    `ApplicationTenancyMovedUp`. Events raised by event handlers join the back
    of the same queue.

    Handlers take the message as their only argument; the unit of work and any
    other collaborator are bound beforehand (see `leasing.bootstrap`). `uow`
    is the same unit those handlers were bound to.

    Note:
        Handler errors are logged and propagate to the caller. Events still
        queued when an event handler fails are dropped.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], CommandHandler],
        event_handlers: dict[type[DomainEvent], list[EventHandler]] | None = None,
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers
        self._event_handlers = event_handlers or {}

    def handle(self, cmd: Command) -> None:
        """Handle `cmd` and the events raised as a consequence.

        Raises:
            NoHandlerForCommand: If no handler is registered for the command type.
            Exception: Whatever a command or event handler raised.
        """
        self._handle_command(cmd)
        pending = deque(self.uow.collect_new_events())
        while pending:
            self._handle_event(pending.popleft())
            pending.extend(self.uow.collect_new_events())

    def _handle_command(self, cmd: Command) -> None:
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)
        self._call(handler, cmd, "command")

    def _handle_event(self, event: DomainEvent) -> None:
        for handler in self._event_handlers.get(type(event), []):
            self._call(handler, event, "event")

    def _call(self, handler: Callable, message: Command | DomainEvent, kind: str) -> None:
        handler_name = self._get_handler_name(handler)
        logger.debug("Handling %s %s with handler %s", kind, message, handler_name)
        try:
            handler(message)
        except Exception:
            logger.exception(
                "Exception handling %s %s with handler %s", kind, message, handler_name
            )
            raise

    @staticmethod
    def _get_handler_name(fn: Callable) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
