"""Service layer handlers."""

from collections.abc import Callable

from .agreement_handlers import COMMAND_HANDLERS as AGREEMENT_COMMAND_HANDLERS
from .numerator_handlers import COMMAND_HANDLERS as NUMERATOR_COMMAND_HANDLERS
from .property_handlers import COMMAND_HANDLERS as PROPERTY_COMMAND_HANDLERS
from .tenancy_handlers import COMMAND_HANDLERS as TENANCY_COMMAND_HANDLERS
from .tenancy_handlers import EVENT_HANDLERS as TENANCY_EVENT_HANDLERS

__all__ = ["COMMAND_HANDLERS", "EVENT_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    **TENANCY_COMMAND_HANDLERS,
    **PROPERTY_COMMAND_HANDLERS,
    **AGREEMENT_COMMAND_HANDLERS,
    **NUMERATOR_COMMAND_HANDLERS,
}

EVENT_HANDLERS: dict[type, list[Callable[..., None]]] = {
    **TENANCY_EVENT_HANDLERS,
}
