"""Numerators: named counters producing formatted sequential references."""

from __future__ import annotations

from leasing.domain.errors import (
    DomainValidationError,
    IncompleteScopeError,
    InvalidFormatError,
)
from leasing.domain.tenancy import ROOT_PATH

from .base import TenantedEntity

# pylint: disable=too-many-arguments,too-many-positional-arguments


class Numerator(TenantedEntity):
    """A counter rendering increments through a printf-style format.

    A numerator is either global (identified by its name alone) or scoped to
    another object, in which case ``object_type`` and ``object_identifier``
    identify that object.

    Example:
        ```py
        numerator = Numerator("n-1", "Invoice number", "INV-%05d", last_increment=41)
        numerator.next_increment_str()  # "INV-00042"
        ```
    """

    def __init__(
        self,
        entity_id: str,
        name: str,
        format: str,  # pylint: disable=redefined-builtin
        last_increment: int | None = None,
        object_type: str | None = None,
        object_identifier: str | None = None,
        application_tenancy_path: str = ROOT_PATH,
    ) -> None:
        super().__init__(entity_id, application_tenancy_path)
        self.name = name
        self.format = format
        self.last_increment = last_increment
        self.object_type = object_type
        self.object_identifier = object_identifier

    @staticmethod
    def validate_format(fmt: str, n: int | None = 0) -> DomainValidationError | None:
        """Return an error if `fmt` cannot render the integer `n`."""
        try:
            fmt % (n or 0)
        except (TypeError, ValueError):
            return InvalidFormatError(fmt)
        return None

    @staticmethod
    def validate_scope(
        object_type: str | None, object_identifier: str | None
    ) -> DomainValidationError | None:
        """Return an error unless the scope is given in full or not at all."""
        if (object_type is None) != (object_identifier is None):
            return IncompleteScopeError(object_type, object_identifier)
        return None

    @property
    def is_scoped(self) -> bool:
        """Whether the numerator is scoped to another object."""
        return self.object_type is not None

    @property
    def title(self) -> str:
        """The last formatted increment if scoped, otherwise the name."""
        return self.last_increment_str() if self.is_scoped else self.name

    def _render(self, n: int | None) -> str:
        return self.format % (n or 0)

    def last_increment_str(self) -> str:
        """Format the current counter value without changing it."""
        return self._render(self.last_increment)

    def next_increment_str(self) -> str:
        """Increment the counter and return the formatted new value."""
        self.last_increment = (self.last_increment or 0) + 1
        return self._render(self.last_increment)

    def change_parameters(
        self,
        format: str,  # pylint: disable=redefined-builtin
        last_increment: int | None,
    ) -> Numerator:
        """Change the format and reset the counter.

        Raises:
            InvalidFormatError: If `format` cannot render an integer.
        """
        if (error := self.validate_format(format, last_increment)) is not None:
            raise error
        self.format = format
        self.last_increment = last_increment
        return self
