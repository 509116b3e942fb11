"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidTransitionError(DomainError):
    """Raised when an entity is in an invalid state for the attempted action."""


class DomainValidationError(DomainError):
    """Base class for failures detected before an action mutates anything.

    Validators return instances of this class (rather than raising them) so
    callers can surface the reason before executing the action. The action
    methods raise the same instance when called with invalid arguments.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


# ============================================================================
#                           Tenancy related errors
# ============================================================================


class NoParentError(DomainError):
    """Raised when the parent of the root tenancy path is requested."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Tenancy path '{path}' has no parent.")
        self.path = path


class InvalidMoveError(DomainValidationError):
    """Raised when an entity is moved to a tenancy outside its choices."""

    def __init__(
        self, current_path: str, target_path: str, reason: str | None = None
    ) -> None:
        if reason is None:
            reason = f"Cannot move from '{current_path}' to '{target_path}'."
        super().__init__(reason)
        self.current_path = current_path
        self.target_path = target_path


class NoLowerLevelsError(InvalidMoveError):
    """Raised when moving down from a tenancy that has no descendants."""

    def __init__(self, current_path: str, target_path: str) -> None:
        super().__init__(current_path, target_path, "No lower levels")


class NoHigherLevelsError(InvalidMoveError):
    """Raised when moving up from a tenancy that has no ancestors."""

    def __init__(self, current_path: str, target_path: str) -> None:
        super().__init__(current_path, target_path, "No higher levels")


# ============================================================================
#                           Interval related errors
# ============================================================================


class InvalidIntervalError(DomainValidationError):
    """Raised when an interval is missing a required date or starts after it ends."""


class OverlapError(DomainValidationError):
    """Raised when a proposed interval intersects an existing sibling's interval."""


class ContiguityError(DomainValidationError):
    """Raised when a proposed interval would leave a gap in the timeline."""


class DuplicatePartyError(DomainValidationError):
    """Raised when a successor/predecessor role names this role's own party."""


class DuplicateRoleError(DomainValidationError):
    """Raised when a successor/predecessor role repeats the adjacent role's party."""


# ============================================================================
#                           Lease related errors
# ============================================================================


class RemovalBlockedError(DomainValidationError):
    """Raised when removing an entity that still has dependent children."""


# ============================================================================
#                           Numerator related errors
# ============================================================================


class InvalidFormatError(DomainValidationError):
    """Raised when a numerator format cannot render an integer."""

    def __init__(self, fmt: str) -> None:
        super().__init__(f"Invalid format string '{fmt}'")
        self.format = fmt


class IncompleteScopeError(DomainValidationError):
    """Raised when a numerator names only one of its scope's type and identifier."""

    def __init__(self, object_type: str | None, object_identifier: str | None) -> None:
        super().__init__(
            "A scoped numerator needs both an object type and an object identifier "
            f"(got {object_type!r}, {object_identifier!r})."
        )
        self.object_type = object_type
        self.object_identifier = object_identifier
