"""ID generators for LEASING."""

import threading

from ulid import monotonic

from leasing.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs sort lexicographically in creation order, so entities registered
    later always receive larger IDs. Backed by the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SequentialIdGenerator(IdGenerator):
    """Zero-padded sequential IDs with an optional prefix.

    Note:
        Not suitable for production use; primarily for tests and fixtures.
    """

    def __init__(self, prefix: str = "", width: int = 6) -> None:
        self._counter = 0
        self._prefix = prefix
        self._width = width

    def new_id(self) -> str:
        """Generate the next identifier."""
        self._counter += 1
        return f"{self._prefix}{self._counter:0{self._width}d}"
