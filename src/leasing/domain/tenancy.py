"""Hierarchical application tenancy paths.

An application tenancy is identified by a slash-delimited path such as
``/it/rome/mall``. The root tenancy is ``/``. A tenancy path determines which
users may view or modify an object, and entities may only be moved to a
tenancy directly above or below their current one in this hierarchy.

Two containment rules are available:

- ``PathMatching.SEGMENT`` (default) compares the path segment by segment, so
  ``/ab`` is *not* a descendant of ``/a``.
- ``PathMatching.PREFIX`` uses plain string-prefix containment, so ``/ab``
  *is* a descendant of ``/a``. This matches how existing tenancy data may
  have been scoped and is kept for parity.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from leasing.domain.errors import NoParentError

T = TypeVar("T")

ROOT_PATH = "/"
SEPARATOR = "/"


class PathMatching(Enum):
    """Containment rule used to compare tenancy paths."""

    SEGMENT = "segment"
    PREFIX = "prefix"


@dataclass(frozen=True, slots=True, order=True)
class TenancyPath:
    """Immutable value object wrapping a tenancy path string.

    Equality and hashing use the path; ordering is lexicographic on the path.
    Paths are not validated: callers supplying paths from storage are trusted
    to have validated them.
    """

    path: str

    @classmethod
    def of(cls, path: str | None) -> TenancyPath | None:
        """Return a `TenancyPath` for `path`, or None if `path` is None."""
        return cls(path) if path is not None else None

    @classmethod
    def root(cls) -> TenancyPath:
        """Return the root tenancy path."""
        return cls(ROOT_PATH)

    def __str__(self) -> str:
        return self.path

    @property
    def is_root(self) -> bool:
        """Whether this is the root path."""
        return self.path == ROOT_PATH

    @property
    def parts(self) -> tuple[str, ...]:
        """The non-empty segments of the path.

        For example ``"/"`` gives ``()``, ``"/a"`` gives ``("a",)`` and
        ``"/a/bb"`` gives ``("a", "bb")``.
        """
        return tuple(part for part in self.path.split(SEPARATOR) if part)

    # --- Hierarchy ---

    def parent(self) -> TenancyPath:
        """Return the path with its last segment removed.

        Raises:
            NoParentError: If this is the root path.
        """
        if self.is_root:
            raise NoParentError(self.path)
        return TenancyPath(SEPARATOR + SEPARATOR.join(self.parts[:-1]))

    def parent_of(
        self, other: TenancyPath | None, matching: PathMatching = PathMatching.SEGMENT
    ) -> bool:
        """Whether this path is a strict ancestor of `other`."""
        return other is not None and contains(self, other, matching)

    def child_of(
        self, other: TenancyPath | None, matching: PathMatching = PathMatching.SEGMENT
    ) -> bool:
        """Whether this path is a strict descendant of `other`."""
        return other is not None and contains(other, self, matching)


@dataclass(frozen=True, slots=True)
class ApplicationTenancy:
    """A stored application tenancy: a path plus a display name."""

    path: str
    name: str = ""

    @property
    def level(self) -> TenancyPath:
        """The tenancy path of this tenancy."""
        return TenancyPath(self.path)


def contains(
    ancestor: TenancyPath,
    descendant: TenancyPath,
    matching: PathMatching = PathMatching.SEGMENT,
) -> bool:
    """Whether `descendant` lies strictly below `ancestor`.

    Args:
        ancestor: The candidate ancestor path.
        descendant: The candidate descendant path.
        matching: The containment rule to apply.

    Returns:
        True if `descendant` is strictly contained in `ancestor`. A path never
        contains itself.
    """
    if matching is PathMatching.PREFIX:
        return descendant.path.startswith(ancestor.path) and len(
            descendant.path
        ) > len(ancestor.path)
    ancestor_parts = ancestor.parts
    descendant_parts = descendant.parts
    return (
        len(descendant_parts) > len(ancestor_parts)
        and descendant_parts[: len(ancestor_parts)] == ancestor_parts
    )


def path_of(candidate: Any) -> str:
    """Default key function: extract a path string from a candidate.

    Accepts `TenancyPath`, anything with a ``path`` attribute (such as
    `ApplicationTenancy`) or a plain string.
    """
    if isinstance(candidate, str):
        return candidate
    return candidate.path


def parents_of(
    level: TenancyPath,
    candidates: Iterable[T],
    key: Callable[[T], str] = path_of,
    matching: PathMatching = PathMatching.SEGMENT,
) -> list[T]:
    """Return the candidates that are strict ancestors of `level`.

    Input order is preserved.
    """
    return [c for c in candidates if TenancyPath(key(c)).parent_of(level, matching)]


def children_of(
    level: TenancyPath,
    candidates: Iterable[T],
    key: Callable[[T], str] = path_of,
    matching: PathMatching = PathMatching.SEGMENT,
) -> list[T]:
    """Return the candidates that are strict descendants of `level`.

    Input order is preserved.
    """
    return [c for c in candidates if TenancyPath(key(c)).child_of(level, matching)]
