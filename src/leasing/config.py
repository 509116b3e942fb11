"""Configuration utilities for LEASING.

Settings are read from the environment on demand, so tests can override them
with ``monkeypatch.setenv`` without reloading anything.
"""

import os

from leasing.domain.tenancy import ROOT_PATH, PathMatching

ROOT_TENANCY_PATH = ROOT_PATH

PATH_MATCHING_ENVVAR = "LEASING_PATH_MATCHING"  # pragma: no mutate
DEFAULT_PATH_MATCHING = PathMatching.SEGMENT


class InvalidConfigError(ValueError):
    """Raised when an environment setting holds an unsupported value."""

    def __init__(self, name: str, value: str, allowed: list[str]) -> None:
        super().__init__(
            f"Invalid value {value!r} for {name}; expected one of {', '.join(allowed)}"
        )
        self.name = name
        self.value = value


def get_path_matching() -> PathMatching:
    """Get the tenancy path containment rule from the environment.

    Returns:
        The `PathMatching` named by `LEASING_PATH_MATCHING` (case-insensitive),
        or `PathMatching.SEGMENT` when the variable is unset or empty.

    Raises:
        InvalidConfigError: If the variable names no known rule.
    """
    if not (value := os.environ.get(PATH_MATCHING_ENVVAR, "").strip()):
        return DEFAULT_PATH_MATCHING
    try:
        return PathMatching(value.lower())
    except ValueError as exc:
        raise InvalidConfigError(
            PATH_MATCHING_ENVVAR, value, [m.value for m in PathMatching]
        ) from exc
