"""Small helpers shared by CLI commands."""

from .log_level_parser import parse_logger_levels
from .path_matching import resolve_path_matching

__all__ = ["parse_logger_levels", "resolve_path_matching"]
