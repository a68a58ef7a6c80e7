"""Core components for pathcheck."""

from .models import Config, Platform, ValidationResult, Violation, WIN_MAX_PATH, LONG_PATH_PREFIX
from .exceptions import ValidationFailed
from .validator import PathValidator

__all__ = [
    "Config",
    "Platform",
    "ValidationResult",
    "Violation",
    "WIN_MAX_PATH",
    "LONG_PATH_PREFIX",
    "ValidationFailed",
    "PathValidator",
]
