"""Validate and normalize filesystem paths against Windows path rules."""

from .core import (
    Config,
    Platform,
    PathValidator,
    ValidationFailed,
    ValidationResult,
    Violation,
    WIN_MAX_PATH,
    LONG_PATH_PREFIX,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "Platform",
    "PathValidator",
    "ValidationFailed",
    "ValidationResult",
    "Violation",
    "WIN_MAX_PATH",
    "LONG_PATH_PREFIX",
]
