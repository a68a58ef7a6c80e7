"""
Core data models for pathcheck.

This module contains the platform context, configuration settings and
validation result types shared by the validator and the CLI.
"""

import ntpath
import os
import platform as _host
import posixpath
from dataclasses import dataclass, field
from enum import Enum
from types import ModuleType
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Maximum characters in a standard Windows path (260 including drive letter and NUL)
WIN_MAX_PATH = 259

# Prefix that lifts the MAX_PATH limit for the Windows API
LONG_PATH_PREFIX = "\\\\?\\"

PLATFORM_NAMES = ("auto", "windows", "posix")


@dataclass(frozen=True)
class Platform:
    """Filesystem conventions that path checks are evaluated against."""

    name: str
    is_windows: bool
    pathmod: ModuleType = field(repr=False, compare=False)

    @property
    def sep(self) -> str:
        """Preferred path separator."""
        return self.pathmod.sep

    @property
    def altsep(self) -> Optional[str]:
        """Alternate separator, None where the platform has only one."""
        return self.pathmod.altsep

    @classmethod
    def windows(cls) -> "Platform":
        return cls(name="windows", is_windows=True, pathmod=ntpath)

    @classmethod
    def posix(cls) -> "Platform":
        return cls(name="posix", is_windows=False, pathmod=posixpath)

    @classmethod
    def current(cls) -> "Platform":
        """Detect the host platform."""
        if _host.system() == "Windows":
            return cls.windows()
        return cls.posix()

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Platform":
        """
        Build a platform context from a name.

        Args:
            name: One of 'auto', 'windows' or 'posix' (case-insensitive).
                None or empty means 'auto'.

        Returns:
            The matching Platform.

        Raises:
            ValueError: If the name is not recognised.
        """
        key = (name or "auto").strip().lower()
        if key == "auto":
            return cls.current()
        if key == "windows":
            return cls.windows()
        if key == "posix":
            return cls.posix()
        raise ValueError(f"Unknown platform '{name}', expected one of: {', '.join(PLATFORM_NAMES)}")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Configuration settings for pathcheck."""

    platform: str = field(default_factory=lambda: os.getenv('PATHCHECK_PLATFORM', 'auto'))
    warn: bool = field(default_factory=lambda: _env_flag('PATHCHECK_WARN'))
    theme: str = field(default_factory=lambda: os.getenv('PATHCHECK_THEME', 'manhattan'))
    debug: bool = False  # Verbose logging for the CLI

    def platform_context(self) -> Platform:
        """Resolve the configured platform name to a Platform."""
        return Platform.from_name(self.platform)


class Violation(Enum):
    """Rules a path can fail."""
    NON_PRINTABLE = "non_printable"
    TOO_LONG = "too_long"


@dataclass
class ValidationResult:
    """Result of validating a single path."""

    # The path after any automatic repair (the input is left untouched)
    path: str
    original: str
    violations: List[Violation] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    repaired: bool = False

    @property
    def ok(self) -> bool:
        return not self.has_errors()

    def has_errors(self) -> bool:
        """Check if any rule failed that was not repaired."""
        return len(self.errors) > 0
