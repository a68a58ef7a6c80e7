"""
Path validation for pathcheck.

This module checks path strings against the rules of a platform:
- Printability (no control characters or whitespace escapes)
- The legacy Windows MAX_PATH limit, with long-path prefix repair
- Canonical and native forms for comparing paths
"""

import logging
import unicodedata
from typing import Optional

from ..utils.path_utils import PathUtils
from .exceptions import ValidationFailed
from .models import WIN_MAX_PATH, LONG_PATH_PREFIX, Platform, ValidationResult, Violation

logger = logging.getLogger(__name__)

# Control, surrogate, unassigned and line/paragraph separator characters
NON_PRINTABLE_CATEGORIES = frozenset({"Cc", "Cs", "Cn", "Zl", "Zp"})


class PathValidator:
    """Validates and normalizes paths for a given platform."""

    def __init__(self, platform: Optional[Platform] = None):
        """
        Initialize the validator.

        Args:
            platform: Platform context the checks run against. If None,
                the host platform is detected.
        """
        self.platform = platform or Platform.current()

    @staticmethod
    def printable(text: str) -> bool:
        """
        Check that a string is free of non-printable characters.

        Whitespace escapes such as newline and tab count as non-printable.
        Spaces and format characters (no-break space, ideographic space,
        zero-width joiner) are printable.
        """
        return not any(unicodedata.category(ch) in NON_PRINTABLE_CATEGORIES for ch in text)

    @staticmethod
    def windows_max_length_exceeded(path: str) -> bool:
        """
        Check if a path is too long for the Windows API without the \\\\?\\ prefix.

        Paths that already carry the prefix are exempt regardless of length.
        See https://learn.microsoft.com/en-us/windows/win32/fileio/maximum-file-path-limitation
        """
        if PathUtils.has_long_path_prefix(path):
            return False
        return len(path) > WIN_MAX_PATH

    @staticmethod
    def non_printable_message(path: str) -> str:
        return (
            f"Path '{path}' contains non-printable characters. Check that backslashes "
            "are escaped with another backslash (e.g. C:\\\\Windows) in double-quoted strings."
        )

    @staticmethod
    def too_long_message(path: str) -> str:
        return f"Path '{path}' is longer than {WIN_MAX_PATH}, and therefore must be prefixed with '{LONG_PATH_PREFIX}'"

    def is_valid(self, path: str, warn: bool = False, error: bool = False,
                 platform: Optional[Platform] = None) -> bool:
        """
        Check whether a path is usable on the platform.

        Only Windows platforms have rules; anything is valid elsewhere.

        Args:
            path: Path to check.
            warn: Log a warning for each failed check.
            error: Raise on the first failed check instead of returning False.
            platform: Overrides the validator's platform for this call.

        Returns:
            True if the path passes both the printability and length checks.

        Raises:
            ValidationFailed: If error is set and a check fails.
        """
        if not (platform or self.platform).is_windows:
            return True

        valid = True

        if not self.printable(path):
            msg = self.non_printable_message(path)
            if warn:
                logger.warning(msg)
            if error:
                raise ValidationFailed(msg, path=path, violation=Violation.NON_PRINTABLE)
            valid = False

        if self.windows_max_length_exceeded(path):
            msg = self.too_long_message(path)
            if warn:
                logger.warning(msg)
            if error:
                raise ValidationFailed(msg, path=path, violation=Violation.TOO_LONG)
            valid = False

        return valid

    def check_path(self, path: str, platform: Optional[Platform] = None) -> ValidationResult:
        """
        Validate a path, repairing what can be repaired.

        Non-printable paths are reported as errors. Paths over the length
        limit get the long-path prefix; the repaired string is returned in
        the result and the input is left as is.
        """
        result = ValidationResult(path=path, original=path)
        if not (platform or self.platform).is_windows:
            return result

        if not self.printable(path):
            result.violations.append(Violation.NON_PRINTABLE)
            result.errors.append(self.non_printable_message(path))
            return result

        if self.windows_max_length_exceeded(path):
            result.violations.append(Violation.TOO_LONG)
            result.path = PathUtils.add_long_path_prefix(path)
            result.repaired = True
            logger.debug(f"Path of {len(path)} characters exceeds {WIN_MAX_PATH}, added long-path prefix")

        return result

    def validate(self, path: str, platform: Optional[Platform] = None) -> str:
        """
        Return a path that is safe to hand to the platform.

        Raises:
            ValidationFailed: If the path contains non-printable characters.
        """
        result = self.check_path(path, platform=platform)
        if result.has_errors():
            raise ValidationFailed(result.errors[0], path=path, violation=result.violations[0])
        return result.path

    def canonical_path(self, path: str, platform: Optional[Platform] = None) -> str:
        """
        Produce a comparable path.

        The platform's abspath resolves relative paths against the working
        directory. Symlinks are left alone.
        """
        # FIXME: decide whether canonical paths should always carry the \\?\ prefix
        return (platform or self.platform).pathmod.abspath(path)

    def native_path(self, path: str, platform: Optional[Platform] = None) -> str:
        """
        Canonical path spelled with the platform's preferred separator.

        Windows API calls often need an absolute backslashed path,
        e.g. "C:\\Program Files (x86)\\Microsoft Office".
        """
        platform = platform or self.platform
        canonical = self.canonical_path(path, platform=platform)
        # altsep is '/' on Windows, None on POSIX
        if platform.altsep:
            return PathUtils.replace_separator(canonical, platform.altsep, platform.sep)
        return canonical

    def paths_equal(self, path1: str, path2: str, platform: Optional[Platform] = None) -> bool:
        """Compare two paths by their canonical forms."""
        # Prefixed and unprefixed spellings of one location are not equal here.
        return self.canonical_path(path1, platform=platform) == self.canonical_path(path2, platform=platform)
