"""Path string helpers for Windows long-path handling and separators."""

from ..core.models import LONG_PATH_PREFIX


class PathUtils:
    """String-level path helpers. None of these touch the filesystem."""

    @staticmethod
    def has_long_path_prefix(path: str) -> bool:
        """
        Check whether a path already carries the Windows long-path prefix.

        Args:
            path: Path string to inspect

        Returns:
            True if the path starts with \\\\?\\
        """
        return path.startswith(LONG_PATH_PREFIX)

    @staticmethod
    def add_long_path_prefix(path: str) -> str:
        """
        Prepend the long-path prefix unless it is already present.

        Args:
            path: Path string

        Returns:
            A new string starting with \\\\?\\
        """
        if PathUtils.has_long_path_prefix(path):
            return path
        return LONG_PATH_PREFIX + path

    @staticmethod
    def replace_separator(path: str, old: str, new: str) -> str:
        """
        Swap one separator character for another.

        Args:
            path: Path string
            old: Separator to replace
            new: Replacement separator

        Returns:
            Path using only the new separator where the old one appeared
        """
        return path.replace(old, new)
