"""Utility modules for pathcheck."""

from .path_utils import PathUtils
from .console import ConsoleManager, StatusType

__all__ = ["PathUtils", "ConsoleManager", "StatusType"]
