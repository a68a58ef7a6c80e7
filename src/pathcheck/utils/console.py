"""Themed console output for the pathcheck CLI.

Status lines are rendered with Rich. Themes follow the retro terminal
palettes: manhattan, green, matrix and sunset.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success")
    ERROR = ("[x]", "error")
    WARNING = ("[!]", "warning")


@dataclass
class ThemeColors:
    """Styles for the parts of a status line."""
    success: str
    warning: str
    error: str
    path: str


THEMES = {
    'manhattan': ThemeColors(success='green', warning='yellow', error='red', path='white'),
    'green': ThemeColors(success='bright_green', warning='yellow', error='red', path='bright_green'),
    'matrix': ThemeColors(success='green', warning='bright_yellow', error='red', path='green'),
    'sunset': ThemeColors(success='green', warning='orange1', error='red3', path='wheat1'),
}

THEME_NAMES = list(THEMES)


class ConsoleManager:
    """Console with theme support for printing path check results."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_terminal: Optional[bool] = None):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_terminal: Passed through to Rich; None lets Rich decide
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout

        if force_terminal is None and os.environ.get('NO_COLOR'):
            force_terminal = False

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            force_terminal=force_terminal,
            highlight=False,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'success': colors.success,
            'warning': colors.warning,
            'error': colors.error,
            'path': colors.path,
        })

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, style = status.value

        status_text = Text()
        status_text.append(f"{icon} ", style=style)
        # Paths may contain brackets, so never parse them as markup
        status_text.append(message)
        self.console.print(status_text, soft_wrap=True)

    def print_error(self, message: str):
        self.print_status(StatusType.ERROR, message)

    def print_success(self, message: str):
        self.print_status(StatusType.SUCCESS, message)

    def print_warning(self, message: str):
        self.print_status(StatusType.WARNING, message)

    def print_path(self, path: str):
        """Print a bare path, without markup or wrapping."""
        self.console.print(Text(path, style="path"), soft_wrap=True)