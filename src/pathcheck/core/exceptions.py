"""Exceptions raised by pathcheck."""

from typing import Optional

from .models import Violation


class ValidationFailed(ValueError):
    """A path broke one of the platform's path rules."""

    def __init__(self, message: str, path: Optional[str] = None,
                 violation: Optional[Violation] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.violation = violation
