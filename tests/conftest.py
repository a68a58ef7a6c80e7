import pytest

from pathcheck.core.models import Platform
from pathcheck.core.validator import PathValidator


@pytest.fixture
def windows():
    """Validator applying Windows path rules, on any host."""
    return PathValidator(Platform.windows())


@pytest.fixture
def posix():
    """Validator applying POSIX path rules, on any host."""
    return PathValidator(Platform.posix())


@pytest.fixture
def make_path():
    """Build a printable Windows path of exactly the given length."""
    def _make(length: int, drive: str = "C:\\") -> str:
        return drive + "x" * (length - len(drive))
    return _make
