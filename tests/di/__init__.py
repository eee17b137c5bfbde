"""Mock providers for testing."""

from .mail import MockMailProvider
from .container import build_test_container

__all__ = [
    "MockMailProvider",
    "build_test_container",
]
