"""Package filesystem adapters."""

from .local import LocalFileSystem
from .memory import InMemoryFileSystem

__all__ = ["LocalFileSystem", "InMemoryFileSystem"]
