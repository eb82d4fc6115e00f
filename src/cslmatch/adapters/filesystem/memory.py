"""In-memory `PackageFileSystem` backend.

This module provides a tiny, dependency-free implementation meant for
**tests**, examples, and hosts that ship packages inside another container.
Files are kept in a dict keyed by ``/``-separated path; directories exist
implicitly as prefixes of file paths.

Typical usage
-------------
    fs = InMemoryFileSystem()
    fs.add_file("CSL/Pack/xsb_aircraft.txt", "EXPORT_NAME Pack\\n")
    fs.list_dir("CSL")  # ["Pack"]
"""

from __future__ import annotations

import threading

from cslmatch.interfaces.filesystem import PackageFileSystem

__all__ = ["InMemoryFileSystem"]


class InMemoryFileSystem(PackageFileSystem):
    """`PackageFileSystem` backed by an in-memory dict.

    Thread-safety
    -------------
    All reads and writes happen under an `RLock`.
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files: dict[str, str] = {}
        self._lock = threading.RLock()
        for path, content in (files or {}).items():
            self.add_file(path, content)

    @staticmethod
    def _normalize(path: str) -> str:
        return path.strip("/")

    def add_file(self, path: str, content: str) -> None:
        """Create or replace the file at `path`."""
        with self._lock:
            self._files[self._normalize(path)] = content

    # ---- PackageFileSystem ----

    def list_dir(self, path: str) -> list[str]:
        prefix = self._normalize(path)
        prefix = f"{prefix}/" if prefix else ""
        with self._lock:
            names = {
                file_path[len(prefix) :].split("/", 1)[0]
                for file_path in self._files
                if file_path.startswith(prefix)
            }
        return sorted(names)

    def exists(self, path: str) -> bool:
        with self._lock:
            return self._normalize(path) in self._files

    def read_text(self, path: str) -> str:
        with self._lock:
            try:
                return self._files[self._normalize(path)]
            except KeyError as e:
                raise FileNotFoundError(path) from e
