"""Local-disk `PackageFileSystem` backend.

Reads declaration files and reference documents straight from disk with
`pathlib`. CSL packages are hand-edited on every platform and many predate
UTF-8, so text that is not valid UTF-8 is decoded as Latin-1 instead of
failing the whole package.
"""

from __future__ import annotations

from pathlib import Path

from cslmatch.interfaces.filesystem import PackageFileSystem

__all__ = ["LocalFileSystem"]


class LocalFileSystem(PackageFileSystem):
    """`PackageFileSystem` over the local filesystem."""

    def list_dir(self, path: str) -> list[str]:
        directory = Path(path)
        if not directory.is_dir():
            return []
        return sorted(entry.name for entry in directory.iterdir())

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        data = Path(path).read_bytes()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return data.decode("latin-1")
