"""Package filesystem interface definitions.

The catalog loader never touches the host filesystem directly. It enumerates
package folders, probes for declaration files and reads text content through
a `PackageFileSystem`, so tests and embedding hosts can supply their own.

Paths are plain strings using ``/`` as the separator; the package parser
builds and compares them textually.
"""

import abc


class PackageFileSystem(abc.ABC):
    """Abstract base class for the read-only file operations used by the loader."""

    @abc.abstractmethod
    def list_dir(self, path: str) -> list[str]:
        """List the names of the immediate children of a directory.

        Args:
            path (str): Directory to enumerate.

        Returns:
            list[str]: Child entry names (not full paths). Returns an empty list
            if the directory does not exist.
        """

    @abc.abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file exists.

        Args:
            path (str): Path of the file to probe.

        Returns:
            bool: True if the file exists, False otherwise.
        """

    @abc.abstractmethod
    def read_text(self, path: str) -> str:
        """Return the full text content of a file.

        Args:
            path (str): Path of the file to read.

        Returns:
            str: The file content with line endings left untouched.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the file exists but cannot be read.
        """

    # --- Convenience Methods ---

    @staticmethod
    def join(*parts: str) -> str:
        """Join path parts with ``/``, the separator used throughout the catalog."""
        head, *rest = [part for part in parts if part]
        return "/".join([head.rstrip("/"), *(part.strip("/") for part in rest)])
