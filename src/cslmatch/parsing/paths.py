"""Path helpers for package-relative asset references.

Declaration files name assets as ``<export name>/<dir>/<file>`` using any of
the separators ``/``, ``:`` or ``\\``. Before use such a path is normalized to
``/`` and its leading package name is replaced by that package's root folder.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cslmatch.domain.models import Package

_SEPARATORS = str.maketrans({":": "/", "\\": "/"})


def normalize_partial_path(path: str) -> str:
    """Replace every ``:`` and ``\\`` separator with ``/``."""
    return path.translate(_SEPARATORS)


def substitute_package_prefix(path: str, packages: Iterable[Package]) -> str | None:
    """Rewrite the leading package-name component of `path` into a root path.

    Args:
        path: A normalized package-relative path, e.g. ``"B738_Pack/B738.obj"``.
        packages: Known packages, searched in order; the first whose export
            name is the first path component wins.

    Returns:
        The path with the package name replaced by the package root folder, or
        None if no known package matches.
    """
    for package in packages:
        name = package.name
        if name and (path == name or path.startswith(name + "/")):
            return package.path + path[len(name) :]
    return None


def relative_to(path: str, root: str) -> str:
    """Strip `root` from the front of `path` if `path` lies below it."""
    if root and len(path) > len(root) and path.startswith(root):
        return path[len(root) :].lstrip("/")
    return path


def file_stem(path: str) -> str:
    """Return the file name of `path` without directory and extension."""
    return posixpath.splitext(posixpath.basename(path))[0]
