"""The package catalog and its two-phase load.

A `Catalog` is an explicit value owned by the caller: the ordered list of
loaded packages plus the two reference tables. `load_catalog` is the single
entry point that fills it. Load order is priority order, so the first package
loaded wins a tie during matching.

Loading a folder of packages happens in two phases:

1. Header phase: every child folder holding an ``xsb_aircraft.txt`` is scanned
   for its ``EXPORT_NAME``. Packages without a (unique) name are dropped.
2. Full phase: the surviving packages are appended to the catalog in discovery
   order, then each is parsed completely. Because all of them are in the
   catalog before the first full parse, ``DEPENDENCY`` commands and
   package-relative paths can refer to any package of the batch.

The catalog is append-only: loading again adds new folders and skips folders
already present. Once loading has finished the catalog is only read.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cslmatch import config
from cslmatch.domain.errors import ReferenceDocumentError
from cslmatch.domain.models import AircraftCode, Package
from cslmatch.parsing.builder import PackageBuilder
from cslmatch.parsing.commands import parse_package_header
from cslmatch.parsing.reference import parse_aircraft_codes, parse_groupings

if TYPE_CHECKING:
    from cslmatch.interfaces.filesystem import PackageFileSystem
    from cslmatch.interfaces.host import HostEnvironment

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."
DOC8643_KIND = "ICAO document 8643"
RELATED_KIND = "related.txt"


@dataclass(slots=True)
class Catalog:
    """Everything the matching engine reads.

    Attributes:
        packages: Loaded packages in load (= priority) order.
        aircraft_codes: ICAO designator to Doc 8643 equipment data.
        groupings: ICAO designator to related-group label.
    """

    packages: list[Package] = field(default_factory=list)
    aircraft_codes: dict[str, AircraftCode] = field(default_factory=dict)
    groupings: dict[str, str] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Package]:
        return iter(self.packages)

    def __len__(self) -> int:
        return len(self.packages)

    def has_path(self, path: str) -> bool:
        """Return True if a package rooted at `path` is already loaded."""
        return any(package.path == path for package in self.packages)

    def extend(self, packages: list[Package]) -> None:
        """Append packages in order."""
        self.packages.extend(packages)

    def dump(self) -> None:
        """Log every package, its planes and its identity tables at INFO level."""
        for n, package in enumerate(self.packages):
            logger.info("CSL: Package %d path = %s (%s)", n, package.name, package.path)
            for p, plane in enumerate(package.planes):
                logger.info("CSL:         Plane %d = %s", p, plane.path)
            for table, entries in package.matches.items():
                logger.info("CSL:           Table %s", table.value)
                for key, index in entries.items():
                    logger.info("CSL:                %s -> %d", key, index)


def _read_reference(
    filesystem: PackageFileSystem, path: str, kind: str, debug: bool
) -> str:
    try:
        text = filesystem.read_text(path)
    except OSError as e:
        raise ReferenceDocumentError(kind, path) from e
    if debug:
        logger.debug("%s %s opened", kind, path)
    return text


def load_reference_documents(
    catalog: Catalog,
    related_file: str,
    doc8643_file: str,
    *,
    filesystem: PackageFileSystem,
    host: HostEnvironment,
) -> bool:
    """Load Doc 8643 and ``related.txt`` into `catalog`.

    Returns:
        bool: False if either document could not be read. A readable document
        is loaded even if the other one is missing.
    """
    ok = True
    debug = host.debug_model_matching()

    try:
        text = _read_reference(filesystem, doc8643_file, DOC8643_KIND, debug)
    except ReferenceDocumentError as e:
        logger.warning("%s", e)
        ok = False
    else:
        catalog.aircraft_codes.update(parse_aircraft_codes(text))

    try:
        text = _read_reference(filesystem, related_file, RELATED_KIND, debug)
    except ReferenceDocumentError as e:
        logger.warning("%s", e)
        ok = False
    else:
        catalog.groupings.update(parse_groupings(text))

    return ok


def _package_file(filesystem: PackageFileSystem, package_path: str) -> str:
    return filesystem.join(package_path, config.PACKAGE_FILE_NAME)


def load_packages(
    catalog: Catalog,
    packages_dir: str,
    *,
    filesystem: PackageFileSystem,
    host: HostEnvironment,
) -> list[Package]:
    """Load every package folder directly below `packages_dir` into `catalog`.

    Folders already in the catalog, hidden folders and folders without a
    declaration file are skipped.

    Returns:
        list[Package]: The packages added by this call, in catalog order.
    """
    candidates = [
        filesystem.join(packages_dir, name)
        for name in filesystem.list_dir(packages_dir)
        if not name.startswith(HIDDEN_PREFIX)
    ]

    # 1) header phase
    batch: list[Package] = []
    for package_path in candidates:
        package_file = _package_file(filesystem, package_path)
        if catalog.has_path(package_path) or not filesystem.exists(package_file):
            continue
        logger.info("Loading package: %s", package_file)
        try:
            content = filesystem.read_text(package_file)
        except OSError as e:
            logger.warning("could not open package file %s: %s", package_file, e)
            continue
        package = parse_package_header(
            package_path,
            package_file,
            content,
            itertools.chain(catalog.packages, batch),
        )
        if package.has_valid_header:
            batch.append(package)
        else:
            logger.warning("Skipping %s: no EXPORT_NAME found", package_file)

    # 2) full phase, after the whole batch is visible in the catalog
    catalog.extend(batch)
    for package in batch:
        package_file = _package_file(filesystem, package.path)
        try:
            content = filesystem.read_text(package_file)
        except OSError as e:
            logger.warning("could not open package file %s: %s", package_file, e)
            continue
        PackageBuilder(
            package,
            known_packages=catalog.packages,
            groupings=catalog.groupings,
            host=host,
        ).build(content)
        logger.debug(
            "Loaded package %s: %d plane(s)", package.name, len(package.planes)
        )

    return batch


def load_catalog(  # pylint: disable=too-many-arguments
    catalog: Catalog,
    packages_dir: str,
    related_file: str,
    doc8643_file: str,
    *,
    filesystem: PackageFileSystem,
    host: HostEnvironment,
) -> bool:
    """Load the reference documents and every package folder into `catalog`.

    Nothing here is fatal: malformed commands, unresolved references and
    unreadable packages are reported through logging and skipped.

    Args:
        catalog: The catalog to fill; may already hold packages.
        packages_dir: Folder whose immediate children are CSL packages.
        related_file: Path of ``related.txt``.
        doc8643_file: Path of ICAO Doc 8643.
        filesystem: Source of directory listings and file contents.
        host: The host environment.

    Returns:
        bool: False only if a reference document could not be read.
    """
    ok = load_reference_documents(
        catalog, related_file, doc8643_file, filesystem=filesystem, host=host
    )
    load_packages(catalog, packages_dir, filesystem=filesystem, host=host)
    return ok
