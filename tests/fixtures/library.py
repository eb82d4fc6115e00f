"""Fixtures for building CSL package libraries in memory."""

from collections.abc import Callable

import pytest

from cslmatch.adapters.filesystem import InMemoryFileSystem
from cslmatch.adapters.host import StaticHost
from cslmatch.service_layer.catalog import Catalog, load_catalog

# pylint: disable=redefined-outer-name

PACKAGES_DIR = "CSL"
RELATED_PATH = "related.txt"
DOC8643_PATH = "Doc8643.txt"

# manufacturer, model, designator, equipment, wake category
DOC8643 = "\n".join(
    [
        "AIRBUS\tA-319\tA319\tL2J\tM",
        "AIRBUS\tA-320\tA320\tL2J\tM",
        "AIRBUS\tA-321\tA321\tL2J\tM",
        "ATR\tATR-72\tAT72\tL2T\tM",
        "BOEING\t737-700\tB737\tL2J\tM",
        "BOEING\t737-800\tB738\tL2J\tM",
        "BOEING\t747-400\tB744\tL4J\tH",
        "CESSNA\t172 Skyhawk\tC172\tL1P\tL",
        "EMBRAER\tERJ-190\tE190\tL2J\tM",
    ]
)

RELATED = "\n".join(
    [
        "; related aircraft, one family per row",
        "A319 A320 A321",
        "B736 B737 B738 B739",
    ]
)


@pytest.fixture
def host() -> StaticHost:
    """A simulator at version 1200 with matching diagnostics off."""
    return StaticHost(version=1200, root="", debug_matching=False)


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    """A fresh in-memory filesystem holding only the reference documents."""
    return InMemoryFileSystem({RELATED_PATH: RELATED, DOC8643_PATH: DOC8643})


@pytest.fixture
def load_library(
    memory_fs: InMemoryFileSystem, host: StaticHost
) -> Callable[[dict[str, str]], Catalog]:
    """Factory fixture: write packages and load them into a new catalog.

    Example:
        ```py
        catalog = load_library({"01_Base": "EXPORT_NAME Base\\n..."})
        ```

    Keys are package folder names below ``CSL/``; folders load in sorted
    order, so a numeric prefix fixes the priority.
    """

    def _load_library(packages: dict[str, str]) -> Catalog:
        for folder, content in packages.items():
            memory_fs.add_file(f"{PACKAGES_DIR}/{folder}/xsb_aircraft.txt", content)
        catalog = Catalog()
        load_catalog(
            catalog,
            PACKAGES_DIR,
            RELATED_PATH,
            DOC8643_PATH,
            filesystem=memory_fs,
            host=host,
        )
        return catalog

    return _load_library
