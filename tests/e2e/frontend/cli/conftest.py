"""Fixtures for end-to-end tests of the ``cslmatch`` CLI.

A small CSL library is written to a temporary folder laid out like a
simulator's resources folder: ``CSL/`` holds the packages and the reference
documents sit next to it.
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.fixtures.library import DOC8643, RELATED

# pylint: disable=redefined-outer-name

PACKAGES = {
    "01_Generic": (
        "EXPORT_NAME Generic\n"
        "OBJECT Generic/A320/A320.obj\n"
        "ICAO A320\n"
        "OBJECT Generic/B738/B738.obj\n"
        "ICAO B738\n"
    ),
    "02_Liveries": (
        "EXPORT_NAME Liveries\n"
        "DEPENDENCY Generic\n"
        "OBJ8_AIRCRAFT B738_DLH\n"
        "OBJ8 SOLID YES Liveries/B738/DLH.obj\n"
        "AIRLINE B738 DLH\n"
        "WINGSPAN 34\n"
    ),
}


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def resources(tmp_path: Path) -> Path:
    """A resources folder with ``CSL/``, ``related.txt`` and ``Doc8643.txt``."""
    for folder, content in PACKAGES.items():
        package_dir = tmp_path / "CSL" / folder
        package_dir.mkdir(parents=True)
        (package_dir / "xsb_aircraft.txt").write_text(content, encoding="utf-8")
    (tmp_path / "related.txt").write_text(RELATED, encoding="utf-8")
    (tmp_path / "Doc8643.txt").write_text(DOC8643, encoding="utf-8")
    return tmp_path


@pytest.fixture
def cli_args(resources: Path) -> list[str]:
    """Group options shared by every invocation (no log file is written)."""
    return ["--no-flight-recorder", "--no-color"]


@pytest.fixture
def packages_dir(resources: Path) -> str:
    """Path of the ``CSL`` folder."""
    return str(resources / "CSL")


@pytest.fixture(autouse=True)
def reset_project_logger_levels():
    """Undo ``-L`` overrides so they do not leak into later tests."""
    yield
    for name, item in list(logging.root.manager.loggerDict.items()):
        if name.startswith("cslmatch") and isinstance(item, logging.Logger):
            item.setLevel(logging.NOTSET)
