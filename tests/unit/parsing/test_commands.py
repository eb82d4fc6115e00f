"""Unit tests for the header scan and command keywords."""

import logging

import pytest

from cslmatch.domain.models import Package
from cslmatch.parsing.commands import CommandKind, parse_package_header

SOURCE = "CSL/Pk/xsb_aircraft.txt"


@pytest.mark.parametrize(
    ("keyword", "expected"),
    [("OBJ8", CommandKind.OBJ8), ("ICAO", CommandKind.ICAO), ("icao", None), ("FOO", None)],
)
def test_lookup_is_case_sensitive(keyword, expected):
    """Keywords are matched exactly."""
    assert CommandKind.lookup(keyword) is expected


def test_header_finds_export_name():
    """The first well-formed EXPORT_NAME names the package."""
    content = "# header\nDEPENDENCY Other\nEXPORT_NAME Pk\nEXPORT_NAME Later\n"

    package = parse_package_header("CSL/Pk", SOURCE, content, [])

    assert package.name == "Pk"
    assert package.has_valid_header
    assert not package.planes


def test_header_without_export_name_is_invalid():
    """A file with no EXPORT_NAME yields an unnamed package."""
    package = parse_package_header("CSL/Pk", SOURCE, "OBJECT Pk/a.obj\n", [])
    assert not package.has_valid_header


def test_malformed_export_name_is_reported_and_scan_continues(caplog):
    """A wrong argument count is reported; a later EXPORT_NAME still counts."""
    content = "EXPORT_NAME\nEXPORT_NAME Pk\n"

    with caplog.at_level(logging.WARNING, logger="cslmatch.parsing"):
        package = parse_package_header("CSL/Pk", SOURCE, content, [])

    assert package.name == "Pk"
    assert "EXPORT_NAME command requires 1 argument." in caplog.text
    assert f"Parse Error in file {SOURCE} line 1." in caplog.text


def test_duplicate_name_is_reported_and_skipped(caplog):
    """A name already exported by a known package is not taken."""
    known = [Package(path="CSL/First", name="Pk")]

    with caplog.at_level(logging.WARNING, logger="cslmatch.parsing"):
        package = parse_package_header("CSL/Second", SOURCE, "EXPORT_NAME Pk\n", known)

    assert not package.has_valid_header
    assert (
        "Package name Pk already in use by CSL/First requested by use by CSL/Second"
        in caplog.text
    )


def test_duplicate_then_unique_name():
    """After a rejected duplicate the scan accepts the next unique name."""
    known = [Package(path="CSL/First", name="Pk")]
    content = "EXPORT_NAME Pk\nEXPORT_NAME Pk2\n"

    package = parse_package_header("CSL/Second", SOURCE, content, known)

    assert package.name == "Pk2"
