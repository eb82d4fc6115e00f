"""Declaration commands and the header-phase dispatcher.

An ``xsb_aircraft.txt`` file is a list of commands, one per line, each starting
with a case-sensitive keyword. Loading a package reads the file twice:

1. The header scan (`parse_package_header`) only looks for ``EXPORT_NAME`` so
   every package's name is known before any path or dependency is resolved.
2. The full parse (`cslmatch.parsing.builder.PackageBuilder`) dispatches every
   command and builds the package's planes and identity tables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from cslmatch.domain.errors import DuplicatePackageNameError
from cslmatch.domain.models import Package

from .lines import iter_command_lines
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class CommandKind(StrEnum):
    """Every keyword understood by the full parse."""

    EXPORT_NAME = "EXPORT_NAME"
    DEPENDENCY = "DEPENDENCY"
    OBJECT = "OBJECT"
    TEXTURE = "TEXTURE"
    AIRCRAFT = "AIRCRAFT"
    OBJ8_AIRCRAFT = "OBJ8_AIRCRAFT"
    OBJ8 = "OBJ8"
    VERT_OFFSET = "VERT_OFFSET"
    HASGEAR = "HASGEAR"
    ICAO = "ICAO"
    AIRLINE = "AIRLINE"
    LIVERY = "LIVERY"

    @classmethod
    def lookup(cls, keyword: str) -> CommandKind | None:
        """Return the command for `keyword`, or None if it is not a known keyword."""
        try:
            return cls(keyword)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class LineContext:
    """Where a command came from, for diagnostics."""

    source: str
    line_number: int
    line: str


def report_parse_error(
    ctx: LineContext, message: str | None = None, level: int = logging.WARNING
) -> None:
    """Log a parse diagnostic for the line described by `ctx` at `level`."""
    if message:
        logger.log(
            level,
            "Parse Error in file %s line %d.\n    %s\n    %s",
            ctx.source,
            ctx.line_number,
            ctx.line,
            message,
        )
    else:
        logger.log(
            level,
            "Parse Error in file %s line %d.\n    %s",
            ctx.source,
            ctx.line_number,
            ctx.line,
        )


def _find_by_name(packages: Iterable[Package], name: str) -> Package | None:
    for package in packages:
        if package.name == name:
            return package
    return None


def parse_package_header(
    path: str, source: str, content: str, known_packages: Iterable[Package]
) -> Package:
    """Scan a declaration file for its ``EXPORT_NAME``.

    The scan stops at the first ``EXPORT_NAME`` that names the package.
    A well-formed ``EXPORT_NAME`` whose name is already exported by one of
    `known_packages` is reported and skipped, and the scan goes on.

    Args:
        path: The package root folder.
        source: The declaration file path, for diagnostics.
        content: The declaration file text.
        known_packages: Packages that already own their names.

    Returns:
        Package: A package holding only `path` and, if found, `name`. Check
        `Package.has_valid_header` before keeping it.
    """
    known = list(known_packages)
    package = Package(path=path)
    for line_number, line in iter_command_lines(content):
        tokens = tokenize(line)
        if CommandKind.lookup(tokens[0]) is not CommandKind.EXPORT_NAME:
            continue
        ctx = LineContext(source, line_number, line)
        if len(tokens) != 2:  # pylint: disable=magic-value-comparison
            report_parse_error(ctx, "EXPORT_NAME command requires 1 argument.")
            continue
        name = tokens[1]
        if (existing := _find_by_name(known, name)) is not None:
            report_parse_error(
                ctx, str(DuplicatePackageNameError(name, existing.path, path))
            )
            continue
        package.name = name
        break
    return package
