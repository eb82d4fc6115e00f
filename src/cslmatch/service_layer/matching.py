"""Model matching: pick the best plane for an ICAO/airline/livery query.

The search degrades in three phases and stops at the first hit:

A. Exact passes. Eight passes from best (ICAO + airline + livery) to worst
   (related group only). Passes are the outer loop and packages the inner
   loop, so a weaker pass is only tried once every package has been checked
   at the stronger one; within a pass the first package loaded wins.
B. Equipment passes. When nothing matched, look for any indexed plane whose
   type has the same wake category and a similar Doc 8643 equipment
   descriptor, optionally flown by the same airline.
C. Default. Repeat the whole search once for the default ICAO designator.

`match_plane` never mutates the catalog.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from cslmatch import config
from cslmatch.domain.models import (
    AircraftCode,
    MatchTable,
    Package,
    Plane,
    WeightCategory,
    identity_key,
)

if TYPE_CHECKING:
    from .catalog import Catalog

logger = logging.getLogger(__name__)

# pylint: disable=magic-value-comparison


class MatchPhase(Enum):
    """Which phase of the search produced a match."""

    EXACT = "exact"
    EQUIPMENT = "equipment"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A matched plane.

    Attributes:
        plane: The plane to render.
        package: The package that declared it.
        quality: The exact pass number (0 best .. 7 worst), or None for
            equipment and default matches.
        phase: The phase that produced the match.
    """

    plane: Plane
    package: Package
    quality: int | None
    phase: MatchPhase


@dataclass(frozen=True, slots=True)
class MatchPass:
    """How to build the key of one exact pass and which table to search."""

    number: int
    use_icao: bool
    use_airline: bool
    use_livery: bool
    table: MatchTable | None


# ICAO + livery without airline is never indexed, so passes 4 and 6 never hit.
MATCH_PASSES: tuple[MatchPass, ...] = (
    MatchPass(0, True, True, True, MatchTable.ICAO_AIRLINE_LIVERY),
    MatchPass(1, True, True, False, MatchTable.ICAO_AIRLINE),
    MatchPass(2, False, True, True, MatchTable.GROUP_AIRLINE_LIVERY),
    MatchPass(3, False, True, False, MatchTable.GROUP_AIRLINE),
    MatchPass(4, True, False, True, None),
    MatchPass(5, True, False, False, MatchTable.ICAO),
    MatchPass(6, False, False, True, None),
    MatchPass(7, False, False, False, MatchTable.GROUP),
)


@dataclass(frozen=True, slots=True)
class EquipmentPass:
    """One equipment fallback pass.

    Levels:
        1. full equipment descriptor ("L2J")
        2. engine count and engine type ("2J")
        3. engine count ("2")
        4. engine type ("J")
        5. wake category only
    """

    match_airline: bool
    level: int
    description: str


EQUIPMENT_PASSES: tuple[EquipmentPass, ...] = (
    EquipmentPass(True, 1, "matching airline, WTC and configuration"),
    EquipmentPass(True, 2, "matching airline, WTC, #engines and enginetype"),
    EquipmentPass(False, 1, "matching WTC and configuration"),
    EquipmentPass(False, 2, "matching WTC, #engines and enginetype"),
    EquipmentPass(True, 3, "matching airline, WTC, #engines"),
    EquipmentPass(True, 4, "matching airline, WTC, enginetype"),
    EquipmentPass(False, 3, "matching WTC, #engines"),
    EquipmentPass(False, 4, "matching WTC, enginetype"),
    EquipmentPass(True, 5, "matching airline, WTC"),
    EquipmentPass(False, 5, "matching WTC"),
)


def _trace(debug: bool, msg: str, *args: object) -> None:
    if debug:
        logger.debug(msg, *args)


def match_exact(
    catalog: Catalog, icao: str, airline: str = "", livery: str = "", *, debug: bool = False
) -> MatchResult | None:
    """Phase A: search the identity tables pass by pass."""
    group = catalog.groupings.get(icao, "")
    _trace(
        debug,
        "MATCH - ICAO=%s AIRLINE=%s LIVERY=%s GROUP=%s",
        icao,
        airline,
        livery,
        group,
    )

    for match_pass in MATCH_PASSES:
        if not match_pass.use_icao and not group:
            _trace(debug, "MATCH -    Skipping %d Due nil Group", match_pass.number)
            continue
        if match_pass.use_airline and not airline:
            _trace(debug, "MATCH -    Skipping %d Due Absent Airline", match_pass.number)
            continue
        if match_pass.use_livery and not livery:
            _trace(debug, "MATCH -    Skipping %d Due Absent Livery", match_pass.number)
            continue
        if match_pass.table is None:
            continue

        key = identity_key(
            icao if match_pass.use_icao else group,
            airline if match_pass.use_airline else "",
            livery if match_pass.use_livery else "",
        )
        _trace(debug, "MATCH -    Group %d key %s", match_pass.number, key)

        for package in catalog.packages:
            plane = package.lookup(match_pass.table, key)
            if plane is not None and plane.is_matchable():
                _trace(
                    debug,
                    "MATCH - Found: %s/%s/%s : %s",
                    plane.icao,
                    plane.airline,
                    plane.livery,
                    plane.path,
                )
                return MatchResult(plane, package, match_pass.number, MatchPhase.EXACT)

    _trace(debug, "MATCH - No match.")
    return None


def equipment_matches(wanted: AircraftCode, candidate: AircraftCode, level: int) -> bool:
    """Return True if `candidate` is similar enough to `wanted` at `level` (1-5)."""
    if candidate.category != wanted.category:
        return False
    if level < 5 and (len(candidate.equip) != 3 or len(wanted.equip) != 3):
        return False
    if level in (1, 2, 4) and candidate.engine_type != wanted.engine_type:
        return False
    if level <= 3 and candidate.engine_count != wanted.engine_count:
        return False
    if level == 1 and candidate.equip != wanted.equip:
        return False
    return True


def match_equipment(
    catalog: Catalog, icao: str, airline: str = "", *, debug: bool = False
) -> MatchResult | None:
    """Phase B: find a plane of a similar type via Doc 8643 equipment data.

    Candidates are the keys of each package's ICAO (or ICAO + airline) table,
    visited in sorted key order.
    """
    wanted = catalog.aircraft_codes.get(icao)
    if wanted is None:
        _trace(debug, "aircraft codes have no entry for %s", icao)
        return None

    _trace(
        debug,
        "MATCH/acf - Looking for a %s %s aircraft",
        WeightCategory.describe(wanted.category),
        wanted.equip,
    )

    for equipment_pass in EQUIPMENT_PASSES:
        if equipment_pass.match_airline and not airline:
            continue
        _trace(debug, "Match/acf - %s", equipment_pass.description)

        table = MatchTable.ICAO_AIRLINE if equipment_pass.match_airline else MatchTable.ICAO
        for package in catalog.packages:
            entries = package.matches[table]
            for key in sorted(entries):
                plane = package.planes[entries[key]]
                if not plane.is_matchable():
                    continue
                # first word rather than a 4-character slice, so 3-letter designators work
                candidate_icao, _, candidate_airline = key.partition(" ")
                candidate = catalog.aircraft_codes.get(candidate_icao)
                if candidate is None:
                    continue
                if not equipment_matches(wanted, candidate, equipment_pass.level):
                    continue
                if equipment_pass.match_airline and candidate_airline != airline:
                    continue
                _trace(debug, "MATCH/acf - found: %s", key)
                return MatchResult(plane, package, None, MatchPhase.EQUIPMENT)

    return None


def match_plane(  # pylint: disable=too-many-arguments
    catalog: Catalog,
    icao: str,
    airline: str = "",
    livery: str = "",
    *,
    default_icao: str | None = None,
    use_default: bool = True,
    debug: bool = False,
) -> MatchResult | None:
    """Return the best plane for an aircraft, or None.

    Args:
        catalog: A fully loaded catalog.
        icao: ICAO type designator of the aircraft, e.g. "B738".
        airline: ICAO airline code, empty if unknown.
        livery: Livery code, empty if unknown.
        default_icao: Designator searched when nothing else matches; defaults
            to `config.get_default_icao()`.
        use_default: Set to False to disable the default fallback.
        debug: Emit a DEBUG trace of every pass.

    Returns:
        MatchResult | None: The match, or None if even the default failed.
    """
    result = match_exact(catalog, icao, airline, livery, debug=debug)
    if result is None:
        result = match_equipment(catalog, icao, airline, debug=debug)
    if result is not None:
        return result

    default = default_icao if default_icao is not None else config.get_default_icao()
    if icao == default or not use_default:
        return None

    _trace(debug, "MATCH - falling back to default %s", default)
    result = match_plane(
        catalog, default, default_icao=default, use_default=False, debug=debug
    )
    if result is None:
        return None
    return dataclasses.replace(result, quality=None, phase=MatchPhase.DEFAULT)
