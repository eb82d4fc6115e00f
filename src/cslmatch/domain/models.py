"""Domain model for CSL packages, planes and aircraft reference data.

Conventions:
  - A `Package` is one folder holding an ``xsb_aircraft.txt`` declaration file.
  - A plane is one renderable model declared inside a package. The four plane
    kinds are separate dataclasses; only the modern-object kind carries
    attachments and only the legacy kinds carry texture naming.
  - Identity keys are the present parts of ICAO/group, airline and livery
    joined with a single space, e.g. ``"B738 DLH"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

# pylint: disable=too-many-instance-attributes


# --- Resolution sentinel ---


def _get_resolution_failed() -> "_ResolutionFailedType":
    # Factory used by pickle to retrieve the one true instance.
    return RESOLUTION_FAILED


@dataclass(frozen=True)
class _ResolutionFailedType:
    """Sentinel stored in a handle field when the renderer could not load the asset.

    This is distinct from `None`, which means "not resolved yet".
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "RESOLUTION_FAILED"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_resolution_failed, ())


RESOLUTION_FAILED = _ResolutionFailedType()

type Handle = int | _ResolutionFailedType | None


# --- Reference data ---


class WeightCategory(Enum):
    """Wake turbulence categories found in ICAO Doc 8643."""

    LIGHT = "L"
    MEDIUM = "M"
    HEAVY = "H"

    @classmethod
    def describe(cls, category: str) -> str:
        """Return a readable name for a category letter ("other" if unknown)."""
        try:
            return cls(category).name.lower()
        except ValueError:
            return "other"


@dataclass(frozen=True, slots=True)
class AircraftCode:
    """Equipment information for one ICAO aircraft type designator.

    Conventions:
      - `equip` is the Doc 8643 description, e.g. "L2J" (landplane, two jets).
        Index 1 is the engine count and index 2 the engine type.
      - `category` is the single wake category letter (L, M, H, ...).
    """

    icao: str
    equip: str
    category: str

    @property
    def engine_count(self) -> str | None:
        """Engine count character, or None if the descriptor is not 3 characters."""
        return self.equip[1] if len(self.equip) == 3 else None  # pylint: disable=magic-value-comparison

    @property
    def engine_type(self) -> str | None:
        """Engine type character, or None if the descriptor is not 3 characters."""
        return self.equip[2] if len(self.equip) == 3 else None  # pylint: disable=magic-value-comparison


# --- Planes ---


class PlaneKind(Enum):
    """Enumeration of the renderable model kinds."""

    LEGACY_ENGINE = "legacy-engine"
    LEGACY_STATIC = "legacy-static"
    LIGHTS_OVERLAY = "lights-overlay"
    MODERN_OBJECT = "modern-object"


class DrawRole(Enum):
    """How an OBJ8 attachment is drawn."""

    LIGHTS = "LIGHTS"
    SOLID = "SOLID"


@dataclass(frozen=True, slots=True)
class Attachment:
    """One sub-object of a modern-object plane."""

    draw_role: DrawRole
    needs_animation: bool
    path: str


@dataclass(slots=True)
class BasePlane:
    """Fields shared by every plane kind."""

    KIND: ClassVar[PlaneKind]

    path: str
    icao: str = ""
    airline: str = ""
    livery: str = ""
    moving_gear: bool = True
    vert_offset: float | None = None

    @property
    def kind(self) -> PlaneKind:
        """The plane kind tag."""
        return self.KIND

    def is_matchable(self) -> bool:
        """Return True if the matching engine may hand out this plane."""
        return True


@dataclass(slots=True)
class LegacyEnginePlane(BasePlane):
    """A model drawn by the simulator's own aircraft engine (``AIRCRAFT``).

    `runtime_index` stays None until the host has loaded the aircraft; such a
    placeholder is never matched.
    """

    KIND: ClassVar[PlaneKind] = PlaneKind.LEGACY_ENGINE

    runtime_index: int | None = None

    def is_matchable(self) -> bool:
        return self.runtime_index is not None


@dataclass(slots=True)
class LegacyStaticPlane(BasePlane):
    """A legacy OBJ7 model with an optional texture (``OBJECT`` / ``TEXTURE``)."""

    KIND: ClassVar[PlaneKind] = PlaneKind.LEGACY_STATIC

    dir_names: list[str] = field(default_factory=list)
    object_name: str = ""
    texture_name: str = ""
    texture_path: str = ""
    texture_handle: Handle = None

    def is_matchable(self) -> bool:
        return self.texture_handle is not RESOLUTION_FAILED


@dataclass(slots=True)
class LightsOverlayPlane(BasePlane):
    """A lights-only overlay; no declaration command creates one."""

    KIND: ClassVar[PlaneKind] = PlaneKind.LIGHTS_OVERLAY


@dataclass(slots=True)
class ModernObjectPlane(BasePlane):
    """An OBJ8 model assembled from attachments (``OBJ8_AIRCRAFT`` / ``OBJ8``)."""

    KIND: ClassVar[PlaneKind] = PlaneKind.MODERN_OBJECT

    dir_names: list[str] = field(default_factory=list)
    object_name: str = ""
    attachments: list[Attachment] = field(default_factory=list)
    texture_handle: Handle = None
    lit_texture_handle: Handle = None

    def is_matchable(self) -> bool:
        return self.texture_handle is not RESOLUTION_FAILED


type Plane = LegacyEnginePlane | LegacyStaticPlane | LightsOverlayPlane | ModernObjectPlane


# --- Packages ---


class MatchTable(Enum):
    """The identity tables built for each package, one per populated match pass."""

    ICAO_AIRLINE_LIVERY = "icao airline livery"
    ICAO_AIRLINE = "icao airline"
    GROUP_AIRLINE_LIVERY = "group airline livery"
    GROUP_AIRLINE = "group airline"
    ICAO = "icao"
    GROUP = "group"


def identity_key(*parts: str) -> str:
    """Join the non-empty identity parts with a single space."""
    return " ".join(part for part in parts if part)


def _empty_tables() -> dict[MatchTable, dict[str, int]]:
    return {table: {} for table in MatchTable}


@dataclass(slots=True)
class Package:
    """One loaded CSL package.

    Conventions:
      - `path` is the package root folder, `name` its ``EXPORT_NAME``.
      - `planes` keeps declaration order.
      - `matches` maps each `MatchTable` to ``{identity key: plane index}``;
        the first plane declared with a key owns it.
    """

    path: str
    name: str = ""
    planes: list[Plane] = field(default_factory=list)
    matches: dict[MatchTable, dict[str, int]] = field(default_factory=_empty_tables)
    dependencies: list[str] = field(default_factory=list)
    missing_dependencies: list[str] = field(default_factory=list)

    @property
    def has_valid_header(self) -> bool:
        """True if the header scan found an export name."""
        return bool(self.name)

    @property
    def root_dir_name(self) -> str:
        """Last component of the package root path."""
        return self.path.rsplit("/", 1)[-1]

    def add_plane(self, plane: Plane) -> int:
        """Append a plane and return its index."""
        self.planes.append(plane)
        return len(self.planes) - 1

    def add_match(self, table: MatchTable, key: str, index: int) -> bool:
        """Index `key` to plane `index` unless the key is already taken.

        Returns:
            bool: True if the entry was inserted, False if an earlier plane owns it.
        """
        entries = self.matches[table]
        if key in entries:
            return False
        entries[key] = index
        return True

    def lookup(self, table: MatchTable, key: str) -> Plane | None:
        """Return the plane indexed under `key` in `table`, if any."""
        index = self.matches[table].get(key)
        if index is None:
            return None
        return self.planes[index]
