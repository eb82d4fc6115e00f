"""Full-phase parser that builds a package's planes and identity tables.

A `PackageBuilder` walks one declaration file. Declaration commands
(``OBJECT``, ``AIRCRAFT``, ``OBJ8_AIRCRAFT``) start a new plane; every other
plane command (``TEXTURE``, ``OBJ8``, ``VERT_OFFSET``, ``HASGEAR`` and the
three identity commands) applies to the plane currently under construction.

A command that cannot be applied is reported and skipped; it never aborts the
rest of the file.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, TypeVar

from cslmatch import config
from cslmatch.domain.errors import (
    CommandError,
    MalformedCommandError,
    MissingDependencyError,
    SequencingError,
    UnresolvedReferenceError,
)
from cslmatch.domain.models import (
    Attachment,
    BasePlane,
    DrawRole,
    LegacyEnginePlane,
    LegacyStaticPlane,
    MatchTable,
    ModernObjectPlane,
    Package,
    Plane,
    identity_key,
)

from .commands import CommandKind, LineContext, report_parse_error
from .lines import iter_command_lines
from .paths import (
    file_stem,
    normalize_partial_path,
    relative_to,
    substitute_package_prefix,
)
from .throttle import DiagnosticThrottle, ThrottledMessage
from .tokenizer import tokenize

if TYPE_CHECKING:
    from cslmatch.interfaces.host import HostEnvironment

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BasePlane)

YES, NO = "YES", "NO"

DECLARATIONS = frozenset(
    {CommandKind.OBJECT, CommandKind.AIRCRAFT, CommandKind.OBJ8_AIRCRAFT}
)

# pylint: disable=magic-value-comparison


class PackageBuilder:
    """Applies full-phase commands to one package.

    Args:
        package: The package under construction; its `path` and `name` come
            from the header scan.
        known_packages: Every package in the catalog, in catalog order. Used to
            resolve package-relative paths and ``DEPENDENCY`` names.
        groupings: ICAO designator to related-group label.
        host: The host environment.
        throttle: Counter for repeated diagnostics; a fresh one is created if
            omitted.
    """

    def __init__(
        self,
        package: Package,
        *,
        known_packages: Sequence[Package],
        groupings: Mapping[str, str],
        host: HostEnvironment,
        throttle: DiagnosticThrottle | None = None,
    ) -> None:
        self.package = package
        self._known_packages = known_packages
        self._groupings = groupings
        self._host = host
        self.throttle = throttle if throttle is not None else DiagnosticThrottle()
        self._current: Plane | None = None
        self._current_index = -1
        self._skipping = False

    @property
    def source(self) -> str:
        """Path of the declaration file, for diagnostics."""
        return f"{self.package.path}/{config.PACKAGE_FILE_NAME}"

    @property
    def current_plane(self) -> Plane | None:
        """The plane that attribute commands currently apply to."""
        return self._current

    def build(self, content: str) -> Package:
        """Apply every command line of `content`, then flush suppressed diagnostics."""
        for line_number, line in iter_command_lines(content):
            self.apply(line_number, line)
        self.throttle.flush(self.source)
        return self.package

    def apply(self, line_number: int, line: str) -> bool:
        """Dispatch one trimmed, non-comment line.

        Returns:
            bool: True if the command was applied, False if it was rejected.
        """
        ctx = LineContext(self.source, line_number, line)
        tokens = tokenize(line)
        if not tokens:
            return False
        if (kind := CommandKind.lookup(tokens[0])) is None:
            report_parse_error(ctx)
            return False
        try:
            self._dispatch(kind, tokens, ctx)
        except CommandError as e:
            if kind in DECLARATIONS:
                # attribute commands up to the next declaration belong to the failed model
                self._skip_plane()
            if not e.suppressed:
                report_parse_error(ctx, e.message)
            return False
        return True

    def _dispatch(
        self, kind: CommandKind, tokens: list[str], ctx: LineContext
    ) -> None:
        match kind:
            case CommandKind.EXPORT_NAME:
                pass  # consumed by the header scan
            case CommandKind.DEPENDENCY:
                self._dependency(tokens)
            case CommandKind.OBJECT:
                self._object(tokenize(ctx.line, max_tokens=2))
            case CommandKind.TEXTURE:
                self._texture(tokenize(ctx.line, max_tokens=2))
            case CommandKind.AIRCRAFT:
                self._aircraft(tokenize(ctx.line, max_tokens=4))
            case CommandKind.OBJ8_AIRCRAFT:
                self._obj8_aircraft(tokens, ctx)
            case CommandKind.OBJ8:
                self._obj8(tokens, ctx)
            case CommandKind.VERT_OFFSET:
                self._vert_offset(tokens)
            case CommandKind.HASGEAR:
                self._has_gear(tokens)
            case CommandKind.ICAO:
                self._icao(tokens)
            case CommandKind.AIRLINE:
                self._airline(tokens)
            case CommandKind.LIVERY:
                self._livery(tokens)

    # --- helpers ---

    def _resolve(self, keyword: str, raw_path: str) -> tuple[str, str]:
        """Return ``(relative, absolute)`` for a package-relative path."""
        relative = normalize_partial_path(raw_path)
        absolute = substitute_package_prefix(relative, self._known_packages)
        if absolute is None:
            raise UnresolvedReferenceError(keyword, "package not found.")
        return relative, absolute

    def _start_plane(self, plane: Plane) -> None:
        self._current_index = self.package.add_plane(plane)
        self._current = plane
        self._skipping = False
        logger.debug("Got %s plane: %s", plane.kind.value, plane.path)

    def _skip_plane(self) -> None:
        self._current = None
        self._current_index = -1
        self._skipping = True

    def _require(self, keyword: str, plane_type: type[P], declaration: str) -> P:
        plane = self._current
        if plane is None:
            raise SequencingError(
                keyword,
                f"{keyword} must follow {declaration}.",
                suppressed=self._skipping,
            )
        if not isinstance(plane, plane_type):
            raise SequencingError(
                keyword,
                f"{keyword} must follow {declaration}, "
                f"but the current plane is {plane.kind.value}.",
            )
        return plane

    def _require_plane(self, keyword: str) -> BasePlane:
        return self._require(keyword, BasePlane, "a plane declaration")

    def _index_identity(self, icao: str, airline: str = "", livery: str = "") -> None:
        if livery:
            icao_table, group_table = (
                MatchTable.ICAO_AIRLINE_LIVERY,
                MatchTable.GROUP_AIRLINE_LIVERY,
            )
        elif airline:
            icao_table, group_table = MatchTable.ICAO_AIRLINE, MatchTable.GROUP_AIRLINE
        else:
            icao_table, group_table = MatchTable.ICAO, MatchTable.GROUP

        index = self._current_index
        self.package.add_match(icao_table, identity_key(icao, airline, livery), index)
        if group := self._groupings.get(icao, ""):
            self.package.add_match(
                group_table, identity_key(group, airline, livery), index
            )

    # --- commands ---

    def _dependency(self, tokens: list[str]) -> None:
        # DEPENDENCY <package name>
        if len(tokens) != 2:
            raise MalformedCommandError(
                CommandKind.DEPENDENCY, "DEPENDENCY command needs 1 argument."
            )
        name = tokens[1]
        self.package.dependencies.append(name)
        if not any(package.name == name for package in self._known_packages):
            self.package.missing_dependencies.append(name)
            raise MissingDependencyError(CommandKind.DEPENDENCY, name)

    def _object(self, tokens: list[str]) -> None:
        # OBJECT <path>
        if len(tokens) != 2:
            raise MalformedCommandError(
                CommandKind.OBJECT, "OBJECT command takes 1 argument."
            )
        relative, absolute = self._resolve(CommandKind.OBJECT, tokens[1])
        components = tokenize(relative, "/")
        self._start_plane(
            LegacyStaticPlane(
                path=absolute,
                dir_names=[self.package.root_dir_name, *components[1:-1]],
                object_name=file_stem(relative),
            )
        )

    def _texture(self, tokens: list[str]) -> None:
        # TEXTURE <path>
        if len(tokens) != 2:
            raise MalformedCommandError(
                CommandKind.TEXTURE, "TEXTURE command takes 1 argument."
            )
        _, absolute = self._resolve(CommandKind.TEXTURE, tokens[1])
        plane = self._require(
            CommandKind.TEXTURE, LegacyStaticPlane, "an OBJECT declaration"
        )
        plane.texture_path = absolute
        plane.texture_name = file_stem(absolute)

    def _aircraft(self, tokens: list[str]) -> None:
        # AIRCRAFT <min version> <max version> <path>
        if len(tokens) != 4:
            raise MalformedCommandError(
                CommandKind.AIRCRAFT, "AIRCRAFT command takes 3 arguments."
            )
        try:
            min_version, max_version = int(tokens[1]), int(tokens[2])
        except ValueError as e:
            raise MalformedCommandError(
                CommandKind.AIRCRAFT, "AIRCRAFT version range must be two integers."
            ) from e

        version = self._host.sim_version()
        if not min_version <= version <= max_version:
            logger.debug(
                "Skipping AIRCRAFT %s: sim version %d outside [%d, %d]",
                tokens[3],
                version,
                min_version,
                max_version,
            )
            self._skip_plane()
            return

        _, absolute = self._resolve(CommandKind.AIRCRAFT, tokens[3])
        self._start_plane(LegacyEnginePlane(path=absolute))

    def _obj8_aircraft(self, tokens: list[str], ctx: LineContext) -> None:
        # OBJ8_AIRCRAFT <name>
        if len(tokens) != 2:
            show = self.throttle.should_emit(ThrottledMessage.OBJ8_AIRCRAFT_ARGS)
            if len(tokens) < 2:
                raise MalformedCommandError(
                    CommandKind.OBJ8_AIRCRAFT,
                    "OBJ8_AIRCRAFT command takes 1 argument.",
                    suppressed=not show,
                )
            if show:
                report_parse_error(ctx, "OBJ8_AIRCRAFT command takes 1 argument.")

        self._start_plane(
            ModernObjectPlane(
                path=tokens[1],
                dir_names=[self.package.root_dir_name],
                object_name=tokens[1],
            )
        )

    def _obj8(self, tokens: list[str], ctx: LineContext) -> None:
        # OBJ8 <LIGHTS|SOLID> <YES|NO> <path> {<texture> {<lit texture>}}
        if len(tokens) < 4:
            raise MalformedCommandError(
                CommandKind.OBJ8, "OBJ8 command takes 3 arguments."
            )
        if len(tokens) > 4 and self.throttle.should_emit(
            ThrottledMessage.OBJ8_EXTRA_ARGS
        ):
            report_parse_error(
                ctx,
                "OBJ8 command takes only 3 arguments, rest ignored.",
                level=logging.INFO,
            )

        plane = self._require(
            CommandKind.OBJ8, ModernObjectPlane, "an OBJ8_AIRCRAFT declaration"
        )

        try:
            draw_role = DrawRole(tokens[1])
        except ValueError as e:
            raise MalformedCommandError(
                CommandKind.OBJ8,
                f"valid OBJ8 part types are LIGHTS or SOLID. Got {tokens[1]}.",
                suppressed=not self.throttle.should_emit(
                    ThrottledMessage.OBJ8_INVALID_PART
                ),
            ) from e

        needs_animation = tokens[2] == YES
        if tokens[2] not in (YES, NO):
            report_parse_error(
                ctx, f"OBJ8 animation flag must be YES or NO, got {tokens[2]}."
            )

        _, absolute = self._resolve(CommandKind.OBJ8, tokens[3])
        plane.attachments.append(
            Attachment(
                draw_role=draw_role,
                needs_animation=needs_animation,
                path=relative_to(absolute, self._host.system_path()),
            )
        )

    def _vert_offset(self, tokens: list[str]) -> None:
        # VERT_OFFSET <meters>
        if len(tokens) != 2:
            raise MalformedCommandError(
                CommandKind.VERT_OFFSET,
                "VERT_OFFSET command takes 1 argument.",
                suppressed=not self.throttle.should_emit(
                    ThrottledMessage.VERT_OFFSET_ARGS
                ),
            )
        try:
            offset = float(tokens[1])
        except ValueError as e:
            raise MalformedCommandError(
                CommandKind.VERT_OFFSET,
                f"VERT_OFFSET argument must be a number, got {tokens[1]}.",
            ) from e
        self._require_plane(CommandKind.VERT_OFFSET).vert_offset = offset

    def _has_gear(self, tokens: list[str]) -> None:
        # HASGEAR YES|NO
        if len(tokens) != 2 or tokens[1] not in (YES, NO):
            raise MalformedCommandError(
                CommandKind.HASGEAR,
                "HASGEAR takes one argument that must be YES or NO.",
            )
        self._require_plane(CommandKind.HASGEAR).moving_gear = tokens[1] == YES

    def _icao(self, tokens: list[str]) -> None:
        # ICAO <code>
        if len(tokens) != 2:
            raise MalformedCommandError(
                CommandKind.ICAO, "ICAO command takes 1 argument."
            )
        plane = self._require_plane(CommandKind.ICAO)
        plane.icao = tokens[1]
        self._index_identity(plane.icao)

    def _airline(self, tokens: list[str]) -> None:
        # AIRLINE <code> <airline>
        if len(tokens) != 3:
            raise MalformedCommandError(
                CommandKind.AIRLINE, "AIRLINE command takes 2 arguments."
            )
        plane = self._require_plane(CommandKind.AIRLINE)
        plane.icao, plane.airline = tokens[1], tokens[2]
        self._index_identity(plane.icao, plane.airline)

    def _livery(self, tokens: list[str]) -> None:
        # LIVERY <code> <airline> <livery>
        if len(tokens) != 4:
            raise MalformedCommandError(
                CommandKind.LIVERY, "LIVERY command takes 3 arguments."
            )
        plane = self._require_plane(CommandKind.LIVERY)
        plane.icao, plane.airline, plane.livery = tokens[1], tokens[2], tokens[3]
        self._index_identity(plane.icao, plane.airline, plane.livery)
