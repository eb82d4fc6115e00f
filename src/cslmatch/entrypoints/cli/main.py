"""CSLMATCH CLI entry point.

Defines the top-level ``cslmatch`` command (via Click-Extra) with the logging
options, and the subcommands that load a CSL library from disk:

- ``cslmatch match`` resolves one aircraft to a plane.
- ``cslmatch dump`` lists every loaded package and plane.

Examples
    $ cslmatch match B738 BAW --packages ~/X-Plane/Resources/CSL
    $ cslmatch -v dump --packages ./CSL --related ./related.txt --doc8643 ./Doc8643.txt
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir
from rich.console import Console
from rich.table import Table

from cslmatch import __version__, config
from cslmatch.adapters.filesystem import LocalFileSystem
from cslmatch.adapters.host import StaticHost
from cslmatch.logging import config_console_handler, config_flight_recorder, log_startup
from cslmatch.service_layer.catalog import Catalog, load_catalog
from cslmatch.service_layer.matching import match_plane

from .helpers import error, parse_log_level, success, warn

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

RELATED_FILE_NAME = "related.txt"
DOC8643_FILE_NAME = "Doc8643.txt"

HELP = """CSLMATCH command-line interface.

    Loads a library of CSL aircraft model packages (folders holding an
    xsb_aircraft.txt declaration file) and picks the best model for an
    aircraft described by its ICAO type designator, airline and livery.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (logger names, timestamps and source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the flight-recorder log file.",
    default=Path(user_log_dir("cslmatch", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="CSLMATCH_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=5000,
    hidden=True,
    envvar="CSLMATCH_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when an ERROR occurs, or on exit with "
        "--force-flush. Handy for reading every parse diagnostic of a library."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL), e.g. "
        "-L cslmatch.parsing=ERROR to hide parse diagnostics. Repeatable."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def cslmatch(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CSLMATCH command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


_LIBRARY_OPTIONS = (
    click.option(
        "--packages",
        "packages_dir",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        envvar=config.PACKAGES_DIR_ENV,
        required=True,
        show_envvar=True,
        help="Folder whose immediate subfolders are CSL packages.",
    ),
    click.option(
        "--related",
        "related_file",
        type=click.Path(dir_okay=False, path_type=Path),
        help=f"Path of {RELATED_FILE_NAME} [default: next to the packages folder].",
    ),
    click.option(
        "--doc8643",
        "doc8643_file",
        type=click.Path(dir_okay=False, path_type=Path),
        help=f"Path of {DOC8643_FILE_NAME} [default: next to the packages folder].",
    ),
    click.option(
        "--sim-version",
        type=int,
        default=1200,
        show_default=True,
        help="Simulator version used by AIRCRAFT version ranges.",
    ),
    click.option(
        "--system-path",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Simulator root; OBJ8 paths are stored relative to it.",
    ),
)


def library_options(func):
    """Add the options that locate a CSL library on disk."""
    for option in reversed(_LIBRARY_OPTIONS):
        func = option(func)
    return func


def _load(  # pylint: disable=too-many-arguments
    packages_dir: Path,
    related_file: Path | None,
    doc8643_file: Path | None,
    sim_version: int,
    system_path: Path | None,
    debug_matching: bool | None = None,
) -> tuple[Catalog, StaticHost]:
    related_file = related_file or packages_dir.parent / RELATED_FILE_NAME
    doc8643_file = doc8643_file or packages_dir.parent / DOC8643_FILE_NAME
    host = StaticHost(
        version=sim_version,
        root=system_path.as_posix() if system_path else "",
        debug_matching=debug_matching,
    )

    catalog = Catalog()
    if not load_catalog(
        catalog,
        packages_dir.as_posix(),
        related_file.as_posix(),
        doc8643_file.as_posix(),
        filesystem=LocalFileSystem(),
        host=host,
    ):
        warn("Reference documents could not be loaded; group and equipment matching are limited.")
    return catalog, host


@cslmatch.command()
@click.argument("icao")
@click.argument("airline", default="")
@click.argument("livery", default="")
@library_options
@click.option(
    "--default-icao",
    envvar=config.DEFAULT_ICAO_ENV,
    default=config.DEFAULT_ICAO,
    show_default=True,
    show_envvar=True,
    help="Type designator used when nothing else matches.",
)
@click.option(
    "--no-default",
    is_flag=True,
    help="Fail instead of falling back to the default type designator.",
)
@click.option(
    "--trace/--no-trace",
    "trace",
    default=None,
    help=(
        "Log every matching pass at DEBUG level (combine with -vv). "
        f"Defaults to {config.DEBUG_MODEL_MATCHING_ENV}."
    ),
)
def match(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    icao: str,
    airline: str,
    livery: str,
    packages_dir: Path,
    related_file: Path | None,
    doc8643_file: Path | None,
    sim_version: int,
    system_path: Path | None,
    default_icao: str,
    no_default: bool,
    trace: bool | None,
) -> None:
    """Pick the model for aircraft ICAO [AIRLINE] [LIVERY]."""
    catalog, host = _load(
        packages_dir, related_file, doc8643_file, sim_version, system_path, trace
    )
    result = match_plane(
        catalog,
        icao,
        airline,
        livery,
        default_icao=default_icao,
        use_default=not no_default,
        debug=host.debug_model_matching(),
    )
    if result is None:
        error(f"No model found for {' '.join(filter(None, (icao, airline, livery)))}")
        raise click.exceptions.Exit(1)

    plane = result.plane
    table = Table(title=f"Match for {icao} {airline} {livery}".rstrip(), show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("phase", result.phase.value)
    table.add_row("quality", "-" if result.quality is None else str(result.quality))
    table.add_row("package", result.package.name)
    table.add_row("kind", plane.kind.value)
    table.add_row("icao", plane.icao)
    table.add_row("airline", plane.airline)
    table.add_row("livery", plane.livery)
    table.add_row("path", plane.path)
    Console().print(table)
    success(f"Matched {plane.icao or icao} in {result.package.name}")


@cslmatch.command()
@library_options
def dump(
    packages_dir: Path,
    related_file: Path | None,
    doc8643_file: Path | None,
    sim_version: int,
    system_path: Path | None,
) -> None:
    """List every loaded package and plane in priority order."""
    catalog, _ = _load(packages_dir, related_file, doc8643_file, sim_version, system_path)
    catalog.dump()

    table = Table(title=f"CSL library: {packages_dir}")
    for column in ("#", "package", "kind", "icao", "airline", "livery", "matchable"):
        table.add_column(column)
    for n, package in enumerate(catalog):
        for plane in package.planes:
            table.add_row(
                str(n),
                package.name,
                plane.kind.value,
                plane.icao,
                plane.airline,
                plane.livery,
                "yes" if plane.is_matchable() else "no",
            )
    Console().print(table)
    success(f"{len(catalog)} package(s) loaded")
