"""End-to-end tests for ``cslmatch match`` and ``cslmatch dump``."""

import pytest

from cslmatch.entrypoints.cli.main import cslmatch

pytestmark = [pytest.mark.e2e]

# pylint: disable=unused-argument


def test_help_lists_commands(runner):
    """The group help names both subcommands."""
    result = runner.invoke(cslmatch, ["--help"])

    assert result.exit_code == 0, result.output
    assert "match" in result.output
    assert "dump" in result.output


def test_match_airline_model(runner, cli_args, packages_dir):
    """An airline model in a later package beats the generic one."""
    result = runner.invoke(
        cslmatch, [*cli_args, "match", "B738", "DLH", "--packages", packages_dir]
    )

    assert result.exit_code == 0, result.output
    assert "Liveries" in result.output
    assert "exact" in result.output
    assert "modern-object" in result.output
    assert "Matched B738 in Liveries" in result.output


def test_match_equipment_fallback(runner, cli_args, packages_dir):
    """A type with no model of its own gets a similar one."""
    result = runner.invoke(cslmatch, [*cli_args, "match", "E190", "--packages", packages_dir])

    assert result.exit_code == 0, result.output
    assert "equipment" in result.output
    assert "Generic" in result.output


def test_match_default(runner, cli_args, packages_dir):
    """An unknown type falls back to the default designator."""
    result = runner.invoke(
        cslmatch,
        [*cli_args, "match", "ZZZZ", "--packages", packages_dir, "--default-icao", "A320"],
    )

    assert result.exit_code == 0, result.output
    assert "default" in result.output
    assert "Matched A320 in Generic" in result.output


def test_match_without_default_fails(runner, cli_args, packages_dir):
    """With --no-default an unknown type is an error."""
    result = runner.invoke(
        cslmatch, [*cli_args, "match", "ZZZZ", "BAW", "--packages", packages_dir, "--no-default"]
    )

    assert result.exit_code == 1
    assert "No model found for ZZZZ BAW" in result.output


def test_packages_from_environment(runner, cli_args, packages_dir):
    """The packages folder may come from CSLMATCH_PACKAGES_DIR."""
    result = runner.invoke(
        cslmatch,
        [*cli_args, "match", "A320"],
        env={"CSLMATCH_PACKAGES_DIR": packages_dir},
    )

    assert result.exit_code == 0, result.output
    assert "Matched A320 in Generic" in result.output


def test_missing_packages_folder_is_a_usage_error(runner, cli_args, tmp_path):
    """A packages folder that does not exist is rejected by option parsing."""
    result = runner.invoke(
        cslmatch, [*cli_args, "match", "A320", "--packages", str(tmp_path / "nope")]
    )

    assert result.exit_code == 2


def test_missing_reference_documents_warn(runner, cli_args, packages_dir, tmp_path):
    """Explicit reference paths that do not exist produce a warning, not a failure."""
    result = runner.invoke(
        cslmatch,
        [
            *cli_args,
            "match",
            "A320",
            "--packages",
            packages_dir,
            "--related",
            str(tmp_path / "missing_related.txt"),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Reference documents could not be loaded" in result.output


def test_parse_errors_reach_the_console(runner, cli_args, packages_dir):
    """Parse diagnostics are WARNING records and show at the default verbosity."""
    result = runner.invoke(cslmatch, [*cli_args, "match", "A320", "--packages", packages_dir])

    assert "Parse Error in file" in result.output
    assert "WINGSPAN 34" in result.output


def test_quiet_hides_parse_errors(runner, cli_args, packages_dir):
    """-q raises the console threshold above WARNING."""
    result = runner.invoke(
        cslmatch, [*cli_args, "-q", "match", "A320", "--packages", packages_dir]
    )

    assert result.exit_code == 0, result.output
    assert "Parse Error" not in result.output


def test_dump_lists_planes(runner, cli_args, packages_dir):
    """dump prints every plane of every package."""
    result = runner.invoke(cslmatch, [*cli_args, "dump", "--packages", packages_dir])

    assert result.exit_code == 0, result.output
    assert "Generic" in result.output
    assert "Liveries" in result.output
    assert "legacy-static" in result.output
    assert "2 package(s) loaded" in result.output
