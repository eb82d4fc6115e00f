"""Unit tests for `cslmatch.entrypoints.cli.helpers.log_level_parser`."""

import logging
import types

import click
import pytest

from cslmatch.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

CTX = types.SimpleNamespace()


def test_no_items_gives_defaults():
    """Without overrides only the library defaults remain."""
    assert parse_log_level(CTX, None, ()) == DEFAULT_LIB_LEVELS == {
        "click_extra": logging.WARNING
    }


def test_later_items_win():
    """Repeated names keep the last level."""
    out = parse_log_level(CTX, None, ("cslmatch.parsing=ERROR", "cslmatch.parsing=info"))
    assert out["cslmatch.parsing"] == logging.INFO


def test_packed_string_from_environment():
    """A single comma/space separated string is split into items."""
    out = parse_log_level(CTX, None, "cslmatch=DEBUG,  click_extra=ERROR rich=warning")
    assert out == {
        "click_extra": logging.ERROR,
        "cslmatch": logging.DEBUG,
        "rich": logging.WARNING,
    }


@pytest.mark.parametrize("item", ["cslmatch", "=INFO", "cslmatch=LOUD"])
def test_bad_items_are_rejected(item):
    """Items must be NAME=LEVEL with a known level."""
    with pytest.raises(click.BadParameter):
        parse_log_level(CTX, None, (item,))
