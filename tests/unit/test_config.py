"""Unit tests for `cslmatch.config`."""

import pytest

from cslmatch import config


def test_default_icao(monkeypatch):
    """The default designator is A320 unless overridden."""
    monkeypatch.delenv(config.DEFAULT_ICAO_ENV, raising=False)
    assert config.get_default_icao() == "A320"

    monkeypatch.setenv(config.DEFAULT_ICAO_ENV, "B738")
    assert config.get_default_icao() == "B738"

    monkeypatch.setenv(config.DEFAULT_ICAO_ENV, "")
    assert config.get_default_icao() == "A320"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", True), ("TRUE", True), (" on ", True), ("yes", True), ("0", False), ("", False)],
)
def test_debug_model_matching(monkeypatch, value, expected):
    """Common truthy spellings enable matching diagnostics."""
    monkeypatch.setenv(config.DEBUG_MODEL_MATCHING_ENV, value)
    assert config.debug_model_matching_enabled() is expected
