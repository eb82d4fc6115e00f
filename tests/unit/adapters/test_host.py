"""Unit tests for `cslmatch.adapters.host.StaticHost`."""

from cslmatch.adapters.host import StaticHost


def test_fixed_answers():
    """Version and system path are returned as given."""
    host = StaticHost(version=1150, root="/XPlane")
    assert host.sim_version() == 1150
    assert host.system_path() == "/XPlane"


def test_debug_flag_defers_to_environment(monkeypatch):
    """With no explicit flag, the environment decides."""
    monkeypatch.setenv("CSLMATCH_DEBUG_MODEL_MATCHING", "yes")
    assert StaticHost().debug_model_matching()

    monkeypatch.delenv("CSLMATCH_DEBUG_MODEL_MATCHING")
    assert not StaticHost().debug_model_matching()


def test_explicit_debug_flag_wins(monkeypatch):
    """An explicit flag ignores the environment."""
    monkeypatch.setenv("CSLMATCH_DEBUG_MODEL_MATCHING", "1")
    assert not StaticHost(debug_matching=False).debug_model_matching()
