"""Configuration utilities for CSLMATCH.

This module centralizes small helpers and constants related to application configuration.
"""

import os

PACKAGE_FILE_NAME = "xsb_aircraft.txt"  # pragma: no mutate
DEFAULT_ICAO = "A320"  # pragma: no mutate

DEFAULT_ICAO_ENV = "CSLMATCH_DEFAULT_ICAO"  # pragma: no mutate
DEBUG_MODEL_MATCHING_ENV = "CSLMATCH_DEBUG_MODEL_MATCHING"  # pragma: no mutate
PACKAGES_DIR_ENV = "CSLMATCH_PACKAGES_DIR"  # pragma: no mutate

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def get_default_icao() -> str:
    """Get the ICAO designator used when nothing else matches.

    Returns:
        The value of `CSLMATCH_DEFAULT_ICAO`, or `DEFAULT_ICAO` if unset or empty.
    """
    return os.environ.get(DEFAULT_ICAO_ENV) or DEFAULT_ICAO


def debug_model_matching_enabled() -> bool:
    """Return True if `CSLMATCH_DEBUG_MODEL_MATCHING` is set to a truthy value.

    Accepted values (case-insensitive): ``1``, ``true``, ``yes``, ``on``.
    """
    return os.environ.get(DEBUG_MODEL_MATCHING_ENV, "").strip().lower() in _TRUTHY
