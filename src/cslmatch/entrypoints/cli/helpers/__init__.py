"""CLI helpers for CSLMATCH: stderr status lines and logger-level parsing."""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "success", "warn"]
