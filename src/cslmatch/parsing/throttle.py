"""Repeat counter for noisy parse diagnostics.

Packages built for other clients (X-IvAp, PilotEdge, X-CSL) tend to repeat the
same harmless oddity on hundreds of lines. A `DiagnosticThrottle` lives for
one package parse: only the first occurrence of each throttled message is
logged, and `flush` reports how often the rest were suppressed.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class ThrottledMessage(Enum):
    """Diagnostics subject to throttling, valued by their summary text."""

    OBJ8_AIRCRAFT_ARGS = "WARNING: OBJ8_AIRCRAFT command takes 1 argument."
    OBJ8_EXTRA_ARGS = "INFO: OBJ8 command takes only 3 arguments, rest ignored."
    OBJ8_INVALID_PART = "WARNING: valid OBJ8 part types are LIGHTS or SOLID."
    VERT_OFFSET_ARGS = "WARNING: VERT_OFFSET command takes 1 argument."


@dataclass
class DiagnosticThrottle:
    """Per-parse counters of throttled diagnostics.

    Attributes:
        limit: Number of occurrences of each message that are shown.
    """

    limit: int = 1
    _counts: Counter[ThrottledMessage] = field(default_factory=Counter)

    def should_emit(self, message: ThrottledMessage) -> bool:
        """Count one occurrence of `message`; True while within the limit."""
        self._counts[message] += 1
        return self._counts[message] <= self.limit

    def suppressed(self) -> dict[ThrottledMessage, int]:
        """Return the total count of every message seen more than `limit` times."""
        return {
            message: count
            for message, count in self._counts.items()
            if count > self.limit
        }

    def flush(self, source: str) -> None:
        """Log a summary of suppressed messages for `source`, then reset.

        Nothing is logged if no message exceeded the limit.
        """
        suppressed = self.suppressed()
        if suppressed:
            logger.warning("--- Parsing '%s':", source)
            for message in ThrottledMessage:
                if message in suppressed:
                    logger.warning(
                        "Following message suppressed %d time(s): %s",
                        suppressed[message],
                        message.value,
                    )
            logger.warning("---")
        self.reset()

    def reset(self) -> None:
        """Clear all counters."""
        self._counts.clear()
