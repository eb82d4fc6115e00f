"""Static `HostEnvironment` implementation.

Used by the CLI and by tests; an embedding simulator plugin would provide its
own adapter that asks the running simulator instead.
"""

from dataclasses import dataclass

from cslmatch import config
from cslmatch.interfaces.host import HostEnvironment

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class StaticHost(HostEnvironment):
    """Host environment with fixed answers.

    Attributes:
        version: Simulator version reported to ``AIRCRAFT`` range checks.
        root: Simulator root folder.
        debug_matching: Verbose model-matching diagnostics; None defers to the
            ``CSLMATCH_DEBUG_MODEL_MATCHING`` environment variable.
    """

    version: int = 1200
    root: str = ""
    debug_matching: bool | None = None

    def sim_version(self) -> int:
        return self.version

    def system_path(self) -> str:
        return self.root

    def debug_model_matching(self) -> bool:
        if self.debug_matching is None:
            return config.debug_model_matching_enabled()
        return self.debug_matching
