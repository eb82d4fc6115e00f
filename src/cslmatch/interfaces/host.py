"""Host environment interface definitions."""

import abc


class HostEnvironment(abc.ABC):
    """Facts about the running simulator that the package parser consults."""

    @abc.abstractmethod
    def sim_version(self) -> int:
        """Return the running simulator version number.

        Only the ``AIRCRAFT <min> <max> <path>`` command consults it.
        """

    @abc.abstractmethod
    def system_path(self) -> str:
        """Return the simulator root folder.

        ``OBJ8`` attachment paths below this folder are stored relative to it.
        """

    @abc.abstractmethod
    def debug_model_matching(self) -> bool:
        """Return True if verbose model-matching diagnostics are requested."""
