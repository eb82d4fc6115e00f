"""CSLMATCH

Loads third-party CSL aircraft model packages (``xsb_aircraft.txt``) into an
in-memory catalog and answers "which model should represent this aircraft?"
for an ICAO type code, an airline code and a livery code.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
