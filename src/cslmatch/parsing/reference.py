"""Readers for the aircraft reference documents.

Two documents ship alongside the CSL packages:

- ICAO Doc 8643 (``Doc8643.txt``): tab-separated rows, e.g.
  ``ABHCO<TAB>SA-342 Gazelle<TAB>GAZL<TAB>H1T<TAB>-``. Field 2 is the ICAO
  designator, field 3 the equipment descriptor and the first character of
  field 4 the wake category. Rows with fewer than five fields are ignored.
- ``related.txt``: whitespace-separated rows of related ICAO designators;
  rows starting with ``;`` are comments.
"""

from cslmatch.domain.models import AircraftCode

from .lines import for_each_line
from .tokenizer import tokenize

DOC8643_SEPARATORS = "\t\r\n"
DOC8643_MIN_FIELDS = 5
RELATED_COMMENT_PREFIX = ";"


def parse_aircraft_codes(text: str) -> dict[str, AircraftCode]:
    """Parse Doc 8643 content into ``{icao: AircraftCode}``.

    Later rows for the same designator overwrite earlier ones.
    """
    codes: dict[str, AircraftCode] = {}
    for line in for_each_line(text):
        fields = tokenize(line, DOC8643_SEPARATORS)
        if len(fields) < DOC8643_MIN_FIELDS:
            continue
        code = AircraftCode(icao=fields[2], equip=fields[3], category=fields[4][0])
        codes[code.icao] = code
    return codes


def parse_groupings(text: str) -> dict[str, str]:
    """Parse ``related.txt`` content into ``{icao: group label}``.

    The group label is the whole row joined by single spaces, so every
    designator on a row maps to the same label.
    """
    groupings: dict[str, str] = {}
    for line in for_each_line(text):
        if line.startswith(RELATED_COMMENT_PREFIX):
            continue
        tokens = tokenize(line)
        group = " ".join(tokens)
        for icao in tokens:
            groupings[icao] = group
    return groupings
