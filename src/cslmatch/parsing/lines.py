"""Line source for declaration files and reference documents.

Files in the wild come from every platform, so ``\\r\\n``, ``\\n\\r``, ``\\n``
and a lone ``\\r`` are each a single line terminator.
"""

import re
from collections.abc import Iterator

_LINE_END = re.compile(r"\r\n|\n\r|\n|\r")

COMMENT_PREFIX = "#"


def for_each_line(text: str) -> Iterator[str]:
    """Yield the raw lines of `text` without their terminators.

    Each call returns a fresh iterator, so the same text can be walked again.
    A terminator at the very end of the text does not produce an extra empty
    line.
    """
    start = 0
    for match in _LINE_END.finditer(text):
        yield text[start : match.start()]
        start = match.end()
    if start < len(text):
        yield text[start:]


def iter_command_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every line worth dispatching.

    Lines are stripped of surrounding whitespace. Blank lines and ``#`` comments
    are skipped but still counted, so line numbers match the file.
    """
    for line_number, raw in enumerate(for_each_line(text), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield line_number, line
