"""Whitespace tokenizer for declaration and reference-document lines."""

import functools
import re

DEFAULT_SEPARATORS = " \t\r\n"


@functools.lru_cache(maxsize=16)
def _token_pattern(separators: str) -> re.Pattern[str]:
    return re.compile(f"[^{re.escape(separators)}]+")


def tokenize(
    line: str, separators: str = DEFAULT_SEPARATORS, max_tokens: int = 0
) -> list[str]:
    """Split `line` on any character in `separators`, discarding empty runs.

    Args:
        line: The text to split.
        separators: Every character of this string is a separator.
        max_tokens: When nonzero, the last token is the remainder of the line,
            taken verbatim (embedded separators included) from the start of the
            ``max_tokens``-th token. Zero means unlimited.

    Returns:
        list[str]: The tokens in order.

    Example:
        >>> tokenize("OBJ8 LIGHTS YES a/b c.obj extra", max_tokens=4)
        ['OBJ8', 'LIGHTS', 'YES', 'a/b c.obj extra']
    """
    if not separators:
        return [line] if line else []

    tokens: list[str] = []
    for match in _token_pattern(separators).finditer(line):
        if max_tokens and len(tokens) + 1 == max_tokens:
            tokens.append(line[match.start() :])
            break
        tokens.append(match.group())
    return tokens
