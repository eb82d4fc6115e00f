"""Unit tests for `cslmatch.entrypoints.cli.helpers.messages`.

Glyph choice follows the encoding of Click's stderr stream; every message is
a bold, colored line on stderr.
"""

import io
import sys

import click
import pytest

from cslmatch.entrypoints.cli.helpers.messages import (
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

BOLD = "\x1b[1m"


class EncodedTTY(io.StringIO):
    """StringIO that claims to be a TTY with a given encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def isatty(self) -> bool:
        return True


@pytest.mark.parametrize(
    ("encoding", "glyphs"),
    [("ascii", ("[!]", "[OK]", "[X]")), ("utf-8", ("⚠️", "✅", "❌"))],
)
def test_glyphs_follow_stderr_encoding(monkeypatch, encoding, glyphs):
    """Emoji are used only when stderr can encode them."""
    stream = EncodedTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert (caution_glyph(), success_glyph(), error_glyph()) == glyphs


@pytest.mark.parametrize(
    ("func", "color"),
    [(warn, "\x1b[33m"), (success, "\x1b[32m"), (error, "\x1b[31m")],
)
def test_messages_are_bold_colored_stderr_lines(monkeypatch, func, color):
    """Each helper writes one styled line with its glyph to stderr."""
    stream = EncodedTTY("ascii")
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream)
    monkeypatch.delenv("NO_COLOR", raising=False)

    func("No model found for B738")

    out = stream.getvalue()
    assert "No model found for B738" in out
    assert color in out
    assert BOLD in out


def test_messages_leave_stdout_alone(capsys):
    """Nothing is written to stdout."""
    success("3 package(s) loaded")

    captured = capsys.readouterr()
    assert "3 package(s) loaded" in captured.err
    assert captured.out == ""
