"""Conversions between parser coordinates and LSP positions.

Parser coordinates are 1-based lines and 1-based UTF-8 byte columns.
LSP positions are 0-based lines and 0-based UTF-16 code-unit offsets.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """A 0-based LSP position (line, UTF-16 character offset)."""

    line: int = 0
    character: int = 0

    def to_dict(self) -> dict:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    """An LSP range; ``end`` is exclusive."""

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    def to_dict(self) -> dict:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class TextEdit:
    """Replacement of ``range`` with ``new_text``."""

    range: Range
    new_text: str

    def to_dict(self) -> dict:
        return {"range": self.range.to_dict(), "newText": self.new_text}


def _utf8_len(ch: str) -> int:
    return len(ch.encode("utf-8", "surrogatepass"))


def line_text_of(src: str, line: int) -> str:
    """Return the text of 1-based ``line`` without its newline.

    Lines past the end of ``src`` yield an empty string; lines below 1
    yield the first line.
    """
    lines = src.split("\n")
    if line > len(lines):
        return ""
    return lines[max(line, 1) - 1]


def byte_col_to_utf16(line: str, byte_col: int) -> int:
    """Convert a 1-based UTF-8 byte column on ``line`` to a UTF-16 offset.

    A column falling inside a multi-byte character counts that whole
    character; columns past the end clamp to the line length.
    """
    target = byte_col - 1
    units = 0
    pos = 0
    for ch in line:
        if pos >= target:
            break
        units += 2 if ord(ch) > 0xFFFF else 1
        pos += _utf8_len(ch)
    return units


def lsp_pos_from_parser(src: str, line: int, byte_col: int) -> Position:
    """Convert a 1-based line and byte column to an LSP position."""
    line = max(line, 1)
    byte_col = max(byte_col, 1)
    text = line_text_of(src, line)
    return Position(line - 1, byte_col_to_utf16(text, byte_col))


def lsp_pos_line_end(src: str, line: int) -> Position:
    """Return the LSP position just past the last character of 1-based ``line``."""
    if line < 1:
        return Position()
    text = line_text_of(src, line)
    return Position(line - 1, byte_col_to_utf16(text, _utf8_len(text) + 1))