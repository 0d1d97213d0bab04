"""Helpers for completing alias names in a ``*<prefix>`` context.

Columns are 1-based UTF-8 byte columns, lines are 1-based, matching the
parser coordinates used elsewhere in the package.
"""

from __future__ import annotations

from itertools import takewhile

from yamlls.positions import line_text_of

_NON_NAME_CHARS = frozenset(" \t\r\n,[]{}&*!")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "replace")


def is_anchor_name_char(c: str | int) -> bool:
    """Whether ``c`` (a character or a byte value) may appear in an anchor name.

    Non-ASCII bytes are accepted, since YAML allows such names.
    """
    if isinstance(c, int):
        c = chr(c)
    return c not in _NON_NAME_CHARS


def alias_prefix_at(text: str, line: int, col: int) -> tuple[str, int] | None:
    """Return the partial alias name typed before ``(line, col)``.

    The result is ``(prefix, prefix_start_col)`` where the start column is
    that of the first name character after the ``*``. Returns None when the
    cursor is not preceded by ``*`` and name characters on the same line.
    """
    data = _encode(line_text_of(text, line))
    end = min(max(col - 1, 0), len(data))
    head = data[:end]
    name_len = sum(1 for _ in takewhile(is_anchor_name_char, reversed(head)))
    start = end - name_len
    if start == 0 or data[start - 1] != ord("*"):
        return None
    return _decode(data[start:end]), start + 1


def mask_alias_context(text: str, line: int, name_start_col: int, prefix: str) -> str:
    """Replace the ``*<prefix>`` span on ``line`` with spaces.

    The byte length of the text is preserved, so positions computed against
    the original remain valid against the result. Masking stops at the end
    of the line.
    """
    data = bytearray(_encode(text))
    start = byte_offset_of(text, line, 1) + name_start_col - 2
    if start < 0 or start >= len(data):
        return text
    end = min(start + 1 + len(_encode(prefix)), len(data))
    for i in range(start, end):
        if data[i] == ord("\n"):
            break
        data[i] = ord(" ")
    return _decode(bytes(data))


def anchor_detail(line: int) -> str:
    """Detail text shown beside a completion candidate."""
    return f"anchor at line {line}"


def byte_offset_of(text: str, line: int, col: int) -> int:
    """Convert a 1-based line and byte column to a 0-based byte offset.

    The result is clamped to the length of the encoded text.
    """
    line = max(line, 1)
    col = max(col, 1)
    data = _encode(text)
    off = 0
    for _ in range(line - 1):
        nl = data.find(b"\n", off)
        if nl < 0:
            off = len(data)
            break
        off = nl + 1
    return min(off + col - 1, len(data))