"""Whole-document and line-range edits derived from a formatted text."""

from __future__ import annotations

from itertools import groupby

from yamlls.positions import Position, Range, TextEdit, lsp_pos_line_end


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def split_keep_empty(text: str) -> list[str]:
    """Split on newlines, dropping the empty piece after a final newline."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def slice_terminator(formatted: str, dst_lines: list[str], end_excl: int) -> str:
    """Return the newline a replacement slice ending at ``end_excl`` must carry."""
    if end_excl < len(dst_lines):
        return "\n"
    return "\n" if formatted.endswith("\n") else ""


def whole_document_range(text: str) -> Range:
    """Return the range covering ``text`` from start to end."""
    line_count = text.count("\n") + 1
    return Range(Position(0, 0), lsp_pos_line_end(text, line_count))


def snap_range_to_lines(text: str, rng: Range) -> tuple[int, int]:
    """Widen ``rng`` to whole 0-based lines, as ``(start, end_exclusive)``.

    An end at character 0 of a line excludes that line; otherwise the line
    is included.
    """
    line_count = text.count("\n") + 1
    start = min(max(rng.start.line, 0), line_count)
    end = rng.end.line + (1 if rng.end.character > 0 else 0)
    end = min(max(end, start), line_count)
    return start, end


def line_start_byte(text: str, lsp_line: int) -> int:
    """Byte offset of the start of 0-based ``lsp_line``, clamped to the length."""
    data = _encode(text)
    if lsp_line <= 0:
        return 0
    pos = -1
    for _ in range(lsp_line):
        pos = data.find(b"\n", pos + 1)
        if pos < 0:
            return len(data)
    return pos + 1


def extract_line_slice(
    text: str, start_line: int, end_line_excl: int
) -> tuple[str, Range]:
    """Return the text and range of lines ``[start_line, end_line_excl)``.

    When the slice reaches the end of the text, the range ends at the
    document's end position.
    """
    data = _encode(text)
    byte_start = line_start_byte(text, start_line)
    byte_end = line_start_byte(text, end_line_excl)
    chunk = data[byte_start:byte_end].decode("utf-8", "surrogatepass")
    if byte_end == len(data):
        end = whole_document_range(text).end
    else:
        end = Position(end_line_excl, 0)
    return chunk, Range(Position(start_line, 0), end)


def range_edits(text: str, formatted: str, rng: Range) -> list[TextEdit]:
    """Edits that bring the lines of ``text`` within ``rng`` to ``formatted``.

    Contiguous runs of changed lines become one edit each. When the line
    count differs between the two texts, a single whole-document edit is
    returned. An empty list means nothing to change.
    """
    if formatted == text:
        return []
    start, end = snap_range_to_lines(text, rng)
    if start >= end:
        return []
    src_lines = split_keep_empty(text)
    dst_lines = split_keep_empty(formatted)
    if len(src_lines) != len(dst_lines):
        return [TextEdit(whole_document_range(text), formatted)]
    end = min(end, len(src_lines))

    edits = []
    changed_runs = groupby(range(start, end), key=lambda k: src_lines[k] != dst_lines[k])
    for changed, run in changed_runs:
        if not changed:
            continue
        indices = list(run)
        first, last = indices[0], indices[-1] + 1
        _, slice_range = extract_line_slice(text, first, last)
        new_text = "\n".join(dst_lines[first:last]) + slice_terminator(
            formatted, dst_lines, last
        )
        edits.append(TextEdit(slice_range, new_text))
    return edits