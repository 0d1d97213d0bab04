"""Parse diagnostics for YAML documents."""

from __future__ import annotations

from dataclasses import dataclass

import yaml
from yaml.composer import ComposerError

from yamlls.positions import Position, Range, line_text_of, lsp_pos_from_parser, lsp_pos_line_end

SEVERITY_ERROR = 1
SOURCE = "yaml-lsp"


@dataclass(frozen=True)
class Diagnostic:
    """A problem reported for a range of the document."""

    range: Range
    message: str
    severity: int = SEVERITY_ERROR
    source: str = SOURCE

    def to_dict(self) -> dict:
        return {
            "range": self.range.to_dict(),
            "severity": self.severity,
            "source": self.source,
            "message": self.message,
        }


def _strip_bom(text: str) -> str:
    return text[1:] if text.startswith("\ufeff") else text


def _check(src: str) -> None:
    """Parse ``src`` fully, raising yaml.YAMLError on the first problem."""
    anchors: set[str] = set()
    for event in yaml.parse(src, Loader=yaml.SafeLoader):
        if isinstance(event, yaml.DocumentStartEvent):
            anchors = set()
        elif isinstance(event, yaml.AliasEvent):
            if event.anchor not in anchors:
                raise ComposerError(
                    None, None, f"found undefined alias {event.anchor!r}", event.start_mark
                )
        elif isinstance(event, yaml.NodeEvent) and event.anchor is not None:
            anchors.add(event.anchor)


def _from_error(src: str, err: yaml.YAMLError) -> Diagnostic:
    mark = getattr(err, "problem_mark", None)
    if mark is not None:
        line = mark.line + 1
        text = line_text_of(src, line)
        byte_col = len(text[: mark.column].encode("utf-8", "surrogatepass")) + 1
        rest = text[mark.column :]
        word = rest[: len(rest) - len(rest.lstrip())] and "" or rest.split(None, 1)[0] if rest.strip() else ""
        if rest[:1].isspace():
            word = ""
        # Span the offending word; otherwise mark a single column.
        width = len(word.encode("utf-8", "surrogatepass")) or 1
        start = lsp_pos_from_parser(src, line, byte_col)
        end = lsp_pos_from_parser(src, line, byte_col + width)
        message = getattr(err, "problem", None) or str(err)
        return Diagnostic(Range(start, end), message)
    return Diagnostic(Range(Position(0, 0), lsp_pos_line_end(src, 1)), str(err))


def compute_diagnostics(text: str) -> list[Diagnostic]:
    """Return the diagnostics for ``text``: empty when it parses cleanly.

    A parse failure yields a single error diagnostic at the reported
    position, or on the first line when no position is known.
    """
    src = _strip_bom(text)
    try:
        _check(src)
    except yaml.YAMLError as err:
        return [_from_error(src, err)]
    return []