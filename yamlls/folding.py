"""Folding regions for multi-line YAML containers.

Each mapping entry whose value spans more than one line folds from the
key's line through the last line of its value. Sequence elements that
span several lines fold as well. The document body itself never folds.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

import yaml
from yaml.composer import ComposerError


@dataclass(frozen=True)
class FoldingRange:
    """A foldable span of 0-based lines, both ends inclusive."""

    start_line: int
    end_line: int

    def to_dict(self) -> dict:
        return {"startLine": self.start_line, "endLine": self.end_line}


class _Kind(Enum):
    SCALAR = auto()
    ALIAS = auto()
    MAPPING = auto()
    SEQUENCE = auto()


@dataclass
class _Node:
    """A YAML node with 1-based line and UTF-8 byte column of its first token.

    ``last_line`` is the last line of the node's own content: the end of a
    scalar, the alias itself, or the opening line of a collection.
    ``decorated`` is set when the node carries an anchor or an explicit tag,
    in which case its start is that of the anchor or tag.
    """

    kind: _Kind
    line: int
    column: int
    last_line: int
    decorated: bool = False
    items: list[_Node] = field(default_factory=list)
    pairs: list[tuple[_Node, _Node]] = field(default_factory=list)


def _strip_bom(text: str) -> str:
    return text[1:] if text.startswith("\ufeff") else text


class _TreeBuilder:
    """Builds a _Node tree per document from a stream of parser events."""

    def __init__(self, src: str) -> None:
        self._lines = src.split("\n")
        self._anchors: set[str] = set()

    def documents(self, events: Iterator[yaml.Event]) -> list[_Node]:
        docs = []
        for event in events:
            if isinstance(event, yaml.DocumentStartEvent):
                # Anchors are local to their document.
                self._anchors = set()
                docs.append(self._node(next(events), events))
        return docs

    def _pos(self, mark) -> tuple[int, int]:
        text = self._lines[mark.line] if mark.line < len(self._lines) else ""
        prefix = text[: mark.column].encode("utf-8", "surrogatepass")
        return mark.line + 1, len(prefix) + 1

    def _node(self, event: yaml.Event, events: Iterator[yaml.Event]) -> _Node:
        line, column = self._pos(event.start_mark)
        if isinstance(event, yaml.AliasEvent):
            if event.anchor not in self._anchors:
                raise ComposerError(
                    None, None, f"found undefined alias {event.anchor!r}", event.start_mark
                )
            return _Node(_Kind.ALIAS, line, column, line)

        decorated = event.anchor is not None or event.tag is not None
        if event.anchor is not None:
            self._anchors.add(event.anchor)

        if isinstance(event, yaml.ScalarEvent):
            end = event.end_mark
            # Block scalars end at the start of the following line.
            if end.column == 0 and end.line > event.start_mark.line:
                last = end.line
            else:
                last = end.line + 1
            return _Node(_Kind.SCALAR, line, column, max(last, line), decorated)

        if isinstance(event, yaml.SequenceStartEvent):
            node = _Node(_Kind.SEQUENCE, line, column, line, decorated)
            for child in events:
                if isinstance(child, yaml.SequenceEndEvent):
                    break
                node.items.append(self._node(child, events))
            return node

        node = _Node(_Kind.MAPPING, line, column, line, decorated)
        for child in events:
            if isinstance(child, yaml.MappingEndEvent):
                break
            key = self._node(child, events)
            value = self._node(next(events), events)
            node.pairs.append((key, value))
        return node


def _parse_documents(text: str) -> list[_Node]:
    """Parse every document of ``text``; raises yaml.YAMLError on failure."""
    src = _strip_bom(text)
    events = iter(yaml.parse(src, Loader=yaml.SafeLoader))
    return _TreeBuilder(src).documents(events)


def node_start(node: _Node | None) -> tuple[int, int]:
    """Return the 1-based (line, byte column) of the first content of ``node``.

    Undecorated containers descend into their first child so the start
    points at content. A missing node starts at (1, 1).
    """
    if node is None:
        return 1, 1
    if not node.decorated:
        if node.kind is _Kind.MAPPING and node.pairs:
            key = node.pairs[0][0]
            return key.line, key.column
        if node.kind is _Kind.SEQUENCE and node.items:
            return node_start(node.items[0])
    return node.line, node.column


def max_node_line(node: _Node | None, floor: int) -> int:
    """Return the largest 1-based line reached by ``node``, at least ``floor``."""
    if node is None:
        return floor
    best = max(floor, node.line, node.last_line)
    for child in node.items:
        best = max_node_line(child, best)
    for key, value in node.pairs:
        best = max_node_line(key, best)
        best = max_node_line(value, best)
    return best


def _collect(node: _Node, out: list[FoldingRange]) -> None:
    if node.kind is _Kind.MAPPING:
        for key, value in node.pairs:
            _emit_entry(key, value, out)
    elif node.kind is _Kind.SEQUENCE:
        for child in node.items:
            _emit_element(child, out)


def _emit_entry(key: _Node, value: _Node, out: list[FoldingRange]) -> None:
    key_line = key.line
    end_line = max_node_line(value, key_line)
    if end_line > key_line:
        out.append(FoldingRange(key_line - 1, end_line - 1))
    _collect(value, out)


def _emit_element(child: _Node, out: list[FoldingRange]) -> None:
    start_line, _ = node_start(child)
    end_line = max_node_line(child, start_line)
    if end_line > start_line:
        out.append(FoldingRange(start_line - 1, end_line - 1))
    _collect(child, out)


def folding_ranges(text: str) -> list[FoldingRange]:
    """Return the folding regions of every document in ``text``.

    Text that does not parse yields no regions.
    """
    try:
        docs = _parse_documents(text)
    except yaml.YAMLError:
        return []
    out: list[FoldingRange] = []
    for doc in docs:
        _collect(doc, out)
    return out