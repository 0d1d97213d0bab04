"""Server settings from the client's initialization options, and capabilities."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

SERVER_NAME = "yaml-lsp"
TEXT_DOCUMENT_SYNC_FULL = 1


@dataclass
class FormatConfig:
    """Formatter settings.

    ``indentation`` is 0 to detect from the source, or a fixed positive
    indent. ``normalize_strings`` strips needless quotes from scalars.
    """

    indentation: int = 0
    normalize_strings: bool = False


@dataclass
class Config:
    """Resolved server settings."""

    format: FormatConfig = field(default_factory=FormatConfig)


_MISSING = object()


def _lookup(obj: Mapping, name: str) -> Any:
    """Fetch a field by name, exact match first, then case-insensitive."""
    if name in obj:
        return obj[name]
    folded = name.casefold()
    for key, value in obj.items():
        if isinstance(key, str) and key.casefold() == folded:
            return value
    return _MISSING


def resolve_indentation(value: Any) -> int:
    """Map the ``indentation`` option to an indent width, 0 meaning detect.

    Strings and absent values detect; numbers of at least 1 are truncated
    to an integer; anything else detects.
    """
    if isinstance(value, bool) or value is None or value is _MISSING:
        return 0
    if isinstance(value, int):
        return value if value >= 1 else 0
    if isinstance(value, float):
        if math.isfinite(value) and value >= 1:
            return int(value)
        return 0
    return 0


def parse_init_options(raw: Any) -> Config:
    """Build a Config from raw ``initializationOptions``.

    Unknown fields are ignored; a malformed payload yields the defaults.
    """
    if raw is None or not isinstance(raw, Mapping):
        return Config()
    fmt = _lookup(raw, "format")
    if fmt is _MISSING or fmt is None:
        return Config()
    if not isinstance(fmt, Mapping):
        return Config()
    normalize = _lookup(fmt, "normalizeStrings")
    if normalize is _MISSING or normalize is None:
        normalize = False
    elif not isinstance(normalize, bool):
        return Config()
    return Config(
        FormatConfig(
            indentation=resolve_indentation(_lookup(fmt, "indentation")),
            normalize_strings=normalize,
        )
    )


def server_capabilities() -> dict:
    """Return the capabilities advertised in the initialize response."""
    return {
        "textDocumentSync": TEXT_DOCUMENT_SYNC_FULL,
        # Request completion as soon as `*` is typed so alias names appear.
        "completionProvider": {"triggerCharacters": ["*"]},
        "hoverProvider": True,
        "documentSymbolProvider": True,
        "foldingRangeProvider": True,
        "definitionProvider": True,
        "referencesProvider": True,
        "documentFormattingProvider": True,
        "documentRangeFormattingProvider": True,
        "renameProvider": {"prepareProvider": True},
    }