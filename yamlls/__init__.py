"""Editor-support building blocks for YAML: positions, a document store,
client options, anchor-name helpers, folding, diagnostics and range edits."""

__version__ = "0.1.0"

__all__ = [
    "anchor_names",
    "completion",
    "config",
    "diagnostics",
    "documents",
    "folding",
    "positions",
    "rangeformat",
]