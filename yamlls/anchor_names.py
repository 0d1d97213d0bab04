"""Validation of YAML anchor names used as rename targets."""

from __future__ import annotations

import json

_WHITESPACE = frozenset(" \t\n\r")
_FLOW_INDICATORS = frozenset(",[]{}")
_SIGILS = frozenset("&*!")


class InvalidAnchorNameError(ValueError):
    """The requested anchor name is empty or holds a forbidden character."""

    def __init__(self, got: str, reason: str) -> None:
        self.got = got
        self.reason = reason
        super().__init__(
            f"invalid anchor name {json.dumps(got, ensure_ascii=False)}: {reason}"
        )


def validate_anchor_name(name: str) -> str:
    """Return ``name`` if it is a legal YAML anchor name.

    A legal name is non-empty and holds no whitespace, no flow indicator
    (``,[]{}``) and no anchor, alias or tag sigil (``&*!``).
    Raises InvalidAnchorNameError otherwise.
    """
    if not name:
        raise InvalidAnchorNameError(name, "empty")
    for ch in name:
        if ch in _WHITESPACE:
            raise InvalidAnchorNameError(name, "contains whitespace")
        if ch in _FLOW_INDICATORS:
            raise InvalidAnchorNameError(name, f"contains flow indicator '{ch}'")
        if ch in _SIGILS:
            raise InvalidAnchorNameError(name, f"contains YAML sigil '{ch}'")
    return name