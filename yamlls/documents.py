"""Thread-safe in-memory store of open document texts."""

from __future__ import annotations

import logging
import threading

SERVER_LOGGER_NAME = "yaml-lsp"

# Entry count above which a warning is logged once. Documents are never
# evicted, so requests against still-open documents keep working.
SOFT_LIMIT = 1024


class DocumentStore:
    """Latest text and version for each open URI.

    Writes only move forward in version; a stale write is dropped.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._lock = threading.RLock()
        self._docs: dict[str, str] = {}
        self._versions: dict[str, int] = {}
        self._warned = False
        self._log = logger or logging.getLogger(SERVER_LOGGER_NAME)

    def set(self, uri: str, text: str, version: int) -> bool:
        """Store ``text`` unless ``version`` is older than the stored one.

        Negative versions are clamped to 0. Returns whether the store was
        written to.
        """
        version = max(version, 0)
        with self._lock:
            existing = self._versions.get(uri)
            if existing is not None and version < existing:
                return False
            existed = uri in self._docs
            self._docs[uri] = text
            self._versions[uri] = version
            if not existed:
                self._maybe_warn()
            return True

    def get(self, uri: str) -> str | None:
        """Return the stored text for ``uri``, or None when it is not open."""
        with self._lock:
            return self._docs.get(uri)

    def delete(self, uri: str) -> None:
        """Forget ``uri`` and its version; re-arm the warning below the limit."""
        with self._lock:
            self._docs.pop(uri, None)
            self._versions.pop(uri, None)
            if self._warned and len(self._docs) <= SOFT_LIMIT:
                self._warned = False

    def warned(self) -> bool:
        """Whether the soft-limit warning has fired and is still armed."""
        with self._lock:
            return self._warned

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __contains__(self, uri: object) -> bool:
        with self._lock:
            return uri in self._docs

    def _maybe_warn(self) -> None:
        if not self._warned and len(self._docs) > SOFT_LIMIT:
            self._log.warning(
                "yaml-lsp: document store now holds %d entries (soft limit %d). "
                "The server does not evict; this likely indicates a client that "
                "opens documents without closing them.",
                len(self._docs),
                SOFT_LIMIT,
            )
            self._warned = True