"""LinkResolver: classifies raw link strings into ``LinkRef`` values.

Classification, in order:

1. None, empty or whitespace-only     -> PLACEHOLDER
2. contains a ``scheme://`` prefix    -> EXTERNAL
3. starts with ``/``                  -> INTERNAL (stored as-is)
4. anything else                      -> RelativePathError

Bare relative paths ("intro/") are rejected rather than resolved, since
their meaning depends on the rendering page.

Results for valid strings are memoised in a per-instance LRU cache.  The
cache is guarded by a lock because one resolver is shared by every worker
thread resolving a tree.  Invalid strings are never cached, so each
offending node gets its own error with its own path.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Sequence

from cachetools import LRUCache

from sidebar_config.exceptions import RelativePathError
from sidebar_config.tree.nodes import LinkRef

__all__ = ["LinkResolver"]

# RFC 3986 scheme followed by "://"
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


class LinkResolver:
    """Pure link classifier with an LRU memo.

    Two separate ``LinkResolver`` instances never share cache state.

    Args:
        max_size: Maximum number of raw link strings held in the cache.
            Least-recently-used entries are evicted silently.  Defaults
            to 512.
    """

    def __init__(self, max_size: int = 512) -> None:
        self._cache: LRUCache[str, LinkRef] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        with self._lock:
            return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, raw: str | None, path: Sequence[str] = ()) -> LinkRef:
        """Classify ``raw`` into a LinkRef.

        Args:
            raw:  The declared link, possibly None or empty.
            path: Label path of the owning item, used in error messages.

        Raises:
            RelativePathError: ``raw`` is a non-empty relative path.
        """
        if raw is None:
            return LinkRef.placeholder()
        with self._lock:
            cached = self._cache.get(raw)
        if cached is not None:
            return cached

        ref = self._classify(raw, path)
        with self._lock:
            self._cache[raw] = ref
        return ref

    @staticmethod
    def _classify(raw: str, path: Sequence[str]) -> LinkRef:
        stripped = raw.strip()
        if not stripped:
            return LinkRef.placeholder()
        if _SCHEME.match(stripped):
            return LinkRef.external(stripped)
        if stripped.startswith("/"):
            return LinkRef.internal(stripped)
        raise RelativePathError(
            path, f"link {raw!r} is relative; use an absolute URL or a path starting with '/'"
        )
