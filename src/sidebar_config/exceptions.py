"""Exception hierarchy for sidebar-config.

Structural errors abort a load: no partial tree is usable once one is
raised.  Validation and diff findings are not exceptions, they are
collected as ``Diagnostic`` records instead.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "AmbiguousNodeError",
    "DocumentError",
    "InvalidBadgeVariantError",
    "MalformedNodeError",
    "RelativePathError",
    "SidebarConfigError",
    "StructuralError",
]


class SidebarConfigError(Exception):
    """Base exception for sidebar-config operations."""


class DocumentError(SidebarConfigError):
    """A configuration document could not be read or parsed."""


class StructuralError(SidebarConfigError):
    """A configuration node is structurally invalid.

    Attributes:
        path:   Ancestor-label chain of the offending node (may be empty for
                the document root).
        reason: The bare reason, without the path prefix.
    """

    def __init__(self, path: Sequence[str], reason: str) -> None:
        self.path: tuple[str, ...] = tuple(path)
        self.reason = reason
        where = " > ".join(self.path) if self.path else "<root>"
        super().__init__(f"{where}: {reason}")


class MalformedNodeError(StructuralError):
    """A node is neither a valid item nor a valid group."""


class AmbiguousNodeError(StructuralError):
    """A node declares both ``link`` and ``items``."""


class InvalidBadgeVariantError(StructuralError):
    """A structured badge names a variant outside the recognised set."""


class RelativePathError(StructuralError):
    """A link is neither external, site-root-relative, nor empty."""
