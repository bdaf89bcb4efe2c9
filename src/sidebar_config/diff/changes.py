"""Change records and the DiffReport returned by diff().

Every change type knows its own ``inverse()``, so ``diff(a, b)`` and
``diff(b, a)`` can be checked against each other record by record.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import ClassVar

from sidebar_config.result import Diagnostic
from sidebar_config.tree.nodes import (
    Badge,
    Group,
    LabelPath,
    LinkRef,
    NavigationNode,
    format_path,
)

__all__ = [
    "Added",
    "BadgeChanged",
    "Change",
    "ChangeKind",
    "DiffReport",
    "LinkChanged",
    "Moved",
    "Removed",
]


class ChangeKind(StrEnum):
    """The five kinds of difference between two sidebar snapshots."""

    ADDED = auto()
    REMOVED = auto()
    MOVED = auto()
    LINK_CHANGED = auto()
    BADGE_CHANGED = auto()


def _describe(node: NavigationNode) -> str:
    if isinstance(node, Group):
        return f"group of {len(node.children)}"
    return str(node.link) if node.link is not None else node.raw_link or "<placeholder>"


def _describe_badge(badge: Badge | None) -> str:
    return f"{badge.text} ({badge.variant})" if badge is not None else "none"


@dataclass(frozen=True, slots=True)
class Added:
    path: LabelPath
    node: NavigationNode
    kind: ClassVar[ChangeKind] = ChangeKind.ADDED

    def inverse(self) -> Removed:
        return Removed(self.path, self.node)

    def __str__(self) -> str:
        return f"ADDED {format_path(self.path)} [{_describe(self.node)}]"


@dataclass(frozen=True, slots=True)
class Removed:
    path: LabelPath
    node: NavigationNode
    kind: ClassVar[ChangeKind] = ChangeKind.REMOVED

    def inverse(self) -> Added:
        return Added(self.path, self.node)

    def __str__(self) -> str:
        return f"REMOVED {format_path(self.path)} [{_describe(self.node)}]"


@dataclass(frozen=True, slots=True)
class Moved:
    path_before: LabelPath
    path_after: LabelPath
    kind: ClassVar[ChangeKind] = ChangeKind.MOVED

    def inverse(self) -> Moved:
        return Moved(self.path_after, self.path_before)

    def __str__(self) -> str:
        return f"MOVED {format_path(self.path_before)} -> {format_path(self.path_after)}"


@dataclass(frozen=True, slots=True)
class LinkChanged:
    path: LabelPath
    old: LinkRef
    new: LinkRef
    kind: ClassVar[ChangeKind] = ChangeKind.LINK_CHANGED

    def inverse(self) -> LinkChanged:
        return LinkChanged(self.path, self.new, self.old)

    def __str__(self) -> str:
        return f"LINK {format_path(self.path)}: {self.old} -> {self.new}"


@dataclass(frozen=True, slots=True)
class BadgeChanged:
    path: LabelPath
    old: Badge | None
    new: Badge | None
    kind: ClassVar[ChangeKind] = ChangeKind.BADGE_CHANGED

    def inverse(self) -> BadgeChanged:
        return BadgeChanged(self.path, self.new, self.old)

    def __str__(self) -> str:
        return (
            f"BADGE {format_path(self.path)}: "
            f"{_describe_badge(self.old)} -> {_describe_badge(self.new)}"
        )


Change = Added | Removed | Moved | LinkChanged | BadgeChanged


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Result of a diff() call.

    Attributes:
        changes:     Change records; ``before`` traversal order for removals,
                     moves and in-place changes, then ``after`` order for
                     additions.
        diagnostics: Findings raised by the diff itself, e.g. FATAL removal
                     of a published internal link.
    """

    changes: tuple[Change, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def breaking(self) -> bool:
        """True when any FATAL diagnostic is present."""
        return any(d.is_fatal for d in self.diagnostics)

    def of_kind(self, kind: ChangeKind) -> tuple[Change, ...]:
        return tuple(c for c in self.changes if c.kind == kind)
