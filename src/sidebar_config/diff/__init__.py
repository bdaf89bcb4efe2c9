"""diff subpackage: snapshot comparison for navigation trees.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from sidebar_config.diff import TreeDiffer

    report = TreeDiffer().diff(before, after)
    # report.changes     -> Added / Removed / Moved / LinkChanged / BadgeChanged
    # report.breaking    -> True when a published internal link disappeared
"""

from __future__ import annotations

from sidebar_config.diff.changes import (
    Added,
    BadgeChanged,
    Change,
    ChangeKind,
    DiffReport,
    LinkChanged,
    Moved,
    Removed,
)
from sidebar_config.diff.differ import TreeDiffer, diff_trees

__all__ = [
    "Added",
    "BadgeChanged",
    "Change",
    "ChangeKind",
    "DiffReport",
    "LinkChanged",
    "Moved",
    "Removed",
    "TreeDiffer",
    "diff_trees",
]
