"""TreeDiffer: structural comparison of two resolved sidebar snapshots.

Nodes are identified by their label path (ancestor labels plus their own
label).  Nodes present in both trees with the same kind are compared in
place (link and badge).  The rest are removal and addition candidates,
which are then paired into moves:

1. Groups with the same label.  Among several candidates, the one whose
   children overlap most wins.  The descendants of a moved group are then
   compared against their counterparts under the group's new location.
2. Items with the same label and link.  A badge that changed along the
   way is reported as a BadgeChanged at the new location.

Pairing uses a minimum-cost bipartite assignment where the cost of a pair
is the number of ancestor labels that differ, so each removed node moves
to its nearest counterpart.  Whatever stays unpaired is reported as
Removed or Added.

Removing an item whose link was internal breaks a published URL and is
reported as a FATAL diagnostic.
"""

from __future__ import annotations

import logging
import math

from sidebar_config.config import ProcessingConfig
from sidebar_config.diff.changes import (
    Added,
    BadgeChanged,
    Change,
    DiffReport,
    LinkChanged,
    Moved,
    Removed,
)
from sidebar_config.diff.matcher import ancestor_distance, match_pairs
from sidebar_config.result import Diagnostic, Severity
from sidebar_config.tree.nodes import (
    Group,
    Item,
    LabelPath,
    LinkKind,
    NavigationNode,
    NavigationTree,
)

__all__ = ["TreeDiffer", "diff_trees"]

logger = logging.getLogger(__name__)

NodeIndex = dict[LabelPath, NavigationNode]
PathMap = dict[LabelPath, LabelPath]

# Weight of child-label dissimilarity in the group cost.  Kept below 1 so it
# only orders candidates at the same ancestor distance.
_CHILD_WEIGHT = 0.5


def _is_under(path: LabelPath, ancestors: set[LabelPath] | PathMap) -> bool:
    return any(path[:depth] in ancestors for depth in range(1, len(path)))


def _relocate(path: LabelPath, moves: PathMap) -> LabelPath:
    """Map ``path`` through the deepest moved group that contains it."""
    for depth in range(len(path) - 1, 0, -1):
        target = moves.get(path[:depth])
        if target is not None:
            return target + path[depth:]
    return path


def _has_counterpart(node: NavigationNode, other: NavigationNode | None) -> bool:
    return other is not None and type(node) is type(other)


def _child_difference(a: Group, b: Group) -> float:
    """1 minus the Jaccard overlap of the two groups' child labels."""
    left = {child.label for child in a.children}
    right = {child.label for child in b.children}
    union = left | right
    if not union:
        return 0.0
    return 1.0 - len(left & right) / len(union)


class TreeDiffer:
    """Computes DiffReports between resolved NavigationTrees.

    Example::

        report = TreeDiffer().diff(before, after)
        for change in report.changes:
            print(change)
        if report.breaking:
            ...
    """

    def __init__(self, config: ProcessingConfig | None = None) -> None:
        self._config = config if config is not None else ProcessingConfig()

    def diff(self, before: NavigationTree, after: NavigationTree) -> DiffReport:
        """Compare ``before`` with ``after``.

        Raises:
            ValueError: Either tree has not been resolved.
        """
        if not before.resolved or not after.resolved:
            msg = "TreeDiffer requires resolved trees; call resolve_tree() first"
            raise ValueError(msg)

        old: NodeIndex = dict(before.walk())
        new: NodeIndex = dict(after.walk())

        # A moved group can uncover further moves among its descendants, so
        # pairing repeats until a round finds nothing new.
        group_moves: PathMap = {}
        while True:
            removed, added = self._candidates(old, new, group_moves)
            found = self._pair_groups(removed, added, old, new)
            if not found:
                break
            group_moves.update(found)

        item_moves = self._pair_items(removed, added, old, new)
        moves = {**group_moves, **item_moves}
        removed_set = set(removed) - set(item_moves)
        added_set = set(added) - set(item_moves.values())

        changes: list[Change] = []
        diagnostics: list[Diagnostic] = []
        for path, node in old.items():
            if path in moves:
                target = moves[path]
                changes.append(Moved(path, target))
                if node.badge != new[target].badge:
                    changes.append(BadgeChanged(target, node.badge, new[target].badge))
            elif path in removed_set:
                changes.append(Removed(path, node))
                diagnostic = self._removal_diagnostic(path, node)
                if diagnostic is not None:
                    diagnostics.append(diagnostic)
            else:
                target = _relocate(path, group_moves)
                changes.extend(self._compare(target, node, new[target]))
        for path, node in new.items():
            if path in added_set:
                changes.append(Added(path, node))

        logger.debug(
            "Diff finished: %d change(s), %d move(s), %d diagnostic(s)",
            len(changes),
            len(moves),
            len(diagnostics),
        )
        return DiffReport(changes=tuple(changes), diagnostics=tuple(diagnostics))

    # ------------------------------------------------------------------
    # Move detection
    # ------------------------------------------------------------------

    @staticmethod
    def _candidates(
        old: NodeIndex, new: NodeIndex, moves: PathMap
    ) -> tuple[list[LabelPath], list[LabelPath]]:
        """Paths with no same-kind counterpart once ``moves`` are applied."""
        back = {b: a for a, b in moves.items()}
        removed = [
            p
            for p, n in old.items()
            if p not in moves and not _has_counterpart(n, new.get(_relocate(p, moves)))
        ]
        added = [
            p
            for p, n in new.items()
            if p not in back and not _has_counterpart(n, old.get(_relocate(p, back)))
        ]
        return removed, added

    def _pair_groups(
        self, removed: list[LabelPath], added: list[LabelPath], old: NodeIndex, new: NodeIndex
    ) -> PathMap:
        left = [p for p in removed if isinstance(old[p], Group)]
        right = [p for p in added if isinstance(new[p], Group)]

        def cost(a: LabelPath, b: LabelPath) -> float:
            group_a, group_b = old[a], new[b]
            if a[-1] != b[-1] or not isinstance(group_a, Group) or not isinstance(group_b, Group):
                return math.inf
            return ancestor_distance(a, b) + _CHILD_WEIGHT * _child_difference(group_a, group_b)

        found: PathMap = {}
        # Shallow pairs first; pairs nested inside them wait for the next round.
        for a, b in sorted(match_pairs(left, right, cost), key=lambda pair: len(pair[0])):
            if _is_under(a, found) or _is_under(b, set(found.values())):
                continue
            found[a] = b
        return found

    def _pair_items(
        self, removed: list[LabelPath], added: list[LabelPath], old: NodeIndex, new: NodeIndex
    ) -> PathMap:
        left = [p for p in removed if isinstance(old[p], Item)]
        right = [p for p in added if isinstance(new[p], Item)]

        def cost(a: LabelPath, b: LabelPath) -> float:
            item_a, item_b = old[a], new[b]
            if a[-1] != b[-1] or not isinstance(item_a, Item) or not isinstance(item_b, Item):
                return math.inf
            if item_a.link != item_b.link:
                return math.inf
            return ancestor_distance(a, b)

        return dict(match_pairs(left, right, cost))

    # ------------------------------------------------------------------
    # In-place comparison
    # ------------------------------------------------------------------

    @staticmethod
    def _compare(
        path: LabelPath, before: NavigationNode, after: NavigationNode
    ) -> list[Change]:
        changes: list[Change] = []
        if (
            isinstance(before, Item)
            and isinstance(after, Item)
            and before.link is not None
            and after.link is not None
            and before.link != after.link
        ):
            changes.append(LinkChanged(path, before.link, after.link))
        if before.badge != after.badge:
            changes.append(BadgeChanged(path, before.badge, after.badge))
        return changes

    def _removal_diagnostic(self, path: LabelPath, node: NavigationNode) -> Diagnostic | None:
        if not isinstance(node, Item) or node.link is None:
            return None
        if node.link.kind != LinkKind.INTERNAL:
            return None
        severity = Severity.FATAL if self._config.fatal_on_removed_internal else Severity.WARNING
        return Diagnostic(
            severity,
            path,
            "removed-published-link",
            f"published page {node.link.target!r} was removed from the sidebar",
        )


def diff_trees(
    before: NavigationTree, after: NavigationTree, config: ProcessingConfig | None = None
) -> DiffReport:
    """Diff two resolved trees with a fresh TreeDiffer."""
    return TreeDiffer(config=config).diff(before, after)
