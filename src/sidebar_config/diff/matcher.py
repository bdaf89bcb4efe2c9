"""Minimum-cost pairing of removed and added nodes for move detection.

Wraps scipy's ``linear_sum_assignment`` so that forbidden pairs (``np.inf``
cells) never reach the solver, which would raise ``ValueError`` on them.
After assignment, pairs that landed on originally-infinite cells are
filtered out.

Guard value formula: ``finite_max * 2.0 + 1.0``
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

from sidebar_config.tree.nodes import LabelPath

__all__ = ["ancestor_distance", "cost_matrix", "hungarian_match", "match_pairs"]

L = TypeVar("L")
R = TypeVar("R")


def ancestor_distance(before: LabelPath, after: LabelPath) -> float:
    """Number of ancestor labels that differ between two label paths.

    Only the ancestor chains are compared (the node's own label is the last
    element of each path).  Moving ``Internals > Schedules`` to
    ``Concepts > Schedules`` costs 2: one ancestor dropped, one added.
    """
    parent_a, parent_b = before[:-1], after[:-1]
    common = 0
    for label_a, label_b in zip(parent_a, parent_b, strict=False):
        if label_a != label_b:
            break
        common += 1
    return float(len(parent_a) - common + len(parent_b) - common)


def cost_matrix(
    left: Sequence[L],
    right: Sequence[R],
    cost: Callable[[L, R], float],
) -> np.ndarray:
    """Build an ``(len(left), len(right))`` float matrix of pairwise costs."""
    matrix = np.full((len(left), len(right)), np.inf, dtype=float)
    for i, a in enumerate(left):
        for j, b in enumerate(right):
            matrix[i, j] = cost(a, b)
    return matrix


def hungarian_match(
    cost: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Compute optimal bipartite assignment with np.inf guard.

    Args:
        cost: 2-D cost matrix of shape ``(m, n)``.  May contain ``np.inf``
            to mark forbidden pairs.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays giving the
        optimal assignment, with any pair whose original cost was infinite
        removed.  Empty arrays are returned when no valid pair exists.
    """
    if cost.size == 0:
        return np.array([], dtype=int), np.array([], dtype=int)

    original = np.asarray(cost, dtype=float)
    inf_mask = np.isinf(original)

    if inf_mask.all():
        return np.array([], dtype=int), np.array([], dtype=int)

    guarded = original
    if inf_mask.any():
        finite_max = float(original[~inf_mask].max())
        guarded = np.where(inf_mask, finite_max * 2.0 + 1.0, original)

    row_ind, col_ind = linear_sum_assignment(guarded)

    keep = np.isfinite(original[row_ind, col_ind])
    return row_ind[keep], col_ind[keep]


def match_pairs(
    left: Sequence[L],
    right: Sequence[R],
    cost: Callable[[L, R], float],
) -> list[tuple[L, R]]:
    """Pair up ``left`` and ``right`` elements at minimum total cost.

    Pairs are returned in ``left`` order; forbidden pairs (infinite cost)
    are never returned.
    """
    if not left or not right:
        return []
    row_ind, col_ind = hungarian_match(cost_matrix(left, right, cost))
    pairs = sorted(zip(row_ind.tolist(), col_ind.tolist(), strict=True))
    return [(left[r], right[c]) for r, c in pairs]
