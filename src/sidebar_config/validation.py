"""SchemaValidator: tree-wide invariants over a resolved NavigationTree.

Checks (FATAL unless noted):

- duplicate-link:   two internal links anywhere in the tree are identical.
- duplicate-label:  two siblings (or two top-level sections) share a label.
- empty-group:      a group has no children.
- empty-label:      a node's label is blank.
- placeholder-link: an item has no target yet (WARNING by default).
- urgent-unlinked:  an item badged ``caution``/``danger`` has a placeholder
                    link (WARNING).

Findings are accumulated, not raised, and come out depth-first with each
node's own findings ahead of its children's.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sidebar_config.config import ProcessingConfig
from sidebar_config.result import Diagnostic, Severity, ValidationReport
from sidebar_config.tree.nodes import (
    Item,
    LabelPath,
    LinkKind,
    NavigationNode,
    NavigationTree,
    format_path,
)

__all__ = ["SchemaValidator", "validate_tree"]

logger = logging.getLogger(__name__)


class SchemaValidator:
    """Validates resolved trees against the sidebar schema.

    Stateless between calls: every ``validate`` starts from scratch, so one
    instance may validate several snapshots concurrently.
    """

    def __init__(self, config: ProcessingConfig | None = None) -> None:
        self._config = config if config is not None else ProcessingConfig()

    def validate(self, tree: NavigationTree) -> ValidationReport:
        """Run every check and return the collected diagnostics.

        Raises:
            ValueError: ``tree`` has not been resolved.
        """
        if not tree.resolved:
            msg = "SchemaValidator requires a resolved tree; call resolve_tree() first"
            raise ValueError(msg)

        diagnostics: list[Diagnostic] = []
        self._visit_siblings(tree.sections, (), diagnostics, {})
        report = ValidationReport(diagnostics=tuple(diagnostics))
        logger.debug(
            "Validation finished: %d fatal, %d warning(s)",
            len(report.fatals),
            len(report.warnings),
        )
        return report

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _visit_siblings(
        self,
        nodes: Sequence[NavigationNode],
        parent: LabelPath,
        out: list[Diagnostic],
        seen_links: dict[str, LabelPath],
    ) -> None:
        seen_labels: set[str] = set()
        for node in nodes:
            path = parent + (node.label,)
            if node.label in seen_labels:
                where = format_path(parent) if parent else "the top level"
                out.append(
                    Diagnostic(
                        Severity.FATAL,
                        path,
                        "duplicate-label",
                        f"label {node.label!r} is used by more than one entry under {where}",
                    )
                )
            seen_labels.add(node.label)
            self._visit_node(node, path, out, seen_links)

    def _visit_node(
        self,
        node: NavigationNode,
        path: LabelPath,
        out: list[Diagnostic],
        seen_links: dict[str, LabelPath],
    ) -> None:
        if not node.label.strip():
            out.append(Diagnostic(Severity.FATAL, path, "empty-label", "label is empty"))

        if isinstance(node, Item):
            self._check_item(node, path, out, seen_links)
            return

        if not node.children:
            out.append(Diagnostic(Severity.FATAL, path, "empty-group", "group has no items"))
        self._visit_siblings(node.children, path, out, seen_links)

    # ------------------------------------------------------------------
    # Item checks
    # ------------------------------------------------------------------

    def _check_item(
        self,
        item: Item,
        path: LabelPath,
        out: list[Diagnostic],
        seen_links: dict[str, LabelPath],
    ) -> None:
        link = item.link
        if link is None:
            msg = f"{format_path(path)}: item has not been resolved"
            raise ValueError(msg)

        if link.kind == LinkKind.INTERNAL:
            first = seen_links.get(link.target)
            if first is not None:
                out.append(
                    Diagnostic(
                        Severity.FATAL,
                        path,
                        "duplicate-link",
                        f"link {link.target!r} is already used by {format_path(first)}",
                    )
                )
            else:
                seen_links[link.target] = path

        if link.is_placeholder:
            out.append(
                Diagnostic(
                    self._config.placeholder_severity,
                    path,
                    "placeholder-link",
                    "placeholder link: entry is rendered but has no target yet",
                )
            )
            if item.badge is not None and item.badge.variant in self._config.urgent_variants:
                out.append(
                    Diagnostic(
                        Severity.WARNING,
                        path,
                        "urgent-unlinked",
                        f"marked urgent ({item.badge.variant} badge {item.badge.text!r}) "
                        "but unlinked",
                    )
                )


def validate_tree(tree: NavigationTree, config: ProcessingConfig | None = None) -> ValidationReport:
    """Validate ``tree`` with a fresh SchemaValidator."""
    return SchemaValidator(config=config).validate(tree)
