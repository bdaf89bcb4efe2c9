"""Public API functions for sidebar-config.

Each call creates fresh pipeline objects (ConfigLoader, TreeResolver,
SchemaValidator, TreeDiffer) so that calls share no mutable state and may
run concurrently.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from sidebar_config.config import ProcessingConfig
from sidebar_config.diff.changes import DiffReport
from sidebar_config.diff.differ import TreeDiffer
from sidebar_config.exporter import export_tree
from sidebar_config.resolver import TreeResolver
from sidebar_config.result import ValidationReport
from sidebar_config.tree.loader import ConfigLoader
from sidebar_config.tree.nodes import NavigationTree
from sidebar_config.validation import SchemaValidator

__all__ = [
    "diff",
    "load",
    "normalize",
    "validate",
    "validate_documents",
]


def load(document: Any, config: ProcessingConfig | None = None) -> NavigationTree:
    """Load and resolve a configuration document.

    Args:
        document: A sidebar document mapping or a bare sidebar sequence.
        config:   Pipeline knobs.  Defaults to ``ProcessingConfig()``.

    Returns:
        A resolved, immutable NavigationTree.

    Raises:
        StructuralError: Any loader, badge or link error; no tree is returned.
    """
    tree = ConfigLoader().load(document)
    return TreeResolver(config=config).resolve(tree)


def normalize(document: Any, config: ProcessingConfig | None = None) -> dict[str, Any]:
    """Return the canonical form of ``document``.

    Idempotent: ``normalize(normalize(x)) == normalize(x)``.
    """
    return export_tree(load(document, config=config))


def validate(document: Any, config: ProcessingConfig | None = None) -> ValidationReport:
    """Load ``document`` and run the schema checks over it.

    Structural errors are raised, not reported: a document that cannot be
    loaded has no tree to validate.
    """
    tree = load(document, config=config)
    return SchemaValidator(config=config).validate(tree)


def validate_documents(
    documents: Sequence[Any], config: ProcessingConfig | None = None
) -> list[ValidationReport]:
    """Validate several independent snapshots concurrently.

    Reports come back in input order.  The first structural error raised by
    any document propagates.
    """
    config = config if config is not None else ProcessingConfig()
    if len(documents) <= 1:
        return [validate(document, config=config) for document in documents]
    workers = min(config.max_workers, len(documents))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sidebar-validate") as pool:
        return list(pool.map(lambda document: validate(document, config=config), documents))


def diff(before: Any, after: Any, config: ProcessingConfig | None = None) -> DiffReport:
    """Load two snapshots and report what changed between them."""
    return TreeDiffer(config=config).diff(load(before, config=config), load(after, config=config))
