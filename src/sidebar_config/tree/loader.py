"""ConfigLoader: converts a raw sidebar document into a NavigationTree.

Uses recursive dispatch over the loosely-typed configuration objects and
decides each node's variant structurally:

- has ``link`` (string, None or empty)       -> Item
- has ``items`` (non-empty sequence)         -> Group
- has both                                   -> AmbiguousNodeError
- has neither, or an empty ``items`` list    -> MalformedNodeError

The loader only parses structure.  Links and badges are kept as declared
(``raw_link`` / ``raw_badge``); the resulting tree is unresolved until it
passes through ``resolve_tree``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sidebar_config.exceptions import AmbiguousNodeError, MalformedNodeError
from sidebar_config.tree.nodes import Group, Item, LabelPath, NavigationNode, NavigationTree

__all__ = ["ConfigLoader"]

logger = logging.getLogger(__name__)

# Keys with a meaning of their own on a node; everything else is an extra.
_NODE_KEYS = frozenset({"label", "link", "items", "badge"})

# Top-level keys the tree models explicitly; everything else is metadata.
_TREE_KEYS = frozenset({"sidebar", "title", "description", "baseHref"})


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


@dataclass
class ConfigLoader:
    """Parses configuration documents into unresolved NavigationTrees.

    Accepts either a document mapping::

        {"title": "ppacer docs", "sidebar": [...], "social": {...}}

    or a bare sidebar sequence.  Keys other than ``sidebar``, ``title``,
    ``description`` and ``baseHref`` are kept verbatim as metadata.

    Example::
        loader = ConfigLoader()
        tree = loader.load({"sidebar": [{"label": "Intro", "link": "/start/intro/"}]})
        # tree.sections == (Item(label="Intro", raw_link="/start/intro/"),)
    """

    def load(self, document: Any) -> NavigationTree:
        """Parse a whole document.

        Raises:
            MalformedNodeError: The document or one of its nodes is malformed.
            AmbiguousNodeError: A node declares both ``link`` and ``items``.
        """
        if _is_sequence(document):
            document = {"sidebar": document}
        if not isinstance(document, Mapping):
            raise MalformedNodeError(
                (), f"document must be a mapping or a sequence, got {type(document).__name__}"
            )

        raw_sections = document.get("sidebar", [])
        if not _is_sequence(raw_sections):
            raise MalformedNodeError((), "'sidebar' must be a sequence of nodes")

        sections = tuple(self.load_node(raw, ()) for raw in raw_sections)
        tree = NavigationTree(
            sections=sections,
            title=self._optional_text(document, "title"),
            description=self._optional_text(document, "description"),
            base_href=self._optional_text(document, "baseHref"),
            metadata={k: v for k, v in document.items() if k not in _TREE_KEYS},
        )
        logger.debug("Loaded sidebar with %d top-level sections", len(sections))
        return tree

    def load_node(self, raw: Any, parent: LabelPath) -> NavigationNode:
        """Parse one node (and its subtree) declared under ``parent``."""
        if not isinstance(raw, Mapping):
            raise MalformedNodeError(
                parent, f"node must be a mapping, got {type(raw).__name__}"
            )

        label = raw.get("label")
        if not isinstance(label, str) or not label:
            raise MalformedNodeError(parent, f"node {self._describe(raw)}has no label")
        path = parent + (label,)

        has_link = "link" in raw
        has_items = "items" in raw
        if has_link and has_items:
            raise AmbiguousNodeError(path, "node declares both 'link' and 'items'")
        extras = {k: v for k, v in raw.items() if k not in _NODE_KEYS}

        if has_link:
            return self._build_item(raw, label, path, extras)
        if has_items:
            return self._build_group(raw, label, path, extras)
        raise MalformedNodeError(path, "node declares neither 'link' nor 'items'")

    def _build_item(
        self, raw: Mapping[str, Any], label: str, path: LabelPath, extras: dict[str, Any]
    ) -> Item:
        link = raw["link"]
        if link is None:
            link = ""
        if not isinstance(link, str):
            raise MalformedNodeError(
                path, f"'link' must be a string, got {type(link).__name__}"
            )
        return Item(label=label, raw_link=link, raw_badge=raw.get("badge"), extras=extras)

    def _build_group(
        self, raw: Mapping[str, Any], label: str, path: LabelPath, extras: dict[str, Any]
    ) -> Group:
        items = raw["items"]
        if not _is_sequence(items):
            raise MalformedNodeError(path, "'items' must be a sequence of nodes")
        if not items:
            raise MalformedNodeError(path, "group has no items")
        children = tuple(self.load_node(child, path) for child in items)
        return Group(label=label, children=children, raw_badge=raw.get("badge"), extras=extras)

    @staticmethod
    def _optional_text(document: Mapping[str, Any], key: str) -> str | None:
        value = document.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise MalformedNodeError((), f"'{key}' must be a string")
        return value

    @staticmethod
    def _describe(raw: Mapping[str, Any]) -> str:
        link = raw.get("link")
        return f"with link {link!r} " if isinstance(link, str) and link else ""
