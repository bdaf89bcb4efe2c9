"""Exporter: serializes a NavigationTree back to a configuration document.

The output is plain ``dict``/``list``/``str`` data, ready for ``json.dump``
or ``yaml.safe_dump`` and for the site generator's sidebar option.  Badges
come out in their structured ``{text, variant}`` form, links as their
stored target.  Metadata and node extras are forwarded verbatim.

The exporter never validates; it is a total function over any tree.
Unresolved nodes export the raw declarations they were loaded from.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from sidebar_config.tree.nodes import Badge, Group, NavigationNode, NavigationTree

__all__ = ["export_node", "export_tree"]


def _plain(value: Any) -> Any:
    """Deep-copy ``value``, turning read-only mapping proxies into dicts."""
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return copy.deepcopy(value)


def _export_badge(node: NavigationNode) -> Any:
    if node.badge is not None:
        return node.badge.to_dict()
    if isinstance(node.raw_badge, Badge):
        return node.raw_badge.to_dict()
    return _plain(node.raw_badge)


def export_node(node: NavigationNode) -> dict[str, Any]:
    """Export a single node and its subtree."""
    out: dict[str, Any] = {"label": node.label}
    if isinstance(node, Group):
        badge = _export_badge(node)
        if badge is not None:
            out["badge"] = badge
        out["items"] = [export_node(child) for child in node.children]
    else:
        out["link"] = node.link.target if node.link is not None else node.raw_link
        badge = _export_badge(node)
        if badge is not None:
            out["badge"] = badge
    for key, value in node.extras.items():
        out[key] = _plain(value)
    return out


def export_tree(tree: NavigationTree) -> dict[str, Any]:
    """Export a whole tree as a configuration document.

    Key order: ``title``, ``description``, ``baseHref``, metadata keys in
    their original order, then ``sidebar``.
    """
    document: dict[str, Any] = {}
    if tree.title is not None:
        document["title"] = tree.title
    if tree.description is not None:
        document["description"] = tree.description
    if tree.base_href is not None:
        document["baseHref"] = tree.base_href
    for key, value in tree.metadata.items():
        document[key] = _plain(value)
    document["sidebar"] = [export_node(node) for node in tree.sections]
    return document
