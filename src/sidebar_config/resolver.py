"""Tree resolution: run BadgeNormalizer and LinkResolver over a whole tree.

Both normalizers are pure functions of a single node's own fields, so the
top-level sections of a sidebar are resolved independently on a thread
pool and fanned back in declared order.  The validator and the differ must
only ever see the fully resolved result.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

from sidebar_config.config import ProcessingConfig
from sidebar_config.tree.badges import BadgeNormalizer
from sidebar_config.tree.links import LinkResolver
from sidebar_config.tree.nodes import Group, Item, LabelPath, NavigationNode, NavigationTree

__all__ = ["TreeResolver", "resolve_tree"]

logger = logging.getLogger(__name__)


class TreeResolver:
    """Produces resolved copies of NavigationTrees.

    One instance owns one ``LinkResolver`` (and its LRU cache), which is
    shared by the worker threads of every ``resolve`` call made through it.

    Example::

        resolver = TreeResolver()
        resolved = resolver.resolve(ConfigLoader().load(document))
        assert resolved.resolved
    """

    def __init__(
        self,
        config: ProcessingConfig | None = None,
        links: LinkResolver | None = None,
        badges: BadgeNormalizer | None = None,
    ) -> None:
        self._config = config if config is not None else ProcessingConfig()
        self._links = links if links is not None else LinkResolver(self._config.link_cache_size)
        self._badges = badges if badges is not None else BadgeNormalizer()

    def resolve(self, tree: NavigationTree) -> NavigationTree:
        """Return a new tree whose items carry LinkRefs and canonical badges.

        Raises:
            RelativePathError: A link is a bare relative path.
            InvalidBadgeVariantError: A badge names an unknown variant.
            MalformedNodeError: A badge declaration is unusable.
        """
        sections = tree.sections
        workers = min(self._config.max_workers, len(sections))
        if workers <= 1:
            resolved = [self._resolve_node(node, ()) for node in sections]
        else:
            with ThreadPoolExecutor(
                max_workers=workers, thread_name_prefix="sidebar-resolve"
            ) as pool:
                # map() preserves input order and re-raises the first failure.
                resolved = list(pool.map(self._resolve_section, sections))
        logger.debug(
            "Resolved %d top-level sections using %d worker(s)", len(sections), max(workers, 1)
        )
        return replace(tree, sections=tuple(resolved))

    def _resolve_section(self, node: NavigationNode) -> NavigationNode:
        return self._resolve_node(node, ())

    def _resolve_node(self, node: NavigationNode, parent: LabelPath) -> NavigationNode:
        path = parent + (node.label,)
        raw_badge = node.badge if node.raw_badge is None else node.raw_badge
        badge = self._badges.normalize(raw_badge, path)
        if isinstance(node, Item):
            link = node.link if node.link is not None else self._links.resolve(node.raw_link, path)
            return replace(node, link=link, badge=badge)
        children = tuple(self._resolve_node(child, path) for child in node.children)
        return replace(node, children=children, badge=badge)


def resolve_tree(tree: NavigationTree, config: ProcessingConfig | None = None) -> NavigationTree:
    """Resolve ``tree`` with a fresh TreeResolver."""
    return TreeResolver(config=config).resolve(tree)
