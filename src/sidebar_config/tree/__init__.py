"""Tree subpackage: the navigation data model and its node-level stages.

Re-exports the public API for the tree module:
- NavigationTree, Group, Item: the immutable sidebar model
- Badge, BadgeVariant, LinkRef, LinkKind: canonical badge and link values
- ConfigLoader: raw configuration document -> unresolved NavigationTree
- BadgeNormalizer: raw badge declaration -> Badge
- LinkResolver: raw link string -> LinkRef
"""

from sidebar_config.tree.nodes import (
    Badge,
    BadgeVariant,
    Group,
    Item,
    LabelPath,
    LinkKind,
    LinkRef,
    NavigationNode,
    NavigationTree,
    format_path,
)
from sidebar_config.tree.badges import BadgeNormalizer
from sidebar_config.tree.links import LinkResolver
from sidebar_config.tree.loader import ConfigLoader

__all__ = [
    "Badge",
    "BadgeNormalizer",
    "BadgeVariant",
    "ConfigLoader",
    "Group",
    "Item",
    "LabelPath",
    "LinkKind",
    "LinkRef",
    "LinkResolver",
    "NavigationNode",
    "NavigationTree",
    "format_path",
]
