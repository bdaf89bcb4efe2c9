"""Navigation tree data model: badges, link references, groups and items.

A sidebar is an ordered forest.  Each node is either a ``Group`` (a labelled
container with at least one child) or an ``Item`` (a labelled leaf with a
link).  All types are frozen; transformations build new trees with
``dataclasses.replace`` instead of mutating in place.

Nodes keep both the canonical form (``link``, ``badge``) and the raw
declaration they were loaded from (``raw_link``, ``raw_badge``).  A freshly
loaded tree has ``link=None`` on every item and is *unresolved* until it has
passed through the resolver.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any
from urllib.parse import urljoin

__all__ = [
    "Badge",
    "BadgeVariant",
    "Group",
    "Item",
    "LabelPath",
    "LinkKind",
    "LinkRef",
    "NavigationNode",
    "NavigationTree",
    "format_path",
]

# Ancestor labels followed by the node's own label.
LabelPath = tuple[str, ...]

# Raw badge declaration as it appears in a configuration document.
RawBadge = str | Mapping[str, Any] | None

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _freeze(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if mapping is None:
        return _EMPTY
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


def format_path(path: LabelPath) -> str:
    """Render a label path as ``"Internals > Schedules"``."""
    return " > ".join(path) if path else "<root>"


class BadgeVariant(StrEnum):
    """The five badge styles a sidebar entry can carry."""

    NOTE = auto()
    TIP = auto()
    CAUTION = auto()
    DANGER = auto()
    SUCCESS = auto()


@dataclass(frozen=True, slots=True)
class Badge:
    """A short status annotation such as "New" or "TODO"."""

    text: str
    variant: BadgeVariant = BadgeVariant.NOTE

    def __post_init__(self) -> None:
        if not isinstance(self.variant, BadgeVariant):
            object.__setattr__(self, "variant", BadgeVariant(self.variant))

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "variant": str(self.variant)}


class LinkKind(StrEnum):
    """Classification of a navigation link.

    - EXTERNAL:    absolute URL with a scheme ("https://pkg.go.dev/...").
    - INTERNAL:    site-root-relative path ("/internals/dags/").
    - PLACEHOLDER: declared but empty; rendered, not yet navigable.
    """

    EXTERNAL = auto()
    INTERNAL = auto()
    PLACEHOLDER = auto()


@dataclass(frozen=True, slots=True)
class LinkRef:
    """A classified link.  ``target`` is empty for placeholders."""

    kind: LinkKind
    target: str = ""

    @classmethod
    def external(cls, url: str) -> LinkRef:
        return cls(LinkKind.EXTERNAL, url)

    @classmethod
    def internal(cls, path: str) -> LinkRef:
        return cls(LinkKind.INTERNAL, path)

    @classmethod
    def placeholder(cls) -> LinkRef:
        return cls(LinkKind.PLACEHOLDER, "")

    @property
    def is_placeholder(self) -> bool:
        return self.kind == LinkKind.PLACEHOLDER

    def href(self, base_href: str | None = None) -> str | None:
        """Return the navigable URL for this link.

        Internal paths are joined onto ``base_href`` (keeping any path prefix
        of the base, so ``https://example.org/docs`` + ``/start/`` gives
        ``https://example.org/docs/start/``).  The stored target itself is
        never rewritten.

        Returns:
            The URL, the bare internal path when no base is known, or None for
            placeholders.
        """
        if self.kind == LinkKind.PLACEHOLDER:
            return None
        if self.kind == LinkKind.EXTERNAL or not base_href:
            return self.target
        return urljoin(base_href.rstrip("/") + "/", self.target.lstrip("/"))

    def __str__(self) -> str:
        return self.target if self.target else "<placeholder>"


@dataclass(frozen=True, slots=True)
class Item:
    """A leaf entry pointing at a page.

    Attributes:
        label:     Display text.  Non-empty.
        link:      Classified link; None until the tree is resolved.
        badge:     Canonical badge; None when absent or not yet resolved.
        raw_link:  The link string as declared ("" when absent).
        raw_badge: The badge declaration as loaded (string, mapping or None).
        extras:    Unrecognised keys (``attrs``, ``collapsed`` ...) forwarded
                   verbatim by the exporter.
    """

    label: str
    link: LinkRef | None = None
    badge: Badge | None = None
    raw_link: str = ""
    raw_badge: RawBadge | Badge = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", _freeze(self.extras))
        if isinstance(self.raw_badge, Mapping):
            object.__setattr__(self, "raw_badge", _freeze(self.raw_badge))

    @property
    def resolved(self) -> bool:
        return self.link is not None and (self.raw_badge is None or self.badge is not None)


@dataclass(frozen=True, slots=True)
class Group:
    """A labelled container whose children render in declaration order."""

    label: str
    children: tuple[NavigationNode, ...] = ()
    badge: Badge | None = None
    raw_badge: RawBadge | Badge = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "extras", _freeze(self.extras))
        if isinstance(self.raw_badge, Mapping):
            object.__setattr__(self, "raw_badge", _freeze(self.raw_badge))

    @property
    def resolved(self) -> bool:
        if self.raw_badge is not None and self.badge is None:
            return False
        return all(child.resolved for child in self.children)


NavigationNode = Group | Item


@dataclass(frozen=True, slots=True)
class NavigationTree:
    """A whole sidebar plus its tree-level metadata.

    Attributes:
        sections:    Top-level nodes in rendered order.
        title:       Site title, if declared.
        description: Site description, if declared.
        base_href:   Explicit ``baseHref`` of the document, if declared.
        metadata:    Opaque top-level keys (``social``, ``customCss``,
                     ``site`` ...), never inspected, exported verbatim.
    """

    sections: tuple[NavigationNode, ...] = ()
    title: str | None = None
    description: str | None = None
    base_href: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.sections, tuple):
            object.__setattr__(self, "sections", tuple(self.sections))
        object.__setattr__(self, "metadata", _freeze(self.metadata))

    @property
    def resolved(self) -> bool:
        """True when every link and badge is in canonical form."""
        return all(node.resolved for node in self.sections)

    @property
    def site_url(self) -> str | None:
        """The base URL internal links resolve against.

        ``baseHref`` wins; otherwise the generator-level ``site`` key.
        """
        if self.base_href:
            return self.base_href
        site = self.metadata.get("site")
        return site if isinstance(site, str) and site else None

    def walk(self) -> Iterator[tuple[LabelPath, NavigationNode]]:
        """Yield ``(path, node)`` depth-first, children in declared order."""
        stack: list[tuple[LabelPath, NavigationNode]] = [
            ((node.label,), node) for node in reversed(self.sections)
        ]
        while stack:
            path, node = stack.pop()
            yield path, node
            if isinstance(node, Group):
                stack.extend(
                    (path + (child.label,), child) for child in reversed(node.children)
                )

    def items(self) -> Iterator[tuple[LabelPath, Item]]:
        """Yield only the leaf items, in traversal order."""
        for path, node in self.walk():
            if isinstance(node, Item):
                yield path, node
