"""BadgeNormalizer: collapses every badge declaration into one ``Badge``.

Sidebar configurations spell badges two ways:

- a bare string:          ``badge: "New"``
- a structured mapping:   ``badge: {text: "TODO", variant: "caution"}``

After normalization every consumer sees ``Badge | None`` only.  A bare
string becomes a ``note`` badge, and so does a mapping without a variant.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sidebar_config.exceptions import InvalidBadgeVariantError, MalformedNodeError
from sidebar_config.tree.nodes import Badge, BadgeVariant

__all__ = ["BadgeNormalizer"]

_VARIANTS = {variant.value: variant for variant in BadgeVariant}


class BadgeNormalizer:
    """Canonicalizes raw badge declarations.

    Stateless, so a single instance can be shared between threads.

    Example usage:
        normalizer = BadgeNormalizer()
        normalizer.normalize("New")
        # Badge(text="New", variant=BadgeVariant.NOTE)
        normalizer.normalize({"text": "TODO", "variant": "caution"})
        # Badge(text="TODO", variant=BadgeVariant.CAUTION)
    """

    def normalize(self, raw: Any, path: Sequence[str] = ()) -> Badge | None:
        """Normalize a badge declaration.

        Args:
            raw:  None, a string, a ``{text, variant}`` mapping, or a Badge.
            path: Label path of the owning node, used in error messages.

        Returns:
            The canonical Badge, or None when no badge is declared.

        Raises:
            InvalidBadgeVariantError: The mapping names an unknown variant.
            MalformedNodeError: The declaration has no usable text or is of
                an unsupported type.
        """
        if raw is None:
            return None
        if isinstance(raw, Badge):
            return raw
        if isinstance(raw, str):
            return Badge(text=self._text(raw, path), variant=BadgeVariant.NOTE)
        if isinstance(raw, Mapping):
            text = raw.get("text")
            if not isinstance(text, str):
                raise MalformedNodeError(path, "badge mapping needs a string 'text'")
            return Badge(text=self._text(text, path), variant=self._variant(raw, path))
        raise MalformedNodeError(
            path, f"badge must be a string or mapping, got {type(raw).__name__}"
        )

    def _text(self, text: str, path: Sequence[str]) -> str:
        stripped = text.strip()
        if not stripped:
            raise MalformedNodeError(path, "badge text is empty")
        return stripped

    def _variant(self, raw: Mapping[str, Any], path: Sequence[str]) -> BadgeVariant:
        variant = raw.get("variant")
        if variant is None:
            return BadgeVariant.NOTE
        if isinstance(variant, str) and variant.strip() in _VARIANTS:
            return _VARIANTS[variant.strip()]
        allowed = ", ".join(_VARIANTS)
        raise InvalidBadgeVariantError(
            path, f"unknown badge variant {variant!r} (expected one of: {allowed})"
        )
