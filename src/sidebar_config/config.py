"""ProcessingConfig: immutable knobs for resolution, validation and diffing.

The config is a frozen (immutable) dataclass.  Every pipeline stage takes
an optional ``ProcessingConfig`` and falls back to ``ProcessingConfig()``
when none is given, so a default run needs no setup at all.
"""

from __future__ import annotations

from dataclasses import dataclass

from sidebar_config.result import Severity
from sidebar_config.tree.nodes import BadgeVariant

__all__ = ["ProcessingConfig"]


@dataclass(frozen=True, slots=True)
class ProcessingConfig:
    """Immutable configuration for the sidebar pipeline.

    Attributes:
        max_workers: Upper bound on worker threads used when resolving
            top-level sections.  ``1`` resolves inline.  Must be >= 1.
        link_cache_size: Number of raw link strings memoised per
            ``LinkResolver``.  Must be >= 1.
        urgent_variants: Badge variants that mark a node as urgent.  An
            urgent node whose link is a placeholder gets a warning.
        placeholder_severity: Severity reported for placeholder links.
        fatal_on_removed_internal: When True, the differ reports removal of
            an item with an internal link as a FATAL diagnostic.
    """

    max_workers: int = 4
    link_cache_size: int = 512
    urgent_variants: frozenset[BadgeVariant] = frozenset(
        {BadgeVariant.CAUTION, BadgeVariant.DANGER}
    )
    placeholder_severity: Severity = Severity.WARNING
    fatal_on_removed_internal: bool = True

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            msg = f"max_workers must be >= 1, got {self.max_workers}"
            raise ValueError(msg)
        if self.link_cache_size < 1:
            msg = f"link_cache_size must be >= 1, got {self.link_cache_size}"
            raise ValueError(msg)
        unknown = [v for v in self.urgent_variants if v not in set(BadgeVariant)]
        if unknown:
            msg = f"urgent_variants contains unknown variants: {sorted(unknown)}"
            raise ValueError(msg)
