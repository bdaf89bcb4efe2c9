"""sidebar-config - load, validate, normalize and diff documentation sidebars."""

from __future__ import annotations

__version__: str = "0.1.0"

from sidebar_config.api import (  # noqa: E402
    diff,
    load,
    normalize,
    validate,
    validate_documents,
)
from sidebar_config.config import ProcessingConfig  # noqa: E402
from sidebar_config.diff import DiffReport, TreeDiffer  # noqa: E402
from sidebar_config.exceptions import (  # noqa: E402
    AmbiguousNodeError,
    DocumentError,
    InvalidBadgeVariantError,
    MalformedNodeError,
    RelativePathError,
    SidebarConfigError,
    StructuralError,
)
from sidebar_config.exporter import export_tree  # noqa: E402
from sidebar_config.resolver import TreeResolver, resolve_tree  # noqa: E402
from sidebar_config.result import Diagnostic, Severity, ValidationReport  # noqa: E402
from sidebar_config.tree import ConfigLoader, NavigationTree  # noqa: E402
from sidebar_config.validation import SchemaValidator  # noqa: E402

__all__: list[str] = [
    "AmbiguousNodeError",
    "ConfigLoader",
    "Diagnostic",
    "DiffReport",
    "DocumentError",
    "InvalidBadgeVariantError",
    "MalformedNodeError",
    "NavigationTree",
    "ProcessingConfig",
    "RelativePathError",
    "SchemaValidator",
    "Severity",
    "SidebarConfigError",
    "StructuralError",
    "TreeDiffer",
    "TreeResolver",
    "ValidationReport",
    "diff",
    "export_tree",
    "load",
    "normalize",
    "resolve_tree",
    "validate",
    "validate_documents",
]
