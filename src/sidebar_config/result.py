"""Diagnostic records and the ValidationReport returned by validate().

Diagnostics are collected, never raised: one invocation surfaces every
finding, in tree traversal order, each carrying the label path of the node
it concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from sidebar_config.tree.nodes import LabelPath, format_path

__all__ = ["Diagnostic", "Severity", "ValidationReport"]


class Severity(StrEnum):
    """How serious a diagnostic is.

    - WARNING: surfaced to authors, never blocks a build.
    - FATAL:   blocks success (validate exits 1, a diff is breaking).
    """

    WARNING = auto()
    FATAL = auto()

    @property
    def prefix(self) -> str:
        return "WARN" if self is Severity.WARNING else "FATAL"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One validator or differ finding.

    Attributes:
        severity: WARNING or FATAL.
        path:     Label path of the offending node.
        code:     Stable machine-readable identifier, e.g. "duplicate-link".
        message:  Human-readable description.
    """

    severity: Severity
    path: LabelPath
    code: str
    message: str

    @property
    def is_fatal(self) -> bool:
        return self.severity is Severity.FATAL

    def __str__(self) -> str:
        return f"{self.severity.prefix} {format_path(self.path)}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Result of a validate() call.

    Attributes:
        diagnostics: Every finding, depth-first in declared order.
    """

    diagnostics: tuple[Diagnostic, ...]

    @property
    def passed(self) -> bool:
        """True when no FATAL diagnostic is present."""
        return not any(d.is_fatal for d in self.diagnostics)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if not d.is_fatal)

    @property
    def fatals(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.is_fatal)
