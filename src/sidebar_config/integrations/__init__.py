"""Integrations subpackage for sidebar-config.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which lets documentation repositories assert their sidebar configuration
is valid from their own test suites.
"""

from __future__ import annotations

__all__: list[str] = []
