"""pytest plugin for sidebar-config.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml.  Once the package is installed (even in editable mode), the
``assert_sidebar_valid`` fixture is available without any conftest.py
changes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from sidebar_config import ProcessingConfig, validate
from sidebar_config.documents import read_document


@pytest.fixture(scope="session")
def assert_sidebar_valid() -> Any:
    """Fixture that returns a callable sidebar validity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to validate(), which builds fresh pipeline objects per call).

    Usage in tests::

        def test_docs_sidebar(assert_sidebar_valid):
            assert_sidebar_valid("docs/sidebar.yaml")

        def test_no_placeholders(assert_sidebar_valid):
            assert_sidebar_valid(document, allow_warnings=False)

    Returns:
        A callable ``_assert(document, allow_warnings=True, config=None)``
        accepting a document value or a path to a JSON/YAML file.  It raises
        ``AssertionError`` listing every offending diagnostic.
    """

    def _assert(
        document: Any,
        allow_warnings: bool = True,
        config: ProcessingConfig | None = None,
    ) -> None:
        if isinstance(document, (str, Path)):
            document = read_document(document)
        report = validate(document, config=config)
        offending = report.diagnostics if not allow_warnings else report.fatals
        if offending:
            lines = "\n".join(f"  {diagnostic}" for diagnostic in offending)
            raise AssertionError(
                f"sidebar configuration is not valid "
                f"({len(report.fatals)} fatal, {len(report.warnings)} warning(s)):\n{lines}"
            )

    return _assert
