"""Tests for SchemaValidator checks, severities and ordering."""

from __future__ import annotations

from typing import Any

import pytest

from sidebar_config.config import ProcessingConfig
from sidebar_config.resolver import resolve_tree
from sidebar_config.result import Severity, ValidationReport
from sidebar_config.tree.loader import ConfigLoader
from sidebar_config.tree.nodes import Group, Item, LinkRef, NavigationTree
from sidebar_config.validation import SchemaValidator, validate_tree


def _validate(document: Any, config: ProcessingConfig | None = None) -> ValidationReport:
    tree = resolve_tree(ConfigLoader().load(document))
    return validate_tree(tree, config)


def _codes(report: ValidationReport) -> list[str]:
    return [d.code for d in report.diagnostics]


class TestScenarios:
    def test_duplicate_link_in_same_group_is_fatal(self) -> None:
        report = _validate(
            [
                {
                    "label": "Getting started",
                    "items": [
                        {"label": "Intro", "link": "/start/intro/"},
                        {"label": "Intro2", "link": "/start/intro/"},
                    ],
                }
            ]
        )
        assert not report.passed
        assert len(report.fatals) == 1
        fatal = report.fatals[0]
        assert fatal.code == "duplicate-link"
        assert fatal.path == ("Getting started", "Intro2")
        assert "Getting started > Intro" in fatal.message

    def test_placeholder_is_single_warning(self) -> None:
        report = _validate(
            [{"label": "Overview", "items": [{"label": "High-level design", "link": ""}]}]
        )
        assert report.passed
        assert len(report.warnings) == 1
        assert report.fatals == ()
        assert report.warnings[0].code == "placeholder-link"
        assert report.warnings[0].path == ("Overview", "High-level design")


class TestChecks:
    def test_clean_snapshot_passes(self, ppacer_v1: dict[str, Any]) -> None:
        report = _validate(ppacer_v1)
        assert report.passed
        assert report.diagnostics == ()

    def test_duplicate_link_across_sections(self) -> None:
        report = _validate(
            [
                {"label": "Internals", "items": [{"label": "Logging", "link": "/internals/loggers/"}]},
                {"label": "Concepts", "items": [{"label": "Loggers", "link": "/internals/loggers/"}]},
            ]
        )
        assert _codes(report) == ["duplicate-link"]
        assert report.fatals[0].path == ("Concepts", "Loggers")

    def test_identical_external_links_are_allowed(self) -> None:
        report = _validate(
            [
                {"label": "API", "link": "https://pkg.go.dev/x"},
                {"label": "Reference", "link": "https://pkg.go.dev/x"},
            ]
        )
        assert report.passed
        assert report.diagnostics == ()

    def test_duplicate_sibling_labels(self) -> None:
        report = _validate(
            [
                {"label": "DAGs", "link": "/a/"},
                {"label": "DAGs", "link": "/b/"},
            ]
        )
        assert _codes(report) == ["duplicate-label"]
        assert "the top level" in report.fatals[0].message

    def test_same_label_under_different_parents_is_fine(self) -> None:
        report = _validate(
            [
                {"label": "A", "items": [{"label": "Intro", "link": "/a/intro/"}]},
                {"label": "B", "items": [{"label": "Intro", "link": "/b/intro/"}]},
            ]
        )
        assert report.passed

    def test_urgent_placeholder_warns_twice(self) -> None:
        report = _validate(
            [{"label": "Roadmap", "link": "", "badge": {"text": "TODO", "variant": "caution"}}]
        )
        assert report.passed
        assert _codes(report) == ["placeholder-link", "urgent-unlinked"]
        assert "marked urgent" in report.warnings[1].message

    def test_danger_badge_counts_as_urgent(self) -> None:
        report = _validate(
            [{"label": "Roadmap", "link": "", "badge": {"text": "!", "variant": "danger"}}]
        )
        assert "urgent-unlinked" in _codes(report)

    def test_note_badge_on_placeholder_is_not_urgent(self) -> None:
        report = _validate([{"label": "Roadmap", "link": "", "badge": "New"}])
        assert _codes(report) == ["placeholder-link"]

    def test_urgent_badge_on_linked_item_is_fine(self) -> None:
        report = _validate(
            [{"label": "Roadmap", "link": "/r/", "badge": {"text": "TODO", "variant": "caution"}}]
        )
        assert report.diagnostics == ()

    def test_empty_group_built_programmatically(self) -> None:
        tree = NavigationTree(sections=(Group("Empty"),))
        report = SchemaValidator().validate(tree)
        assert _codes(report) == ["empty-group"]
        assert not report.passed

    def test_empty_label_built_programmatically(self) -> None:
        tree = NavigationTree(sections=(Item(" ", link=LinkRef.internal("/a/")),))
        assert _codes(SchemaValidator().validate(tree)) == ["empty-label"]

    def test_empty_label_from_document(self) -> None:
        report = _validate([{"label": "  ", "link": "/a/"}])
        assert _codes(report) == ["empty-label"]
        assert report.diagnostics[0].severity is Severity.FATAL

    def test_unresolved_tree_is_rejected(self, ppacer_v1: dict[str, Any]) -> None:
        with pytest.raises(ValueError, match="resolved"):
            SchemaValidator().validate(ConfigLoader().load(ppacer_v1))

    def test_unresolved_nested_item_is_rejected(self) -> None:
        tree = NavigationTree(sections=(Group("G", children=(Item("x", raw_link="/x/"),)),))
        with pytest.raises(ValueError, match="resolved"):
            SchemaValidator().validate(tree)


class TestConfig:
    def test_placeholder_can_be_fatal(self) -> None:
        config = ProcessingConfig(placeholder_severity=Severity.FATAL)
        report = _validate([{"label": "Later", "link": ""}], config)
        assert not report.passed

    def test_urgent_variants_are_configurable(self) -> None:
        config = ProcessingConfig(urgent_variants=frozenset())
        report = _validate(
            [{"label": "R", "link": "", "badge": {"text": "TODO", "variant": "caution"}}], config
        )
        assert _codes(report) == ["placeholder-link"]


class TestOrdering:
    def test_diagnostics_follow_traversal_order(self) -> None:
        report = _validate(
            [
                {
                    "label": "A",
                    "items": [
                        {"label": "x", "link": ""},
                        {"label": "B", "items": [{"label": "y", "link": "/dup/"}]},
                        {"label": "z", "link": "/dup/"},
                    ],
                },
                {"label": "A", "link": ""},
            ]
        )
        assert [(d.code, d.path) for d in report.diagnostics] == [
            ("placeholder-link", ("A", "x")),
            ("duplicate-link", ("A", "z")),
            ("duplicate-label", ("A",)),
            ("placeholder-link", ("A",)),
        ]

    def test_str_has_severity_prefix(self) -> None:
        report = _validate(
            [
                {"label": "Overview", "items": [{"label": "HLD", "link": ""}]},
                {"label": "I1", "link": "/i/"},
                {"label": "I2", "link": "/i/"},
            ]
        )
        lines = [str(d) for d in report.diagnostics]
        assert lines[0].startswith("WARN Overview > HLD: ")
        assert lines[1].startswith("FATAL I2: ")
