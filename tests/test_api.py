"""Tests for the public API functions and the pipeline-wide properties.

Covers load / normalize / validate / validate_documents / diff, plus:
- idempotence:  normalize(normalize(x)) == normalize(x)
- round trip:   export(load(export(load(x)))) == export(load(x))
- uniqueness:   valid trees have unique internal links and sibling labels
"""

from __future__ import annotations

from typing import Any

import pytest

import sidebar_config
from sidebar_config import (
    AmbiguousNodeError,
    ConfigLoader,
    ProcessingConfig,
    RelativePathError,
    diff,
    export_tree,
    load,
    normalize,
    validate,
    validate_documents,
)
from sidebar_config.tree.nodes import Group

MESSY: dict[str, Any] = {
    "title": "ppacer docs",
    "customCss": ["./custom.css"],
    "sidebar": [
        {"label": "Intro", "link": "  /start/intro/ ", "badge": " New "},
        {
            "label": "Overview",
            "badge": {"text": "TODO"},
            "collapsed": True,
            "items": [
                {"label": "High-level design", "link": None},
                {"label": "Roadmap", "link": "", "badge": {"text": "TODO", "variant": "caution"}},
            ],
        },
        {"label": "API reference", "link": "https://pkg.go.dev/github.com/ppacer/core"},
    ],
}


class TestLoad:
    def test_returns_resolved_tree(self, ppacer_v1: dict[str, Any]) -> None:
        assert load(ppacer_v1).resolved

    def test_structural_errors_abort(self) -> None:
        with pytest.raises(AmbiguousNodeError):
            load([{"label": "X", "link": "/x/", "items": [{"label": "y", "link": "/y/"}]}])

    def test_relative_link_aborts(self) -> None:
        with pytest.raises(RelativePathError):
            load([{"label": "X", "link": "x/"}])


class TestNormalize:
    def test_canonicalizes_badges_and_links(self) -> None:
        result = normalize(MESSY)
        intro, overview, _ = result["sidebar"]
        assert intro == {
            "label": "Intro",
            "link": "/start/intro/",
            "badge": {"text": "New", "variant": "note"},
        }
        assert overview["badge"] == {"text": "TODO", "variant": "note"}
        assert overview["items"][0] == {"label": "High-level design", "link": ""}
        assert overview["collapsed"] is True
        assert result["customCss"] == ["./custom.css"]

    def test_idempotent(self, ppacer_v2: dict[str, Any]) -> None:
        for document in (MESSY, ppacer_v2):
            once = normalize(document)
            assert normalize(once) == once

    def test_does_not_mutate_input(self, ppacer_v2: dict[str, Any]) -> None:
        before = repr(ppacer_v2)
        normalize(ppacer_v2)
        assert repr(ppacer_v2) == before


class TestRoundTrip:
    @pytest.mark.parametrize("name", ["messy", "v1", "v2"])
    def test_export_load_export(
        self, name: str, ppacer_v1: dict[str, Any], ppacer_v2: dict[str, Any]
    ) -> None:
        document = {"messy": MESSY, "v1": ppacer_v1, "v2": ppacer_v2}[name]
        loader = ConfigLoader()
        once = export_tree(loader.load(document))
        twice = export_tree(loader.load(once))
        assert twice == once


class TestValidate:
    def test_snapshot_with_placeholder(self, ppacer_v2: dict[str, Any]) -> None:
        report = validate(ppacer_v2)
        assert report.passed
        assert [d.code for d in report.warnings] == ["placeholder-link", "urgent-unlinked"]

    def test_valid_trees_have_unique_links_and_labels(self, ppacer_v2: dict[str, Any]) -> None:
        report = validate(ppacer_v2)
        assert report.passed
        tree = load(ppacer_v2)
        internal = [i.link.target for _, i in tree.items() if i.link and i.link.kind == "internal"]
        assert len(internal) == len(set(internal))
        for _, node in tree.walk():
            if isinstance(node, Group):
                labels = [child.label for child in node.children]
                assert len(labels) == len(set(labels))

    def test_validate_documents_keeps_order(
        self, ppacer_v1: dict[str, Any], ppacer_v2: dict[str, Any]
    ) -> None:
        broken = [{"label": "a", "link": "/x/"}, {"label": "b", "link": "/x/"}]
        reports = validate_documents(
            [ppacer_v1, broken, ppacer_v2], ProcessingConfig(max_workers=3)
        )
        assert [r.passed for r in reports] == [True, False, True]

    def test_validate_documents_single_and_empty(self, ppacer_v1: dict[str, Any]) -> None:
        assert validate_documents([]) == []
        assert len(validate_documents([ppacer_v1])) == 1


class TestDiff:
    def test_snapshot_diff_is_breaking(
        self, ppacer_v1: dict[str, Any], ppacer_v2: dict[str, Any]
    ) -> None:
        assert diff(ppacer_v1, ppacer_v2).breaking

    def test_reverse_diff_is_not_breaking(
        self, ppacer_v1: dict[str, Any], ppacer_v2: dict[str, Any]
    ) -> None:
        # v2 -> v1 only drops a placeholder, an external link and the new group.
        assert not diff(ppacer_v2, ppacer_v1).breaking


class TestExports:
    def test_all_exports_exist(self) -> None:
        for name in sidebar_config.__all__:
            assert hasattr(sidebar_config, name), name
