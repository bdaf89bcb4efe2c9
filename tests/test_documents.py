"""Tests for reading and dumping JSON/YAML configuration documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from sidebar_config import DocumentError
from sidebar_config.documents import dump_document, read_document

YAML_SIDEBAR = """\
title: ppacer docs
sidebar:
  - label: Getting started
    items:
      - label: Intro
        link: /start/intro/
        badge:
          text: New
          variant: tip
"""


class TestReadDocument:
    def test_json(self, tmp_path: Path, ppacer_v1: dict[str, Any]) -> None:
        path = tmp_path / "sidebar.json"
        path.write_text(json.dumps(ppacer_v1), encoding="utf-8")
        assert read_document(path) == ppacer_v1

    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
    def test_yaml(self, tmp_path: Path, suffix: str) -> None:
        path = tmp_path / f"sidebar{suffix}"
        path.write_text(YAML_SIDEBAR, encoding="utf-8")
        document = read_document(str(path))
        assert document["title"] == "ppacer docs"
        intro = document["sidebar"][0]["items"][0]
        assert intro["badge"] == {"text": "New", "variant": "tip"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentError, match="cannot read"):
            read_document(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "sidebar.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DocumentError, match="cannot parse"):
            read_document(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "sidebar.yaml"
        path.write_text("sidebar: [unclosed", encoding="utf-8")
        with pytest.raises(DocumentError, match="cannot parse"):
            read_document(path)


class TestDumpDocument:
    def test_json_is_indented_with_trailing_newline(self) -> None:
        text = dump_document({"sidebar": []})
        assert text == '{\n  "sidebar": []\n}\n'

    def test_yaml_keeps_key_order(self, ppacer_v1: dict[str, Any]) -> None:
        text = dump_document(ppacer_v1, "yaml")
        assert text.startswith("title: ppacer docs\n")
        assert yaml.safe_load(text) == ppacer_v1

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="unsupported output format"):
            dump_document({}, "toml")
