"""Reading and writing configuration documents (JSON or YAML files)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from sidebar_config.exceptions import DocumentError

__all__ = ["dump_document", "read_document"]

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def read_document(path: str | Path) -> Any:
    """Load a configuration document from ``path``.

    ``.yaml``/``.yml`` files are parsed with ``yaml.safe_load``; anything else
    is parsed as JSON.

    Raises:
        DocumentError: The file is missing, unreadable or not parseable.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"cannot read {path}: {exc}") from exc

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise DocumentError(f"cannot parse {path}: {exc}") from exc

    logger.debug("Read configuration document %s", path)
    return document


def dump_document(document: Any, fmt: str = "json") -> str:
    """Render ``document`` as JSON (two-space indent) or YAML text."""
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    msg = f"unsupported output format {fmt!r}; expected 'json' or 'yaml'"
    raise ValueError(msg)
