"""Shared fixtures: sidebar snapshots of a small documentation site.

``ppacer_v1`` mirrors the first published sidebar.  ``ppacer_v2`` is a later
snapshot in which the "Internals" section was reorganised into "Concepts",
badges were added, an unfinished page was declared with an empty link and
an external "API reference" entry was added at the top level.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

PPACER_V1: dict[str, Any] = {
    "title": "ppacer docs",
    "social": {"github": "https://github.com/ppacer"},
    "site": "https://docs.ppacer.org",
    "sidebar": [
        {
            "label": "Getting started",
            "items": [{"label": "Intro", "link": "/start/intro/"}],
        },
        {
            "label": "Overview",
            "items": [{"label": "High-level design", "link": "/overview/hld/"}],
        },
        {
            "label": "Internals",
            "items": [
                {"label": "DAGs", "link": "/internals/dags/"},
                {"label": "Schedules", "link": "/internals/schedules/"},
                {"label": "DagWatcher", "link": "/internals/dagwatcher/"},
                {"label": "TaskScheduler", "link": "/internals/taskscheduler/"},
                {"label": "Logging", "link": "/internals/loggers/"},
                {"label": "Databases", "link": "/internals/dbs/"},
            ],
        },
    ],
}

PPACER_V2: dict[str, Any] = {
    "title": "ppacer docs",
    "social": {"github": "https://github.com/ppacer"},
    "site": "https://docs.ppacer.org",
    "sidebar": [
        {
            "label": "Getting started",
            "items": [{"label": "Intro", "link": "/start/intro/", "badge": "New"}],
        },
        {
            "label": "Overview",
            "items": [
                {"label": "High-level design", "link": "/overview/hld/"},
                {
                    "label": "Roadmap",
                    "link": "",
                    "badge": {"text": "TODO", "variant": "caution"},
                },
            ],
        },
        {
            "label": "Concepts",
            "items": [
                {"label": "DAGs", "link": "/internals/dags/"},
                {"label": "Schedules", "link": "/internals/schedules/"},
                {"label": "TaskScheduler", "link": "/internals/taskscheduler/"},
                {"label": "Logging", "link": "/internals/loggers/"},
                {"label": "Databases", "link": "/internals/dbs/"},
            ],
        },
        {"label": "API reference", "link": "https://pkg.go.dev/github.com/ppacer/core"},
    ],
}


@pytest.fixture
def ppacer_v1() -> dict[str, Any]:
    """A fresh deep copy of the first sidebar snapshot."""
    return copy.deepcopy(PPACER_V1)


@pytest.fixture
def ppacer_v2() -> dict[str, Any]:
    """A fresh deep copy of the reorganised sidebar snapshot."""
    return copy.deepcopy(PPACER_V2)
