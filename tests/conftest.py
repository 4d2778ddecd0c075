#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for dirwatch."""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path

from provide.testkit.mocking import Mock
import pytest
import structlog

from dirwatch.config import GovernorConfig
from tests.helpers.fakes import FakeClock, MemorySource


def _reset_structlog() -> None:
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)


@pytest.fixture(autouse=True)
def reset_logging():
    """Start every test from structlog's defaults and undo whatever the test installed."""
    _reset_structlog()
    yield
    _reset_structlog()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def work() -> Mock:
    """A synchronous work callback that records the directories it was called with."""
    return Mock(return_value=None)


@pytest.fixture
def watched_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "watched"
    directory.mkdir()
    return directory


@pytest.fixture
def memory_source(watched_dir: Path) -> MemorySource:
    return MemorySource(str(watched_dir))


@pytest.fixture
def make_config(work: Mock):
    """Build a GovernorConfig around the recording callback."""

    def _make(max_events: int = 1, window_seconds: float = 5.0) -> GovernorConfig:
        return GovernorConfig(
            work_callback=work,
            max_events=max_events,
            event_window=timedelta(seconds=window_seconds),
        )

    return _make


# 🔼⚙️🔚
