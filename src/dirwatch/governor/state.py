#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Window state, decisions and metrics for the event governor."""

from __future__ import annotations

from datetime import datetime
from enum import Enum, auto
from typing import Any

from attrs import define, field


class Decision(Enum):
    """Outcome of feeding one raw event to the governor."""

    ADMITTED = auto()
    SUPPRESSED = auto()
    IGNORED = auto()


@define
class GovernorState:
    """Mutable window state, owned by exactly one governor loop."""

    window_start: datetime
    event_count: int = field(default=0)

    def restart(self, now: datetime) -> None:
        """Open a new window that already holds the triggering event."""
        self.event_count = 1
        self.window_start = now


@define
class GovernorMetrics:
    """Counters for governor decisions over a session."""

    events_admitted: int = field(default=0)
    events_suppressed: int = field(default=0)
    events_ignored: int = field(default=0)
    transport_errors: int = field(default=0)

    # Windows in which at least one event was suppressed
    suppression_windows: int = field(default=0)

    last_admitted_at: datetime | None = field(default=None)
    _last_suppressed_window: datetime | None = field(default=None, init=False, repr=False)

    def record_admitted(self, now: datetime) -> None:
        self.events_admitted += 1
        self.last_admitted_at = now

    def record_suppressed(self, window_start: datetime) -> None:
        self.events_suppressed += 1
        if self._last_suppressed_window != window_start:
            self.suppression_windows += 1
            self._last_suppressed_window = window_start

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary for reporting."""
        return {
            "events_admitted": self.events_admitted,
            "events_suppressed": self.events_suppressed,
            "events_ignored": self.events_ignored,
            "transport_errors": self.transport_errors,
            "suppression_windows": self.suppression_windows,
            "last_admitted_at": self.last_admitted_at.isoformat() if self.last_admitted_at else None,
        }


# 🔼⚙️🔚
