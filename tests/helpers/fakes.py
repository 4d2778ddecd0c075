#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""In-memory stand-ins for the clock and the watch source."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from dirwatch.monitor import OperationKind, RawEvent, WatchError

EPOCH = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


def at(seconds: float) -> datetime:
    """Timestamp ``seconds`` after the test epoch."""
    return EPOCH + timedelta(seconds=seconds)


class FakeClock:
    """Manually advanced clock; starts at the test epoch."""

    def __init__(self, start: datetime = EPOCH) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def set(self, seconds: float) -> None:
        self.now = at(seconds)

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class ScriptedClock:
    """Returns pre-arranged offsets from the epoch, one per call, then repeats the last."""

    def __init__(self, offsets: Iterable[float]) -> None:
        self._offsets = list(offsets)
        self.calls = 0

    def __call__(self) -> datetime:
        index = min(self.calls, len(self._offsets) - 1)
        self.calls += 1
        return at(self._offsets[index])


class MemorySource:
    """ChangeSource backed by two asyncio queues that tests fill by hand."""

    def __init__(self, path: str, *, fail_on_open: BaseException | None = None) -> None:
        self.path = str(path)
        self.fail_on_open = fail_on_open
        self.opened = False
        self.close_calls = 0
        self._events: asyncio.Queue[RawEvent | None] = asyncio.Queue()
        self._errors: asyncio.Queue[WatchError | None] = asyncio.Queue()
        self._events_done = False
        self._errors_done = False

    def open(self) -> None:
        if self.fail_on_open is not None:
            raise self.fail_on_open
        self.opened = True

    def push(self, kind: OperationKind, name: str = "file.txt") -> None:
        self._events.put_nowait(RawEvent(kind=kind, path=f"{self.path}/{name}"))

    def push_error(self, message: str = "inotify queue overflow") -> None:
        self._errors.put_nowait(WatchError(message=message, path=self.path))

    def end_events(self) -> None:
        self._events.put_nowait(None)

    def end_errors(self) -> None:
        self._errors.put_nowait(None)

    async def next_event(self) -> RawEvent | None:
        if self._events_done:
            return None
        event = await self._events.get()
        if event is None:
            self._events_done = True
        return event

    async def next_error(self) -> WatchError | None:
        if self._errors_done:
            return None
        error = await self._errors.get()
        if error is None:
            self._errors_done = True
        return error

    def close(self) -> None:
        self.close_calls += 1
        if self.close_calls == 1:
            self.end_events()
            self.end_errors()

    async def aclose(self) -> None:
        self.close()


# 🔼⚙️🔚
