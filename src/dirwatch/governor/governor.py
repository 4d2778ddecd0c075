#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Event governor: turns a live stream of change events into rate-limited work.

The governor keeps a rolling-restart window. A relevant event that arrives more
than ``event_window`` after the window start opens a new window and is admitted.
Inside a window, events are counted; up to ``max_events`` are admitted and each
admission slides the window start forward. Events past the cap are suppressed:
they still count, but the window start stays put, so a sustained burst remains
in one window until a gap longer than ``event_window`` shows up.

Usage:
    config = GovernorConfig(work_callback=rebuild, max_events=2, event_window=timedelta(seconds=1))
    governor = EventGovernor("/srv/docs", config)
    await governor.run(source, stop_event)
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from dirwatch.config.models import GovernorConfig
from dirwatch.governor.state import Decision, GovernorMetrics, GovernorState
from dirwatch.logger import get_logger
from dirwatch.monitor.events import OperationKind, RawEvent, WatchError
from dirwatch.monitor.protocol import ChangeSource

log = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def truncate_to_seconds(delta: timedelta) -> timedelta:
    """Drop sub-second precision, rounding toward zero."""
    return timedelta(seconds=int(delta.total_seconds()))


def is_relevant(kind: OperationKind) -> bool:
    match kind:
        case OperationKind.WRITE | OperationKind.CREATE | OperationKind.REMOVE | OperationKind.CHMOD:
            return True
        case _:
            return False


class EventGovernor:
    """Decides, event by event, whether the work callback runs.

    One instance serves one watched directory and owns its window state; it is
    driven by a single task and needs no locking.
    """

    def __init__(self, directory: str, config: GovernorConfig, *, clock: Clock = utc_now) -> None:
        self.directory = str(directory)
        self.config = config
        self._clock = clock
        self.state = GovernorState(window_start=clock())
        self.metrics = GovernorMetrics()

    def handle_event(self, event: RawEvent) -> Decision:
        """Apply the kind filter and the window rules to one event.

        Only updates state, metrics and diagnostics; the callback is run by
        ``process``.
        """
        if not is_relevant(event.kind):
            self.metrics.events_ignored += 1
            return Decision.IGNORED

        now = self._clock()
        state = self.state
        elapsed = now - state.window_start

        if elapsed > self.config.event_window:
            state.restart(now)
        else:
            state.event_count += 1
            if state.event_count > self.config.max_events:
                time_remaining = str(truncate_to_seconds(self.config.event_window - elapsed))
                log.debug(
                    "too many events, suppressing...",
                    count=state.event_count,
                    max=self.config.max_events,
                    event_window=str(self.config.event_window),
                    window_start=state.window_start.isoformat(),
                    now=now.isoformat(),
                    time_remaining=time_remaining,
                )
                log.info(
                    "suppression stats",
                    op=event.kind.value,
                    event_window=str(self.config.event_window),
                    time_remaining=time_remaining,
                )
                self.metrics.record_suppressed(state.window_start)
                return Decision.SUPPRESSED
            state.window_start = now

        self.metrics.record_admitted(now)
        log.debug("file event", op=event.kind.value, fname=event.path, dir=self.directory)
        return Decision.ADMITTED

    async def process(self, event: RawEvent) -> Decision:
        """Handle one event and, if admitted, run the work callback to completion."""
        decision = self.handle_event(event)
        if decision is Decision.ADMITTED:
            result = self.config.work_callback(self.directory)
            if inspect.isawaitable(result):
                await result
        return decision

    def handle_error(self, error: WatchError) -> None:
        """Log a transport error. Window state is left alone."""
        self.metrics.transport_errors += 1
        log.error("watcher error", err=str(error), path=error.path)

    async def run(self, source: ChangeSource, stop_event: asyncio.Event | None = None) -> None:
        """Consume ``source`` until stopped or until both of its sequences close.

        Events and errors are awaited together; whichever is ready first is
        handled first. Each sequence ends independently when it closes.
        """
        if stop_event is None:
            stop_event = asyncio.Event()

        event_task: asyncio.Task | None = asyncio.ensure_future(source.next_event())
        error_task: asyncio.Task | None = asyncio.ensure_future(source.next_error())
        stop_task = asyncio.ensure_future(stop_event.wait())

        try:
            while event_task is not None or error_task is not None:
                waiting = {t for t in (event_task, error_task, stop_task) if t is not None}
                done, _pending = await asyncio.wait(waiting, return_when=asyncio.FIRST_COMPLETED)

                # An event or error taken off its queue is handled even when stop arrived with it
                if event_task is not None and event_task in done:
                    event = event_task.result()
                    if event is None:
                        log.debug("event sequence closed", dir=self.directory)
                        event_task = None
                    else:
                        await self.process(event)
                        event_task = asyncio.ensure_future(source.next_event())

                if error_task is not None and error_task in done:
                    error = error_task.result()
                    if error is None:
                        log.debug("error sequence closed", dir=self.directory)
                        error_task = None
                    else:
                        self.handle_error(error)
                        error_task = asyncio.ensure_future(source.next_error())

                if stop_task.done():
                    log.info("stop requested, leaving governor loop", dir=self.directory)
                    break
        finally:
            pending = [t for t in (event_task, error_task, stop_task) if t is not None and not t.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            log.info("governor stopped", dir=self.directory, **self.metrics.to_dict())


# 🔼⚙️🔚
