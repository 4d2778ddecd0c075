#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Watchdog-backed watch source for a single directory."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any

from structlog.typing import FilteringBoundLogger as StructLogger
from watchdog.observers import Observer

from dirwatch.errors import DirectoryNotFoundError, WatchSetupError
from dirwatch.logger import get_logger
from dirwatch.monitor.events import RawEvent, WatchError
from dirwatch.monitor.handler import QueueingEventHandler

log: StructLogger = get_logger(__name__)

OBSERVER_JOIN_TIMEOUT = 2.0


def ensure_directory(path: str | Path) -> Path:
    """Return ``path`` as a Path, raising DirectoryNotFoundError unless it is an existing directory."""
    target = Path(path)
    if not target.exists():
        raise DirectoryNotFoundError(target)
    if not target.is_dir():
        raise DirectoryNotFoundError(target, "is not a directory")
    return target


class WatchSource:
    """Live change notifications for one directory, non-recursive.

    Events and errors are delivered through two independent asyncio queues.
    Each is closed with a ``None`` sentinel when the source is released, after
    which ``next_event``/``next_error`` keep returning ``None``.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        observer_factory: Callable[[], Any] = Observer,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.path = str(path)
        self._observer_factory = observer_factory
        self._loop = loop
        self._observer: Any = None
        self._observer_started = False
        self._events: asyncio.Queue[RawEvent | None] = asyncio.Queue()
        self._errors: asyncio.Queue[WatchError | None] = asyncio.Queue()
        self._events_exhausted = False
        self._errors_exhausted = False
        self._opened = False
        self._closed = False
        self._log = log.bind(path=self.path)

    @property
    def is_open(self) -> bool:
        return self._opened and not self._closed

    def open(self) -> None:
        """Validate the directory and start watching it.

        Raises:
            DirectoryNotFoundError: The path is missing or not a directory.
            WatchSetupError: The observer could not be created, registered or started.
        """
        if self._opened:
            raise RuntimeError(f"WatchSource for {self.path} was already opened")
        ensure_directory(self.path)

        loop = self._loop or asyncio.get_running_loop()
        self._opened = True

        try:
            self._observer = self._observer_factory()
        except (OSError, RuntimeError) as e:
            self.close()
            raise WatchSetupError(self.path, "create watcher", e) from e

        handler = QueueingEventHandler(self.path, loop, self._put_event, self._put_error)

        try:
            self._observer.schedule(handler, self.path, recursive=False)
        except (OSError, RuntimeError) as e:
            self.close()
            raise WatchSetupError(self.path, "add directory to watcher", e) from e

        try:
            self._observer.start()
        except (OSError, RuntimeError) as e:
            self.close()
            raise WatchSetupError(self.path, "start watcher", e) from e
        self._observer_started = True

        self._log.debug("Watch source opened", observer=type(self._observer).__name__)

    def _put_event(self, event: RawEvent) -> None:
        if not self._closed:
            self._events.put_nowait(event)

    def _put_error(self, error: WatchError) -> None:
        if not self._closed:
            self._errors.put_nowait(error)

    def report_error(self, error: WatchError) -> None:
        """Deliver an error on the error sequence. Must be called from the loop thread."""
        self._put_error(error)

    async def next_event(self) -> RawEvent | None:
        if self._events_exhausted:
            return None
        event = await self._events.get()
        if event is None:
            self._events_exhausted = True
        return event

    async def next_error(self) -> WatchError | None:
        if self._errors_exhausted:
            return None
        error = await self._errors.get()
        if error is None:
            self._errors_exhausted = True
        return error

    def _stop_observer(self) -> Any:
        """Mark the source closed and signal the observer; returns it if its thread needs joining."""
        self._closed = True
        observer = self._observer
        self._observer = None
        if observer is None:
            return None
        try:
            observer.stop()
        except RuntimeError as e:
            self._log.warning("Error while stopping observer", error=str(e))
            return None
        return observer if self._observer_started else None

    def _join_observer(self, observer: Any) -> None:
        try:
            observer.join(timeout=OBSERVER_JOIN_TIMEOUT)
        except RuntimeError as e:
            self._log.warning("Error while stopping observer", error=str(e))
            return
        if observer.is_alive():
            self._log.warning("Observer thread did not exit within timeout")

    def _close_sequences(self) -> None:
        self._events.put_nowait(None)
        self._errors.put_nowait(None)
        self._log.debug("Watch source closed")

    def close(self) -> None:
        """Stop the observer and close both sequences. Safe to call repeatedly.

        Joins the observer thread on the calling thread; code running on the
        event loop should prefer ``aclose``.
        """
        if self._closed:
            return
        observer = self._stop_observer()
        if observer is not None:
            self._join_observer(observer)
        self._close_sequences()

    async def aclose(self) -> None:
        """Like ``close``, but waits for the observer thread off the event loop."""
        if self._closed:
            return
        observer = self._stop_observer()
        if observer is not None:
            await asyncio.to_thread(self._join_observer, observer)
        self._close_sequences()

    async def __aenter__(self) -> WatchSource:
        self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


# 🔼⚙️🔚
