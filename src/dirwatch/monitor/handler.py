#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bridges watchdog's observer thread onto the asyncio event loop."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Callable

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)

from dirwatch.monitor.events import OperationKind, RawEvent, WatchError

_WATCHDOG_KINDS = {
    EVENT_TYPE_MODIFIED: OperationKind.WRITE,
    EVENT_TYPE_CREATED: OperationKind.CREATE,
    EVENT_TYPE_DELETED: OperationKind.REMOVE,
}


def _normalize(path: str | bytes) -> str:
    return os.path.normpath(os.fsdecode(path))


def _classify_move(event: FileSystemEvent, watched_path: str) -> list[RawEvent | WatchError]:
    """A move is the old name going away plus, when it stays in the watched dir, a new name appearing."""
    items: list[RawEvent | WatchError] = []
    if event.src_path:
        items.append(RawEvent(kind=OperationKind.REMOVE, path=_normalize(event.src_path)))
    if event.dest_path:
        dest_path = _normalize(event.dest_path)
        if os.path.dirname(dest_path) == watched_path:
            items.append(RawEvent(kind=OperationKind.CREATE, path=dest_path))
    return items


def classify(event: FileSystemEvent, watched_path: str) -> list[RawEvent | WatchError]:
    """Translate one watchdog event into raw events, or a WatchError for the watched dir itself.

    Moves never surface as RENAME; they arrive as REMOVE and CREATE.
    """
    src_path = _normalize(event.src_path) if event.src_path else ""

    if src_path == watched_path and event.is_directory:
        if event.event_type == EVENT_TYPE_DELETED:
            return [WatchError(message="watched directory was removed", path=watched_path)]
        if event.event_type == EVENT_TYPE_MOVED:
            return [WatchError(message="watched directory was moved away", path=watched_path)]
        # Entry changes already arrive as their own events
        return [RawEvent(kind=OperationKind.OTHER, path=src_path)]

    if event.event_type == EVENT_TYPE_MOVED:
        return _classify_move(event, watched_path)

    return [RawEvent(kind=_WATCHDOG_KINDS.get(event.event_type, OperationKind.OTHER), path=src_path)]


class QueueingEventHandler(FileSystemEventHandler):
    """Pushes classified watchdog events onto asyncio queues owned by the loop.

    Runs on watchdog's observer thread, so every hand-off goes through
    ``call_soon_threadsafe``.
    """

    def __init__(
        self,
        watched_path: str,
        loop: asyncio.AbstractEventLoop,
        on_event: Callable[[RawEvent], None],
        on_error: Callable[[WatchError], None],
    ) -> None:
        super().__init__()
        self._watched_path = _normalize(watched_path)
        self._loop = loop
        self._on_event = on_event
        self._on_error = on_error

    def on_any_event(self, event: FileSystemEvent) -> None:
        try:
            items = classify(event, self._watched_path)
        except Exception as e:
            items = [WatchError(message="failed to translate watch event", path=self._watched_path, exception=e)]

        for item in items:
            target = self._on_error if isinstance(item, WatchError) else self._on_event
            try:
                self._loop.call_soon_threadsafe(target, item)
            except RuntimeError:
                # Loop already closed; the session is gone
                return


# 🔼⚙️🔚
