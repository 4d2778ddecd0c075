#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Blocking entry points that run watch sessions until a shutdown signal arrives."""

from __future__ import annotations

import asyncio
import contextlib
import signal
from collections.abc import Sequence
from pathlib import Path

from dirwatch.config.models import GovernorConfig
from dirwatch.logger import get_logger
from dirwatch.runtime.session import WatchSession

log = get_logger(__name__)

_SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _handle_signal(sig: int, stop_event: asyncio.Event) -> None:
    signame = signal.Signals(sig).name
    log.warning("Received shutdown signal", signal=signame, signal_num=sig)
    if not stop_event.is_set():
        log.info("Setting shutdown requested event.")
        stop_event.set()
    else:
        log.warning("Shutdown already requested, signal ignored.")


async def run_sessions_async(sessions: Sequence[WatchSession], stop_event: asyncio.Event) -> None:
    """Run every session concurrently until ``stop_event`` is set.

    If one session fails, the others are stopped and the first failure is raised.
    """
    tasks = [asyncio.create_task(s.run(stop_event), name=f"watch:{s.name}") for s in sessions]
    try:
        await asyncio.gather(*tasks)
    finally:
        stop_event.set()
        await asyncio.gather(*tasks, return_exceptions=True)


async def _main(sessions: Sequence[WatchSession]) -> None:
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    installed: list[int] = []
    for sig in _SHUTDOWN_SIGNALS:
        # Not available on Windows event loops
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, _handle_signal, sig, stop_event)
            installed.append(sig)

    try:
        await run_sessions_async(sessions, stop_event)
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


def run_sessions(sessions: Sequence[WatchSession]) -> int:
    """Block until SIGINT/SIGTERM stops the sessions. Returns a process exit code."""
    if not sessions:
        log.warning("No directories to watch")
        return 0
    asyncio.run(_main(sessions))
    log.info("All watch sessions stopped", sessions=len(sessions))
    return 0


def run_watch(path: str | Path, config: GovernorConfig) -> int:
    """Watch a single directory until SIGINT/SIGTERM."""
    return run_sessions([WatchSession(path, config)])


# 🔼⚙️🔚
