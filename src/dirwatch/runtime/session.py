#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Watch sessions: one directory, one watch source, one governor loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

from dirwatch.config.models import GovernorConfig
from dirwatch.governor import EventGovernor, utc_now
from dirwatch.governor.governor import Clock
from dirwatch.logger import get_logger
from dirwatch.monitor import ChangeSource, WatchSource, ensure_directory

log = get_logger(__name__)

SourceFactory = Callable[[str], ChangeSource]


class WatchSession:
    """Binds a directory to its watch source and governor for one run."""

    def __init__(
        self,
        path: str | Path,
        config: GovernorConfig,
        *,
        source_factory: SourceFactory = WatchSource,
        clock: Clock = utc_now,
        name: str | None = None,
    ) -> None:
        self.path = str(path)
        self.config = config
        self.name = name or self.path
        self._source_factory = source_factory
        self._clock = clock
        self.governor: EventGovernor | None = None

    async def run(self, stop_event: asyncio.Event | None = None) -> None:
        """Open the source, run the governor, and release the source on the way out.

        Raises:
            DirectoryNotFoundError: The path is missing or not a directory.
            WatchSetupError: The subscription could not be set up.
        """
        ensure_directory(self.path)

        source = self._source_factory(self.path)
        try:
            source.open()
        except BaseException:
            source.close()
            raise

        try:
            log.info("watching directory", path=self.path, session=self.name)
            self.governor = EventGovernor(self.path, self.config, clock=self._clock)
            await self.governor.run(source, stop_event)
        finally:
            await source.aclose()


async def watch_directory(
    path: str | Path,
    config: GovernorConfig,
    *,
    stop_event: asyncio.Event | None = None,
    source_factory: SourceFactory = WatchSource,
) -> None:
    """Watch ``path`` and run ``config.work_callback`` for admitted events.

    Setup problems raise before any loop starts. Without a ``stop_event`` this
    only returns when the source closes both of its sequences.
    """
    session = WatchSession(path, config, source_factory=source_factory)
    await session.run(stop_event)


# 🔼⚙️🔚
