#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Ready-made work callbacks for admitted change events."""

from __future__ import annotations

import asyncio
import contextlib
import subprocess

from structlog.typing import FilteringBoundLogger as StructLogger

from dirwatch.logger import get_logger

log: StructLogger = get_logger(__name__)


def log_work(directory: str) -> None:
    """Default work callback: just report that work would run."""
    log.info("custom work function called with directory:", path=directory)


class CommandAction:
    """Runs a shell command inside the watched directory on each admission.

    The command runs as an asyncio subprocess, so the event loop keeps serving
    other directories while it executes. Failures are logged rather than raised
    so one bad run does not end the watch.
    """

    def __init__(self, command: str, timeout: float | None = None) -> None:
        self.command = command
        self.timeout = timeout
        self._log = log.bind(command=command)

    async def __call__(self, directory: str) -> None:
        self._log.debug("Running command", cwd=directory)
        try:
            proc = await asyncio.create_subprocess_shell(
                self.command,
                cwd=directory,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            self._log.error("Command could not be started", cwd=directory, error=str(e))
            return

        try:
            _stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except TimeoutError:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            self._log.error("Command timed out", cwd=directory, timeout=self.timeout)
            return

        if proc.returncode == 0:
            self._log.info("Command finished", cwd=directory, returncode=proc.returncode)
        else:
            self._log.warning(
                "Command failed",
                cwd=directory,
                returncode=proc.returncode,
                stderr=stderr.decode(errors="replace").strip()[-500:],
            )

    def __repr__(self) -> str:
        return f"CommandAction(command={self.command!r}, timeout={self.timeout!r})"


# 🔼⚙️🔚
