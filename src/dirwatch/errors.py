#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Exception hierarchy for dirwatch."""

from __future__ import annotations

from pathlib import Path


class DirWatchError(Exception):
    """Base exception for dirwatch errors."""


class DirectoryNotFoundError(DirWatchError):
    """Raised when the path to watch does not exist or is not a directory."""

    def __init__(self, path: str | Path, reason: str = "does not exist"):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"directory {self.path} {reason}")


class WatchSetupError(DirWatchError):
    """Raised when the watch subscription for a directory cannot be set up."""

    def __init__(self, path: str | Path, stage: str, cause: BaseException | None = None):
        self.path = str(path)
        self.stage = stage
        self.cause = cause
        message = f"failed to {stage} for {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ConfigurationError(DirWatchError):
    """Raised for invalid configuration files or values."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{message} (in {self.path})"
        super().__init__(message)


# 🔼⚙️🔚
