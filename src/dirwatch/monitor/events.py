#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Raw change events and watch errors produced by a watch source."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from attrs import field, frozen


class OperationKind(Enum):
    """What happened to a path inside the watched directory."""

    WRITE = "write"
    CREATE = "create"
    REMOVE = "remove"
    CHMOD = "chmod"
    RENAME = "rename"
    OTHER = "other"


@frozen
class RawEvent:
    """A single change notification, consumed once by the governor."""

    kind: OperationKind
    path: str


@frozen
class WatchError:
    """A problem reported by the watch transport while a session is running."""

    message: str
    path: str
    exception: BaseException | None = field(default=None, eq=False)
    timestamp: datetime = field(factory=lambda: datetime.now(UTC), eq=False)

    def __str__(self) -> str:
        if self.exception is not None:
            return f"{self.message}: {self.exception}"
        return self.message


# 🔼⚙️🔚
