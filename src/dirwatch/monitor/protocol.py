#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Protocol every watch source must satisfy to feed a governor."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dirwatch.monitor.events import RawEvent, WatchError


@runtime_checkable
class ChangeSource(Protocol):
    """A live subscription to change notifications for one directory.

    ``next_event`` and ``next_error`` return ``None`` once their sequence is
    exhausted; after that they keep returning ``None``. ``close`` and ``aclose``
    must be safe to call more than once; ``aclose`` is the variant used from the
    event loop.
    """

    path: str

    def open(self) -> None: ...

    async def next_event(self) -> RawEvent | None: ...

    async def next_error(self) -> WatchError | None: ...

    def close(self) -> None: ...

    async def aclose(self) -> None: ...


# 🔼⚙️🔚
