#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Filesystem monitoring package for dirwatch using watchdog."""

from .events import OperationKind, RawEvent, WatchError
from .protocol import ChangeSource
from .source import WatchSource, ensure_directory

__all__ = ["ChangeSource", "OperationKind", "RawEvent", "WatchError", "WatchSource", "ensure_directory"]

# 🔼⚙️🔚
