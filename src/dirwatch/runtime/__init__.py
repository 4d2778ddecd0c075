#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The runtime package for dirwatch, tying watch sources to governors."""

from .runner import run_sessions, run_sessions_async, run_watch
from .session import WatchSession, watch_directory

__all__ = ["WatchSession", "run_sessions", "run_sessions_async", "run_watch", "watch_directory"]

# 🔼⚙️🔚
