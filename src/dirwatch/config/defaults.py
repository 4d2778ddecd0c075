#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Default values shared by the configuration models and the CLI."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

DEFAULT_MAX_EVENTS = 1
DEFAULT_EVENT_WINDOW = timedelta(seconds=5)
DEFAULT_EVENT_WINDOW_MS = int(DEFAULT_EVENT_WINDOW.total_seconds() * 1000)

DEFAULT_CONFIG_PATH = Path("dirwatch.conf")
CONFIG_ENV_VAR = "DIRWATCH_CONF"

# 🔼⚙️🔚
