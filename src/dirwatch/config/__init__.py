#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration module for dirwatch.

Re-exports the configuration models and the loader."""

from __future__ import annotations

from dirwatch.config.models import (
    DirectoryConfig,
    DirWatchConfig,
    GlobalConfig,
    GovernorConfig,
    WorkCallback,
    load_config,
)

__all__ = [
    "DirWatchConfig",
    "DirectoryConfig",
    "GlobalConfig",
    "GovernorConfig",
    "WorkCallback",
    "load_config",
]

# 🔼⚙️🔚
