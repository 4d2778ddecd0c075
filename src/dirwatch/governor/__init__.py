#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Event governor package: window-based burst suppression for change events."""

from dirwatch.governor.governor import EventGovernor, is_relevant, truncate_to_seconds, utc_now
from dirwatch.governor.state import Decision, GovernorMetrics, GovernorState

__all__ = [
    "Decision",
    "EventGovernor",
    "GovernorMetrics",
    "GovernorState",
    "is_relevant",
    "truncate_to_seconds",
    "utc_now",
]

# 🔼⚙️🔚
