#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test helper modules for dirwatch.

Fake clocks and in-memory watch sources for driving the governor without a
real filesystem or real time."""

from __future__ import annotations

# 🔼⚙️🔚
