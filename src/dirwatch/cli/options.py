#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared click options."""

from __future__ import annotations

from pathlib import Path

import click

from dirwatch.config.defaults import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH

config_path_option = click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    envvar=CONFIG_ENV_VAR,
    help=f"Path to the dirwatch configuration file (env var {CONFIG_ENV_VAR}).",
    show_envvar=True,
)

# 🔼⚙️🔚
