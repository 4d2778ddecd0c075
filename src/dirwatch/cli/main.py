#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Entry point for the dirwatch command."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.cli.decorators import logging_options

from dirwatch import __version__
from dirwatch.cli.config_cmds import config_cli
from dirwatch.cli.watch_cmds import run_cli, watch_cli
from dirwatch.logger import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL, configure_logging


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="dirwatch")
@logging_options
def cli(**kwargs: Any) -> None:
    """dirwatch: run work when a directory changes, with burst suppression."""
    configure_logging(
        kwargs.get("log_level") or DEFAULT_LOG_LEVEL,
        kwargs.get("log_format") or DEFAULT_LOG_FORMAT,
        kwargs.get("log_file"),
    )


cli.add_command(watch_cli)
cli.add_command(run_cli)
cli.add_command(config_cli)

if __name__ == "__main__":
    cli()

# 🔼⚙️🔚
