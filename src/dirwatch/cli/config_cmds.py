#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration inspection commands for dirwatch."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dirwatch.cli.options import config_path_option
from dirwatch.config import load_config
from dirwatch.errors import DirWatchError


@click.group(name="config")
def config_cli() -> None:
    """Configuration commands."""


@config_cli.command(name="show")
@config_path_option
def show_config(config_path: Path) -> None:
    """Load, validate, and display the configuration."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, DirWatchError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    g = config.global_config
    click.echo(f"Configuration: {config_path}")
    click.echo(f"   Log level: {g.log_level}")
    click.echo(f"   Default max events: {g.max_events}")
    click.echo(f"   Default event window: {g.event_window.total_seconds():g}s")

    if not config.directories:
        click.echo("\n⚠️  No directories configured")
        return

    click.echo("")
    for directory in config.directories.values():
        marker = "✅" if directory.enabled else "⏸️ "
        exists = "" if directory.path.is_dir() else "  (missing)"
        click.echo(f"{marker} {directory.name}: {directory.path}{exists}")
        click.echo(f"   Max events: {directory.max_events}")
        click.echo(f"   Event window: {directory.event_window.total_seconds():g}s")
        click.echo(f"   Command: {directory.command or '(log only)'}")


# 🔼⚙️🔚
