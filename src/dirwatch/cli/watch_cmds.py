#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Commands that watch directories: a single path, or everything in a config file."""

from __future__ import annotations

import sys
from datetime import timedelta
from pathlib import Path

import click
from structlog.typing import FilteringBoundLogger as StructLogger

from dirwatch.actions import CommandAction, log_work
from dirwatch.cli.options import config_path_option
from dirwatch.config import DirectoryConfig, GovernorConfig, load_config
from dirwatch.config.defaults import DEFAULT_EVENT_WINDOW, DEFAULT_MAX_EVENTS
from dirwatch.errors import DirWatchError
from dirwatch.logger import DEFAULT_LOG_FORMAT, configure_logging, get_logger
from dirwatch.runtime import WatchSession, run_sessions

log: StructLogger = get_logger(__name__)


def _session_for(directory: DirectoryConfig) -> WatchSession:
    callback = CommandAction(directory.command) if directory.command else log_work
    return WatchSession(directory.path, directory.governor_config(callback), name=directory.name)


@click.command(name="watch")
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "-n",
    "--max-events",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_EVENTS,
    show_default=True,
    help="Events admitted per window before suppression starts.",
)
@click.option(
    "-w",
    "--event-window",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_EVENT_WINDOW.total_seconds(),
    show_default=True,
    help="Window length in seconds.",
)
@click.option(
    "--command",
    "command",
    default=None,
    help="Shell command to run in PATH for every admitted event (default: log only).",
)
def watch_cli(path: Path, max_events: int, event_window: float, command: str | None) -> None:
    """Watch a directory and run work when it changes.

    PATH: The directory to watch (not recursive).
    """
    callback = CommandAction(command) if command else log_work
    config = GovernorConfig(
        work_callback=callback,
        max_events=max_events,
        event_window=timedelta(seconds=event_window),
    )

    try:
        exit_code = run_sessions([WatchSession(path, config)])
    except DirWatchError as e:
        log.error("Failed to watch directory", path=str(path), error=str(e))
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    sys.exit(exit_code)


@click.command(name="run")
@config_path_option
@click.pass_context
def run_cli(ctx: click.Context, config_path: Path) -> None:
    """Watch every enabled directory listed in a configuration file."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, DirWatchError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    # The config file decides the level unless --log-level (or PROVIDE_LOG_LEVEL) was given
    parent = ctx.parent
    if parent is not None and not parent.params.get("log_level"):
        configure_logging(
            config.global_config.log_level,
            parent.params.get("log_format") or DEFAULT_LOG_FORMAT,
            parent.params.get("log_file"),
        )

    directories = config.enabled_directories
    if not directories:
        click.echo("⚠️  No enabled directories in configuration")
        sys.exit(0)

    try:
        exit_code = run_sessions([_session_for(d) for d in directories])
    except DirWatchError as e:
        log.error("Watch session failed", error=str(e))
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    sys.exit(exit_code)


# 🔼⚙️🔚
