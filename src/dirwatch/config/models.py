#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration models for dirwatch and the TOML loader that builds them."""

from __future__ import annotations

import tomllib
from collections.abc import Awaitable, Callable
from datetime import timedelta
from pathlib import Path
from typing import Any

from attrs import define, field, frozen

from dirwatch.config.defaults import DEFAULT_EVENT_WINDOW, DEFAULT_MAX_EVENTS
from dirwatch.errors import ConfigurationError
from dirwatch.logger import LOG_LEVELS, get_logger

log = get_logger(__name__)

WorkCallback = Callable[[str], None | Awaitable[None]]

_GLOBAL_KEYS = {"log_level", "max_events", "event_window_ms"}
_DIRECTORY_KEYS = {"path", "enabled", "max_events", "event_window_ms", "command"}


def _validate_max_events(instance: Any, attribute: Any, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{attribute.name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{attribute.name} must be a positive integer, got {value}")


def _validate_event_window(instance: Any, attribute: Any, value: timedelta) -> None:
    if not isinstance(value, timedelta):
        raise TypeError(f"{attribute.name} must be a timedelta, got {type(value).__name__}")
    if value <= timedelta(0):
        raise ValueError(f"{attribute.name} must be a positive duration, got {value}")


def _validate_callback(instance: Any, attribute: Any, value: Any) -> None:
    if not callable(value):
        raise TypeError(f"{attribute.name} must be callable")


@frozen
class GovernorConfig:
    """Settings for one event governor.

    Attributes:
        work_callback: Called with the watched directory path for every admitted event.
            May be a coroutine function; its result is awaited before the next event.
        max_events: Events admitted per window before suppression starts.
        event_window: Quiet gap that closes a window and admits the next event.
    """

    work_callback: WorkCallback = field(validator=_validate_callback)
    max_events: int = field(default=DEFAULT_MAX_EVENTS, validator=_validate_max_events)
    event_window: timedelta = field(default=DEFAULT_EVENT_WINDOW, validator=_validate_event_window)


@define(frozen=True)
class DirectoryConfig:
    """One watched directory as declared in the config file."""

    name: str
    path: Path
    enabled: bool = True
    max_events: int = field(default=DEFAULT_MAX_EVENTS, validator=_validate_max_events)
    event_window: timedelta = field(default=DEFAULT_EVENT_WINDOW, validator=_validate_event_window)
    command: str | None = None

    def governor_config(self, work_callback: WorkCallback) -> GovernorConfig:
        """Build the governor settings for this directory around a work callback."""
        return GovernorConfig(
            work_callback=work_callback,
            max_events=self.max_events,
            event_window=self.event_window,
        )


@define(frozen=True)
class GlobalConfig:
    """Settings from the ``[global]`` table."""

    log_level: str = "INFO"
    max_events: int = field(default=DEFAULT_MAX_EVENTS, validator=_validate_max_events)
    event_window: timedelta = field(default=DEFAULT_EVENT_WINDOW, validator=_validate_event_window)


@define(frozen=True)
class DirWatchConfig:
    """Complete configuration: global defaults plus the directories to watch."""

    global_config: GlobalConfig = field(factory=GlobalConfig)
    directories: dict[str, DirectoryConfig] = field(factory=dict)

    @property
    def enabled_directories(self) -> list[DirectoryConfig]:
        return [d for d in self.directories.values() if d.enabled]


def _window_from_ms(raw: Any, key: str, config_path: Path) -> timedelta:
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise ConfigurationError(f"'{key}' must be a number of milliseconds, got {raw!r}", config_path)
    return timedelta(milliseconds=raw)


def _check_keys(table: dict[str, Any], allowed: set[str], where: str, config_path: Path) -> None:
    unknown = sorted(set(table) - allowed)
    if unknown:
        raise ConfigurationError(f"Unknown key(s) in {where}: {', '.join(unknown)}", config_path)


def _build_global(table: dict[str, Any], config_path: Path) -> GlobalConfig:
    _check_keys(table, _GLOBAL_KEYS, "[global]", config_path)

    log_level = str(table.get("log_level", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(f"Invalid log_level '{log_level}'", config_path)

    kwargs: dict[str, Any] = {"log_level": log_level}
    if "max_events" in table:
        kwargs["max_events"] = table["max_events"]
    if "event_window_ms" in table:
        kwargs["event_window"] = _window_from_ms(table["event_window_ms"], "event_window_ms", config_path)

    try:
        return GlobalConfig(**kwargs)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid [global] settings: {e}", config_path) from e


def _build_directory(
    name: str, table: Any, global_config: GlobalConfig, config_path: Path
) -> DirectoryConfig:
    where = f"[directories.{name}]"
    if not isinstance(table, dict):
        raise ConfigurationError(f"{where} must be a table", config_path)
    _check_keys(table, _DIRECTORY_KEYS, where, config_path)

    raw_path = table.get("path")
    if not raw_path or not isinstance(raw_path, str):
        raise ConfigurationError(f"{where} is missing a 'path'", config_path)

    event_window = global_config.event_window
    if "event_window_ms" in table:
        event_window = _window_from_ms(table["event_window_ms"], "event_window_ms", config_path)

    command = table.get("command")
    if command is not None and not isinstance(command, str):
        raise ConfigurationError(f"{where} 'command' must be a string", config_path)

    try:
        return DirectoryConfig(
            name=name,
            path=Path(raw_path).expanduser(),
            enabled=bool(table.get("enabled", True)),
            max_events=table.get("max_events", global_config.max_events),
            event_window=event_window,
            command=command,
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {where} settings: {e}", config_path) from e


def load_config(config_path: Path) -> DirWatchConfig:
    """Load and validate a dirwatch TOML configuration file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is not valid TOML or holds invalid settings.
    """
    log.debug("Loading configuration", path=str(config_path))

    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML: {e}", config_path) from e

    unknown_tables = sorted(set(data) - {"global", "directories"})
    if unknown_tables:
        raise ConfigurationError(f"Unknown top-level table(s): {', '.join(unknown_tables)}", config_path)

    global_config = _build_global(data.get("global", {}), config_path)

    raw_dirs = data.get("directories", {})
    if not isinstance(raw_dirs, dict):
        raise ConfigurationError("'directories' must be a table", config_path)

    directories = {
        name: _build_directory(name, table, global_config, config_path) for name, table in raw_dirs.items()
    }

    config = DirWatchConfig(global_config=global_config, directories=directories)
    log.info(
        "Configuration loaded",
        path=str(config_path),
        directories=len(directories),
        enabled=len(config.enabled_directories),
    )
    return config


# 🔼⚙️🔚
