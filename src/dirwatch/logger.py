#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Logging for dirwatch: provide-foundation telemetry over structlog."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from attrs import evolve
from provide.foundation import LoggingConfig, TelemetryConfig, get_hub
import structlog

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Formats offered by foundation's logging_options, mapped to its console formatters
LOG_FORMATS = {"key_value": "key_value", "text": "key_value", "json": "json"}

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "key_value"
SERVICE_NAME = "dirwatch"


def get_logger(name: str) -> Any:
    """Return a logger tagged with ``name`` under foundation's ``logger_name`` key.

    Foundation's own ``get_logger`` binds against the configuration active when
    it is called. Module-level loggers are created at import, before the CLI
    has applied ``--log-level``, so this proxy resolves the active
    configuration on every call instead.
    """
    return structlog.wrap_logger(None, cache_logger_on_first_use=False, logger_name=name)


def configure_logging(
    level: str = DEFAULT_LOG_LEVEL,
    fmt: str = DEFAULT_LOG_FORMAT,
    log_file: Path | None = None,
) -> None:
    """(Re)initialize foundation telemetry for the process.

    Args:
        level: Minimum level name, one of ``LOG_LEVELS``.
        fmt: ``key_value`` (or ``text``) for human readable output, ``json`` for one JSON object per line.
        log_file: Optional file that receives the log stream as well.
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LOG_LEVELS)}")
    formatter = LOG_FORMATS.get(fmt.lower())
    if formatter is None:
        raise ValueError(f"Unknown log format '{fmt}', expected one of {', '.join(LOG_FORMATS)}")

    telemetry_config = evolve(
        TelemetryConfig.from_env(),
        service_name=SERVICE_NAME,
        logging=LoggingConfig(
            default_level=level_name,
            console_formatter=formatter,
            das_emoji_prefix_enabled=False,
            logger_name_emoji_prefix_enabled=False,
            log_file=log_file,
        ),
    )
    get_hub().initialize_foundation(telemetry_config, force=True)


# 🔼⚙️🔚
