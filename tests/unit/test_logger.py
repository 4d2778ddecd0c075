#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for logger setup on top of provide-foundation."""

import logging
from pathlib import Path

from provide.testkit.mocking import patch
import pytest
import structlog
from structlog.testing import capture_logs

from dirwatch.logger import configure_logging, get_logger


@patch("dirwatch.logger.get_hub")
def test_configure_initializes_foundation(mock_get_hub, tmp_path: Path):
    log_file = tmp_path / "dirwatch.log"

    configure_logging("debug", "json", log_file)

    initialize = mock_get_hub.return_value.initialize_foundation
    initialize.assert_called_once()
    telemetry_config = initialize.call_args.args[0]
    assert initialize.call_args.kwargs == {"force": True}
    assert telemetry_config.service_name == "dirwatch"
    assert telemetry_config.logging.default_level == "DEBUG"
    assert telemetry_config.logging.console_formatter == "json"
    assert telemetry_config.logging.log_file == log_file


@patch("dirwatch.logger.get_hub")
def test_text_format_maps_to_key_value(mock_get_hub):
    configure_logging("INFO", "text")

    telemetry_config = mock_get_hub.return_value.initialize_foundation.call_args.args[0]
    assert telemetry_config.logging.console_formatter == "key_value"
    assert telemetry_config.logging.log_file is None


@patch("dirwatch.logger.get_hub")
def test_invalid_level(mock_get_hub):
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")
    mock_get_hub.assert_not_called()


@patch("dirwatch.logger.get_hub")
def test_invalid_format(mock_get_hub):
    with pytest.raises(ValueError, match="Unknown log format"):
        configure_logging("INFO", "xml")
    mock_get_hub.assert_not_called()


def test_logger_name_is_bound():
    log = get_logger("dirwatch.test")

    with capture_logs() as logs:
        log.info("suppression stats", op="write", time_remaining="0:00:03")

    assert logs == [
        {
            "event": "suppression stats",
            "log_level": "info",
            "logger_name": "dirwatch.test",
            "op": "write",
            "time_remaining": "0:00:03",
        }
    ]


def test_module_logger_follows_later_configuration():
    log = get_logger("dirwatch.test")

    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    with capture_logs() as logs:
        log.info("hidden")
        log.warning("shown")

    assert [r["event"] for r in logs] == ["shown"]


# 🔼⚙️🔚
