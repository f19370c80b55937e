# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Tests for the logging configuration."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-raises-doc

import logging.config
import os
import sys

# noinspection PyProtectedMember
from pwhash_dispatch._logging import (
    ENV_PREFIX,
    LogLevel,
    get_log_level,
    get_logging_config,
)


def test_get_logging_config() -> None:
    """Test the get_logging_config function."""
    log_level = "WARNING"
    config = get_logging_config(log_level)
    assert config["version"] == 1
    assert config["disable_existing_loggers"] is False
    assert (
        config["formatters"]["default"]["format"]
        == "%(levelname)-8s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s"  # pylint: disable=line-too-long # noqa: E501
    )
    assert config["formatters"]["default"]["datefmt"] == "%Y-%m-%d %H:%M:%S"
    assert config["handlers"]["default"]["stream"] == "ext://sys.stderr"
    for module in ["", "pwhash_dispatch"]:
        module_logger = config["loggers"][module]
        assert module_logger["level"] == log_level
        assert module_logger["handlers"] == ["default"]
        assert module_logger["propagate"] is False


def test_logging_config_is_valid() -> None:
    """Test the config can be applied."""
    root = logging.getLogger()
    package_logger = logging.getLogger("pwhash_dispatch")
    saved = (
        root.level,
        root.handlers[:],
        package_logger.level,
        package_logger.handlers[:],
        package_logger.propagate,
    )
    try:
        logging.config.dictConfig(get_logging_config(LogLevel.INFO.value))
        assert package_logger.level == logging.INFO
    finally:
        root.setLevel(saved[0])
        root.handlers = saved[1]
        package_logger.setLevel(saved[2])
        package_logger.handlers = saved[3]
        package_logger.propagate = saved[4]


def test_get_log_level() -> None:
    """Test get_log_level."""
    original_argv = sys.argv[:]
    try:
        sys.argv = ["test_lib.py"]
        os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "DEBUG"
        assert get_log_level() == "DEBUG"

        os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
        assert get_log_level() == "WARNING"

        sys.argv = ["test_lib.py", "--debug"]
        assert get_log_level() == "DEBUG"

        sys.argv = ["test_lib.py", "--log-level", "info"]
        assert get_log_level() == "INFO"
        assert os.environ[f"{ENV_PREFIX}LOG_LEVEL"] == "INFO"

        os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
        sys.argv = ["test_lib.py", "--log-level"]
        assert get_log_level() == "WARNING"

        os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
        sys.argv = ["test_lib.py", "--log-level", "INVALID"]
        assert get_log_level() == "WARNING"

        sys.argv = ["test_lib.py"]
        os.environ[f"{ENV_PREFIX}LOG_LEVEL"] = "INVALID"
        assert get_log_level() == "WARNING"
        assert os.environ[f"{ENV_PREFIX}LOG_LEVEL"] == "WARNING"
    finally:
        sys.argv = original_argv
