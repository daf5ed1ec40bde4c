##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Mixkit
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Mixkit.
##############################################################################

"""
Tests for the `log_formatter.py` module.
"""

import logging
import sys

from pytest_mock import MockerFixture

from mixkit.log_formatter import FORMATS, setup_logging


class TestSetupLogging:
    """Tests for `setup_logging`."""

    def test_plain_handler(self, mixkit_logger: logging.Logger, mocker: MockerFixture):
        """
        Test that a stdout handler is attached and colors are skipped when disabled.

        Args:
            mixkit_logger: The package logger, restored after the test.
            mocker: A built-in fixture from the pytest-mock library to create a Mock object.
        """
        mock_install = mocker.patch("mixkit.log_formatter.coloredlogs.install")
        existing = len(mixkit_logger.handlers)

        setup_logging(mixkit_logger, log_level="warning", colors=False)

        assert len(mixkit_logger.handlers) == existing + 1
        handler = mixkit_logger.handlers[-1]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout
        assert handler.formatter._fmt == FORMATS["DEFAULT"]
        assert mixkit_logger.level == logging.WARNING
        assert mixkit_logger.propagate is False
        mock_install.assert_not_called()

    def test_colored_logs(self, mixkit_logger: logging.Logger, mocker: MockerFixture):
        """
        Test that coloredlogs is installed with the default format.

        Args:
            mixkit_logger: The package logger, restored after the test.
            mocker: A built-in fixture from the pytest-mock library to create a Mock object.
        """
        mock_install = mocker.patch("mixkit.log_formatter.coloredlogs.install")
        setup_logging(mixkit_logger, log_level="INFO", colors=True)
        mock_install.assert_called_once_with(level="INFO", logger=mixkit_logger, fmt=FORMATS["DEFAULT"])

    def test_debug_format(self, mixkit_logger: logging.Logger, mocker: MockerFixture):
        """
        Test that the DEBUG level switches to the format that shows module and line.

        Args:
            mixkit_logger: The package logger, restored after the test.
            mocker: A built-in fixture from the pytest-mock library to create a Mock object.
        """
        mocker.patch("mixkit.log_formatter.coloredlogs.install")
        setup_logging(mixkit_logger, log_level="debug", colors=False)
        assert mixkit_logger.handlers[-1].formatter._fmt == FORMATS["DEBUG"]
        assert mixkit_logger.level == logging.DEBUG
