"""Tests for singleton logging configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

from lintnames.logging_config import LOG_DATEFMT, LOG_FORMAT, setup_logging


def test_setup_logging_is_idempotent() -> None:
    """Executes once even when called twice."""
    with patch("lintnames.logging_config.logging.basicConfig") as mock_bc:
        setup_logging()
        setup_logging()  # second call is no-op
        mock_bc.assert_called_once()


def test_setup_logging_passes_format_and_level() -> None:
    with patch("lintnames.logging_config.logging.basicConfig") as mock_bc:
        setup_logging("debug")
    mock_bc.assert_called_once_with(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
