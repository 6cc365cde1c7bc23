"""Tests for the logging setup."""

import logging
from unittest.mock import patch

import pytest

from gql_client.config import Config
from gql_client.logs import setup_logging


@pytest.mark.parametrize("verbose, level", [(True, logging.DEBUG), (False, logging.INFO)])
def test_setup_logging(verbose: bool, level: int):
    config = Config()
    transport_logger = logging.getLogger("gql.transport")
    previous_level = transport_logger.level
    try:
        with patch("gql_client.logs.logging.basicConfig") as mock_basic_config:
            setup_logging(verbose, config)

        mock_basic_config.assert_called_once_with(
            level=level, format=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT
        )
        assert transport_logger.level == logging.WARNING
    finally:
        transport_logger.setLevel(previous_level)
