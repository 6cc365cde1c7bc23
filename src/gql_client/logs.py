"""Logging setup for applications using the GraphQL client."""

import logging
from typing import Optional

from gql_client.config import Config


def setup_logging(verbose: bool = False, config: Optional[Config] = None) -> None:
    """Set up logging configuration."""
    config = config or Config()
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATE_FORMAT,
    )
    logging.getLogger("gql.transport").setLevel(logging.WARNING)
