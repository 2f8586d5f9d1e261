"""Logging setup for the command line."""

import logging
import sys


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the report."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )
