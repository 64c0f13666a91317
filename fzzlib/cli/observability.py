"""Logging setup for the command line tool."""

import logging


def configure_logging(level: str) -> None:
    """Configure logging format once; library modules only create loggers."""

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
