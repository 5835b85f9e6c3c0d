"""
_logging.py – Package logger and CLI logging setup.
"""

import logging

LOGGER = logging.getLogger("densalt")


def configure_logging(verbose: bool = False) -> None:
    """Configure default logging if no handlers are present."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    LOGGER.setLevel(logging.DEBUG if verbose else logging.WARNING)
