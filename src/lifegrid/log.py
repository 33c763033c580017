# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

APP_LOGGER_NAME = "lifegrid"


def configure_logging(verbose: bool = False) -> None:
    """Route the application's log records to stderr through rich.

    Args:
        verbose: True to show debug records, False for warnings and above
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
