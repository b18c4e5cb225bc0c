"""Logging configuration helpers."""

import logging

_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger and set its level.

    Repeated calls only update the level. The ``httpx`` logger is capped at
    WARNING because its INFO request lines include the FDC ``api_key``.
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logger = logging.getLogger("food_search")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
