"""
    Logging setup for BigLisp. Library modules only create loggers under the
    'biglisp' namespace; handlers are attached here, on request of the host.
"""

from __future__ import annotations

import logging

from biglisp.config import get_log_level

FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s - %(message)s"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stream handler to the 'biglisp' logger and set its level.

    The level defaults to BIGLISP_LOG_LEVEL (WARNING when unset). Calling this
    more than once replaces the level but never stacks handlers.
    """
    logger = logging.getLogger("biglisp")
    if level is None:
        level = get_log_level()
    logger.setLevel(level)
    if not any(getattr(h, "_biglisp_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT))
        handler._biglisp_handler = True
        logger.addHandler(handler)
    return logger
