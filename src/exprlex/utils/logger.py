"""Logger helpers for exprlex.

Every module asks for its logger through get_logger so that all output
lands under the single "exprlex" namespace. Handlers are never installed
here; that is left to the application (see exprlex.cli).

Example:
    >>> from exprlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scanning line %d", 1)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "exprlex"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for *name*, nested under "exprlex".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("lexer").name
        'exprlex.lexer'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + ".")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
