"""Shared exception policy helpers for tolerated failures."""

from __future__ import annotations

import logging
from typing import TypeAlias

RecoverableErrors: TypeAlias = tuple[type[BaseException], ...]

# Failures a document scan may skip over: unreadable files and malformed JSON.
RECOVERABLE_IO_ERRORS: RecoverableErrors = (OSError, ValueError)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.DEBUG,
) -> None:
    """Emit observability for a tolerated exception, including its traceback."""
    logger.log(level, message, *args, exc_info=True)
