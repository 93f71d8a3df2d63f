"""Logging setup and credential masking."""

import logging
import re
import sys
from collections.abc import Iterable
from typing import TextIO

LOGGER_NAME = "confluence-blocks"

MASK = "***"

_AUTH_HEADER_PATTERN = re.compile(r"\b(Basic|Bearer)\s+[A-Za-z0-9+/=._-]+", re.IGNORECASE)


def setup_logging(
    level: int = logging.WARNING, stream: TextIO = sys.stderr
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: The logging level to use
        stream: The stream to write log records to

    Returns:
        The configured application logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for name in ("confluence_blocks", "confluence_blocks.blocks"):
        logging.getLogger(name).setLevel(level)

    return logger


def mask_sensitive(text: str, secrets: Iterable[str | None] = ()) -> str:
    """Mask credentials in a message before it is logged.

    Replaces every occurrence of the given secret values and any inline
    ``Basic``/``Bearer`` credential with ``***``.
    """
    if not text:
        return text

    masked = _AUTH_HEADER_PATTERN.sub(lambda m: f"{m.group(1)} {MASK}", text)
    for secret in secrets:
        if secret:
            masked = masked.replace(secret, MASK)
    return masked
