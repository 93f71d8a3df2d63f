"""Audit log of Confluence API calls.

Enabled with ``CONFLUENCE_LOG_REQUESTS=true``. Every response received by a
client session is written as one line to ``.confluence-blocks/requests.log``
through a dedicated, non-propagating logger. Only the method, status, elapsed
time and URL are recorded, never headers.
"""

import logging
import time
from pathlib import Path

from requests import Response

from .env import is_env_truthy

logger = logging.getLogger(__name__)

REQUESTS_LOG_FILE = ".confluence-blocks/requests.log"
REQUESTS_LOGGER_NAME = "confluence-blocks.requests"


def is_request_logging_enabled() -> bool:
    return is_env_truthy("CONFLUENCE_LOG_REQUESTS")


def get_requests_logger() -> logging.Logger:
    """Return the audit logger, attaching a file handler for the current log path."""
    requests_logger = logging.getLogger(REQUESTS_LOGGER_NAME)
    log_path = Path(REQUESTS_LOG_FILE).resolve()

    for handler in requests_logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path:
            return requests_logger

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    formatter = logging.Formatter("%(asctime)s | %(message)s", "%Y-%m-%d %H:%M:%S")
    formatter.converter = time.gmtime
    handler.setFormatter(formatter)

    requests_logger.addHandler(handler)
    requests_logger.setLevel(logging.INFO)
    requests_logger.propagate = False
    return requests_logger


def format_request_line(response: Response) -> str:
    """Format ``METHOD | status | elapsed | url`` for one response."""
    request = response.request
    elapsed_ms = int(response.elapsed.total_seconds() * 1000)
    return f"{request.method or 'GET':6} | {response.status_code} | {elapsed_ms:5}ms | {request.url or ''}"


def log_request(response: Response, *args, **kwargs) -> None:
    """``requests`` response hook writing one audit line per call.

    A response that cannot be described is skipped rather than failing the
    request it belongs to.
    """
    try:
        line = format_request_line(response)
    except (AttributeError, TypeError) as e:
        logger.debug(f"Failed to log request: {e}")
        return

    try:
        get_requests_logger().info(line)
    except OSError as e:
        logger.debug(f"Failed to write request log: {e}")


def install_request_logging(session) -> None:
    """Add :func:`log_request` to ``session``'s response hooks when enabled."""
    if not is_request_logging_enabled():
        return

    hooks = session.hooks.setdefault("response", [])
    if log_request not in hooks:
        hooks.append(log_request)
        logger.debug("Request logging installed on session")
