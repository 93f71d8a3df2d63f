"""Shared utilities."""

from .env import is_env_truthy
from .io import is_read_only_mode
from .logging import mask_sensitive, setup_logging

__all__ = [
    "is_env_truthy",
    "is_read_only_mode",
    "mask_sensitive",
    "setup_logging",
]
