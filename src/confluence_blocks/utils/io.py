"""Read-only mode helpers."""

from .env import is_env_truthy


def is_read_only_mode() -> bool:
    """Check whether the server runs in read-only mode (READ_ONLY_MODE=true)."""
    return is_env_truthy("READ_ONLY_MODE", "false")
