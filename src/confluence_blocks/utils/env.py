"""Environment variable helpers."""

import os


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if an environment variable is set to a truthy value.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if the variable is not set

    Returns:
        True if the variable is "true", "1" or "yes" (case-insensitive)
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting; anything but an explicit false verifies."""
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")
