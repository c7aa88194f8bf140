# ABOUTME: User directory path management for greet-rpc configuration files.
# ABOUTME: Resolves ~/.greet-rpc, overridable programmatically or via GREET_RPC_APP_NAME.

import os
from pathlib import Path

DEFAULT_APP_NAME = "greet-rpc"

# Module-level cache for app name
_app_name: str | None = None


def set_app_name(name: str | None) -> None:
    """Set the application name for user directory paths.

    Passing None clears the cached name so the next lookup re-reads the environment.

    Example:
        >>> set_app_name("my-greeter")
        >>> get_user_dir()
        PosixPath('/home/user/.my-greeter')
    """
    global _app_name
    _app_name = name


def get_app_name() -> str:
    """Get the application name for user directory paths.

    Priority order:
    1. Explicitly set via set_app_name()
    2. Environment variable GREET_RPC_APP_NAME
    3. Fallback to "greet-rpc"
    """
    if _app_name is not None:
        return _app_name
    return os.getenv("GREET_RPC_APP_NAME") or DEFAULT_APP_NAME


def get_user_dir() -> Path:
    """Get the user configuration directory path (not guaranteed to exist)."""
    return Path.home() / f".{get_app_name()}"
