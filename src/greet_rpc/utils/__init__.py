"""Utility functions for greet-rpc."""

from .paths import get_app_name, get_user_dir, set_app_name

__all__ = ["get_app_name", "get_user_dir", "set_app_name"]
