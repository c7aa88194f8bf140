"""Configuration management for greet-rpc."""

from .config import (
    get_config,
    load_config_from_file,
    reset_configuration,
    setup_configuration,
    setup_logging,
)
from .loader import ConfigLoader
from .models import ClientConfig, GreetRpcConfig, LoggingConfig, LogLevel, ServerConfig

__all__ = [
    "ClientConfig",
    "ConfigLoader",
    "GreetRpcConfig",
    "LogLevel",
    "LoggingConfig",
    "ServerConfig",
    "get_config",
    "load_config_from_file",
    "reset_configuration",
    "setup_configuration",
    "setup_logging",
]
