"""Global configuration and logging setup for greet-rpc."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any

from .loader import ConfigLoader
from .models import GreetRpcConfig, LoggingConfig

# Global configuration instance
_config: GreetRpcConfig | None = None


def load_config_from_file(config_file: Path | None = None) -> GreetRpcConfig:
    """Load configuration without touching logging.

    Checks for config in this order:
    1. The explicit config_file argument
    2. GREET_RPC_CONFIG environment variable (if set)
    3. ~/.{app-name}/config.yaml, then ./config.yaml
    4. Built-in defaults (if no file exists)
    """
    return ConfigLoader.load_config(config_file)


def setup_logging(logging_config: LoggingConfig) -> None:
    """Send log records to the console and, if configured, to a rotating file."""
    log_level = getattr(logging, logging_config.level.value)
    formatter = logging.Formatter(logging_config.format, datefmt=logging_config.datefmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if logging_config.file is not None:
        log_file = logging_config.file.expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=logging_config.max_file_size,
            backupCount=logging_config.backup_count,
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # grpc logs connection churn at INFO
    logging.getLogger("grpc").setLevel(logging.WARNING)


def setup_configuration(
    config_file: Path | None = None, overrides: dict[str, Any] | None = None
) -> GreetRpcConfig:
    """Initialize global configuration and logging. Later calls return the loaded config."""
    global _config

    if _config is None:
        _config = ConfigLoader.load_config(config_file=config_file, config_data=overrides)
        setup_logging(_config.logging)
        logging.getLogger(__name__).debug("Configuration loaded")

    return _config


def get_config() -> GreetRpcConfig:
    """Get the global configuration instance."""
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call setup_configuration() first.")
    return _config


def reset_configuration() -> None:
    """Drop the global configuration so the next setup_configuration() reloads it."""
    global _config
    _config = None
