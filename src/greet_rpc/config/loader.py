"""Configuration loader with environment variable and file support."""

import json
import logging
import os
import re
from importlib.resources import files
from pathlib import Path
from typing import Any, cast

import yaml

from .models import GreetRpcConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GREET_RPC_CONFIG"


class ConfigLoader:
    """Configuration loader with support for YAML/JSON files with environment variable substitution."""

    @classmethod
    def load_from_file(cls, file_path: Path) -> dict[str, Any]:
        """Load configuration from a file (YAML or JSON)."""
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        file_content = file_path.read_text(encoding="utf-8")

        # Parse first, then substitute
        try:
            if file_path.suffix.lower() in {".yaml", ".yml"}:
                data: dict[str, Any] = yaml.safe_load(file_content) or {}
            elif file_path.suffix.lower() == ".json":
                data = json.loads(file_content)
            else:
                raise ValueError(f"Unsupported file format: {file_path.suffix}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid {file_path.suffix.upper()} in {file_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Invalid {file_path.suffix.upper()} in {file_path}: top level must be a mapping")

        return cls._substitute_env_vars_in_dict(data)

    @classmethod
    def _substitute_env_vars_in_dict(cls, data: Any) -> Any:
        """Substitute ${VAR} patterns in string values after parsing."""
        if isinstance(data, dict):
            return {key: cls._substitute_env_vars_in_dict(value) for key, value in cast(dict[str, Any], data).items()}
        if isinstance(data, list):
            return [cls._substitute_env_vars_in_dict(item) for item in cast(list[Any], data)]
        if isinstance(data, str):
            return re.sub(r"\$\{([^}]+)\}", lambda m: os.getenv(m.group(1), m.group(0)), data)
        return data

    @classmethod
    def find_config_file(cls, config_paths: list[Path] | None = None) -> Path | None:
        """Find the first existing configuration file from the search paths.

        GREET_RPC_CONFIG, when set, is checked before the default locations.
        """
        if config_paths is None:
            config_paths = GreetRpcConfig.get_default_config_paths()
            if env_path := os.getenv(CONFIG_ENV_VAR):
                config_paths.insert(0, Path(env_path).expanduser())
        return next((path for path in config_paths if path.exists() and path.is_file()), None)

    @classmethod
    def load_default_config(cls) -> dict[str, Any]:
        """Load default configuration from package resources."""
        config_file = files("greet_rpc.data.config") / "config.yaml"
        data: dict[str, Any] = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
        return cls._substitute_env_vars_in_dict(data)

    @classmethod
    def load_config(cls, config_file: Path | None = None, config_data: dict[str, Any] | None = None) -> GreetRpcConfig:
        """Load configuration from multiple sources with precedence."""
        final_config: dict[str, Any] = {}

        # 1. Packaged defaults so user configs can be sparse
        cls._deep_merge(final_config, cls.load_default_config())

        # 2. Configuration file
        if config_file:
            if not config_file.exists():
                raise FileNotFoundError(f"Specified config file not found: {config_file}")
            cls._deep_merge(final_config, cls.load_from_file(config_file))
        elif found_config := cls.find_config_file():
            logger.debug(f"Using config file {found_config}")
            cls._deep_merge(final_config, cls.load_from_file(found_config))

        # 3. Explicit config data (highest precedence)
        if config_data:
            cls._deep_merge(final_config, config_data)

        return GreetRpcConfig(**final_config)

    @classmethod
    def _deep_merge(cls, target: dict[str, Any], source: dict[str, Any]) -> None:
        """Deep merge source dict into target dict."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                cls._deep_merge(cast(dict[str, Any], target[key]), cast(dict[str, Any], value))
            else:
                target[key] = value
