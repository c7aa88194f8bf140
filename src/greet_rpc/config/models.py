"""Core configuration models for greet-rpc."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from greet_rpc.utils import get_user_dir


class LogLevel(str, Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ServerConfig(BaseModel):
    """Greeter server listener configuration."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=50051, ge=0, le=65535, description="Port to bind (0 picks a free port)")
    shutdown_grace: float | None = Field(
        default=None, ge=0, description="Seconds in-flight calls get to finish when the server is interrupted"
    )

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


class ClientConfig(BaseModel):
    """Greeter client configuration."""

    target: str = Field(default="localhost:50051", description="Server address as host:port")
    name: str = Field(default="World", description="Name sent in the greeting request")
    timeout: float | None = Field(default=None, gt=0, description="Per-call deadline in seconds (transport default if unset)")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    format: str = Field(default="%(asctime)s %(levelname)s [%(name)s] %(message)s", description="Log format")
    datefmt: str | None = Field(default=None, description="Date format for asctime (optional)")
    file: Path | None = Field(default=None, description="Also write logs to this file (rotating)")
    max_file_size: int = Field(default=10 * 1024 * 1024, gt=0, description="Max log file size in bytes")
    backup_count: int = Field(default=3, ge=0, description="Number of backup log files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        if isinstance(v, LogLevel):
            return v
        try:
            return LogLevel(v.upper())
        except (ValueError, AttributeError):
            raise ValueError(f"Log level must be one of: {[level.value for level in LogLevel]}")


class GreetRpcConfig(BaseModel):
    """Main configuration for greet-rpc."""

    server: ServerConfig = Field(default_factory=ServerConfig, description="Server settings")
    client: ClientConfig = Field(default_factory=ClientConfig, description="Client settings")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging settings")

    @classmethod
    def get_default_config_paths(cls) -> list[Path]:
        """Get default configuration file paths to search."""
        return [
            get_user_dir() / "config.yaml",  # User config (highest priority)
            Path.cwd() / "config.yaml",  # Project root
        ]
