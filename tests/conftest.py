"""Shared test fixtures for greet-rpc tests."""

import logging
import socket
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from pathlib import Path
from typing import Any

import pytest

from greet_rpc.config import ServerConfig, reset_configuration
from greet_rpc.server import create_server
from greet_rpc.utils import set_app_name


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep user config, cwd, global config and root logging private to each test."""
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("GREET_RPC_CONFIG", raising=False)
    monkeypatch.delenv("GREET_RPC_APP_NAME", raising=False)
    monkeypatch.chdir(workdir)
    set_app_name(None)
    reset_configuration()

    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    yield

    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    reset_configuration()
    set_app_name(None)


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Temporary directory for config files."""
    config_dir = tmp_path / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Sample configuration dictionary for testing."""
    return {
        "server": {"host": "127.0.0.1", "port": 6000},
        "client": {"target": "127.0.0.1:6000", "name": "Alice", "timeout": 2.5},
        "logging": {"level": "debug", "format": "%(message)s", "datefmt": "%H:%M:%S"},
    }


@pytest.fixture
def unused_port() -> int:
    """A loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def occupied_port() -> Any:
    """A loopback port held by a listening socket for the duration of the test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()


@pytest.fixture
def running_server() -> Callable[[], AbstractAsyncContextManager[int]]:
    """Factory for a started Greeter server on an ephemeral loopback port.

    Use inside an async test: ``async with running_server() as port: ...``
    """

    @asynccontextmanager
    async def _running_server() -> AsyncIterator[int]:
        server, port = await create_server(ServerConfig(host="127.0.0.1", port=0))
        await server.start()
        try:
            yield port
        finally:
            await server.stop(None)

    return _running_server
