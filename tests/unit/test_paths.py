"""Test user directory resolution."""

from pathlib import Path

import pytest

from greet_rpc.utils import get_app_name, get_user_dir, set_app_name


def test_default_user_dir() -> None:
    assert get_app_name() == "greet-rpc"
    assert get_user_dir() == Path.home() / ".greet-rpc"


def test_app_name_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GREET_RPC_APP_NAME", "greeter-dev")

    assert get_user_dir() == Path.home() / ".greeter-dev"


def test_explicit_app_name_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GREET_RPC_APP_NAME", "greeter-dev")
    set_app_name("custom")

    assert get_app_name() == "custom"
    assert get_user_dir() == Path.home() / ".custom"
