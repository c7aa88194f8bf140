"""
greet-rpc CLI - gRPC greeter server and client.

`serve` runs the server until interrupted; `greet` sends one request and exits.
"""

import asyncio
from importlib.resources import files
from pathlib import Path
from typing import Any

import typer
from rich.markup import escape

from .client import run as run_client
from .config import GreetRpcConfig, setup_configuration
from .console import get_console
from .server import serve as run_server
from .utils import get_user_dir

app = typer.Typer(name="greet-rpc", help="gRPC greeter server and client")


def _load_config(config_file: Path | None, overrides: dict[str, Any]) -> GreetRpcConfig:
    """Load configuration, reporting config errors on the console."""
    try:
        return setup_configuration(config_file, overrides)
    except (FileNotFoundError, ValueError) as e:
        get_console().print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def init(force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing configuration")):
    """Write the default configuration to the user directory."""
    user_config_dir = get_user_dir()
    config_file = user_config_dir / "config.yaml"

    if config_file.exists() and not force:
        get_console().print("[yellow]Configuration already exists.[/yellow] Use --force to overwrite.")
        return

    user_config_dir.mkdir(parents=True, exist_ok=True)
    config_resource = files("greet_rpc.data.config") / "config.yaml"
    config_file.write_text(config_resource.read_text(encoding="utf-8"), encoding="utf-8")
    get_console().print(f"[green]✓[/green] Config saved to {config_file}")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Path to a YAML or JSON config file"),
):
    """Run the Greeter server until interrupted."""
    server_overrides = {key: value for key, value in {"host": host, "port": port}.items() if value is not None}
    config = _load_config(config_file, {"server": server_overrides} if server_overrides else {})

    try:
        asyncio.run(run_server(config.server))
    except RuntimeError as e:
        get_console().print(f"[red]Server failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Shutdown requested. Goodbye![/yellow]")


@app.command()
def greet(
    target: str | None = typer.Option(None, "--target", "-t", help="Server address as host:port"),
    name: str | None = typer.Option(None, "--name", "-n", help="Name to greet"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Path to a YAML or JSON config file"),
):
    """Send one greeting request to the server."""
    client_overrides = {key: value for key, value in {"target": target, "name": name}.items() if value is not None}
    config = _load_config(config_file, {"client": client_overrides} if client_overrides else {})

    asyncio.run(run_client(config.client))


def main():
    """Main entry point for the application."""
    app()


if __name__ == "__main__":
    main()
