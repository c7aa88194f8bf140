"""greet-rpc - a gRPC greeter server and client."""

from greet_rpc.client import GreeterClient
from greet_rpc.client import run as run_client
from greet_rpc.config import get_config, setup_configuration
from greet_rpc.server import GreeterService, create_server, make_greeting, serve

__all__ = [
    "GreeterClient",
    "GreeterService",
    "create_server",
    "get_config",
    "make_greeting",
    "run_client",
    "serve",
    "setup_configuration",
]

__version__ = "0.1.0"
