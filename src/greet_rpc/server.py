"""Greeter gRPC server."""

import asyncio
import logging
import signal

import grpc

from greet_rpc.config.models import ServerConfig
from greet_rpc.proto import load_protos

logger = logging.getLogger(__name__)

protos, services = load_protos()


def make_greeting(name: str) -> str:
    """Build the greeting for a name, leaving the name exactly as given."""
    return "Hello, " + name + "!"


class GreeterService(services.GreeterServicer):
    """Implementation of the greet.Greeter service."""

    async def Greet(self, request, context: grpc.aio.ServicerContext):
        logger.info(f"Received request for Greet: {request.name}")
        return protos.GreetResponse(message=make_greeting(request.name))


async def create_server(config: ServerConfig) -> tuple[grpc.aio.Server, int]:
    """Create a server with the Greeter service bound to the configured address.

    Returns:
        The (not yet started) server and the port actually bound.

    Raises:
        RuntimeError: If the address cannot be bound.
    """
    # Without SO_REUSEPORT a second listener on the same port is a bind failure
    server = grpc.aio.server(options=[("grpc.so_reuseport", 0)])
    services.add_GreeterServicer_to_server(GreeterService(), server)

    try:
        port = server.add_insecure_port(config.address)
        if port == 0:
            raise RuntimeError(f"Failed to bind to address {config.address}")
    except RuntimeError:
        await server.stop(None)
        raise
    return server, port


async def serve(config: ServerConfig, stop_event: asyncio.Event | None = None) -> None:
    """Run the Greeter server until SIGINT/SIGTERM or until stop_event is set.

    In-flight calls get config.shutdown_grace seconds to finish on stop.
    """
    try:
        server, port = await create_server(config)
    except RuntimeError as e:
        logger.error(f"Failed to bind server: {e}")
        raise

    stop_event = stop_event or asyncio.Event()
    loop = asyncio.get_running_loop()
    handled_signals: list[signal.Signals] = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
            handled_signals.append(sig)
        except NotImplementedError:
            # Windows event loops have no signal handlers
            pass

    await server.start()
    logger.info(f"gRPC server running on port {port}")
    try:
        await stop_event.wait()
        logger.info("Shutdown requested, stopping gRPC server")
    finally:
        for sig in handled_signals:
            loop.remove_signal_handler(sig)
        await server.stop(config.shutdown_grace)
        logger.info("gRPC server stopped")
