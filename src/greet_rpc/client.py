"""Greeter gRPC client."""

import logging
from types import TracebackType

import grpc

from greet_rpc.config.models import ClientConfig
from greet_rpc.proto import load_protos

logger = logging.getLogger(__name__)

protos, services = load_protos()


class GreeterClient:
    """Async client for the greet.Greeter service over an insecure channel."""

    def __init__(self, target: str, timeout: float | None = None):
        self.target = target
        self.timeout = timeout
        self._channel: grpc.aio.Channel | None = None
        self._stub = None

    async def __aenter__(self) -> "GreeterClient":
        self._channel = grpc.aio.insecure_channel(self.target)
        self._stub = services.GreeterStub(self._channel)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        if self._channel is not None:
            await self._channel.close()
            self._channel = None
            self._stub = None

    async def greet(self, name: str) -> str:
        """Call Greet once and return the greeting message.

        Raises:
            grpc.aio.AioRpcError: If the call fails at the transport or server.
            ValueError: If the name cannot be encoded into the request.
        """
        if self._stub is None:
            raise RuntimeError("GreeterClient is not connected. Use 'async with GreeterClient(...)'.")
        response = await self._stub.Greet(protos.GreetRequest(name=name), timeout=self.timeout)
        return response.message


async def run(config: ClientConfig) -> str | None:
    """Send one greeting request and log the outcome.

    Returns:
        The greeting message, or None if the call failed.
    """
    async with GreeterClient(config.target, timeout=config.timeout) as client:
        try:
            message = await client.greet(config.name)
        except grpc.aio.AioRpcError as e:
            logger.error(f"Error calling Greet: {e.details() or e.code().name}")
            return None
        except ValueError as e:
            # The name could not be encoded into the request (e.g. lone surrogates from argv)
            logger.error(f"Error calling Greet: {e}")
            return None

    logger.info(f"Greeting: {message}")
    return message
