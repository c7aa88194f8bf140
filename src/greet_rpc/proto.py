"""Runtime loading of the greet.proto interface definition.

The schema is compiled on first use by grpcio-tools, so client and server
always share the exact file shipped in this package.
"""

import functools
from types import ModuleType

import grpc

PROTO_PATH = "greet_rpc/protos/greet.proto"


@functools.lru_cache(maxsize=None)
def load_protos() -> tuple[ModuleType, ModuleType]:
    """Return the (messages, services) modules generated from greet.proto."""
    return grpc.protos_and_services(PROTO_PATH)
