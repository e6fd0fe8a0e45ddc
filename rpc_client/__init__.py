"""Chain JSON-RPC client package."""

from rpc_client.base import BaseClient
from rpc_client.chain import ChainClient
from rpc_client.errors import (
    RpcError,
    RpcInvalidParamsError,
    RpcNotFoundError,
    RpcUnavailableError,
)

__all__ = [
    # Base
    "BaseClient",
    # Clients
    "ChainClient",
    # Errors
    "RpcError",
    "RpcInvalidParamsError",
    "RpcNotFoundError",
    "RpcUnavailableError",
]
