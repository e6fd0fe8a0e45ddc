"""Chain RPC client."""

from rpc_client.chain.client import ChainClient

__all__ = ["ChainClient"]
