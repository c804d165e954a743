"""
RPC Manager
Opens and verifies the connection to the configured JSON-RPC node
"""

from typing import Optional

from web3 import Web3
from loguru import logger

from .errors import NodeConnectionError


class RPCManager:
    """
    Single-endpoint RPC connection

    No fallback tiers and no retries: an unreachable node is a
    terminal failure for the deployment.
    """

    def __init__(self, rpc_url: str, w3: Optional[Web3] = None):
        """
        Initialize RPC Manager

        Args:
            rpc_url: HTTP(S) JSON-RPC endpoint
            w3: Existing Web3 instance to verify instead of building one
        """
        if not rpc_url:
            raise NodeConnectionError("No RPC endpoint configured")

        self.rpc_url = rpc_url
        self.w3 = w3
        self.connected = False

    def build_client(self) -> Web3:
        """
        Build the Web3 client without touching the network

        The provider's request retry is disabled: a retried
        eth_sendRawTransaction could re-broadcast an accepted transaction.

        Returns:
            Web3 instance
        """
        provider = Web3.HTTPProvider(self.rpc_url, exception_retry_configuration=None)
        return Web3(provider)

    def connect(self) -> Web3:
        """
        Connect to the node and verify it answers

        Returns:
            Connected Web3 instance

        Raises:
            NodeConnectionError: If the endpoint is unreachable
        """
        if self.connected:
            return self.w3

        logger.info(f"Connecting to {self.rpc_url}...")

        try:
            if self.w3 is None:
                self.w3 = self.build_client()
            connected = self.w3.is_connected()
        except Exception as e:
            raise NodeConnectionError(f"Error connecting to {self.rpc_url}: {e}") from e

        if not connected:
            raise NodeConnectionError(f"Failed to connect to network at {self.rpc_url}")

        self.connected = True
        logger.success(f"Connected to {self.rpc_url}")
        return self.w3
