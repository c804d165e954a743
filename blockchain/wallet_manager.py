"""
Wallet Manager
Derives the deployer signing identity from the configured private key
"""

from decimal import Decimal
from typing import Dict, Optional

from web3 import Web3
from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger

from .errors import ConfigError


class WalletManager:
    """
    Holds the deployer account

    The private key is consumed at construction and never stored,
    logged or included in error messages.
    """

    def __init__(self, private_key: Optional[str]):
        """
        Initialize wallet manager

        Args:
            private_key: Hex-encoded secp256k1 key (with or without 0x)

        Raises:
            ConfigError: If the key is missing or malformed
        """
        if private_key is None or not private_key.strip():
            raise ConfigError("PRIVATE_KEY must be set in the environment or .env")

        try:
            self.account: LocalAccount = Account.from_key(private_key.strip())
        except (ValueError, TypeError) as e:
            # Exception text is dropped to keep any key material out of logs
            raise ConfigError(
                f"PRIVATE_KEY is malformed ({type(e).__name__}); "
                f"expected a 32-byte hex string"
            ) from None

        self.address = self.account.address

        logger.info(f"Deploying from: {self.address}")

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        return self.account.sign_transaction(transaction)

    def get_balance(self, w3: Web3) -> Decimal:
        """
        Get deployer native balance

        Args:
            w3: Web3 instance

        Returns:
            Balance in ether units
        """
        balance_wei = w3.eth.get_balance(self.address)
        return Decimal(str(Web3.from_wei(balance_wei, 'ether')))
