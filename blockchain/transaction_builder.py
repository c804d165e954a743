"""
Transaction Builder
Constructs contract-creation transactions from compiled artifacts
"""

from typing import Dict, Sequence

from web3 import Web3
from loguru import logger


class TransactionBuilder:
    """
    Builds deployment transactions for the deployer wallet
    """

    def __init__(self, w3: Web3, wallet_manager):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            wallet_manager: Wallet manager for the sender address
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager

    def build_deployment_tx(self, artifact, constructor_args: Sequence = ()) -> Dict:
        """
        Build the contract-creation transaction

        Nonce and chain id are read from the node; gas limit and fee
        fields are left to web3, which estimates them against the node.

        Args:
            artifact: ContractArtifact to deploy
            constructor_args: Positional constructor arguments

        Returns:
            Unsigned transaction dict
        """
        sender = self.wallet_manager.address

        Contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

        nonce = self.w3.eth.get_transaction_count(sender, 'pending')
        chain_id = self.w3.eth.chain_id

        transaction = Contract.constructor(*constructor_args).build_transaction({
            'from': sender,
            'nonce': nonce,
            'chainId': chain_id
        })

        logger.debug(f"Deployment tx: nonce={nonce} chainId={chain_id} gas={transaction.get('gas')}")
        return transaction
