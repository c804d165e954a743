"""
Contract Deployer
Signs, submits and confirms a contract-creation transaction
"""

from typing import Optional

from requests.exceptions import RequestException
from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception
from loguru import logger

from utils.settings import DeploymentConfig
from .artifact_loader import ContractArtifact
from .errors import ConfirmationError, SubmissionError
from .rpc_manager import RPCManager
from .transaction_builder import TransactionBuilder
from .wallet_manager import WalletManager


class DeploymentResult:
    """Outcome of a confirmed deployment"""

    def __init__(
        self,
        address: str,
        tx_hash: str,
        deployer: str,
        gas_used: Optional[int] = None,
        block_number: Optional[int] = None
    ):
        self.address = address
        self.tx_hash = tx_hash
        self.deployer = deployer
        self.gas_used = gas_used
        self.block_number = block_number

    def __repr__(self):
        return f"DeploymentResult(address={self.address!r}, tx_hash={self.tx_hash!r})"


class ContractDeployer:
    """
    Deploys a compiled contract in five ordered steps:

    1. derive the signing identity from the configured key
    2. connect to the node
    3. build, sign and submit the creation transaction
    4. block until the transaction is mined
    5. report the contract address

    Any failure is raised as a DeploymentError subclass. Nothing is retried.
    The constructor receives a single argument: the deployer's own address.
    """

    def __init__(self, config: DeploymentConfig, w3: Optional[Web3] = None):
        """
        Initialize Contract Deployer

        Args:
            config: Deployment configuration
            w3: Pre-built Web3 instance (skips client construction)
        """
        self.config = config
        self._w3 = w3

    def deploy(self, artifact: ContractArtifact) -> DeploymentResult:
        """
        Deploy the artifact and wait for confirmation

        Args:
            artifact: Loaded contract artifact

        Returns:
            DeploymentResult with the checksummed contract address

        Raises:
            ConfigError: Missing or malformed private key
            NodeConnectionError: Node unreachable
            SubmissionError: Transaction rejected
            ConfirmationError: Transaction timed out or reverted
        """
        # Key is validated offline before any network traffic
        wallet = WalletManager(self.config.private_key)

        w3 = self._connect()

        tx_hash = self._submit(w3, wallet, artifact)

        receipt = self._wait_for_confirmation(w3, tx_hash)

        contract_address = Web3.to_checksum_address(receipt['contractAddress'])

        result = DeploymentResult(
            address=contract_address,
            tx_hash=tx_hash,
            deployer=wallet.address,
            gas_used=receipt.get('gasUsed'),
            block_number=receipt.get('blockNumber')
        )

        logger.success("✅ Contract deployed successfully!")
        logger.success(f"Contract address: {result.address}")
        logger.success(f"Transaction hash: {result.tx_hash}")
        if result.gas_used is not None:
            logger.success(f"Gas used: {result.gas_used}")

        return result

    def _connect(self) -> Web3:
        """Return a connected Web3 instance"""
        self._w3 = RPCManager(self.config.rpc_url, w3=self._w3).connect()
        return self._w3

    def _submit(self, w3: Web3, wallet: WalletManager, artifact: ContractArtifact) -> str:
        """
        Build, sign and broadcast the creation transaction

        Returns:
            Transaction hash as 0x-prefixed hex
        """
        builder = TransactionBuilder(w3, wallet)

        logger.info("Building deployment transaction...")

        try:
            transaction = builder.build_deployment_tx(artifact, constructor_args=(wallet.address,))

            logger.info("Signing transaction...")
            signed_tx = wallet.sign_transaction(transaction)

            logger.info("Sending deployment transaction...")
            tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except (Web3Exception, RequestException, ValueError, TypeError) as e:
            raise SubmissionError(f"Deployment transaction rejected: {e}") from e

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"Transaction sent: {tx_hash_hex}")
        return tx_hash_hex

    def _wait_for_confirmation(self, w3: Web3, tx_hash: str):
        """
        Block until the transaction is mined with the client default timeout

        Returns:
            Transaction receipt
        """
        logger.info("Waiting for confirmation...")

        try:
            receipt = w3.eth.wait_for_transaction_receipt(tx_hash)
        except TimeExhausted as e:
            raise ConfirmationError(f"Transaction {tx_hash} not confirmed in time: {e}") from e
        except (Web3Exception, RequestException, ValueError) as e:
            raise ConfirmationError(f"Error waiting for transaction {tx_hash}: {e}") from e

        if receipt['status'] != 1:
            raise ConfirmationError(f"Deployment transaction {tx_hash} reverted")

        if not receipt.get('contractAddress'):
            raise ConfirmationError(f"Receipt for {tx_hash} has no contract address")

        return receipt
