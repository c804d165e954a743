"""
Blockchain Interaction Package
Handles artifact loading, signing, transaction building and contract deployment
"""

from .errors import (
    DeploymentError,
    LoadError,
    ConfigError,
    NodeConnectionError,
    SubmissionError,
    ConfirmationError
)
from .artifact_loader import ContractArtifact, load_artifact
from .wallet_manager import WalletManager
from .rpc_manager import RPCManager
from .transaction_builder import TransactionBuilder
from .deployer import ContractDeployer, DeploymentResult

__all__ = [
    'DeploymentError',
    'LoadError',
    'ConfigError',
    'NodeConnectionError',
    'SubmissionError',
    'ConfirmationError',
    'ContractArtifact',
    'load_artifact',
    'WalletManager',
    'RPCManager',
    'TransactionBuilder',
    'ContractDeployer',
    'DeploymentResult'
]
