"""
Deployment Settings
Explicit configuration passed to the deployer instead of process-wide state
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv


DEFAULT_RPC_URL = "https://testnet-rpc.monad.xyz"
DEFAULT_ARTIFACT_PATH = "artifacts/contracts/bountyfactory.sol/BountyFactory.json"
DEFAULT_LOG_LEVEL = "INFO"


class DeploymentConfig:
    """
    Deployment configuration

    The private key is held but never rendered: it is excluded from
    repr() and str() so the config object can be logged safely.
    """

    __slots__ = ('_rpc_url', '_private_key', '_artifact_path', '_log_level', '_log_file')

    def __init__(
        self,
        private_key: Optional[str],
        rpc_url: str = DEFAULT_RPC_URL,
        artifact_path: str = DEFAULT_ARTIFACT_PATH,
        log_level: str = DEFAULT_LOG_LEVEL,
        log_file: Optional[str] = None
    ):
        self._private_key = private_key
        self._rpc_url = rpc_url
        self._artifact_path = artifact_path
        self._log_level = log_level.upper()
        self._log_file = log_file

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides) -> 'DeploymentConfig':
        """
        Build configuration from the environment (and a .env file if present)

        Args:
            dotenv_path: Explicit .env path (default: nearest .env from the
                working directory upward)
            **overrides: Values that take precedence over the environment;
                None values are ignored

        Returns:
            DeploymentConfig
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))

        values = {
            'private_key': os.getenv('PRIVATE_KEY'),
            'rpc_url': os.getenv('RPC_URL', DEFAULT_RPC_URL),
            'artifact_path': os.getenv('ARTIFACT_PATH', DEFAULT_ARTIFACT_PATH),
            'log_level': os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_file': os.getenv('LOG_FILE') or None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        return cls(**values)

    @property
    def private_key(self) -> Optional[str]:
        return self._private_key

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    @property
    def artifact_path(self) -> str:
        return self._artifact_path

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def log_file(self) -> Optional[str]:
        return self._log_file

    @property
    def has_private_key(self) -> bool:
        return bool(self._private_key and self._private_key.strip())

    def __repr__(self):
        key_state = 'set' if self.has_private_key else 'missing'
        return (
            f"DeploymentConfig(rpc_url={self._rpc_url!r}, "
            f"artifact_path={self._artifact_path!r}, "
            f"private_key=<{key_state}>, log_level={self._log_level!r})"
        )

    __str__ = __repr__
