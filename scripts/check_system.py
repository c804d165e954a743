"""
System Check Script
Verifies key, node connection, balance and artifact before deploying
"""

import sys
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

# Allow running as `python scripts/check_system.py` from the project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from blockchain import ConfigError, DeploymentError, RPCManager, WalletManager, load_artifact  # noqa: E402
from utils import DeploymentConfig, configure_logging  # noqa: E402


class SystemCheck:
    """
    Preflight diagnostics for a deployment

    Each check logs its outcome and returns True/False; no check
    sends a transaction.
    """

    def __init__(self, config: DeploymentConfig, w3=None):
        self.config = config
        self.w3 = w3
        self.wallet: Optional[WalletManager] = None

    def check_private_key(self) -> bool:
        """Check PRIVATE_KEY is set and parses"""
        logger.info("Checking private key...")

        try:
            self.wallet = WalletManager(self.config.private_key)
        except ConfigError as e:
            logger.error(f"  ✗ {e}")
            return False

        logger.success("  ✓ PRIVATE_KEY valid")
        return True

    def check_rpc_connection(self) -> bool:
        """Check the RPC endpoint answers"""
        logger.info("Checking RPC connection...")

        try:
            self.w3 = RPCManager(self.config.rpc_url, w3=self.w3).connect()
            chain_id = self.w3.eth.chain_id
            block = self.w3.eth.block_number
        except DeploymentError as e:
            logger.error(f"  ✗ {e}")
            self.w3 = None
            return False
        except Exception as e:
            logger.error(f"  ✗ {self.config.rpc_url}: {e}")
            self.w3 = None
            return False

        logger.success(f"  ✓ Connected (Chain ID: {chain_id}, Block: {block})")
        return True

    def check_wallet_balance(self) -> bool:
        """Check the deployer can pay for gas"""
        logger.info("Checking deployer balance...")

        if self.wallet is None or self.w3 is None:
            logger.warning("  Skipped (needs a valid key and connection)")
            return False

        try:
            balance = self.wallet.get_balance(self.w3)
        except Exception as e:
            logger.error(f"  Error checking balance: {e}")
            return False

        logger.info(f"  Deployer: {balance:.6f} ETH")

        if balance <= 0:
            logger.error("  ✗ Deployer has no funds for gas")
            return False

        logger.success("  ✓ Deployer funded")
        return True

    def check_artifact(self) -> bool:
        """Check the artifact loads and is deployable"""
        logger.info("Checking contract artifact...")

        try:
            artifact = load_artifact(self.config.artifact_path)
        except DeploymentError as e:
            logger.error(f"  ✗ {e}")
            return False

        logger.success(f"  ✓ {artifact}")
        return True

    def run_all(self) -> List[Tuple[str, bool]]:
        """Run every check in order"""
        checks = [
            ("Private Key", self.check_private_key),
            ("Contract Artifact", self.check_artifact),
            ("RPC Connection", self.check_rpc_connection),
            ("Deployer Balance", self.check_wallet_balance)
        ]

        return [(name, check_func()) for name, check_func in checks]


def main(w3=None) -> int:
    """Run all system checks"""
    config = DeploymentConfig.from_env()
    configure_logging(config.log_level, config.log_file)

    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    results = SystemCheck(config, w3=w3).run_all()

    passed = sum(1 for _, result in results if result)
    total = len(results)

    logger.info("")
    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python main.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
