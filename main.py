"""
BountyFactory Deployer - Main Entry Point
Deploys the compiled BountyFactory contract and prints its address
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from blockchain import ContractDeployer, DeploymentError, DeploymentResult, load_artifact
from utils import DeploymentConfig, configure_logging


LOG_LEVELS = ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']


class DeploymentRunner:
    """Runs one deployment from a loaded configuration"""

    def __init__(self, config: DeploymentConfig):
        self.config = config

    def run(self) -> DeploymentResult:
        """
        Load the artifact and deploy it

        Returns:
            DeploymentResult

        Raises:
            DeploymentError: On any failed step
        """
        logger.info("Deploying...")

        # Artifact must parse before the deployer touches the key or the node
        artifact = load_artifact(self.config.artifact_path)
        logger.info(f"Loaded artifact: {artifact}")

        deployer = ContractDeployer(self.config)
        result = deployer.deploy(artifact)

        logger.info(f"Contract deployed at address: {result.address}")
        return result


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line overrides for the environment configuration"""
    parser = argparse.ArgumentParser(
        description="Deploy the compiled BountyFactory contract"
    )
    parser.add_argument("--rpc-url", default=None, help="JSON-RPC endpoint (env: RPC_URL)")
    parser.add_argument("--artifact", default=None, help="artifact JSON path (env: ARTIFACT_PATH)")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="console log level (env: LOG_LEVEL)"
    )
    parser.add_argument("--log-file", default=None, help="also log to this file (env: LOG_FILE)")
    parser.add_argument("--env-file", default=None, help="path to a .env file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the deployment

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    args = parse_args(argv)

    config = DeploymentConfig.from_env(
        dotenv_path=args.env_file,
        rpc_url=args.rpc_url,
        artifact_path=args.artifact,
        log_level=args.log_level,
        log_file=args.log_file
    )

    try:
        configure_logging(config.log_level, config.log_file)
    except ValueError as e:
        print(f"Invalid logging configuration: {e}", file=sys.stderr)
        return 1

    try:
        result = DeploymentRunner(config).run()
    except DeploymentError as e:
        logger.critical(f"Error executing deployment script: {type(e).__name__}: {e}")
        return 1
    except Exception as e:
        logger.opt(exception=e).critical(f"Fatal error in deployment script: {e}")
        return 1

    print(result.address)
    logger.success("Deployment script executed successfully.")
    return 0


def cli():
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    cli()
