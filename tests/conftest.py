"""
Shared fixtures for deployment tests
"""

import json
from unittest.mock import MagicMock

import pytest
from loguru import logger
from web3 import Web3

from utils.settings import DeploymentConfig
from tests.constants import (
    BOUNTY_FACTORY_ABI,
    BOUNTY_FACTORY_BYTECODE,
    CHAIN_ID,
    DEPLOYED_ADDRESS,
    TEST_ADDRESS,
    TEST_PRIVATE_KEY,
    TX_HASH
)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (they may point at captured streams)"""
    yield
    logger.remove()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test"""
    messages = []
    handler_id = logger.add(messages.append, format="{message}", level="TRACE")
    yield messages
    try:
        logger.remove(handler_id)
    except ValueError:
        pass


@pytest.fixture
def artifact_data():
    """Hardhat-style artifact content"""
    return {
        "_format": "hh-sol-artifact-1",
        "contractName": "BountyFactory",
        "sourceName": "contracts/bountyfactory.sol",
        "abi": BOUNTY_FACTORY_ABI,
        "bytecode": BOUNTY_FACTORY_BYTECODE,
        "deployedBytecode": "0x6080604052",
        "linkReferences": {},
        "deployedLinkReferences": {}
    }


@pytest.fixture
def artifact_file(tmp_path, artifact_data):
    """Artifact written to the Hardhat output layout"""
    path = tmp_path / "artifacts" / "contracts" / "bountyfactory.sol" / "BountyFactory.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(artifact_data))
    return path


@pytest.fixture
def config(artifact_file):
    """Deployment configuration with the test key"""
    return DeploymentConfig(
        private_key=TEST_PRIVATE_KEY,
        rpc_url="http://127.0.0.1:8545",
        artifact_path=str(artifact_file)
    )


@pytest.fixture
def fake_w3():
    """Web3 stand-in for a node that accepts and mines the deployment"""
    w3 = MagicMock(spec=Web3)
    w3.is_connected.return_value = True

    eth = MagicMock()
    eth.chain_id = CHAIN_ID
    eth.block_number = 42
    eth.get_transaction_count.return_value = 7
    eth.get_balance.return_value = 2 * 10**18
    eth.contract.return_value.constructor.return_value.build_transaction.return_value = {
        'from': TEST_ADDRESS,
        'nonce': 7,
        'chainId': CHAIN_ID,
        'value': 0,
        'gas': 1_500_000,
        'maxFeePerGas': 2_000_000_000,
        'maxPriorityFeePerGas': 1_000_000_000,
        'data': BOUNTY_FACTORY_BYTECODE
    }
    eth.send_raw_transaction.return_value = TX_HASH
    eth.wait_for_transaction_receipt.return_value = {
        'status': 1,
        'contractAddress': DEPLOYED_ADDRESS,
        'gasUsed': 245_000,
        'blockNumber': 43
    }
    w3.eth = eth

    return w3
