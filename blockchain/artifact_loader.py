"""
Artifact Loader
Reads compiled contract artifacts (ABI + bytecode) produced by Hardhat
"""

import copy
import json
import re
from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger

from .errors import LoadError


HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


class ContractArtifact:
    """
    Compiled contract output: interface description and creation bytecode
    """

    def __init__(
        self,
        abi: List[Dict],
        bytecode: str,
        contract_name: Optional[str] = None,
        source_name: Optional[str] = None,
        path: Optional[Path] = None
    ):
        self._abi = copy.deepcopy(list(abi))
        self._bytecode = bytecode
        self._contract_name = contract_name
        self._source_name = source_name
        self._path = path

    @property
    def abi(self) -> List[Dict]:
        return copy.deepcopy(self._abi)

    @property
    def bytecode(self) -> str:
        return self._bytecode

    @property
    def contract_name(self) -> Optional[str]:
        return self._contract_name

    @property
    def source_name(self) -> Optional[str]:
        return self._source_name

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def __repr__(self):
        name = self._contract_name or 'unnamed'
        return f"ContractArtifact({name}, {len(self._abi)} ABI items, {len(self._bytecode)} bytecode chars)"


def load_artifact(path: Union[str, Path]) -> ContractArtifact:
    """
    Load a compiled contract artifact from disk

    Args:
        path: Path to the artifact JSON file

    Returns:
        ContractArtifact with ABI and bytecode

    Raises:
        LoadError: If the file is missing, unreadable, not JSON, or lacks
            a usable 'abi' or 'bytecode' field
    """
    artifact_path = Path(path)

    if not artifact_path.is_file():
        raise LoadError(
            f"Contract artifact not found: {artifact_path} "
            f"(run 'npx hardhat compile' first)"
        )

    try:
        with open(artifact_path, 'r', encoding='utf-8') as f:
            contract_json = json.load(f)
    except OSError as e:
        raise LoadError(f"Cannot read contract artifact {artifact_path}: {e}") from e
    except ValueError as e:
        raise LoadError(f"Contract artifact {artifact_path} is not valid JSON: {e}") from e

    if not isinstance(contract_json, dict):
        raise LoadError(f"Contract artifact {artifact_path} must be a JSON object")

    missing = [field for field in ('abi', 'bytecode') if field not in contract_json]
    if missing:
        raise LoadError(
            f"Contract artifact {artifact_path} is missing field(s): {', '.join(missing)}"
        )

    abi = contract_json['abi']
    bytecode = contract_json['bytecode']

    if not isinstance(abi, list):
        raise LoadError(f"'abi' in {artifact_path} must be a list of descriptors")

    _validate_bytecode(bytecode, artifact_path)

    artifact = ContractArtifact(
        abi=abi,
        bytecode=bytecode,
        contract_name=contract_json.get('contractName'),
        source_name=contract_json.get('sourceName'),
        path=artifact_path
    )

    logger.debug(
        f"Loaded artifact {artifact_path}: {len(abi)} ABI items, "
        f"{len(bytecode)} bytecode chars"
    )
    return artifact


def _validate_bytecode(bytecode, artifact_path: Path):
    """Reject empty, non-hex, or interface-only (0x) bytecode"""
    if not isinstance(bytecode, str):
        raise LoadError(f"'bytecode' in {artifact_path} must be a hex string")

    body = bytecode[2:] if bytecode.startswith(('0x', '0X')) else bytecode

    if not body:
        # Interfaces and abstract contracts compile to '0x'
        raise LoadError(
            f"'bytecode' in {artifact_path} is empty - abstract contracts "
            f"and interfaces cannot be deployed"
        )

    if not HEX_PATTERN.fullmatch(body) or len(body) % 2:
        raise LoadError(f"'bytecode' in {artifact_path} is not valid hex")
