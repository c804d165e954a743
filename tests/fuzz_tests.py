"""
Fuzz Testing for Deployment Inputs
Tests key parsing and artifact validation against unexpected inputs
"""

import json
import string

import pytest
from eth_account import Account
from hypothesis import given, settings, strategies as st
from web3 import Web3

from blockchain.artifact_loader import load_artifact
from blockchain.errors import ConfigError, LoadError
from blockchain.wallet_manager import WalletManager


SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

NON_HEX_TEXT = st.text(
    alphabet=st.characters(blacklist_characters=string.hexdigits),
    min_size=1,
    max_size=80
)


class TestPrivateKeyFuzzing:
    """Fuzz the signing identity derivation"""

    @given(secret=st.integers(min_value=1, max_value=SECP256K1_N - 1))
    def test_any_valid_scalar_derives_checksum_address(self, secret):
        key = "0x" + secret.to_bytes(32, 'big').hex()

        wallet = WalletManager(key)

        assert wallet.address == Account.from_key(key).address
        assert Web3.is_checksum_address(wallet.address)

    @given(key=NON_HEX_TEXT)
    def test_garbage_key_only_raises_config_error(self, key):
        with pytest.raises(ConfigError) as exc_info:
            WalletManager(key)

        if len(key.strip()) >= 8:
            assert key.strip() not in str(exc_info.value)

    @given(raw=st.binary(min_size=0, max_size=64).filter(lambda b: len(b) != 32))
    def test_wrong_length_key_rejected(self, raw):
        with pytest.raises(ConfigError):
            WalletManager("0x" + raw.hex())


class TestArtifactFuzzing:
    """Fuzz artifact bytecode validation"""

    @settings(max_examples=50)
    @given(code=st.binary(min_size=1, max_size=256))
    def test_any_hex_bytecode_loads(self, tmp_path_factory, code):
        path = tmp_path_factory.mktemp("artifact") / "Fuzz.json"
        path.write_text(json.dumps({"abi": [], "bytecode": "0x" + code.hex()}))

        assert load_artifact(path).bytecode == "0x" + code.hex()

    @settings(max_examples=50)
    @given(code=NON_HEX_TEXT)
    def test_non_hex_bytecode_rejected(self, tmp_path_factory, code):
        path = tmp_path_factory.mktemp("artifact") / "Fuzz.json"
        path.write_text(json.dumps({"abi": [], "bytecode": code}))

        with pytest.raises(LoadError):
            load_artifact(path)
