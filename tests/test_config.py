"""Tests for network configuration and account derivation."""

import logging

import pytest

from refi.config import derive_account, get_env, load_network_config

TEST_MNEMONIC = "test test test test test test test test test test test junk"
NO_ENV_FILE = "/nonexistent/.env"


class TestGetEnv:
    def test_set(self, monkeypatch):
        monkeypatch.setenv("REFI_TEST_VALUE", "abc")
        assert get_env("REFI_TEST_VALUE") == "abc"

    def test_unset_warns_and_returns_empty(self, monkeypatch, caplog):
        monkeypatch.delenv("REFI_TEST_VALUE", raising=False)
        with caplog.at_level(logging.WARNING, logger="refi.config"):
            assert get_env("REFI_TEST_VALUE") == ""
        assert "REFI_TEST_VALUE environment variable has not been set" in caplog.text


class TestLoadNetworkConfig:
    def test_kovan(self, monkeypatch):
        monkeypatch.setenv("KOVAN_ENDPOINT", "https://kovan.example")
        monkeypatch.setenv("KOVAN_MNEMONIC", TEST_MNEMONIC)

        config = load_network_config("kovan", env_file=NO_ENV_FILE)
        assert config.chain_id == 42
        assert config.url == "https://kovan.example"
        assert config.mnemonic == TEST_MNEMONIC
        assert config.lending_pool_addresses_provider.startswith("0x")
        assert config.uniswap_router.startswith("0x")

    def test_mainnet_uses_eth_rpc_url(self, monkeypatch):
        monkeypatch.setenv("ETH_RPC_URL", "https://mainnet.example")
        config = load_network_config("mainnet", env_file=NO_ENV_FILE)
        assert config.chain_id == 1
        assert config.url == "https://mainnet.example"

    def test_missing_values_are_empty(self, monkeypatch):
        monkeypatch.delenv("KOVAN_ENDPOINT", raising=False)
        monkeypatch.delenv("KOVAN_MNEMONIC", raising=False)
        config = load_network_config("kovan", env_file=NO_ENV_FILE)
        assert config.url == ""
        assert config.mnemonic == ""

    def test_env_file(self, monkeypatch, tmp_path):
        # setenv first so teardown also removes the value loaded from the file
        monkeypatch.setenv("KOVAN_ENDPOINT", "")
        monkeypatch.delenv("KOVAN_ENDPOINT")
        env_file = tmp_path / ".env"
        env_file.write_text("KOVAN_ENDPOINT=https://from-dotenv.example\n")

        config = load_network_config("kovan", env_file=env_file)
        assert config.url == "https://from-dotenv.example"

    def test_unknown_network(self):
        with pytest.raises(ValueError, match="Unknown network"):
            load_network_config("ropsten", env_file=NO_ENV_FILE)


class TestDeriveAccount:
    def test_first_account(self):
        account = derive_account(TEST_MNEMONIC)
        assert account.address == "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

    def test_second_account(self):
        account = derive_account(TEST_MNEMONIC, account_index=1)
        assert account.address == "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"

    def test_empty_mnemonic(self):
        with pytest.raises(ValueError):
            derive_account("  ")

    def test_negative_index(self):
        with pytest.raises(ValueError):
            derive_account(TEST_MNEMONIC, account_index=-1)
