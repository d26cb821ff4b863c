"""Network configuration loaded from the environment (and ``.env``)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from eth_account import Account
from eth_account.signers.local import LocalAccount

from refi.data.constants import CHAIN_IDS, KOVAN, MAINNET
from refi.data.contracts import (
    AAVE_LENDING_POOL_ADDRESSES_PROVIDER,
    UNISWAP_V2_ROUTER,
)

logger = logging.getLogger(__name__)

_DEFAULT_EVM_ACCOUNT_PATH_TEMPLATE = "m/44'/60'/0'/0/{index}"

# Environment variable names per network: (endpoint, mnemonic)
_NETWORK_ENV: dict[str, tuple[str, str]] = {
    KOVAN: ("KOVAN_ENDPOINT", "KOVAN_MNEMONIC"),
    MAINNET: ("ETH_RPC_URL", "ETH_MNEMONIC"),
}

DEFAULT_NETWORK = KOVAN

_HD_WALLET_ENABLED = False


@dataclass(frozen=True)
class NetworkConfig:
    """Where to find a network and the protocols deployed on it."""

    name: str
    url: str
    chain_id: int
    mnemonic: str
    lending_pool_addresses_provider: str
    uniswap_router: str


def get_env(name: str) -> str:
    """Read an environment variable, warning (not failing) when it is unset."""
    value = os.environ.get(name)
    if value is None:
        logger.warning("%s environment variable has not been set", name)
        return ""
    return value


def load_env_file(path: str | Path | None = None) -> bool:
    """Load a ``.env`` file into ``os.environ`` without overriding set values."""
    if path is None:
        return load_dotenv()
    return load_dotenv(Path(path).expanduser())


def load_network_config(
    name: str = DEFAULT_NETWORK,
    env_file: str | Path | None = None,
) -> NetworkConfig:
    """Build the configuration for a named network.

    Parameters
    ----------
    name : str
        ``"kovan"`` or ``"mainnet"``.
    env_file : str | Path | None
        Optional ``.env`` path; the default search is used when omitted.
    """
    if name not in _NETWORK_ENV:
        raise ValueError(f"Unknown network: {name}")

    load_env_file(env_file)
    endpoint_var, mnemonic_var = _NETWORK_ENV[name]

    return NetworkConfig(
        name=name,
        url=get_env(endpoint_var),
        chain_id=CHAIN_IDS[name],
        mnemonic=get_env(mnemonic_var),
        lending_pool_addresses_provider=AAVE_LENDING_POOL_ADDRESSES_PROVIDER[name],
        uniswap_router=UNISWAP_V2_ROUTER[name],
    )


def _enable_hd_wallet_features() -> None:
    global _HD_WALLET_ENABLED
    if _HD_WALLET_ENABLED:
        return
    Account.enable_unaudited_hdwallet_features()
    _HD_WALLET_ENABLED = True


def derive_account(mnemonic: str, account_index: int = 0) -> LocalAccount:
    """Derive an account from a BIP-39 mnemonic at ``m/44'/60'/0'/0/{index}``."""
    if not mnemonic or not mnemonic.strip():
        raise ValueError("mnemonic is empty")
    idx = int(account_index)
    if idx < 0:
        raise ValueError("account_index must be non-negative")
    _enable_hd_wallet_features()
    path = _DEFAULT_EVM_ACCOUNT_PATH_TEMPLATE.format(index=idx)
    return Account.from_mnemonic(mnemonic.strip(), account_path=path)
