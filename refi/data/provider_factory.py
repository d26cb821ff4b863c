"""Factory for creating a ReFi wired to on-chain or static data."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from refi.config import DEFAULT_NETWORK, derive_account, load_network_config
from refi.data.constants import AAVE, MAINNET, WETH
from refi.data.contracts import ASSET_ADDRESSES
from refi.data.static_params import StaticAaveProvider, StaticUniswapProvider

if TYPE_CHECKING:
    from refi.client import ReFi

logger = logging.getLogger(__name__)


def _default_user(mnemonic: str) -> str | None:
    if not mnemonic:
        return None
    try:
        return derive_account(mnemonic).address
    except Exception:
        logger.warning("Could not derive an account from the configured mnemonic", exc_info=True)
        return None


def create_static_refi(
    network: str = MAINNET,
    default_user: str | None = None,
) -> ReFi:
    """ReFi backed by the hardcoded snapshot providers.

    Snapshot prices are keyed by symbol and follow ``network``.  The reserve
    snapshot holds mainnet pairs only, so other networks report empty pairs.
    """
    from refi.client import ReFi

    if network not in ASSET_ADDRESSES:
        raise ValueError(f"Unknown network: {network}")
    refi = ReFi(network=network, default_user=default_user)
    refi.register_lending_provider(AAVE, StaticAaveProvider(network=network))
    refi.set_exchange_provider(StaticUniswapProvider(weth=ASSET_ADDRESSES[network][WETH]))
    return refi


def create_refi(
    use_onchain: bool = False,
    network: str = DEFAULT_NETWORK,
    rpc_url: str | None = None,
    cache_ttl: float = 60.0,
) -> ReFi:
    """Create a ReFi, selecting static or on-chain data.

    Parameters
    ----------
    use_onchain : bool
        If True, attempt to wire ReFi to the network's deployed contracts.
    network : str
        Network whose configuration (endpoint, mnemonic, addresses) is used.
    rpc_url : str | None
        JSON-RPC URL overriding the network's configured endpoint.
    cache_ttl : float
        TTL in seconds for the on-chain cache (default 60).

    Returns
    -------
    ReFi
        On-chain when requested and an endpoint is available, otherwise
        backed by the static snapshot for ``network``.
    """
    if not use_onchain:
        return create_static_refi(network=network)

    config = load_network_config(network)
    resolved_url = rpc_url or config.url
    default_user = _default_user(config.mnemonic)
    if not resolved_url:
        logger.warning("On-chain data requested but no RPC URL provided; using static data")
        return create_static_refi(network=network, default_user=default_user)

    try:
        from web3 import Web3

        from refi.client import ReFi

        refi = ReFi(
            w3=Web3(Web3.HTTPProvider(resolved_url)),
            network=network,
            cache_ttl=cache_ttl,
            price_fallback=StaticAaveProvider(network=network),
            default_user=default_user,
        )
        refi.set_aave_contracts(config.lending_pool_addresses_provider)
        refi.set_uniswap_router(config.uniswap_router)
        return refi
    except Exception:
        logger.warning("Failed to create on-chain ReFi; using static data", exc_info=True)
        return create_static_refi(network=network, default_user=default_user)
