"""On-chain Aave v1 data provider via web3.py."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from web3 import Web3

from refi.data.constants import MAINNET, PRICE_SOURCE_ORACLE, PRICE_SOURCE_SNAPSHOT
from refi.data.contracts import (
    LENDING_POOL_ABI,
    LENDING_POOL_ADDRESSES_PROVIDER_ABI,
    PRICE_ORACLE_ABI,
    resolve_asset,
)
from refi.data.interfaces import AaveContracts, LendingDataProvider, UserReserveData

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# TTL cache
# ---------------------------------------------------------------------------

class _TTLCache:
    """Simple dict-based cache with per-entry TTL expiry."""

    def __init__(self, ttl: float) -> None:
        self._ttl = ttl
        self._store: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        ts, value = entry
        if time.monotonic() - ts > self._ttl:
            del self._store[key]
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        self._store[key] = (time.monotonic(), value)

    def clear(self) -> None:
        self._store.clear()


# ---------------------------------------------------------------------------
# OnChainAaveProvider
# ---------------------------------------------------------------------------

class OnChainAaveProvider(LendingDataProvider):
    """Live Aave v1 lending data located through a LendingPoolAddressesProvider.

    Parameters
    ----------
    addresses_provider : str
        Address of the ``LendingPoolAddressesProvider``.
    rpc_url : str | None
        JSON-RPC endpoint, used when ``w3`` is not supplied.
    w3 : Web3 | None
        Existing web3 handle to share.
    network : str
        Network used to resolve asset symbols (default mainnet).
    cache_ttl : float
        Seconds before a cached value expires (default 60).
    fallback : LendingDataProvider | None
        Optional provider serving prices when an RPC call fails.
    """

    def __init__(
        self,
        addresses_provider: str,
        rpc_url: str | None = None,
        w3: Any | None = None,
        network: str = MAINNET,
        cache_ttl: float = 60.0,
        fallback: LendingDataProvider | None = None,
    ) -> None:
        if w3 is None:
            if not rpc_url:
                raise ValueError("Either rpc_url or w3 is required")
            w3 = Web3(Web3.HTTPProvider(rpc_url))

        self._w3 = w3
        self._network = network
        self._cache = _TTLCache(cache_ttl)
        self._fallback = fallback
        # Assets whose latest price came from the fallback
        self._fallback_prices: set[str] = set()

        # No RPC calls here; pool and oracle are resolved on first use
        self._addresses_provider = self._w3.eth.contract(
            address=self._w3.to_checksum_address(addresses_provider),
            abi=LENDING_POOL_ADDRESSES_PROVIDER_ABI,
        )
        self._contracts: AaveContracts | None = None
        self._lending_pool: Any = None
        self._oracle: Any = None

    @property
    def addresses_provider(self) -> str:
        return self._addresses_provider.address

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve_address(self, asset: str) -> str:
        return resolve_asset(asset, self._network)

    def _ensure_contracts(self) -> AaveContracts:
        """Resolve lending pool, core and oracle from the addresses provider."""
        if self._contracts is not None:
            return self._contracts

        fns = self._addresses_provider.functions
        contracts = AaveContracts(
            lending_pool=fns.getLendingPool().call(),
            lending_pool_core=fns.getLendingPoolCore().call(),
            price_oracle=fns.getPriceOracle().call(),
        )
        self._lending_pool = self._w3.eth.contract(
            address=self._w3.to_checksum_address(contracts.lending_pool),
            abi=LENDING_POOL_ABI,
        )
        self._oracle = self._w3.eth.contract(
            address=self._w3.to_checksum_address(contracts.price_oracle),
            abi=PRICE_ORACLE_ABI,
        )
        self._contracts = contracts
        logger.info(
            "Resolved Aave contracts: pool=%s oracle=%s",
            contracts.lending_pool,
            contracts.price_oracle,
        )
        return contracts

    def _call_with_fallback(
        self,
        cache_key: str,
        fetcher: Callable[[], Any],
        fallback_method: Callable[..., Any] | None,
        *fallback_args: Any,
    ) -> Any:
        """Cache → RPC → fallback pipeline."""
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            value = fetcher()
            self._cache.set(cache_key, value)
            return value
        except Exception:
            logger.warning(
                "RPC call failed for key=%s, using fallback", cache_key, exc_info=True
            )

        if fallback_method is not None:
            return fallback_method(*fallback_args)

        raise RuntimeError(f"RPC call failed and no fallback available for {cache_key}")

    # ------------------------------------------------------------------
    # LendingDataProvider interface
    # ------------------------------------------------------------------

    @property
    def contracts(self) -> AaveContracts:
        return self._ensure_contracts()

    def get_user_reserve_data(self, reserve: str, user: str) -> UserReserveData:
        reserve_addr = self._resolve_address(reserve)
        user_addr = self._w3.to_checksum_address(user)

        def _fetch() -> UserReserveData:
            self._ensure_contracts()
            data = self._lending_pool.functions.getUserReserveData(
                reserve_addr, user_addr
            ).call()
            return UserReserveData.from_tuple(data)

        return self._call_with_fallback(
            f"user_reserve:{reserve_addr}:{user_addr}", _fetch, None
        )

    def get_asset_price(self, asset: str) -> int:
        asset_addr = self._resolve_address(asset)

        def _fetch() -> int:
            self._ensure_contracts()
            price = int(self._oracle.functions.getAssetPrice(asset_addr).call())
            self._fallback_prices.discard(asset_addr)
            return price

        def _fallback(addr: str) -> int:
            price = self._fallback.get_asset_price(addr)
            self._fallback_prices.add(addr)
            return price

        fb = _fallback if self._fallback else None
        return self._call_with_fallback(f"price:{asset_addr}", _fetch, fb, asset_addr)

    def price_source(self, asset: str) -> str:
        if self._resolve_address(asset) in self._fallback_prices:
            return PRICE_SOURCE_SNAPSHOT
        return PRICE_SOURCE_ORACLE

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Invalidate cached values and resolved contracts."""
        self._cache.clear()
        self._fallback_prices.clear()
        self._contracts = None
        self._lending_pool = None
        self._oracle = None

    @property
    def is_connected(self) -> bool:
        """Check if the Web3 provider is connected."""
        try:
            return self._w3.is_connected()
        except Exception:
            return False
