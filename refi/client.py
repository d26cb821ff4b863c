"""ReFi — borrow balances, price equivalents and pair lookups over Aave and Uniswap."""

from __future__ import annotations

import logging
from typing import Any

from web3 import Web3

from refi.data.constants import (
    AAVE,
    DEFAULT_DECIMALS,
    MAINNET,
    SUPPORTED_LENDING_PROTOCOLS,
    UNSUPPORTED_PROTOCOL_REASON,
)
from refi.data.contracts import resolve_asset
from refi.data.dex_liquidity import UniswapV2Liquidity
from refi.data.interfaces import (
    ExchangeDataProvider,
    LendingDataProvider,
    PairReserves,
    UserReserveData,
)
from refi.data.onchain_provider import OnChainAaveProvider
from refi.protocol.pairs import pair_for, sort_tokens
from refi.protocol.pricing import equivalent_amount

logger = logging.getLogger(__name__)


def _protocol_key(protocol: Any) -> Any:
    return protocol.lower() if isinstance(protocol, str) else protocol


class UnsupportedProtocolError(ValueError):
    """Raised for a protocol identifier ReFi does not know."""

    def __init__(self, protocol: Any) -> None:
        super().__init__(UNSUPPORTED_PROTOCOL_REASON)
        self.protocol = protocol


class ReFi:
    """Read-only view over a lending protocol and a Uniswap v2 deployment.

    Parameters
    ----------
    w3 : Web3 | None
        web3 handle used by :meth:`set_aave_contracts` and
        :meth:`set_uniswap_router`.  Static setups may omit it and register
        providers directly.
    network : str
        Network used to resolve asset symbols.
    cache_ttl : float
        TTL for the on-chain Aave cache.
    price_fallback : LendingDataProvider | None
        Serves oracle prices when an on-chain price call fails.
    default_user : str | None
        Account queried when a call does not name a user.
    """

    def __init__(
        self,
        w3: Any | None = None,
        network: str = MAINNET,
        cache_ttl: float = 60.0,
        price_fallback: LendingDataProvider | None = None,
        default_user: str | None = None,
    ) -> None:
        self._w3 = w3
        self.network = network
        self._cache_ttl = cache_ttl
        self._price_fallback = price_fallback
        self.default_user = Web3.to_checksum_address(default_user) if default_user else None
        self._lending: dict[str, LendingDataProvider] = {}
        self._exchange: ExchangeDataProvider | None = None

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------

    def _require_w3(self) -> Any:
        if self._w3 is None:
            raise RuntimeError("ReFi was created without a web3 handle")
        return self._w3

    def set_aave_contracts(self, addresses_provider: str) -> None:
        """Point Aave lookups at a LendingPoolAddressesProvider."""
        self._lending[AAVE] = OnChainAaveProvider(
            addresses_provider,
            w3=self._require_w3(),
            network=self.network,
            cache_ttl=self._cache_ttl,
            fallback=self._price_fallback,
        )
        logger.info("Aave addresses provider set to %s", addresses_provider)

    def set_uniswap_router(self, router: str) -> None:
        """Point Uniswap lookups at a v2 router."""
        self._exchange = UniswapV2Liquidity(router, w3=self._require_w3())
        logger.info("Uniswap router set to %s", router)

    def register_lending_provider(self, protocol: str, provider: LendingDataProvider) -> None:
        key = _protocol_key(protocol)
        if key not in SUPPORTED_LENDING_PROTOCOLS:
            raise UnsupportedProtocolError(protocol)
        self._lending[key] = provider

    def set_exchange_provider(self, provider: ExchangeDataProvider) -> None:
        self._exchange = provider

    @property
    def lending_providers(self) -> dict[str, LendingDataProvider]:
        return dict(self._lending)

    @property
    def exchange_provider(self) -> ExchangeDataProvider | None:
        return self._exchange

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _lending_for(self, protocol: str) -> LendingDataProvider:
        key = _protocol_key(protocol)
        if key not in SUPPORTED_LENDING_PROTOCOLS:
            raise UnsupportedProtocolError(protocol)
        provider = self._lending.get(key)
        if provider is None:
            raise RuntimeError(f"{key} contracts have not been set")
        return provider

    def _exchange_or_raise(self) -> ExchangeDataProvider:
        if self._exchange is None:
            raise RuntimeError("Uniswap router has not been set")
        return self._exchange

    def _user_or_default(self, user: str | None) -> str:
        if user:
            return Web3.to_checksum_address(user)
        if self.default_user is None:
            raise ValueError("No user given and no default user configured")
        return self.default_user

    # ------------------------------------------------------------------
    # Lending
    # ------------------------------------------------------------------

    def get_user_reserve_data(
        self, reserve: str, user: str | None = None, protocol: str = AAVE
    ) -> UserReserveData:
        provider = self._lending_for(protocol)
        return provider.get_user_reserve_data(reserve, self._user_or_default(user))

    def get_borrow_balance(
        self, reserve: str, user: str | None = None, protocol: str = AAVE
    ) -> int:
        """Current borrow balance (principal plus accrued interest) of a user."""
        return self.get_user_reserve_data(reserve, user, protocol).current_borrow_balance

    def get_asset_price(self, asset: str, protocol: str = AAVE) -> int:
        return self._lending_for(protocol).get_asset_price(asset)

    def get_equivalent_borrow_balance(
        self,
        from_reserve: str,
        to_reserve: str,
        amount: int,
        protocol: str = AAVE,
        from_decimals: int = DEFAULT_DECIMALS,
        to_decimals: int = DEFAULT_DECIMALS,
    ) -> int:
        """Value of ``amount`` of ``from_reserve`` expressed in ``to_reserve``.

        With 18-decimal tokens this is ``amount * price(from) // price(to)``.
        A warning is logged when one price is live and the other comes from
        the snapshot fallback.
        """
        provider = self._lending_for(protocol)
        from_price = provider.get_asset_price(from_reserve)
        to_price = provider.get_asset_price(to_reserve)
        from_source = provider.price_source(from_reserve)
        to_source = provider.price_source(to_reserve)
        if from_source != to_source:
            logger.warning(
                "Mixed price sources: %s from %s, %s from %s",
                from_reserve,
                from_source,
                to_reserve,
                to_source,
            )
        return equivalent_amount(
            amount,
            from_price,
            to_price,
            from_decimals=from_decimals,
            to_decimals=to_decimals,
        )

    # ------------------------------------------------------------------
    # Uniswap
    # ------------------------------------------------------------------

    def get_uniswap_pair(self, token_a: str, token_b: str, canonical: bool = False) -> str:
        """Pair address for two tokens, derived from the router's factory.

        Tokens are hashed in the order given, so callers must pass them
        sorted (or set ``canonical``) to get the deployed pair.
        """
        a = resolve_asset(token_a, self.network)
        b = resolve_asset(token_b, self.network)
        if canonical:
            a, b = sort_tokens(a, b)
        return pair_for(self._exchange_or_raise().get_factory(), a, b)

    def get_pair_reserves(self, token_a: str, token_b: str) -> PairReserves:
        """Reserves of the canonical pair, oriented to ``(token_a, token_b)``."""
        a = resolve_asset(token_a, self.network)
        b = resolve_asset(token_b, self.network)
        token0, token1 = sort_tokens(a, b)
        exchange = self._exchange_or_raise()
        pair = pair_for(exchange.get_factory(), token0, token1)
        reserve0, reserve1, timestamp = exchange.get_reserves(pair)
        if a == token0:
            reserve_a, reserve_b = reserve0, reserve1
        else:
            reserve_a, reserve_b = reserve1, reserve0
        return PairReserves(
            pair=pair,
            token_a=a,
            token_b=b,
            reserve_a=reserve_a,
            reserve_b=reserve_b,
            block_timestamp_last=timestamp,
        )
