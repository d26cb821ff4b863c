"""Uniswap v2 router, factory and pair queries."""

from __future__ import annotations

import logging
from typing import Any

from web3 import Web3

from refi.data.contracts import (
    UNISWAP_V2_FACTORY_ABI,
    UNISWAP_V2_PAIR_ABI,
    UNISWAP_V2_ROUTER_ABI,
)
from refi.data.interfaces import ExchangeDataProvider

logger = logging.getLogger(__name__)


class UniswapV2Liquidity(ExchangeDataProvider):
    """Query a Uniswap v2 deployment through its router.

    The router names the factory (``factory()``) and wrapped ether
    (``WETH()``); both are read once and kept for the lifetime of the
    instance.
    """

    def __init__(
        self,
        router: str,
        rpc_url: str | None = None,
        w3: Any | None = None,
    ) -> None:
        if w3 is None:
            if not rpc_url:
                raise ValueError("Either rpc_url or w3 is required")
            w3 = Web3(Web3.HTTPProvider(rpc_url))

        self._w3 = w3
        self._router = w3.eth.contract(
            address=w3.to_checksum_address(router),
            abi=UNISWAP_V2_ROUTER_ABI,
        )
        self._factory_address: str | None = None
        self._weth_address: str | None = None

    @property
    def router(self) -> str:
        return self._router.address

    def get_factory(self) -> str:
        if self._factory_address is None:
            factory = self._router.functions.factory().call()
            self._factory_address = self._w3.to_checksum_address(factory)
            logger.info("Router %s uses factory %s", self.router, self._factory_address)
        return self._factory_address

    def get_weth(self) -> str:
        if self._weth_address is None:
            weth = self._router.functions.WETH().call()
            self._weth_address = self._w3.to_checksum_address(weth)
        return self._weth_address

    def get_reserves(self, pair: str) -> tuple[int, int, int]:
        contract = self._w3.eth.contract(
            address=self._w3.to_checksum_address(pair),
            abi=UNISWAP_V2_PAIR_ABI,
        )
        reserve0, reserve1, timestamp = contract.functions.getReserves().call()
        return int(reserve0), int(reserve1), int(timestamp)

    def get_pair_from_factory(self, token_a: str, token_b: str) -> str:
        """Ask the factory for the deployed pair (zero address when none exists)."""
        factory = self._w3.eth.contract(
            address=self.get_factory(),
            abi=UNISWAP_V2_FACTORY_ABI,
        )
        pair = factory.functions.getPair(
            self._w3.to_checksum_address(token_a),
            self._w3.to_checksum_address(token_b),
        ).call()
        return self._w3.to_checksum_address(pair)
