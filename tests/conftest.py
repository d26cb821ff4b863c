"""Shared mock chain: a MagicMock web3 whose contracts are looked up by address."""

from __future__ import annotations

from dataclasses import dataclass, field
from unittest.mock import MagicMock

import pytest

from refi.data.constants import UNISWAP_V2_FACTORY, ZERO_ADDRESS

ADDRESSES_PROVIDER = "0x1111111111111111111111111111111111111111"
LENDING_POOL = "0x2222222222222222222222222222222222222222"
PRICE_ORACLE = "0x3333333333333333333333333333333333333333"
ROUTER = "0x4444444444444444444444444444444444444444"

DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def _mock_contract(address: str) -> MagicMock:
    contract = MagicMock()
    contract.address = address
    return contract


@dataclass
class MockChain:
    """Deployed mock contracts, wired the way the real protocols are."""

    w3: MagicMock
    contracts: dict[str, MagicMock] = field(default_factory=dict)

    addresses_provider: str = ADDRESSES_PROVIDER
    lending_pool: str = LENDING_POOL
    price_oracle: str = PRICE_ORACLE
    router: str = ROUTER
    factory: str = UNISWAP_V2_FACTORY
    dai: str = DAI
    weth: str = WETH
    user: str = USER

    def contract(self, address: str) -> MagicMock:
        return self.contracts.setdefault(address, _mock_contract(address))

    def set_prices(self, prices: dict[str, int]) -> None:
        """Oracle answers ``getAssetPrice(asset)`` per asset."""
        oracle = self.contract(self.price_oracle)
        oracle.functions.getAssetPrice.side_effect = lambda asset: MagicMock(
            call=MagicMock(return_value=prices[asset])
        )

    def set_user_reserve_data(self, *values) -> None:
        pool = self.contract(self.lending_pool)
        pool.functions.getUserReserveData.return_value.call.return_value = values


@pytest.fixture
def chain() -> MockChain:
    w3 = MagicMock()
    w3.is_connected.return_value = True
    w3.to_checksum_address = lambda addr: addr

    mock = MockChain(w3=w3)
    w3.eth.contract = MagicMock(side_effect=lambda address, abi: mock.contract(address))

    provider = mock.contract(ADDRESSES_PROVIDER)
    provider.functions.getLendingPool.return_value.call.return_value = LENDING_POOL
    provider.functions.getLendingPoolCore.return_value.call.return_value = ZERO_ADDRESS
    provider.functions.getPriceOracle.return_value.call.return_value = PRICE_ORACLE

    router = mock.contract(ROUTER)
    router.functions.factory.return_value.call.return_value = UNISWAP_V2_FACTORY
    router.functions.WETH.return_value.call.return_value = WETH

    return mock
