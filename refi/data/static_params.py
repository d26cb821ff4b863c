"""Static data providers with a hardcoded mainnet snapshot."""

from eth_utils import to_checksum_address

from refi.data.constants import (
    DAI,
    ETH,
    MAINNET,
    PRICE_SOURCE_SNAPSHOT,
    UNISWAP_V2_FACTORY,
    USDC,
    WETH,
)
from refi.data.contracts import ASSET_ADDRESSES, resolve_asset
from refi.data.interfaces import (
    ExchangeDataProvider,
    LendingDataProvider,
    UserReserveData,
)

# --- Aave v1 oracle prices, ETH wei per whole token ---

_ASSET_PRICES: dict[str, int] = {
    ETH: 10**18,
    WETH: 10**18,
    DAI: 5 * 10**15,  # 1 ETH = 200 DAI
    USDC: 5 * 10**15,
}

# --- Uniswap v2 pair snapshots (reserve0 = DAI or USDC, reserve1 = WETH) ---

_DAI_WETH_PAIR = "0xA478c2975Ab1Ea89e8196811F51A7B7Ade33eB11"
_USDC_WETH_PAIR = "0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc"

_PAIR_RESERVES: dict[str, tuple[int, int, int]] = {
    _DAI_WETH_PAIR: (40_000_000 * 10**18, 200_000 * 10**18, 1_600_000_000),
    _USDC_WETH_PAIR: (40_000_000 * 10**6, 200_000 * 10**18, 1_600_000_000),
}


class StaticAaveProvider(LendingDataProvider):
    """Lending data from a fixed price snapshot and optional seeded positions.

    Users without a seeded position have an all-zero reserve record.
    """

    def __init__(
        self,
        network: str = MAINNET,
        prices: dict[str, int] | None = None,
        positions: dict[tuple[str, str], UserReserveData] | None = None,
    ) -> None:
        self._network = network
        source = prices if prices is not None else _ASSET_PRICES
        self._prices = {self._resolve(asset): price for asset, price in source.items()}
        self._positions = {
            (self._resolve(reserve), to_checksum_address(user)): data
            for (reserve, user), data in (positions or {}).items()
        }

    def _resolve(self, asset: str) -> str:
        return resolve_asset(asset, self._network)

    def get_user_reserve_data(self, reserve: str, user: str) -> UserReserveData:
        key = (self._resolve(reserve), to_checksum_address(user))
        return self._positions.get(key, UserReserveData.empty())

    def get_asset_price(self, asset: str) -> int:
        addr = self._resolve(asset)
        if addr not in self._prices:
            raise ValueError(f"No price for asset: {asset}")
        return self._prices[addr]

    def price_source(self, asset: str) -> str:
        return PRICE_SOURCE_SNAPSHOT


class StaticUniswapProvider(ExchangeDataProvider):
    """Uniswap v2 mainnet factory with DAI/WETH and USDC/WETH reserve snapshots."""

    def __init__(
        self,
        factory: str = UNISWAP_V2_FACTORY,
        weth: str = ASSET_ADDRESSES[MAINNET][WETH],
        reserves: dict[str, tuple[int, int, int]] | None = None,
    ) -> None:
        self._factory = to_checksum_address(factory)
        self._weth = to_checksum_address(weth)
        source = reserves if reserves is not None else _PAIR_RESERVES
        self._reserves = {to_checksum_address(pair): r for pair, r in source.items()}

    def get_factory(self) -> str:
        return self._factory

    def get_weth(self) -> str:
        return self._weth

    def get_reserves(self, pair: str) -> tuple[int, int, int]:
        return self._reserves.get(to_checksum_address(pair), (0, 0, 0))
