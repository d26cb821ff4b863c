"""Abstract data provider interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UserReserveData:
    """A user's position in one Aave v1 reserve, as returned by the lending pool."""

    current_a_token_balance: int
    current_borrow_balance: int
    principal_borrow_balance: int
    borrow_rate_mode: int
    borrow_rate: int  # RAY
    liquidity_rate: int  # RAY
    origination_fee: int
    variable_borrow_index: int
    last_update_timestamp: int
    usage_as_collateral_enabled: bool

    @classmethod
    def from_tuple(cls, data: tuple | list) -> "UserReserveData":
        if len(data) != 10:
            raise ValueError(f"Expected 10 reserve data fields, got {len(data)}")
        return cls(*(int(v) for v in data[:9]), bool(data[9]))

    @classmethod
    def empty(cls) -> "UserReserveData":
        return cls(0, 0, 0, 0, 0, 0, 0, 0, 0, False)


@dataclass(frozen=True)
class AaveContracts:
    """Addresses resolved from a LendingPoolAddressesProvider."""

    lending_pool: str
    lending_pool_core: str
    price_oracle: str


@dataclass(frozen=True)
class PairReserves:
    """Uniswap v2 pair reserves, oriented to the caller's token order."""

    pair: str
    token_a: str
    token_b: str
    reserve_a: int
    reserve_b: int
    block_timestamp_last: int


class LendingDataProvider(ABC):
    """Abstract interface for lending protocol data."""

    @abstractmethod
    def get_user_reserve_data(self, reserve: str, user: str) -> UserReserveData:
        """Get a user's position in a reserve."""

    @abstractmethod
    def get_asset_price(self, asset: str) -> int:
        """Get the oracle price of an asset (ETH-denominated wei per whole token)."""

    @abstractmethod
    def price_source(self, asset: str) -> str:
        """Where the last price served for ``asset`` came from (oracle or snapshot)."""


class ExchangeDataProvider(ABC):
    """Abstract interface for Uniswap v2 style exchange data."""

    @abstractmethod
    def get_factory(self) -> str:
        """Get the factory address that deploys pairs."""

    @abstractmethod
    def get_weth(self) -> str:
        """Get the wrapped-ether address the router trades against."""

    @abstractmethod
    def get_reserves(self, pair: str) -> tuple[int, int, int]:
        """Get ``(reserve0, reserve1, block_timestamp_last)`` for a pair."""
