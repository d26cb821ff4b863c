"""ReFi: Aave borrow balances, price equivalents and Uniswap pair lookups."""

from refi.client import ReFi, UnsupportedProtocolError
from refi.data.provider_factory import create_refi

__all__ = ["ReFi", "UnsupportedProtocolError", "create_refi"]
