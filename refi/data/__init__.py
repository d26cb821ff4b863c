"""Data providers for Aave and Uniswap lookups."""

from refi.data.provider_factory import create_refi, create_static_refi

__all__ = ["create_refi", "create_static_refi"]
