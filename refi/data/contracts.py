"""Contract addresses and minimal ABIs for Aave v1 and Uniswap v2 lookups."""

from eth_utils import is_hex_address, to_checksum_address

from refi.data.constants import (
    AAVE_ETH_RESERVE,
    DAI,
    ETH,
    KOVAN,
    MAINNET,
    USDC,
    WETH,
)

# ---------------------------------------------------------------------------
# Asset addresses per network
# ---------------------------------------------------------------------------
ASSET_ADDRESSES: dict[str, dict[str, str]] = {
    MAINNET: {
        ETH: AAVE_ETH_RESERVE,
        WETH: "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        DAI: "0x6B175474E89094C44Da98b954EedeAC495271d0F",
        USDC: "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
    },
    KOVAN: {
        ETH: AAVE_ETH_RESERVE,
        WETH: "0xd0A1E359811322d97991E03f863a0C30C2cF029C",
        DAI: "0xFf795577d9AC8bD7D90Ee22b6C1703490b6512FD",
        USDC: "0xe22da380ee6B445bb8273C81944ADEB6E8450422",
    },
}

# ---------------------------------------------------------------------------
# Protocol entry points per network
# ---------------------------------------------------------------------------
AAVE_LENDING_POOL_ADDRESSES_PROVIDER: dict[str, str] = {
    MAINNET: "0x24a42fD28C976A61Df5D00D0599C34c4f90748c8",
    KOVAN: "0x506B0B2CF20FAA8f38a4E2B524EE43e1f4458Cc5",
}

UNISWAP_V2_ROUTER: dict[str, str] = {
    MAINNET: "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D",
    KOVAN: "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D",
}


def resolve_asset(asset: str, network: str = MAINNET) -> str:
    """Map an asset symbol or raw address to a checksummed address."""
    known = ASSET_ADDRESSES.get(network, {})
    if asset in known:
        return to_checksum_address(known[asset])
    if is_hex_address(asset):
        return to_checksum_address(asset)
    raise ValueError(f"Unknown asset: {asset}")


# ---------------------------------------------------------------------------
# Minimal ABIs: only the view functions we call
# ---------------------------------------------------------------------------

LENDING_POOL_ADDRESSES_PROVIDER_ABI = [
    {
        "inputs": [],
        "name": "getLendingPool",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getLendingPoolCore",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getPriceOracle",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
]

LENDING_POOL_ABI = [
    {
        "inputs": [
            {"name": "_reserve", "type": "address"},
            {"name": "_user", "type": "address"},
        ],
        "name": "getUserReserveData",
        "outputs": [
            {"name": "currentATokenBalance", "type": "uint256"},
            {"name": "currentBorrowBalance", "type": "uint256"},
            {"name": "principalBorrowBalance", "type": "uint256"},
            {"name": "borrowRateMode", "type": "uint256"},
            {"name": "borrowRate", "type": "uint256"},
            {"name": "liquidityRate", "type": "uint256"},
            {"name": "originationFee", "type": "uint256"},
            {"name": "variableBorrowIndex", "type": "uint256"},
            {"name": "lastUpdateTimestamp", "type": "uint256"},
            {"name": "usageAsCollateralEnabled", "type": "bool"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]

PRICE_ORACLE_ABI = [
    {
        "inputs": [{"name": "_asset", "type": "address"}],
        "name": "getAssetPrice",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

UNISWAP_V2_ROUTER_ABI = [
    {
        "inputs": [],
        "name": "factory",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "WETH",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
]

UNISWAP_V2_FACTORY_ABI = [
    {
        "inputs": [
            {"name": "tokenA", "type": "address"},
            {"name": "tokenB", "type": "address"},
        ],
        "name": "getPair",
        "outputs": [{"name": "pair", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
]

UNISWAP_V2_PAIR_ABI = [
    {
        "inputs": [],
        "name": "getReserves",
        "outputs": [
            {"name": "reserve0", "type": "uint112"},
            {"name": "reserve1", "type": "uint112"},
            {"name": "blockTimestampLast", "type": "uint32"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]
