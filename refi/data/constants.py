"""Protocol identifiers, units and well-known addresses."""

# Protocol identifiers
AAVE = "aave"
SUPPORTED_LENDING_PROTOCOLS = (AAVE,)

UNSUPPORTED_PROTOCOL_REASON = "ReFi: unsupported protocol"

# Networks
MAINNET = "mainnet"
KOVAN = "kovan"

CHAIN_IDS: dict[str, int] = {
    MAINNET: 1,
    KOVAN: 42,
}

# Asset symbols
ETH = "ETH"
WETH = "WETH"
DAI = "DAI"
USDC = "USDC"

# Decimals
DEFAULT_DECIMALS = 18

# Price sources
PRICE_SOURCE_ORACLE = "oracle"
PRICE_SOURCE_SNAPSHOT = "snapshot"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Aave v1 uses this placeholder as the ETH reserve address
AAVE_ETH_RESERVE = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

# Uniswap v2 factory (same address on mainnet and kovan) and pair bytecode hash
UNISWAP_V2_FACTORY = "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f"
UNISWAP_V2_INIT_CODE_HASH = (
    "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"
)

# Token decimals that differ from DEFAULT_DECIMALS
TOKEN_DECIMALS: dict[str, int] = {
    USDC: 6,
}
