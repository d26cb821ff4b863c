"""Oracle price conversions between reserves."""

from refi.data.constants import DEFAULT_DECIMALS


def equivalent_amount(
    amount: int,
    from_price: int,
    to_price: int,
    from_decimals: int = DEFAULT_DECIMALS,
    to_decimals: int = DEFAULT_DECIMALS,
) -> int:
    """Express ``amount`` of one asset as the same value of another asset.

    Prices are oracle prices per whole token in a common unit (Aave v1
    quotes in ETH wei).  The result is floored, matching on-chain integer
    division.

    Parameters
    ----------
    amount : int
        Raw amount of the source asset.
    from_price, to_price : int
        Oracle prices of the source and target assets.
    from_decimals, to_decimals : int
        Token decimals of the source and target assets.
    """
    if amount < 0:
        raise ValueError("Amount must be non-negative")
    if from_price < 0:
        raise ValueError("Source asset price must be non-negative")
    if to_price <= 0:
        raise ValueError("Target asset price must be positive")

    numerator = amount * from_price * 10**to_decimals
    denominator = to_price * 10**from_decimals
    return numerator // denominator


def from_wei(amount: int, decimals: int = DEFAULT_DECIMALS) -> float:
    """Convert a raw token amount to whole-token units for display."""
    return amount / 10**decimals
