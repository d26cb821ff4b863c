"""Uniswap v2 pair address derivation."""

from web3 import Web3

from refi.data.constants import UNISWAP_V2_INIT_CODE_HASH, ZERO_ADDRESS


def _address_bytes(address: str) -> bytes:
    return bytes.fromhex(Web3.to_checksum_address(address)[2:])


def sort_tokens(token_a: str, token_b: str) -> tuple[str, str]:
    """Return the two tokens in the pair's canonical (numeric) order."""
    a = Web3.to_checksum_address(token_a)
    b = Web3.to_checksum_address(token_b)
    if a == b:
        raise ValueError("UniswapV2Library: IDENTICAL_ADDRESSES")
    token0, token1 = (a, b) if int(a, 16) < int(b, 16) else (b, a)
    if token0 == ZERO_ADDRESS:
        raise ValueError("UniswapV2Library: ZERO_ADDRESS")
    return token0, token1


def pair_for(
    factory: str,
    token_a: str,
    token_b: str,
    init_code_hash: str = UNISWAP_V2_INIT_CODE_HASH,
) -> str:
    """CREATE2 address of the pair for ``token_a``/``token_b``.

    The tokens are hashed in the order given.  Only the canonical order
    (see :func:`sort_tokens`) yields the address the factory deploys.
    """
    salt = Web3.keccak(_address_bytes(token_a) + _address_bytes(token_b))
    digest = Web3.keccak(
        b"\xff"
        + _address_bytes(factory)
        + salt
        + bytes.fromhex(init_code_hash.removeprefix("0x"))
    )
    return Web3.to_checksum_address(bytes(digest[12:]))
