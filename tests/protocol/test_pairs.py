"""Tests for Uniswap v2 pair derivation."""

import pytest

from refi.data.constants import UNISWAP_V2_FACTORY, ZERO_ADDRESS
from refi.protocol.pairs import pair_for, sort_tokens

DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
DAI_WETH_PAIR = "0xA478c2975Ab1Ea89e8196811F51A7B7Ade33eB11"
USDC_WETH_PAIR = "0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc"


class TestSortTokens:
    def test_already_sorted(self):
        token0, token1 = sort_tokens(DAI, WETH)
        assert token0.lower() == DAI
        assert token1.lower() == WETH

    def test_reversed(self):
        assert sort_tokens(WETH, DAI) == sort_tokens(DAI, WETH)

    def test_returns_checksummed(self):
        token0, _ = sort_tokens(DAI, WETH)
        assert token0 == "0x6B175474E89094C44Da98b954EedeAC495271d0F"

    def test_identical_addresses(self):
        with pytest.raises(ValueError, match="IDENTICAL_ADDRESSES"):
            sort_tokens(DAI, DAI.upper().replace("0X", "0x"))

    def test_zero_address(self):
        with pytest.raises(ValueError, match="ZERO_ADDRESS"):
            sort_tokens(ZERO_ADDRESS, WETH)


class TestPairFor:
    def test_dai_weth_in_order(self):
        assert pair_for(UNISWAP_V2_FACTORY, DAI, WETH) == DAI_WETH_PAIR

    def test_out_of_order_gives_another_address(self):
        assert pair_for(UNISWAP_V2_FACTORY, WETH, DAI) != DAI_WETH_PAIR

    def test_usdc_weth(self):
        assert pair_for(UNISWAP_V2_FACTORY, *sort_tokens(WETH, USDC)) == USDC_WETH_PAIR

    def test_depends_on_factory(self):
        other_factory = "0x1111111111111111111111111111111111111111"
        assert pair_for(other_factory, DAI, WETH) != DAI_WETH_PAIR

    def test_depends_on_init_code_hash(self):
        other_hash = "0x" + "00" * 32
        assert pair_for(UNISWAP_V2_FACTORY, DAI, WETH, init_code_hash=other_hash) != DAI_WETH_PAIR
