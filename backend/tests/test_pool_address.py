"""
Tests for pool_address module.

Known Uniswap V3 mainnet pools are used as regression vectors.
Run: cd backend && uv run python tests/test_pool_address.py
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pool_quotes.models import PoolQueryParams, TokenPair
from pool_quotes.pool_address import (
    compute_pool_address,
    compute_pool_salt,
    derive_pool_address,
    get_create2_address,
    sort_tokens,
)

# Uniswap V3 mainnet factory (also the pool deployer) and pool init code hash
UNIV3_FACTORY = "0x1F98431c8aD98523631AE4a59f267346ea31F984"
UNIV3_INIT_CODE_HASH = "0xe34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"
USDC = "0xA0b86991c6218b36c1D19D4a2e9Eb0cE3606eB48"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"

TOKEN_A = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa1"
TOKEN_B = "0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb2"


def _raises_value_error(fn, *args) -> bool:
    try:
        fn(*args)
    except ValueError:
        return True
    return False


def test_known_pool_addresses() -> None:
    """USDC/WETH 0.05% and 0.3% pools on Ethereum mainnet."""
    assert compute_pool_address(UNIV3_FACTORY, USDC, WETH, 500, UNIV3_INIT_CODE_HASH) == (
        "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"
    )
    assert compute_pool_address(UNIV3_FACTORY, USDC, WETH, 3000, UNIV3_INIT_CODE_HASH) == (
        "0x8ad599c3A0ff1De082011EFDDc58f1908eb6e6D8"
    )
    print("  [PASS] known_pool_addresses")


def test_order_independent() -> None:
    ab = compute_pool_address(UNIV3_FACTORY, TOKEN_A, TOKEN_B, 3000, UNIV3_INIT_CODE_HASH)
    ba = compute_pool_address(UNIV3_FACTORY, TOKEN_B, TOKEN_A, 3000, UNIV3_INIT_CODE_HASH)
    assert ab == ba
    assert compute_pool_address(UNIV3_FACTORY, WETH, USDC, 500, UNIV3_INIT_CODE_HASH) == (
        "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"
    )
    print("  [PASS] order_independent")


def test_deterministic() -> None:
    results = {
        compute_pool_address(UNIV3_FACTORY, TOKEN_A, TOKEN_B, 3000, UNIV3_INIT_CODE_HASH)
        for _ in range(5)
    }
    assert len(results) == 1
    print("  [PASS] deterministic")


def test_input_case_does_not_matter() -> None:
    """Lowercase and checksummed inputs derive the same pool."""
    lower = compute_pool_address(
        UNIV3_FACTORY.lower(), USDC.lower(), WETH.lower(), 500, UNIV3_INIT_CODE_HASH
    )
    assert lower == "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"
    print("  [PASS] input_case_does_not_matter")


def test_fee_and_hash_change_address() -> None:
    base = compute_pool_address(UNIV3_FACTORY, USDC, WETH, 500, UNIV3_INIT_CODE_HASH)
    other_fee = compute_pool_address(UNIV3_FACTORY, USDC, WETH, 10000, UNIV3_INIT_CODE_HASH)
    other_hash = compute_pool_address(UNIV3_FACTORY, USDC, WETH, 500, "0x" + "11" * 32)
    assert len({base, other_fee, other_hash}) == 3
    print("  [PASS] fee_and_hash_change_address")


def test_hash_accepts_bytes() -> None:
    as_bytes = bytes.fromhex(UNIV3_INIT_CODE_HASH[2:])
    assert compute_pool_address(UNIV3_FACTORY, USDC, WETH, 500, as_bytes) == (
        "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"
    )
    print("  [PASS] hash_accepts_bytes")


def test_sort_tokens() -> None:
    token0, token1 = sort_tokens(TOKEN_B, TOKEN_A)
    assert token0.lower() == TOKEN_A
    assert token1.lower() == TOKEN_B

    pair = TokenPair.from_unordered(WETH, USDC)
    assert pair == TokenPair(USDC, WETH)
    print("  [PASS] sort_tokens")


def test_salt_and_create2_compose() -> None:
    token0, token1 = sort_tokens(USDC, WETH)
    salt = compute_pool_salt(token0, token1, 500)
    assert len(salt) == 32
    assert get_create2_address(UNIV3_FACTORY, salt, UNIV3_INIT_CODE_HASH) == (
        "0x88e6A0c2dDD26FEEb64F039a2c41296FcB3f5640"
    )
    print("  [PASS] salt_and_create2_compose")


def test_pool_query_params() -> None:
    params = PoolQueryParams(UNIV3_FACTORY, WETH, USDC, 3000, UNIV3_INIT_CODE_HASH)
    assert derive_pool_address(params) == "0x8ad599c3A0ff1De082011EFDDc58f1908eb6e6D8"
    print("  [PASS] pool_query_params")


def test_validation_errors() -> None:
    h = UNIV3_INIT_CODE_HASH
    # Bad checksum casing
    bad_checksum = "0xa0B86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
    assert _raises_value_error(compute_pool_address, UNIV3_FACTORY, bad_checksum, WETH, 500, h)
    assert _raises_value_error(compute_pool_address, UNIV3_FACTORY, "0x1234", WETH, 500, h)
    assert _raises_value_error(compute_pool_address, "not-an-address", USDC, WETH, 500, h)
    assert _raises_value_error(compute_pool_address, UNIV3_FACTORY, USDC, WETH, 2 ** 24, h)
    assert _raises_value_error(compute_pool_address, UNIV3_FACTORY, USDC, WETH, -1, h)
    assert _raises_value_error(compute_pool_address, UNIV3_FACTORY, USDC, WETH, "3000", h)
    assert _raises_value_error(compute_pool_address, UNIV3_FACTORY, USDC, WETH, 500, "0x1234")
    assert _raises_value_error(compute_pool_address, UNIV3_FACTORY, USDC, WETH, 500, "0x" + "zz" * 32)
    assert _raises_value_error(compute_pool_address, UNIV3_FACTORY, USDC, USDC.lower(), 500, h)
    print("  [PASS] validation_errors")


if __name__ == "__main__":
    print("=== test_pool_address.py ===")
    test_known_pool_addresses()
    test_order_independent()
    test_deterministic()
    test_input_case_does_not_matter()
    test_fee_and_hash_change_address()
    test_hash_accepts_bytes()
    test_sort_tokens()
    test_salt_and_create2_compose()
    test_pool_query_params()
    test_validation_errors()
    print("\nAll pool address tests passed.")
