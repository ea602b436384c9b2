"""
Deterministic (CREATE2) pool address derivation.

A pool deployer creates each pool with salt = keccak256(abi.encode(token0,
token1, fee)), so the pool address can be computed off-chain without asking
a factory contract:

    address = keccak256(0xff ++ deployer ++ salt ++ initCodeHash)[12:]
"""

from eth_abi.abi import encode
from web3 import Web3

from .models import PoolQueryParams, TokenPair

MAX_UINT24 = 2 ** 24 - 1


def _require_address(value: str, label: str) -> str:
    if not isinstance(value, str) or not Web3.is_address(value):
        raise ValueError(f"Invalid {label} address: {value!r}")
    return Web3.to_checksum_address(value)


def validate_fee(fee: int) -> int:
    if isinstance(fee, bool) or not isinstance(fee, int):
        raise ValueError(f"Fee must be an integer, got {fee!r}")
    if not 0 <= fee <= MAX_UINT24:
        raise ValueError(f"Fee {fee} does not fit in uint24")
    return fee


def _require_hash32(value: str | bytes, label: str) -> bytes:
    if isinstance(value, str):
        try:
            value = bytes.fromhex(value.removeprefix("0x"))
        except ValueError as e:
            raise ValueError(f"Invalid {label}: not hex") from e
    if not isinstance(value, bytes) or len(value) != 32:
        raise ValueError(f"Invalid {label}: expected 32 bytes")
    return value


def sort_tokens(token_a: str, token_b: str) -> tuple[str, str]:
    """Return (token0, token1) ordered by case-insensitive address comparison."""
    pair = TokenPair.from_unordered(
        _require_address(token_a, "tokenA"),
        _require_address(token_b, "tokenB"),
    )
    return pair.token0, pair.token1


def compute_pool_salt(token0: str, token1: str, fee: int) -> bytes:
    """keccak256(abi.encode(address token0, address token1, uint24 fee))."""
    encoded = encode(["address", "address", "uint24"], [token0, token1, fee])
    return bytes(Web3.keccak(encoded))


def get_create2_address(
    deployer: str, salt: bytes, init_code_hash: str | bytes
) -> str:
    """
    Compute the CREATE2 deployment address.

    Args:
        deployer: Address of the contract that executes CREATE2
        salt: 32-byte salt
        init_code_hash: keccak256 of the contract's creation code

    Returns:
        Checksummed 20-byte address
    """
    deployer_bytes = bytes.fromhex(_require_address(deployer, "deployer")[2:])
    salt = _require_hash32(salt, "salt")
    code_hash = _require_hash32(init_code_hash, "init code hash")

    digest = Web3.keccak(b"\xff" + deployer_bytes + salt + code_hash)
    return Web3.to_checksum_address("0x" + bytes(digest[12:]).hex())


def compute_pool_address(
    deployer: str,
    token_a: str,
    token_b: str,
    fee: int,
    init_code_hash: str | bytes,
) -> str:
    """
    Derive the pool address for a token pair and fee tier.

    Token order does not matter; the pair is sorted before hashing.

    Raises:
        ValueError: malformed address, fee outside uint24, or a hash that is
            not 32 bytes
    """
    token0, token1 = sort_tokens(token_a, token_b)
    salt = compute_pool_salt(token0, token1, validate_fee(fee))
    return get_create2_address(deployer, salt, init_code_hash)


def derive_pool_address(params: PoolQueryParams) -> str:
    return compute_pool_address(
        params.deployer, params.token_a, params.token_b, params.fee, params.init_code_hash
    )
