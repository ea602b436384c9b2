"""
Swap quotes through the QuoterV2 periphery contract.

fetch_quote derives the pool address, logs the pool's current state, then
simulates quoteExactInput over a single-hop path with eth_call.
"""

import logging

from eth_abi.packed import encode_packed
from web3 import Web3

from .async_rpc import async_eth_call, client_session
from .config import RPC_TIMEOUT
from .contract_calls import QUOTER_V2_CONTRACT, decode_function_result, encode_function_call
from .models import PoolQueryParams, QuoteResult
from .pool_address import derive_pool_address, validate_fee
from .pool_info import read_pool_info

logger = logging.getLogger(__name__)


def encode_path(tokens: list[str], fees: list[int]) -> bytes:
    """
    Encode a swap path: token0 ++ fee0 ++ token1 ++ fee1 ++ token2 ...

    Each token is 20 bytes and each fee a 3-byte uint24, in swap order.
    """
    if len(tokens) < 2 or len(fees) != len(tokens) - 1:
        raise ValueError(
            f"Path needs n tokens and n-1 fees, got {len(tokens)} and {len(fees)}"
        )
    types: list[str] = []
    values: list = []
    for i, token in enumerate(tokens):
        if not Web3.is_address(token):
            raise ValueError(f"Invalid token address in path: {token!r}")
        types.append("address")
        values.append(Web3.to_checksum_address(token))
        if i < len(fees):
            types.append("uint24")
            values.append(validate_fee(fees[i]))
    return encode_packed(types, values)


async def quote_exact_input(
    quoter: str,
    path: bytes,
    amount_in: int,
    rpc_url: str,
    timeout: float = RPC_TIMEOUT,
) -> QuoteResult:
    """Static-call QuoterV2.quoteExactInput(path, amountIn)."""
    data = encode_function_call(QUOTER_V2_CONTRACT, "quoteExactInput", (path, amount_in))
    async with client_session(timeout) as session:
        raw = await async_eth_call(
            session, rpc_url, Web3.to_checksum_address(quoter), data
        )
    res = decode_function_result(QUOTER_V2_CONTRACT, "quoteExactInput", raw)
    return QuoteResult(
        amount_out=str(res["amountOut"]),
        sqrt_price_x96_after_list=list(res["sqrtPriceX96AfterList"]),
        initialized_ticks_crossed_list=list(res["initializedTicksCrossedList"]),
        gas_estimate=res["gasEstimate"],
    )


async def fetch_quote(
    quoter: str,
    deployer: str,
    init_code_hash: str | bytes,
    token_in: str,
    token_out: str,
    amount_in: int,
    fee: int,
    rpc_url: str,
    *,
    suppress_errors: bool = True,
    timeout: float = RPC_TIMEOUT,
) -> QuoteResult | None:
    """
    Quote an exact-input single-hop swap of token_in for token_out.

    The pool state is read first and logged. A failed pool read fails the
    whole quote.

    Args:
        quoter: QuoterV2 contract address
        deployer: Pool deployer address (CREATE2 sender)
        init_code_hash: Pool init code hash
        token_in: Address of the token sold
        token_out: Address of the token bought
        amount_in: Input amount in base units
        fee: Pool fee tier (e.g. 3000 for 0.3%)
        rpc_url: RPC endpoint URL
        suppress_errors: If True, log failures and return None; otherwise raise
        timeout: Per-request timeout in seconds

    Returns:
        QuoteResult, or None when the quote failed and suppress_errors is set
    """
    try:
        params = PoolQueryParams(deployer, token_in, token_out, fee, init_code_hash)
        pool_address = derive_pool_address(params)
        pool_info = await read_pool_info(pool_address, rpc_url, timeout=timeout)
        logger.info("Pool info: %s", pool_info)

        path = encode_path([token_in, token_out], [fee])
        return await quote_exact_input(quoter, path, amount_in, rpc_url, timeout=timeout)
    except Exception:
        if not suppress_errors:
            raise
        logger.exception("Failed to fetch quote")
        return None
