"""
Pool state reader.

Fetches token0, token1, fee, tickSpacing, liquidity and slot0 from a
UniswapV3-style pool with six concurrent eth_calls.
"""

import logging

from web3 import Web3

from .async_rpc import gather_eth_calls
from .config import RPC_TIMEOUT
from .contract_calls import POOL_CONTRACT, decode_function_result, encode_function_call
from .models import PoolInfo, Slot0

logger = logging.getLogger(__name__)

POOL_FIELDS = ["token0", "token1", "fee", "tickSpacing", "liquidity", "slot0"]


def decode_slot0(values: dict) -> Slot0:
    return Slot0(
        sqrt_price_x96=values["sqrtPriceX96"],
        tick=values["tick"],
        observation_index=values["observationIndex"],
        observation_cardinality=values["observationCardinality"],
        observation_cardinality_next=values["observationCardinalityNext"],
        fee_protocol=values["feeProtocol"],
        unlocked=values["unlocked"],
    )


async def read_pool_info(
    pool_address: str,
    rpc_url: str,
    timeout: float = RPC_TIMEOUT,
) -> PoolInfo:
    """
    Read a snapshot of pool state.

    The calls are issued together and awaited jointly. They may land on
    different blocks.

    Args:
        pool_address: Pool contract address
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        PoolInfo snapshot

    Raises:
        Any transport, RPC or decoding error from any of the six calls.
    """
    pool_address = Web3.to_checksum_address(pool_address)
    calls = [
        (pool_address, encode_function_call(POOL_CONTRACT, name))
        for name in POOL_FIELDS
    ]
    raw = await gather_eth_calls(rpc_url, calls, timeout=timeout)
    token0, token1, fee, tick_spacing, liquidity, slot0 = (
        decode_function_result(POOL_CONTRACT, name, data)
        for name, data in zip(POOL_FIELDS, raw)
    )

    return PoolInfo(
        address=pool_address,
        token0=Web3.to_checksum_address(token0["0"]),
        token1=Web3.to_checksum_address(token1["0"]),
        fee=fee["0"],
        tick_spacing=tick_spacing["0"],
        liquidity=liquidity["0"],
        slot0=decode_slot0(slot0),
    )
