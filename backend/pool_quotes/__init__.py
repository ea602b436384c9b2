"""
Uniswap V3-style pool state and QuoterV2 quotes across EVM networks.
"""

from .models import NetworkConfig, NetworkQuote, PoolInfo, QuoteResult, Slot0, TokenPair
from .pool_address import compute_pool_address
from .pool_info import read_pool_info
from .quoter import fetch_quote

__all__ = [
    "NetworkConfig",
    "NetworkQuote",
    "PoolInfo",
    "QuoteResult",
    "Slot0",
    "TokenPair",
    "compute_pool_address",
    "fetch_quote",
    "read_pool_info",
]
